# entry_store.py
import json
import logging
from datetime import datetime

logger = logging.getLogger(__name__)

GRATITUDE_KEY = "gratitude_entries"
THOUGHT_KEY = "thought_entries"
ACCOMPLISHMENT_KEY = "accomplishment_entries"


def new_entry(text, ai_response, tone=None, now=None):
    """Build an entry record. The id is the epoch timestamp in milliseconds."""
    now = now or datetime.now()
    entry = {
        "id": str(int(now.timestamp() * 1000)),
        "text": text,
        "aiResponse": ai_response,
        "date": now.date().isoformat(),
        "time": now.strftime("%I:%M %p"),
    }
    if tone is not None:
        entry["tone"] = tone
    return entry


def _load(storage, key):
    raw = storage.get_item(key)
    if not raw:
        return []
    entries = json.loads(raw)
    if not isinstance(entries, list):
        raise ValueError(f"{key} does not hold a list")
    if not all(isinstance(entry, dict) for entry in entries):
        raise ValueError(f"{key} holds non-entry items")
    return entries


def save_entry(storage, key, text, ai_response, tone=None, on_error=None, now=None):
    """
    Prepend a new entry to the collection stored under key.

    Read-modify-write of the whole collection; not atomic across concurrent
    saves to the same key. Failures are logged, passed to on_error if given,
    and otherwise ignored.
    """
    try:
        entries = _load(storage, key)
        entries.insert(0, new_entry(text, ai_response, tone, now))
        storage.set_item(key, json.dumps(entries))
    except Exception as e:
        logger.error("Error saving %s: %s", key, e)
        if on_error is not None:
            on_error(e)


def get_entries(storage, key, on_error=None):
    """Entries under key, most recent first; [] if missing or unreadable."""
    try:
        return _load(storage, key)
    except Exception as e:
        logger.error("Error getting %s: %s", key, e)
        if on_error is not None:
            on_error(e)
        return []


def save_gratitude(storage, text, ai_response, **options):
    save_entry(storage, GRATITUDE_KEY, text, ai_response, **options)


def save_thought(storage, text, ai_response, tone, **options):
    save_entry(storage, THOUGHT_KEY, text, ai_response, tone=tone, **options)


def save_accomplishment(storage, text, ai_response, **options):
    save_entry(storage, ACCOMPLISHMENT_KEY, text, ai_response, **options)


def get_gratitude_entries(storage, **options):
    return get_entries(storage, GRATITUDE_KEY, **options)


def get_thought_entries(storage, **options):
    return get_entries(storage, THOUGHT_KEY, **options)


def get_accomplishment_entries(storage, **options):
    return get_entries(storage, ACCOMPLISHMENT_KEY, **options)
