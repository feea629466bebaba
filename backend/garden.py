# garden.py
from datetime import datetime

from entry_store import (
    get_accomplishment_entries,
    get_gratitude_entries,
    get_thought_entries,
)
from tone_service import NEGATIVE, POSITIVE


def greeting(hour):
    if hour < 12:
        return "Good morning"
    if hour < 18:
        return "Good afternoon"
    return "Good evening"


def garden_overview(storage, now=None, on_error=None):
    """
    Counts for the tab screens: gratitude petals, thoughts split into
    plants (positive) and seeds (negative), and accomplishment trees.
    """
    now = now or datetime.now()
    thoughts = get_thought_entries(storage, on_error=on_error)
    return {
        "greeting": greeting(now.hour),
        "petals": len(get_gratitude_entries(storage, on_error=on_error)),
        "plants": sum(1 for t in thoughts if t.get("tone") == POSITIVE),
        "seeds": sum(1 for t in thoughts if t.get("tone") == NEGATIVE),
        "trees": len(get_accomplishment_entries(storage, on_error=on_error)),
    }
