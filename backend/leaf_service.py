# leaf_service.py
import logging
import random

import httpx

import config
from tone_service import detect_tone

logger = logging.getLogger(__name__)

PERSONA = "You are Leaf, a gentle AI companion for a mindfulness app."
STYLE = "Keep responses under 100 characters and include an emoji."

GRATITUDE_PROMPT = (
    f"{PERSONA} Respond to gratitude entries with warmth, encouragement, "
    f"and nature metaphors. {STYLE}"
)
ACCOMPLISHMENT_PROMPT = (
    f"{PERSONA} Respond to accomplishments with celebration, pride, "
    f"and tree/forest metaphors. {STYLE}"
)


def _thought_prompt(tone):
    return (
        f"{PERSONA} Respond to {tone} thoughts with empathy and nature metaphors. "
        "For positive thoughts, celebrate growth. For negative thoughts, offer gentle "
        f"support and remind them that challenges help us grow. {STYLE}"
    )


# --- Canned replies, checked in this order; first bucket with a match wins ---
GRATITUDE_KEYWORDS = ("grateful", "thankful", "appreciate")
SUPPORT_KEYWORDS = ("overwhelm", "stress", "anxious", "worried", "difficult", "hard")
POSITIVE_KEYWORDS = ("confident", "happy", "excited", "proud", "wonderful", "great")
ACCOMPLISHMENT_KEYWORDS = (
    "completed", "achieved", "accomplished", "finished", "succeeded", "goal",
)

GRATITUDE_REPLIES = (
    "What a beautiful moment to cherish! Gratitude like this creates ripples of joy. 🌸",
    "Your appreciation for life's gifts is truly heartwarming. Keep nurturing this grateful heart! ✨",
    "This gratitude is like sunshine for your soul. Thank you for sharing this precious moment. 🌅",
    "Such beautiful awareness of life's blessings. Your grateful spirit is inspiring! 💝",
)
SUPPORT_REPLIES = (
    "Even in challenging moments, seeds of growth are being planted. This feeling will transform. 🌱",
    "Your awareness of this struggle is the first step toward healing. Be gentle with yourself. 🤗",
    "These difficult emotions are temporary visitors. They carry wisdom for your journey. 🌿",
    "In the soil of challenge, the strongest roots grow. You're building resilience. 💪",
)
POSITIVE_REPLIES = (
    "Your positive energy is radiating beautifully! Keep nurturing these uplifting thoughts. 🌟",
    "What a wonderful mindset! This positivity is like sunshine for your inner garden. ☀️",
    "Your confidence is blooming magnificently. Trust in this beautiful energy you're creating. 🌺",
    "This joy is contagious! Your positive spirit is a gift to yourself and others. 🎉",
)
ACCOMPLISHMENT_REPLIES = (
    "What an incredible achievement! Your dedication has grown into something magnificent. 🏆",
    "This accomplishment is a testament to your strength and perseverance. Celebrate this victory! 🎊",
    "You've planted a mighty tree of success! Your hard work has truly paid off. 🌳",
    "This achievement will stand tall in your forest of accomplishments. Well done! 👏",
)
DEFAULT_REPLY = (
    "Thank you for sharing this with me. Every thought and feeling is a step "
    "in your growth journey. 🍃"
)

REPLY_BUCKETS = (
    ("gratitude", GRATITUDE_KEYWORDS, GRATITUDE_REPLIES),
    ("support", SUPPORT_KEYWORDS, SUPPORT_REPLIES),
    ("positive", POSITIVE_KEYWORDS, POSITIVE_REPLIES),
    ("accomplishment", ACCOMPLISHMENT_KEYWORDS, ACCOMPLISHMENT_REPLIES),
)


def match_bucket(text):
    """Name of the first reply bucket whose keywords occur in text, else "default"."""
    lowered = (text or "").lower()
    for name, keywords, _ in REPLY_BUCKETS:
        if any(word in lowered for word in keywords):
            return name
    return "default"


def fallback_reply(text, rng=None):
    """Pick a canned reply for text. rng only needs a .choice() method."""
    rng = rng or random
    bucket = match_bucket(text)
    for name, _, replies in REPLY_BUCKETS:
        if name == bucket:
            return rng.choice(replies)
    return DEFAULT_REPLY


def _extract_content(data):
    content = data["choices"][0]["message"]["content"]
    if not isinstance(content, str) or not content.strip():
        raise ValueError("completion returned empty content")
    return content.strip()


def request_completion(messages, api_key, client=None):
    """
    POST the chat messages to the completion endpoint and return the trimmed
    reply text. Raises httpx errors or parsing errors; no retry.
    """
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }
    body = {
        "model": config.OPENAI_MODEL,
        "messages": messages,
        "max_tokens": 150,
        "temperature": 0.7,
    }

    if client is None:
        with httpx.Client(timeout=config.OPENAI_TIMEOUT) as own_client:
            resp = own_client.post(config.OPENAI_API_URL, headers=headers, json=body)
    else:
        resp = client.post(config.OPENAI_API_URL, headers=headers, json=body)

    logger.debug("LLM status: %s", resp.status_code)
    resp.raise_for_status()
    return _extract_content(resp.json())


def _reply_text(messages, text, api_key=None, rng=None, client=None, on_error=None):
    api_key = config.OPENAI_API_KEY if api_key is None else api_key
    if not api_key:
        return fallback_reply(text, rng)

    try:
        return request_completion(messages, api_key, client)
    except httpx.HTTPStatusError as e:
        logger.error("LLM HTTP error %s: %s", e.response.status_code, e.response.text[:800])
        error = e
    except Exception as e:
        logger.error("General LLM error: %s", e)
        error = e

    if on_error is not None:
        on_error(error)
    # Fallback if anything goes wrong
    return fallback_reply(text, rng)


def process_gratitude(text, **options):
    """Leaf's reply to a gratitude petal. Returns {"message": ...}."""
    messages = [
        {"role": "system", "content": GRATITUDE_PROMPT},
        {"role": "user", "content": f"Gratitude entry: {text}"},
    ]
    return {"message": _reply_text(messages, text, **options)}


def process_thought(text, **options):
    """Leaf's reply to a garden thought, with its detected tone."""
    tone = detect_tone(text)
    messages = [
        {"role": "system", "content": _thought_prompt(tone)},
        {"role": "user", "content": f"Thought: {text}"},
    ]
    return {"message": _reply_text(messages, text, **options), "tone": tone}


def process_accomplishment(text, **options):
    messages = [
        {"role": "system", "content": ACCOMPLISHMENT_PROMPT},
        {"role": "user", "content": f"Accomplishment: {text}"},
    ]
    return {"message": _reply_text(messages, text, **options)}
