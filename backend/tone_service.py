# tone_service.py
NEGATIVE_KEYWORDS = (
    "overwhelm", "stress", "anxious", "worried", "difficult", "hard", "sad", "angry",
    "frustrated", "tired", "exhausted", "lonely", "confused", "scared", "upset",
)

POSITIVE_KEYWORDS = (
    "happy", "excited", "confident", "proud", "grateful", "thankful", "wonderful",
    "great", "amazing", "fantastic", "love", "joy", "peaceful", "content", "blessed",
)

POSITIVE = "positive"
NEGATIVE = "negative"
TONES = (POSITIVE, NEGATIVE)


def count_tone_keywords(text):
    """
    Count how many keywords of each list appear in the text.

    Plain substring containment on the lower-cased text, so "gratefulness"
    still counts as "grateful". Each keyword counts at most once.
    Returns (negative_count, positive_count).
    """
    lowered = (text or "").lower()
    negative = sum(1 for word in NEGATIVE_KEYWORDS if word in lowered)
    positive = sum(1 for word in POSITIVE_KEYWORDS if word in lowered)
    return negative, positive


def detect_tone(text):
    # Ties (including no matches at all) resolve to positive.
    negative, positive = count_tone_keywords(text)
    return NEGATIVE if negative > positive else POSITIVE
