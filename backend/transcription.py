# transcription.py
# No audio is captured; each screen gets a fixed transcription instead.
TRANSCRIPTIONS = {
    "gratitude": (
        "I'm grateful for the beautiful sunset I witnessed today. "
        "It reminded me how precious these simple moments are."
    ),
    "thoughts": (
        "I feel overwhelmed by all the tasks I need to complete today. "
        "It seems like there's never enough time."
    ),
    "accomplishments": (
        "I successfully completed my first 5K run today! "
        "I've been training for months and finally achieved my goal."
    ),
}


def simulate_transcription(category):
    try:
        return TRANSCRIPTIONS[category]
    except KeyError:
        raise ValueError(f"Unknown category: {category}") from None
