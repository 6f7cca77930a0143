"""
Structured warning codes for degraded layouts.
Use these keys in return values; map to user-facing messages with user_message.
"""

# Known warning keys (collected on FrameLayout.warnings)
TEXT_CLAMPED = "text_clamped"
TEXT_CHAR_SPLIT = "text_char_split"
TEXT_TRUNCATED = "text_truncated"
PATH_INVALID = "path_invalid"
NOTCH_OVERFLOW = "notch_overflow"

# User-facing messages (short, actionable)
USER_MESSAGES: dict[str, str] = {
    TEXT_CLAMPED: "Text is longer than the character limit and was cut.",
    TEXT_CHAR_SPLIT: "A word does not fit the line at the smallest size; text was split mid-word and may be cut.",
    TEXT_TRUNCATED: "Text needs more lines than allowed at the smallest size; extra lines were dropped.",
    PATH_INVALID: "Frame outline is not a clean shape. Try shorter pill labels or fewer notches.",
    NOTCH_OVERFLOW: "Notches on the same edge overlap. Try shorter pill labels or a wider output size.",
}


def user_message(error_key: str | None, fallback: str = "Something went wrong.") -> str:
    """Return a user-facing message for the given warning key."""
    if not error_key:
        return fallback
    return USER_MESSAGES.get(error_key, fallback)
