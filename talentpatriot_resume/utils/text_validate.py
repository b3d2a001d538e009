import re


MIN_TEXT_LENGTH = 50
MIN_WORD_COUNT = 10

_WORD_RE = re.compile(r"[a-zA-Z]{3,}")


def validate_extracted_text(text: str) -> bool:
    """True when the text is long enough and has enough real words to be a resume."""
    t = (text or "").strip()
    if len(t) < MIN_TEXT_LENGTH:
        return False
    return len(_WORD_RE.findall(t)) >= MIN_WORD_COUNT
