"""Text helpers shared by services."""


def is_encodable(text: str) -> bool:
    """False for strings holding lone surrogates, which cannot be stored or sent."""
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True
