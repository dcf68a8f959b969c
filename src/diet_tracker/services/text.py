"""Text normalization for food name matching."""

import re
import unicodedata

_DISALLOWED = re.compile(r"[^a-z0-9 ]")


def normalize(text: str) -> str:
    """Lowercase, strip diacritics, and drop characters outside [a-z0-9 ]."""
    decomposed = unicodedata.normalize("NFD", text.lower())
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return _DISALLOWED.sub("", stripped)
