"""
strongpass.variants

Normalized rewritings of a password used only for dictionary comparison:
- lower-cased password
- leetspeak reversed ("p@55w0rd" -> "password"), once with 1 read as "i"
  and once with 1 read as "l"

Every other character (brackets, parentheses, spaces, ...) passes through.
"""

from typing import List, Optional

LEET_SUBSTITUTIONS = {
    "@": "a",
    "4": "a",
    "8": "b",
    "3": "e",
    "!": "i",
    "1": "i",
    "0": "o",
    "$": "s",
    "5": "s",
    "7": "t",
    "2": "z",
    "6": "g",
    "9": "g",
}
LEET_CHARS = frozenset(LEET_SUBSTITUTIONS)

LEET_MAP = str.maketrans(LEET_SUBSTITUTIONS)
# "1" stands in for "l" about as often as for "i"
LEET_MAP_ALT = str.maketrans(dict(LEET_SUBSTITUTIONS, **{"1": "l"}))


def leet_variants(text: str) -> List[str]:
    """De-leeted forms of ``text``; empty when it has no leet characters."""
    if not any(c in LEET_CHARS for c in text):
        return []
    return [text.translate(LEET_MAP), text.translate(LEET_MAP_ALT)]


def all_variants(password: Optional[str]) -> List[str]:
    """
    Return every variant of ``password`` to check against the dictionary,
    in a stable order and without duplicates. The lower-cased password
    always comes first.
    """
    lower = (password or "").lower()
    variants = [lower] + leet_variants(lower)
    return list(dict.fromkeys(variants))  # unique-preserve-order
