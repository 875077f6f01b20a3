"""
strongpass.entropy

Positional entropy estimate (NIST SP 800-63 style):
- base_entropy(text): banded bits per character position, ignoring content
- weakened_entropy(tokens): same bands, but repeated tokens are worth less
  each time they reappear
"""

from typing import Hashable, Iterable, Optional

FIRST_CHAR_BITS = 4.0
SHORT_BAND_BITS = 2.0    # positions 2-8
MIDDLE_BAND_BITS = 1.5   # positions 9-20
LONG_BAND_BITS = 1.0     # positions 21+

REPEAT_WEAKENING_FACTOR = 0.75


def position_weight(index: int) -> float:
    """Bits credited to the character at 0-based ``index``."""
    if index == 0:
        return FIRST_CHAR_BITS
    if index < 8:
        return SHORT_BAND_BITS
    if index < 20:
        return MIDDLE_BAND_BITS
    return LONG_BAND_BITS


def base_entropy(text: Optional[str]) -> float:
    """
    Naive brute-force estimate: sum of the positional weights for every
    character. Depends on length only.
    """
    if not text:
        return 0.0
    length = len(text)
    bits = FIRST_CHAR_BITS
    bits += SHORT_BAND_BITS * (min(length, 8) - 1)
    if length > 8:
        bits += MIDDLE_BAND_BITS * (min(length, 20) - 8)
    if length > 20:
        bits += LONG_BAND_BITS * (length - 20)
    return bits


def weakened_entropy(tokens: Iterable[Hashable]) -> float:
    """
    Positional entropy where every repeat of a token is multiplied by
    REPEAT_WEAKENING_FACTOR once more than its previous occurrence.

    ``tokens`` is usually a string, but any sequence of hashables works; the
    dictionary adjuster passes characters mixed with a word placeholder.
    """
    multipliers = {}
    bits = 0.0
    for index, token in enumerate(tokens):
        multiplier = multipliers.get(token, 1.0)
        multipliers[token] = multiplier * REPEAT_WEAKENING_FACTOR
        bits += position_weight(index) * multiplier
    return bits
