"""
strongpass.bonus

Composition credit added on top of positional entropy.

NIST SP 800-63 (Appendix A) grants 6 extra bits to a password when the
composition rule forces both upper case and non-alphabetic characters.
"""

import re

COMPOSITION_BONUS_BITS = 6.0

_UPPER = re.compile(r"[A-Z]")
_NON_ALPHA = re.compile(r"[^A-Za-z]")


def nist_bonus_bits(text: str) -> float:
    """Return 6 bits if ``text`` mixes upper case with non-letters, else 0."""
    if not text:
        return 0.0
    if _UPPER.search(text) and _NON_ALPHA.search(text):
        return COMPOSITION_BONUS_BITS
    return 0.0


def no_bonus_bits(text: str) -> float:
    return 0.0
