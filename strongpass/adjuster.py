"""
strongpass.adjuster

Dictionary-adjusted entropy.

An attacker who guesses whole dictionary words pays "try the next word", not
"guess every character". So every dictionary word found in a password
(including through its case/leetspeak variants) is collapsed to a single
placeholder position before the password is scored:

    'E_!3password'  -> variant 'e_iepassword' -> ['e', '_', 'i', 'e', WORD]

The adjusted entropy is the lowest score among the raw password and all of
its collapsed variants.
"""

import logging
from typing import Callable, List, NamedTuple, Optional, Tuple

from .bonus import nist_bonus_bits
from .config import StrengthConfig
from .dictionary import Dictionary
from .entropy import weakened_entropy
from .variants import all_variants

logger = logging.getLogger(__name__)

BonusFunc = Callable[[str], float]


class _WordToken:
    """Placeholder for a collapsed dictionary word; never equal to a character."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<word>"


WORD = _WordToken()


class Match(NamedTuple):
    start: int
    length: int
    word: str

    @property
    def end(self) -> int:
        return self.start + self.length


class Assessment(NamedTuple):
    entropy: float
    variant: str
    matches: Tuple[Match, ...]


class DictionaryAdjuster:
    """
    Scores passwords against the baseline dictionary plus any extra words.

    Options are the StrengthConfig fields, either as a ready ``config`` or as
    keyword arguments (keywords override the config). ``bonus`` is the
    bonus-bit calculator; pass ``no_bonus_bits`` to score without it.
    """

    def __init__(self, config: Optional[StrengthConfig] = None, bonus: BonusFunc = nist_bonus_bits, **options):
        if config is None:
            config = StrengthConfig.from_mapping(options)
        elif options:
            config = config.replace(**options)
        self.config = config
        self.bonus = bonus
        self.dictionary = Dictionary(config.extra_dictionary_words)

    @property
    def min_entropy(self) -> float:
        return self.config.min_entropy

    def is_strong(self, password: Optional[str]) -> bool:
        return self.adjusted_entropy(password) >= self.min_entropy

    def is_weak(self, password: Optional[str]) -> bool:
        return not self.is_strong(password)

    def adjusted_entropy(self, password: Optional[str]) -> float:
        return self.assess(password).entropy

    def unadjusted_entropy(self, password: Optional[str]) -> float:
        """Positional entropy of the password without any dictionary check."""
        password = password or ""
        return min(self._score(password, password), self._score(password.lower(), password.lower()))

    def find_matches(self, text: str) -> List[Match]:
        """
        Every dictionary word found in ``text`` (already normalized), at any
        offset, whatever surrounds it. Candidates may overlap.
        """
        min_len = self.config.min_word_length
        longest = self.dictionary.longest
        found: List[Match] = []
        n = len(text)
        for start in range(n):
            top = min(longest, n - start)
            for length in range(top, min_len - 1, -1):
                piece = text[start:start + length]
                if piece in self.dictionary:
                    found.append(Match(start, length, piece))
        return found

    def select_matches(self, candidates: List[Match]) -> List[Match]:
        """
        Keep the earliest, then longest, candidate and drop any candidate
        overlapping one already kept. Only the first survives when
        every_dictionary_word is off.
        """
        accepted: List[Match] = []
        end = 0
        for match in sorted(candidates, key=lambda m: (m.start, -m.length)):
            if match.start < end:
                continue
            accepted.append(match)
            end = match.end
            if not self.config.every_dictionary_word:
                break
        return accepted

    def _layers(self, candidates: List[Match]) -> List[List[Match]]:
        """
        Candidate sets to select from: the baseline words alone, then the
        baseline plus the extra words up to each extra word found, in the
        order the extra words were given.
        """
        rank = self.dictionary.rank
        cutoff = self.dictionary.baseline_size
        layers = [[m for m in candidates if rank(m.word) < cutoff]]
        for r in sorted({rank(m.word) for m in candidates if rank(m.word) >= cutoff}):
            layers.append([m for m in candidates if rank(m.word) <= r])
        return layers

    def assess(self, password: Optional[str]) -> Assessment:
        """
        Score the raw password and every collapsed variant; return the lowest
        with the variant and matches that produced it.

        Extra words are layered over the baseline in the order given, so an
        extra word can only lower the result, never shadow a baseline word
        into a higher one.
        """
        password = password or ""
        best = Assessment(self._score(password, password), password, ())
        for variant in all_variants(password):
            candidates = self.find_matches(variant)
            for layer in self._layers(candidates):
                matches = self.select_matches(layer)
                logger.debug("variant of length %d: %d dictionary match(es)", len(variant), len(matches))
                renderings = [tuple(matches)]
                # a later word can un-weaken repeated characters; never let it raise the score
                if len(matches) > 1:
                    renderings.append(tuple(matches[:1]))
                for kept in renderings:
                    tokens, remainder = _collapse(variant, kept)
                    bits = self._score(tokens, remainder)
                    if bits < best.entropy:
                        best = Assessment(bits, variant, kept)
        return best

    def _score(self, tokens, text: str) -> float:
        return weakened_entropy(tokens) + self.bonus(text)

    def __repr__(self) -> str:
        return f"DictionaryAdjuster({self.config!r})"


def _collapse(text: str, matches: Tuple[Match, ...]) -> Tuple[List[object], str]:
    """Replace each match by WORD; return the tokens and the leftover characters."""
    tokens: List[object] = []
    remainder: List[str] = []
    i = 0
    for match in matches:
        remainder.extend(text[i:match.start])
        tokens.extend(text[i:match.start])
        tokens.append(WORD)
        i = match.end
    remainder.extend(text[i:])
    tokens.extend(text[i:])
    return tokens, "".join(remainder)
