"""
strongpass.checker

Strong/weak verdict for a password against a minimum entropy.

    checker = construct(min_entropy=20, extra_dictionary_words=["acme"])
    weak(checker, "acme2024!")   # True

Each checker owns its configuration and dictionary; to change options build
a new checker.
"""

from typing import Optional

from .adjuster import BonusFunc, DictionaryAdjuster
from .bonus import nist_bonus_bits
from .config import StrengthConfig


class StrengthChecker:
    def __init__(self, config: Optional[StrengthConfig] = None, bonus: BonusFunc = nist_bonus_bits, **options):
        self.adjuster = DictionaryAdjuster(config, bonus=bonus, **options)

    @property
    def config(self) -> StrengthConfig:
        return self.adjuster.config

    @property
    def min_entropy(self) -> float:
        return self.config.min_entropy

    def calculate_entropy(self, password: Optional[str]) -> float:
        """Entropy used for the verdict (dictionary-adjusted unless use_dictionary is off)."""
        if self.config.use_dictionary:
            return self.adjuster.adjusted_entropy(password)
        return self.adjuster.unadjusted_entropy(password)

    def is_strong(self, password: Optional[str]) -> bool:
        if password is None:
            return False
        return self.calculate_entropy(password) >= self.min_entropy

    def is_weak(self, password: Optional[str]) -> bool:
        return not self.is_strong(password)

    def __repr__(self) -> str:
        return f"StrengthChecker({self.config!r})"


def construct(config: Optional[StrengthConfig] = None, **options) -> StrengthChecker:
    """Build a checker; raises ConfigurationError for invalid options."""
    return StrengthChecker(config, **options)


def weak(checker: StrengthChecker, password: Optional[str]) -> bool:
    return checker.is_weak(password)
