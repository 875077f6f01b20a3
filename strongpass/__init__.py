"""
strongpass

Password strength estimation by dictionary-adjusted entropy.
"""

from .adjuster import Assessment, DictionaryAdjuster, Match
from .bonus import nist_bonus_bits, no_bonus_bits
from .checker import StrengthChecker, construct, weak
from .config import ConfigurationError, StrengthConfig
from .entropy import base_entropy
from .variants import all_variants

__all__ = [
    "Assessment",
    "ConfigurationError",
    "DictionaryAdjuster",
    "Match",
    "StrengthChecker",
    "StrengthConfig",
    "all_variants",
    "base_entropy",
    "construct",
    "nist_bonus_bits",
    "no_bonus_bits",
    "weak",
]

__version__ = "0.1.0"
