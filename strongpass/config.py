# strongpass/config.py
"""
Strength-check settings.

StrengthConfig is the immutable option set read by the dictionary adjuster
and the strength checker. Defaults for the command line are persisted as JSON
in %APPDATA%/StrongPass/config.json (Windows) or ~/.strongpass/config.json
(fallback).
"""

import os
import json
import logging
from dataclasses import dataclass, fields
from numbers import Real
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "min_entropy": 18.0,
    "min_word_length": 4,
    "every_dictionary_word": True,
    "extra_dictionary_words": [],
    "use_dictionary": True,
}


class ConfigurationError(ValueError):
    """An option value that cannot be used to build a checker."""


def _freeze_words(words: Optional[Iterable[Any]]) -> Tuple[str, ...]:
    if words is None:
        return ()
    if isinstance(words, str):
        raise ConfigurationError("extra_dictionary_words must be a sequence of strings, not a string")
    try:
        items = list(words)
    except TypeError:
        raise ConfigurationError(
            f"extra_dictionary_words must be a sequence of strings, got {type(words).__name__}"
        ) from None
    for word in items:
        if not isinstance(word, str):
            raise ConfigurationError(
                f"extra_dictionary_words entries must be strings, got {word!r}"
            )
    return tuple(items)


@dataclass(frozen=True)
class StrengthConfig:
    min_entropy: float = 18.0
    min_word_length: int = 4
    every_dictionary_word: bool = True
    extra_dictionary_words: Tuple[str, ...] = ()
    use_dictionary: bool = True

    def __post_init__(self):
        # bool is an int subclass; reject it explicitly
        if isinstance(self.min_word_length, bool) or not isinstance(self.min_word_length, int):
            raise ConfigurationError(f"min_word_length must be an integer, got {self.min_word_length!r}")
        if self.min_word_length < 1:
            raise ConfigurationError("min_word_length must be >= 1")
        if isinstance(self.min_entropy, bool) or not isinstance(self.min_entropy, Real):
            raise ConfigurationError(f"min_entropy must be a number, got {self.min_entropy!r}")
        for name in ("every_dictionary_word", "use_dictionary"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigurationError(f"{name} must be True or False")
        object.__setattr__(self, "min_entropy", float(self.min_entropy))
        object.__setattr__(self, "extra_dictionary_words", _freeze_words(self.extra_dictionary_words))

    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, Any]] = None, **overrides: Any) -> "StrengthConfig":
        """Build a config from a dict of options; unknown names are an error."""
        merged = dict(options or {})
        merged.update(overrides)
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(merged) - known)
        if unknown:
            raise ConfigurationError(f"Unknown option(s): {', '.join(unknown)}")
        # None means "use the default", as in a settings file with a null value
        return cls(**{k: v for k, v in merged.items() if v is not None})

    def replace(self, **overrides: Any) -> "StrengthConfig":
        """Return a copy with some options changed."""
        current = {f.name: getattr(self, f.name) for f in fields(self)}
        return StrengthConfig.from_mapping(current, **overrides)

    def to_dict(self) -> Dict[str, Any]:
        out = {f.name: getattr(self, f.name) for f in fields(self)}
        out["extra_dictionary_words"] = list(self.extra_dictionary_words)
        return out


def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "StrongPass")
    return os.path.join(os.path.expanduser("~"), ".strongpass")


def config_path() -> str:
    return os.path.join(_appdata_dir(), "config.json")


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    p = path or config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge defaults
    out = DEFAULTS.copy()
    out.update(data)
    return out


def save_config(cfg: Dict[str, Any], path: Optional[str] = None) -> str:
    p = path or config_path()
    d = os.path.dirname(p)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)
    logger.debug("Saved settings to %s", p)
    return p
