"""
strongpass.validation

Record-level password validation built on the strength checker.

The extra-words option can be given three ways, mirroring how validation
rules are usually declared on a model:
- a list of words:           extra_dictionary_words=["acme"]
- a callable on the record:  extra_dictionary_words=lambda user: [user.username]
- an attribute name:         extra_dictionary_words="banned_words"

It is resolved to a plain list of strings here, before any checker is built.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Sequence, Union

from .checker import StrengthChecker
from .config import ConfigurationError

TOO_WEAK = "is too weak"


@dataclass(frozen=True)
class LiteralWords:
    words: Sequence[str]


@dataclass(frozen=True)
class ComputedWords:
    func: Callable[[Any], Sequence[str]]


@dataclass(frozen=True)
class RecordWords:
    attribute: str


ExtraWordsSource = Union[LiteralWords, ComputedWords, RecordWords]


def extra_words_source(option: Any) -> ExtraWordsSource:
    """Classify a raw extra_dictionary_words option."""
    if isinstance(option, (LiteralWords, ComputedWords, RecordWords)):
        return option
    if option is None:
        return LiteralWords(())
    if isinstance(option, str):
        return RecordWords(option)
    if callable(option):
        return ComputedWords(option)
    if isinstance(option, (list, tuple)):
        return LiteralWords(tuple(option))
    raise ConfigurationError(
        f"extra_dictionary_words must be a list, a callable or an attribute name, got {type(option).__name__}"
    )


def resolve_extra_words(source: ExtraWordsSource, record: Any) -> List[str]:
    if isinstance(source, LiteralWords):
        words = source.words
    elif isinstance(source, ComputedWords):
        words = source.func(record)
    else:
        words = getattr(record, source.attribute)
        if callable(words):
            words = words()
    return list(words or [])


class PasswordStrengthValidator:
    """
    Validates the ``field`` attribute of a record. Remaining keyword options
    are StrengthConfig options; extra_dictionary_words may use any of the
    three forms above.
    """

    def __init__(self, field: str = "password", **options):
        self.field = field
        self.extra_words = extra_words_source(options.pop("extra_dictionary_words", None))
        self.options = options
        # static options get a checker up front; problems surface here
        self._checker = None
        if isinstance(self.extra_words, LiteralWords):
            self._checker = StrengthChecker(extra_dictionary_words=self.extra_words.words, **options)

    def checker_for(self, record: Any) -> StrengthChecker:
        if self._checker is not None:
            return self._checker
        words = resolve_extra_words(self.extra_words, record)
        return StrengthChecker(extra_dictionary_words=words, **self.options)

    def validate(self, record: Any) -> List[str]:
        """Return error messages for the record's password (empty when valid)."""
        password = getattr(record, self.field, None)
        if password is None:
            return [TOO_WEAK]
        if self.checker_for(record).is_weak(password):
            return [TOO_WEAK]
        return []


def validate_password_strength(record: Any, field: str = "password", **options) -> List[str]:
    return PasswordStrengthValidator(field, **options).validate(record)
