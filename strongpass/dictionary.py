"""
strongpass.dictionary

Built-in list of common passwords and words (offline), and the immutable
Dictionary the adjuster scans against.
"""

import logging
from typing import Iterable, Iterator, Optional, Tuple

logger = logging.getLogger(__name__)

COMMON_PASSWORDS: Tuple[str, ...] = (
    "password", "password1", "123456", "12345678", "1234", "12345",
    "1234567", "123456789", "1234567890", "2345", "qwerty", "qwertyuiop",
    "asdf", "asdfgh", "asdfghjkl", "zxcvbn", "abc123", "monkey",
    "letmein", "dragon", "111111", "000000", "baseball", "iloveyou",
    "trustno1", "sunshine", "master", "123123", "welcome", "shadow",
    "ashley", "football", "jesus", "michael", "ninja", "mustang",
    "admin", "login", "princess", "starwars", "solo", "passw0rd",
    "hello", "freedom", "whatever", "qazwsx", "secret", "charlie",
    "donald", "batman", "superman", "access", "flower", "hottie",
    "loveme", "zaq1zaq1", "654321", "696969", "6969", "hunter",
    "buster", "soccer", "hockey", "killer", "george", "sexy",
    "andrew", "jordan", "harley", "ranger", "thomas", "robert",
    "tigger", "daniel", "computer", "michelle", "jessica", "pepper",
    "maggie", "summer", "corvette", "taylor", "austin", "merlin",
    "matthew", "cheese", "amanda", "orange", "chelsea", "yankees",
    "biteme", "matrix", "internet", "samantha", "blahblah", "golfer",
    "cowboy", "nicole", "diamond", "silver", "purple", "snoopy",
    "ginger", "hammer", "yellow", "banana", "cookie", "google",
    "lakers", "junior", "maverick", "chicken", "peanut", "scooter",
    "mercedes", "phoenix", "dakota", "guitar", "qwerty123", "1q2w3e4r",
    "1qaz2wsx", "abcdef", "abcd1234", "aaaaaa", "changeme", "default",
    "guest", "root", "test", "test123", "user", "pass",
    "iloveu", "lovely", "angel", "babygirl", "family", "forever",
    "friends", "sparky", "hannah", "jennifer", "joshua", "london",
    "liverpool", "arsenal", "spiderman", "pokemon", "naruto", "minecraft",
    "monday", "gandalf", "starfish", "wizard",
)


class Dictionary:
    """
    Ordered, de-duplicated set of lowercase words: the baseline list followed
    by any extra words. Built once and never modified.
    """

    __slots__ = ("_words", "_ranks", "_longest", "_baseline_size")

    def __init__(self, extra_words: Iterable[str] = (), baseline: Optional[Iterable[str]] = None):
        base = [w.lower() for w in (COMMON_PASSWORDS if baseline is None else baseline)]
        self._baseline_size = len(dict.fromkeys(w for w in base if w))
        words = base + [w.lower() for w in extra_words]
        self._words: Tuple[str, ...] = tuple(dict.fromkeys(w for w in words if w))
        self._ranks = {w: i for i, w in enumerate(self._words)}
        self._longest = max((len(w) for w in self._words), default=0)
        logger.debug("Dictionary built with %d words (longest %d)", len(self._words), self._longest)

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    @property
    def longest(self) -> int:
        """Length of the longest word; scanning never looks further."""
        return self._longest

    @property
    def baseline_size(self) -> int:
        """Number of words that come from the baseline list."""
        return self._baseline_size

    def rank(self, word: str) -> int:
        """Position of ``word`` in the dictionary order; extra words rank after the baseline."""
        return self._ranks[word]

    def __contains__(self, word: object) -> bool:
        return word in self._ranks

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"Dictionary({len(self._words)} words)"
