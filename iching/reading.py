"""
Casting a reading: six line values from coins or yarrow stalks.

Randomness comes either from random.org ("true" randomness, over HTTP) or
from a local pseudo-random generator.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum, IntEnum
from typing import List, Optional, Sequence

import requests

from iching import config
from iching.errors import InvalidReadingError, RandomnessError
from iching.hexagrams import Hexagram, Line, lookup_hexagram

logger = logging.getLogger(__name__)


class LineValue(IntEnum):
    """Traditional line values."""
    OLD_YIN = 6      # changing yin, becomes yang
    YOUNG_YANG = 7
    YOUNG_YIN = 8
    OLD_YANG = 9     # changing yang, becomes yin

    @property
    def line(self) -> Line:
        return Line.OPEN if self in (LineValue.OLD_YIN, LineValue.YOUNG_YIN) else Line.CLOSED

    @property
    def is_changing(self) -> bool:
        return self in (LineValue.OLD_YIN, LineValue.OLD_YANG)

    @property
    def future_line(self) -> Line:
        return self.line.inverse() if self.is_changing else self.line


class ReadingMethod(Enum):
    COINS = "coins"
    YARROW_STALKS = "yarrow"

    def __str__(self) -> str:
        return self.value


class RandomnessMode(Enum):
    RANDOM = "random"
    PSEUDO = "pseudo"

    def __str__(self) -> str:
        return self.value


# === Randomness sources ===
class PseudoRandomSource:
    """Local pseudo-random integers."""

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def integers(self, count: int, minimum: int, maximum: int) -> List[int]:
        return [self.rng.randint(minimum, maximum) for _ in range(count)]


class RandomOrgSource:
    """Integers from the random.org plain-text API."""

    def __init__(self, url: str = config.RANDOM_ORG_URL, timeout: float = config.HTTP_TIMEOUT,
                 session: Optional[requests.Session] = None):
        self.url = url
        self.timeout = timeout
        self.session = session

    def integers(self, count: int, minimum: int, maximum: int) -> List[int]:
        params = {
            "num": count,
            "min": minimum,
            "max": maximum,
            "col": 1,
            "base": 10,
            "format": "plain",
            "rnd": "new",
        }
        logger.debug("requesting %d integers in [%d, %d] from %s", count, minimum, maximum, self.url)
        try:
            get = self.session.get if self.session is not None else requests.get
            response = get(
                self.url, params=params, timeout=self.timeout,
                headers={"User-Agent": config.USER_AGENT},
            )
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            raise RandomnessError(f"random.org returned an error: {e.response.text.strip()}") from e
        except requests.exceptions.ConnectionError as e:
            raise RandomnessError("Unable to connect to random.org. Check your internet connection.") from e
        except requests.exceptions.RequestException as e:
            raise RandomnessError(f"Request to random.org failed: {e}") from e

        try:
            values = [int(token) for token in response.text.split()]
        except ValueError as e:
            raise RandomnessError(f"Unexpected response from random.org: {response.text[:80]!r}") from e
        if len(values) != count or any(not minimum <= v <= maximum for v in values):
            raise RandomnessError(f"random.org returned {len(values)} value(s), expected {count} in [{minimum}, {maximum}]")
        return values


def make_source(randomness: RandomnessMode, seed: Optional[int] = None):
    if randomness is RandomnessMode.RANDOM:
        return RandomOrgSource()
    return PseudoRandomSource(seed)


# === Throws ===
def coin_throws(source) -> List[LineValue]:
    """Three coins per line; heads count 3, tails count 2."""
    coins = source.integers(18, 2, 3)
    return [LineValue(sum(coins[i:i + 3])) for i in range(0, 18, 3)]


# Yarrow-stalk odds out of 16: 6 -> 1, 7 -> 5, 8 -> 7, 9 -> 3.
YARROW_TABLE = (
    [LineValue.OLD_YIN] * 1
    + [LineValue.YOUNG_YANG] * 5
    + [LineValue.YOUNG_YIN] * 7
    + [LineValue.OLD_YANG] * 3
)


def yarrow_throws(source) -> List[LineValue]:
    """One draw in 1..16 per line, weighted like the yarrow-stalk procedure."""
    return [YARROW_TABLE[n - 1] for n in source.integers(6, 1, 16)]


# === Reading ===
@dataclass
class Reading:
    """A cast reading: present hexagram and, with changing lines, the future one."""
    values: List[LineValue]
    present: Hexagram
    future: Optional[Hexagram] = None
    changing_positions: List[int] = field(default_factory=list)
    question: str = ""
    method: Optional[ReadingMethod] = None
    randomness: Optional[RandomnessMode] = None
    timestamp: str = ""


def reading_from_values(values: Sequence[int], question: str = "") -> Reading:
    """Builds a reading from six line values in {6, 7, 8, 9}, bottom line first."""
    if len(values) != 6:
        raise InvalidReadingError(f"A reading needs 6 line values, got {len(values)}")
    try:
        lines = [LineValue(v) for v in values]
    except ValueError as e:
        raise InvalidReadingError(f"Line values must be 6, 7, 8 or 9: {list(values)}") from e

    present = lookup_hexagram(v.line for v in lines)
    changing = [i for i, v in enumerate(lines) if v.is_changing]
    future = lookup_hexagram(v.future_line for v in lines) if changing else None
    return Reading(
        values=lines,
        present=present,
        future=future,
        changing_positions=changing,
        question=question,
        timestamp=datetime.now(timezone.utc).isoformat(timespec="seconds"),
    )


def generate_reading(
    method: ReadingMethod = ReadingMethod.YARROW_STALKS,
    randomness: RandomnessMode = RandomnessMode.RANDOM,
    question: str = "",
    source=None,
) -> Reading:
    """Casts a reading with the given method and source of randomness."""
    source = source or make_source(randomness)
    if method is ReadingMethod.COINS:
        values = coin_throws(source)
    else:
        values = yarrow_throws(source)
    logger.info("cast %s with %s randomness: %s", method, randomness, [int(v) for v in values])

    reading = reading_from_values(values, question)
    reading.method = method
    reading.randomness = randomness
    return reading
