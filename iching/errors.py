"""Exceptions raised by the I-Ching analyzer."""

from __future__ import annotations


class IChingError(Exception):
    """Base class for every error raised by this package."""


class InvalidHexagramError(IChingError, ValueError):
    """A hexagram number outside 1-64 was requested."""

    def __init__(self, number: object, role: str = "hexagram"):
        self.number = number
        self.role = role
        super().__init__(f"Invalid {role} number: {number} (expected 1-64)")


class InvalidTrigramError(IChingError, ValueError):
    """A trigram number outside 1-8 was requested."""

    def __init__(self, number: object):
        self.number = number
        super().__init__(f"Invalid trigram number: {number} (expected 1-8)")


class InvalidReadingError(IChingError, ValueError):
    """A reading was built from something other than six values in {6, 7, 8, 9}."""


class CatalogueError(IChingError, LookupError):
    """A line pattern is missing from the static catalogue.

    Every operation is closed over the 64 hexagrams, so this only fires when
    the catalogue or an operation is broken.
    """


class NoPathFoundError(IChingError):
    """The search exhausted its queue without reaching the goal."""

    def __init__(self, start: int, end: int):
        self.start = start
        self.end = end
        super().__init__(f"No path found from hexagram {start} to hexagram {end}")


class RandomnessError(IChingError):
    """The randomness source could not deliver numbers."""


class InvalidSequenceCountError(IChingError, ValueError):
    """A random-sequence analysis was asked for fewer than one sequence or worker."""

    def __init__(self, name: str, value: object):
        self.name = name
        self.value = value
        super().__init__(f"Invalid {name}: {value} (expected at least 1)")
