"""
Structural edits that turn one hexagram into another.

The catalogue is closed: every operation maps a catalogue hexagram to a
catalogue hexagram. Its order matters, since the searcher tries operations
in exactly this order at every node.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Optional, Tuple

from iching.hexagrams import HEXAGRAMS, Hexagram

LINE_ORDINALS = ("First", "Second", "Third", "Fourth", "Fifth", "Sixth")


class OperationKind(Enum):
    NO_OP = "NoOp"
    INVERSE_LINE = "InverseLine"
    INVERSE_BOTTOM_TRIGRAM = "InverseBottomTrigram"
    INVERSE_TOP_TRIGRAM = "InverseTopTrigram"
    REVERSE_BOTTOM_TRIGRAM = "ReverseBottomTrigram"
    REVERSE_TOP_TRIGRAM = "ReverseTopTrigram"
    FLIP_TRIGRAMS = "FlipTrigrams"
    MIRROR_TRIGRAMS = "MirrorTrigrams"
    NUCLEAR_TRIGRAMS = "NuclearTrigrams"
    INVERSE_HEXAGRAM = "InverseHexagram"
    REVERSE_HEXAGRAM = "ReverseHexagram"
    MIX_TRIGRAMS_BOTTOM_FIRST = "MixTrigramsBottomFirst"
    MIX_TRIGRAMS_TOP_FIRST = "MixTrigramsTopFirst"


DESCRIPTIONS = {
    OperationKind.NO_OP: "No operation.",
    OperationKind.INVERSE_LINE: "Inverse a single line.",
    OperationKind.INVERSE_BOTTOM_TRIGRAM: "Inverse the bottom trigram.",
    OperationKind.INVERSE_TOP_TRIGRAM: "Inverse the top trigram.",
    OperationKind.REVERSE_BOTTOM_TRIGRAM: "Reverse the order of the lines in the bottom trigram.",
    OperationKind.REVERSE_TOP_TRIGRAM: "Reverse the order of the lines in the top trigram.",
    OperationKind.FLIP_TRIGRAMS: "Swap the bottom and top trigrams.",
    OperationKind.MIRROR_TRIGRAMS: "Reverse the order of the lines within each trigram.",
    OperationKind.NUCLEAR_TRIGRAMS: "Stack the bottom nuclear trigram under the top nuclear trigram.",
    OperationKind.INVERSE_HEXAGRAM: "Inverse all the lines in the hexagram.",
    OperationKind.REVERSE_HEXAGRAM: "Reverse the order of the lines in the hexagram.",
    OperationKind.MIX_TRIGRAMS_BOTTOM_FIRST: "Interleave the trigram lines, bottom trigram first.",
    OperationKind.MIX_TRIGRAMS_TOP_FIRST: "Interleave the trigram lines, top trigram first.",
}

# Hexagram method implementing each kind (INVERSE_LINE and NO_OP handled apart).
_METHODS = {
    OperationKind.INVERSE_BOTTOM_TRIGRAM: Hexagram.inverse_bottom_trigram,
    OperationKind.INVERSE_TOP_TRIGRAM: Hexagram.inverse_top_trigram,
    OperationKind.REVERSE_BOTTOM_TRIGRAM: Hexagram.reverse_bottom_trigram,
    OperationKind.REVERSE_TOP_TRIGRAM: Hexagram.reverse_top_trigram,
    OperationKind.FLIP_TRIGRAMS: Hexagram.flip_trigrams,
    OperationKind.MIRROR_TRIGRAMS: Hexagram.mirror_trigrams,
    OperationKind.NUCLEAR_TRIGRAMS: Hexagram.use_nuclear_trigrams,
    OperationKind.INVERSE_HEXAGRAM: Hexagram.inverse,
    OperationKind.REVERSE_HEXAGRAM: Hexagram.reverse,
    OperationKind.MIX_TRIGRAMS_BOTTOM_FIRST: Hexagram.mix_trigrams_bottom_first,
    OperationKind.MIX_TRIGRAMS_TOP_FIRST: Hexagram.mix_trigrams_top_first,
}

_NON_INVOLUTIONS = frozenset({
    OperationKind.NUCLEAR_TRIGRAMS,
    OperationKind.MIX_TRIGRAMS_BOTTOM_FIRST,
    OperationKind.MIX_TRIGRAMS_TOP_FIRST,
})


@dataclass(frozen=True)
class SearchOperation:
    """An operation that can be applied to transform a hexagram.

    ``position`` is the 0-based line index and is only set for
    ``INVERSE_LINE``.
    """
    kind: OperationKind
    position: Optional[int] = None

    def __post_init__(self):
        if self.kind is OperationKind.INVERSE_LINE:
            if self.position is None or not 0 <= self.position < 6:
                raise ValueError(f"InverseLine needs a position in 0..5, got {self.position}")
        elif self.position is not None:
            raise ValueError(f"{self.kind.value} does not take a line position")

    # --- constructors ---

    @classmethod
    def no_op(cls) -> "SearchOperation":
        return NO_OP

    @classmethod
    def inverse_line(cls, position: int) -> "SearchOperation":
        return cls(OperationKind.INVERSE_LINE, position)

    @staticmethod
    def all_operations() -> Tuple["SearchOperation", ...]:
        """The search edges of the extended catalogue, in search order."""
        return ALL_OPERATIONS

    @staticmethod
    def minimal_operations() -> Tuple["SearchOperation", ...]:
        """The search edges of the canonical minimal catalogue, in search order."""
        return MINIMAL_OPERATIONS

    # --- behaviour ---

    def apply(self, hexagram: Hexagram) -> Hexagram:
        """Applies the operation to the given hexagram."""
        return _apply(self, hexagram.number)

    @property
    def is_involution(self) -> bool:
        """Whether applying the operation twice always gives the input back."""
        return self.kind not in _NON_INVOLUTIONS

    @property
    def description(self) -> str:
        if self.kind is OperationKind.INVERSE_LINE:
            return f"Inverse the {LINE_ORDINALS[self.position].lower()} line."
        return DESCRIPTIONS[self.kind]

    def __str__(self) -> str:
        if self.kind is OperationKind.INVERSE_LINE:
            return f"{self.kind.value}({LINE_ORDINALS[self.position]})"
        return self.kind.value


@lru_cache(maxsize=None)
def _apply(operation: SearchOperation, number: int) -> Hexagram:
    # Memoized per (operation, hexagram number).
    hexagram = HEXAGRAMS[number - 1]
    if operation.kind is OperationKind.NO_OP:
        return hexagram
    if operation.kind is OperationKind.INVERSE_LINE:
        return hexagram.inverse_line(operation.position)
    return _METHODS[operation.kind](hexagram)


NO_OP = SearchOperation(OperationKind.NO_OP)

_LINE_FLIPS = tuple(SearchOperation(OperationKind.INVERSE_LINE, p) for p in range(6))

ALL_OPERATIONS: Tuple[SearchOperation, ...] = _LINE_FLIPS + (
    SearchOperation(OperationKind.INVERSE_BOTTOM_TRIGRAM),
    SearchOperation(OperationKind.INVERSE_TOP_TRIGRAM),
    SearchOperation(OperationKind.REVERSE_BOTTOM_TRIGRAM),
    SearchOperation(OperationKind.REVERSE_TOP_TRIGRAM),
    SearchOperation(OperationKind.FLIP_TRIGRAMS),
    SearchOperation(OperationKind.MIRROR_TRIGRAMS),
    SearchOperation(OperationKind.NUCLEAR_TRIGRAMS),
    SearchOperation(OperationKind.INVERSE_HEXAGRAM),
    SearchOperation(OperationKind.REVERSE_HEXAGRAM),
    SearchOperation(OperationKind.MIX_TRIGRAMS_BOTTOM_FIRST),
    SearchOperation(OperationKind.MIX_TRIGRAMS_TOP_FIRST),
)

MINIMAL_OPERATIONS: Tuple[SearchOperation, ...] = _LINE_FLIPS + (
    SearchOperation(OperationKind.INVERSE_BOTTOM_TRIGRAM),
    SearchOperation(OperationKind.INVERSE_TOP_TRIGRAM),
    SearchOperation(OperationKind.REVERSE_BOTTOM_TRIGRAM),
    SearchOperation(OperationKind.REVERSE_TOP_TRIGRAM),
    SearchOperation(OperationKind.MIRROR_TRIGRAMS),
    SearchOperation(OperationKind.INVERSE_HEXAGRAM),
    SearchOperation(OperationKind.REVERSE_HEXAGRAM),
)

CATALOGUES = {
    "extended": ALL_OPERATIONS,
    "minimal": MINIMAL_OPERATIONS,
}


@lru_cache(maxsize=None)
def transition_table(operations: Tuple[SearchOperation, ...]) -> Tuple[Tuple[SearchOperation, Tuple[Hexagram, ...]], ...]:
    """For each operation, its result on every hexagram, indexed by number - 1."""
    return tuple(
        (op, tuple(op.apply(hexagram) for hexagram in HEXAGRAMS))
        for op in operations
    )
