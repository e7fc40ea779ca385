"""
Analysis of whole sequences of hexagrams.

A sequence is scored by searching the shortest paths between each pair of
neighbours and summing them up. Random orderings of the 64 hexagrams can be
scored in parallel and compared with the King Wen sequence.
"""

from __future__ import annotations

import logging
import random
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from math import prod
from typing import Iterable, List, Optional, Sequence, Tuple

from iching.errors import InvalidSequenceCountError
from iching.hexagrams import validate_hexagram_number
from iching.operations import SearchOperation
from iching.search import HexagramSearcher, Path, count_line_changes, path_length

logger = logging.getLogger(__name__)


def king_wen() -> List[int]:
    """King Wen's sequence: the hexagrams as they appear in the I Ching."""
    return list(range(1, 65))


def random_sequence(rng: Optional[random.Random] = None) -> List[int]:
    """A shuffled copy of the King Wen sequence."""
    sequence = king_wen()
    (rng or random.Random()).shuffle(sequence)
    return sequence


@dataclass
class SequenceAnalysis:
    """The result of analyzing a sequence of hexagrams."""
    sequence: List[int]
    # Surviving shortest paths for every consecutive pair.
    shortest_paths: List[List[Path]] = field(default_factory=list)
    total_ops: int = 0
    total_line_changes: int = 0
    # Product of the per-pair path counts.
    total_paths: int = 1

    @property
    def lines_per_operation(self) -> float:
        if self.total_ops == 0:
            return 0.0
        return self.total_line_changes / self.total_ops

    def pairs(self) -> List[Tuple[int, int, List[Path]]]:
        """(start, end, paths) for every consecutive pair."""
        return [
            (self.sequence[i - 1], self.sequence[i], self.shortest_paths[i - 1])
            for i in range(1, len(self.sequence))
        ]


class SequenceAnalyzer:
    """Runs the shortest-path search over every consecutive pair of a sequence."""

    def __init__(self, sequence: Iterable[int], operations: Optional[Sequence[SearchOperation]] = None):
        self.sequence = list(sequence)
        self.operations = operations
        for number in self.sequence:
            validate_hexagram_number(number)

    def analyze(self) -> SequenceAnalysis:
        shortest_paths: List[List[Path]] = []
        for start, end in zip(self.sequence, self.sequence[1:]):
            searcher = HexagramSearcher(start, end, self.operations)
            shortest_paths.append(searcher.find_shortest_paths(False))

        # The first surviving path of each pair stands for the whole pair.
        total_ops = sum(path_length(paths[0]) for paths in shortest_paths)
        total_line_changes = sum(count_line_changes(paths[0]) for paths in shortest_paths)
        total_paths = prod(len(paths) for paths in shortest_paths)

        logger.debug(
            "analyzed sequence of %d hexagrams: %d ops, %d line changes",
            len(self.sequence), total_ops, total_line_changes,
        )
        return SequenceAnalysis(
            sequence=list(self.sequence),
            shortest_paths=shortest_paths,
            total_ops=total_ops,
            total_line_changes=total_line_changes,
            total_paths=total_paths,
        )


def analyze_sequence(sequence: Iterable[int], operations: Optional[Sequence[SearchOperation]] = None) -> SequenceAnalysis:
    return SequenceAnalyzer(sequence, operations).analyze()


def compare_sequences(
    first: Iterable[int],
    second: Iterable[int],
    operations: Optional[Sequence[SearchOperation]] = None,
) -> Tuple[SequenceAnalysis, SequenceAnalysis]:
    """Analyze two sequences so their statistics can be shown side by side."""
    return analyze_sequence(first, operations), analyze_sequence(second, operations)


def compare_with_random(
    seed: Optional[int] = None,
    operations: Optional[Sequence[SearchOperation]] = None,
) -> Tuple[SequenceAnalysis, SequenceAnalysis]:
    """King Wen's sequence next to one random shuffling of it."""
    return compare_sequences(king_wen(), random_sequence(random.Random(seed)), operations)


def _analyze_random(args: Tuple[int, Optional[Tuple[SearchOperation, ...]]]) -> SequenceAnalysis:
    # Module-level so worker processes can unpickle it.
    seed, operations = args
    return analyze_sequence(random_sequence(random.Random(seed)), operations)


def analyze_random_sequences(
    num_sequences: int,
    seed: Optional[int] = None,
    max_workers: Optional[int] = None,
    operations: Optional[Sequence[SearchOperation]] = None,
) -> List[SequenceAnalysis]:
    """
    Analyze ``num_sequences`` random shufflings of King Wen's sequence.

    Each shuffling gets its own seed, drawn up front from ``seed``, so the
    outcome does not depend on how the work is split across processes.
    Results come back in submission order. ``max_workers=1`` runs inline.
    """
    if num_sequences < 1:
        raise InvalidSequenceCountError("number of sequences", num_sequences)
    if max_workers is not None and max_workers < 1:
        raise InvalidSequenceCountError("number of workers", max_workers)
    rng = random.Random(seed)
    ops = None if operations is None else tuple(operations)
    jobs = [(rng.getrandbits(64), ops) for _ in range(num_sequences)]

    if max_workers == 1:
        return [_analyze_random(job) for job in jobs]

    logger.info("analyzing %d random sequences in parallel", num_sequences)
    with ProcessPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(_analyze_random, jobs))


def find_min_random_sequence(
    num_sequences: int,
    seed: Optional[int] = None,
    max_workers: Optional[int] = None,
    operations: Optional[Sequence[SearchOperation]] = None,
) -> SequenceAnalysis:
    """
    Finds the best random shuffling of King Wen's sequence by number of operations.

    Ties keep the earliest shuffling in submission order.
    """
    analyses = analyze_random_sequences(num_sequences, seed, max_workers, operations)
    return min(analyses, key=lambda analysis: analysis.total_ops)
