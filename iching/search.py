"""
Shortest-path search between hexagrams.

Nodes are hexagrams, edges are the operations of a fixed catalogue. The
searcher runs a breadth-first search over whole paths so that every
shortest path is found, then keeps the ones that change the fewest lines.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Optional, Sequence, Tuple

from iching.errors import NoPathFoundError
from iching.hexagrams import Hexagram, Trigram, get_hexagram, validate_hexagram_number
from iching.operations import ALL_OPERATIONS, NO_OP, SearchOperation, transition_table

logger = logging.getLogger(__name__)

Step = Tuple[Hexagram, SearchOperation]
# A path between two hexagrams: the first step is always (start, NoOp).
Path = Tuple[Step, ...]


def path_length(path: Path) -> int:
    """Number of operations (edges) in a path."""
    return len(path) - 1


def count_line_changes(path: Path) -> int:
    """Counts the total number of line changes in a path between two hexagrams."""
    return sum(
        path[i][0].num_line_changes(path[i - 1][0])
        for i in range(1, len(path))
    )


def path_numbers(path: Path) -> List[Tuple[int, str]]:
    """(hexagram number, operation label) pairs, the form handed to reporting."""
    return [(hexagram.number, str(operation)) for hexagram, operation in path]


def distances_from(start: int, operations: Optional[Sequence[SearchOperation]] = None) -> Dict[int, int]:
    """BFS distance (in operations) from ``start`` to every reachable hexagram."""
    table = transition_table(ALL_OPERATIONS if operations is None else tuple(operations))
    origin = get_hexagram(start)
    dist: Dict[int, int] = {origin.number: 0}
    queue: Deque[Hexagram] = deque([origin])
    while queue:
        current = queue.popleft()
        for _, targets in table:
            nxt = targets[current.number - 1]
            if nxt.number not in dist:
                dist[nxt.number] = dist[current.number] + 1
                queue.append(nxt)
    return dist


class HexagramSearcher:
    """Given two hexagrams, finds the shortest paths between them."""

    def __init__(self, start: int, end: int, operations: Optional[Sequence[SearchOperation]] = None):
        validate_hexagram_number(start, "start hexagram")
        validate_hexagram_number(end, "end hexagram")
        self.start_hexagram = get_hexagram(start)
        self.end_hexagram = get_hexagram(end)
        self.operations: Tuple[SearchOperation, ...] = (
            ALL_OPERATIONS if operations is None
            else tuple(op for op in operations if op != NO_OP)
        )

    @staticmethod
    def find_least_lines_changed(paths: Sequence[Path]) -> List[Path]:
        """Returns only the paths with the least line changes, in their original order."""
        if not paths:
            return []
        changes = [count_line_changes(path) for path in paths]
        least = min(changes)
        return [path for path, n in zip(paths, changes) if n == least]

    def find_shortest_paths(self, all_paths: bool = False) -> List[Path]:
        """
        Returns the shortest paths between the start and end hexagrams.

        With ``all_paths`` every path of minimum length is returned; otherwise
        only those with the least total line changes. Ties are all kept, in
        the order the search discovered them.
        """
        start, goal = self.start_hexagram, self.end_hexagram
        if start == goal:
            return [((start, NO_OP),)]

        table = transition_table(self.operations)
        queue: Deque[Path] = deque([((start, NO_OP),)])
        shortest_paths: List[Path] = []
        explored = 0
        while queue:
            path = queue.popleft()
            # Level order: nothing shorter can turn up once a result exists.
            if shortest_paths and len(path) >= len(shortest_paths[0]):
                break
            explored += 1

            current = path[-1][0]
            for operation, targets in table:
                new_hexagram = targets[current.number - 1]
                if any(hexagram == new_hexagram for hexagram, _ in path):
                    continue
                new_path = path + ((new_hexagram, operation),)
                if new_hexagram == goal:
                    shortest_paths.append(new_path)
                else:
                    queue.append(new_path)

        if not shortest_paths:
            raise NoPathFoundError(start.number, goal.number)

        logger.debug(
            "search %d -> %d: %d path(s) of length %d after expanding %d path(s)",
            start.number, goal.number, len(shortest_paths),
            path_length(shortest_paths[0]), explored,
        )
        if all_paths:
            return shortest_paths
        return self.find_least_lines_changed(shortest_paths)


@dataclass
class HexagramAnalysis:
    """A hexagram, its trigrams and the hexagrams one operation away."""
    hexagram: Hexagram
    bottom_trigram: Trigram
    top_trigram: Trigram
    bottom_nuclear_trigram: Trigram
    top_nuclear_trigram: Trigram
    reachable_hexagrams: List[Step] = field(default_factory=list)

    @classmethod
    def new(cls, number: int, operations: Optional[Sequence[SearchOperation]] = None) -> "HexagramAnalysis":
        hexagram = get_hexagram(number)
        ops = ALL_OPERATIONS if operations is None else tuple(operations)
        bottom, top = hexagram.trigrams()
        bottom_nuclear, top_nuclear = hexagram.nuclear_trigrams()
        reachable = []
        for op in ops:
            result = op.apply(hexagram)
            if result != hexagram:
                reachable.append((result, op))
        return cls(
            hexagram=hexagram,
            bottom_trigram=bottom,
            top_trigram=top,
            bottom_nuclear_trigram=bottom_nuclear,
            top_nuclear_trigram=top_nuclear,
            reachable_hexagrams=reachable,
        )
