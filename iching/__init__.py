"""I-Ching readings and shortest-path analysis of hexagram transformations."""

from iching.errors import (
    CatalogueError,
    IChingError,
    InvalidHexagramError,
    InvalidReadingError,
    InvalidSequenceCountError,
    InvalidTrigramError,
    NoPathFoundError,
    RandomnessError,
)
from iching.hexagrams import (
    HEXAGRAMS,
    TRIGRAMS,
    Hexagram,
    Line,
    Trigram,
    get_hexagram,
    get_trigram,
    lookup_hexagram,
    lookup_trigram,
)
from iching.operations import ALL_OPERATIONS, MINIMAL_OPERATIONS, OperationKind, SearchOperation
from iching.search import HexagramAnalysis, HexagramSearcher, count_line_changes
from iching.sequence import (
    SequenceAnalysis,
    SequenceAnalyzer,
    find_min_random_sequence,
    king_wen,
)

__version__ = "0.1.0"
