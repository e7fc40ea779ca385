"""Tests for sequence analysis and the random-sequence comparison."""
import random
import unittest

from iching.errors import InvalidHexagramError, InvalidSequenceCountError
from iching.operations import MINIMAL_OPERATIONS
from iching.search import count_line_changes, path_length
from iching.sequence import (
    SequenceAnalysis, SequenceAnalyzer, analyze_random_sequences, analyze_sequence,
    compare_sequences, compare_with_random, find_min_random_sequence, king_wen, random_sequence,
)


class TestKingWen(unittest.TestCase):
    def test_order(self):
        self.assertEqual(king_wen(), list(range(1, 65)))

    def test_random_is_permutation(self):
        seq = random_sequence(random.Random(3))
        self.assertEqual(sorted(seq), king_wen())

    def test_random_reproducible(self):
        self.assertEqual(random_sequence(random.Random(9)), random_sequence(random.Random(9)))


class TestSequenceAnalyzer(unittest.TestCase):
    def test_single_element(self):
        analysis = SequenceAnalyzer([5]).analyze()
        self.assertEqual(analysis.total_ops, 0)
        self.assertEqual(analysis.total_line_changes, 0)
        self.assertEqual(analysis.shortest_paths, [])
        self.assertEqual(analysis.total_paths, 1)
        self.assertEqual(analysis.lines_per_operation, 0.0)

    def test_empty(self):
        analysis = SequenceAnalyzer([]).analyze()
        self.assertEqual(analysis.total_ops, 0)
        self.assertEqual(analysis.pairs(), [])

    def test_round_trip(self):
        analysis = SequenceAnalyzer([1, 2, 1]).analyze()
        self.assertEqual(analysis.total_ops, 2)
        self.assertEqual(analysis.total_line_changes, 12)
        self.assertEqual(analysis.total_paths, 1)
        self.assertEqual(analysis.lines_per_operation, 6.0)
        self.assertEqual(len(analysis.shortest_paths), 2)

    def test_pairs(self):
        analysis = analyze_sequence([1, 2, 24])
        pairs = analysis.pairs()
        self.assertEqual([(a, b) for a, b, _ in pairs], [(1, 2), (2, 24)])
        self.assertEqual(pairs[1][2][0][-1][0].number, 24)

    def test_validates_before_search(self):
        with self.assertRaises(InvalidHexagramError):
            SequenceAnalyzer([1, 70])
        with self.assertRaises(InvalidHexagramError):
            SequenceAnalyzer([0])

    def test_totals_from_representative_paths(self):
        analysis = analyze_sequence([3, 50, 17, 64])
        self.assertEqual(analysis.total_ops, sum(path_length(p[0]) for p in analysis.shortest_paths))
        self.assertEqual(
            analysis.total_line_changes,
            sum(count_line_changes(p[0]) for p in analysis.shortest_paths),
        )
        product = 1
        for paths in analysis.shortest_paths:
            product *= len(paths)
        self.assertEqual(analysis.total_paths, product)

    def test_king_wen(self):
        analysis = analyze_sequence(king_wen())
        self.assertEqual(len(analysis.shortest_paths), 63)
        self.assertGreaterEqual(analysis.total_ops, 63)
        self.assertGreaterEqual(analysis.total_line_changes, analysis.total_ops)
        self.assertGreaterEqual(analysis.total_paths, 1)

    def test_minimal_catalogue(self):
        analysis = analyze_sequence([1, 2, 1], MINIMAL_OPERATIONS)
        self.assertEqual(analysis.total_ops, 2)


class TestComparison(unittest.TestCase):
    def test_compare_sequences(self):
        first, second = compare_sequences([1, 2], [1, 2, 1])
        self.assertIsInstance(first, SequenceAnalysis)
        self.assertEqual(first.total_ops, 1)
        self.assertEqual(second.total_ops, 2)

    def test_compare_with_random(self):
        kw, rnd = compare_with_random(seed=11)
        self.assertEqual(kw.sequence, king_wen())
        self.assertEqual(sorted(rnd.sequence), king_wen())


class TestRandomSequences(unittest.TestCase):
    def test_minimum_of_all(self):
        analyses = analyze_random_sequences(3, seed=42, max_workers=1)
        best = find_min_random_sequence(3, seed=42, max_workers=1)
        self.assertEqual(len(analyses), 3)
        for analysis in analyses:
            self.assertLessEqual(best.total_ops, analysis.total_ops)
        self.assertEqual(best.total_ops, min(a.total_ops for a in analyses))

    def test_seed_reproducible(self):
        a = analyze_random_sequences(2, seed=7, max_workers=1)
        b = analyze_random_sequences(2, seed=7, max_workers=1)
        self.assertEqual([x.sequence for x in a], [x.sequence for x in b])

    def test_parallel_matches_inline(self):
        inline = analyze_random_sequences(2, seed=5, max_workers=1)
        parallel = analyze_random_sequences(2, seed=5, max_workers=2)
        self.assertEqual([x.sequence for x in inline], [x.sequence for x in parallel])
        self.assertEqual([x.total_ops for x in inline], [x.total_ops for x in parallel])

    def test_single_sequence(self):
        best = find_min_random_sequence(1, seed=1, max_workers=1)
        self.assertEqual(sorted(best.sequence), king_wen())

    def test_needs_one_sequence(self):
        with self.assertRaises(InvalidSequenceCountError):
            find_min_random_sequence(0)
        with self.assertRaises(ValueError):
            analyze_random_sequences(-3, max_workers=1)

    def test_needs_one_worker(self):
        with self.assertRaises(InvalidSequenceCountError):
            analyze_random_sequences(2, max_workers=0)


if __name__ == "__main__":
    unittest.main()
