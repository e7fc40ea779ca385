"""Tests for the transformation operation catalogue."""
import unittest

from iching.hexagrams import HEXAGRAMS, get_hexagram
from iching.operations import (
    ALL_OPERATIONS, MINIMAL_OPERATIONS, NO_OP, OperationKind, SearchOperation, transition_table,
)


def op(kind, position=None):
    return SearchOperation(kind, position)


class TestCatalogue(unittest.TestCase):
    def test_sizes(self):
        self.assertEqual(len(ALL_OPERATIONS), 17)
        self.assertEqual(len(MINIMAL_OPERATIONS), 13)

    def test_no_op_not_an_edge(self):
        self.assertNotIn(NO_OP, ALL_OPERATIONS)
        self.assertNotIn(NO_OP, MINIMAL_OPERATIONS)

    def test_minimal_is_subset(self):
        self.assertTrue(set(MINIMAL_OPERATIONS) <= set(ALL_OPERATIONS))

    def test_fixed_order(self):
        self.assertEqual(ALL_OPERATIONS[:6], tuple(SearchOperation.inverse_line(p) for p in range(6)))
        self.assertEqual(ALL_OPERATIONS[-1].kind, OperationKind.MIX_TRIGRAMS_TOP_FIRST)
        self.assertIs(SearchOperation.all_operations(), ALL_OPERATIONS)
        self.assertIs(SearchOperation.minimal_operations(), MINIMAL_OPERATIONS)

    def test_equality_and_hash(self):
        self.assertEqual(SearchOperation.inverse_line(2), SearchOperation.inverse_line(2))
        self.assertNotEqual(SearchOperation.inverse_line(2), SearchOperation.inverse_line(3))
        self.assertEqual(len(set(ALL_OPERATIONS)), 17)

    def test_invalid_position(self):
        with self.assertRaises(ValueError):
            SearchOperation.inverse_line(6)
        with self.assertRaises(ValueError):
            SearchOperation(OperationKind.INVERSE_LINE)
        with self.assertRaises(ValueError):
            SearchOperation(OperationKind.FLIP_TRIGRAMS, 1)

    def test_labels(self):
        self.assertEqual(str(SearchOperation.inverse_line(3)), "InverseLine(Fourth)")
        self.assertEqual(str(NO_OP), "NoOp")
        self.assertIs(SearchOperation.no_op(), NO_OP)
        self.assertEqual(str(op(OperationKind.INVERSE_HEXAGRAM)), "InverseHexagram")
        self.assertEqual(SearchOperation.inverse_line(0).description, "Inverse the first line.")


class TestLaws(unittest.TestCase):
    def test_no_op_identity(self):
        for h in HEXAGRAMS:
            self.assertEqual(NO_OP.apply(h), h)

    def test_closed_over_catalogue(self):
        catalogue = set(HEXAGRAMS)
        for operation in ALL_OPERATIONS:
            for h in HEXAGRAMS:
                self.assertIn(operation.apply(h), catalogue)

    def test_involutions(self):
        for operation in ALL_OPERATIONS:
            if not operation.is_involution:
                continue
            for h in HEXAGRAMS:
                self.assertEqual(operation.apply(operation.apply(h)), h, str(operation))

    def test_minimal_all_involutions(self):
        self.assertTrue(all(o.is_involution for o in MINIMAL_OPERATIONS))

    def test_mirror_is_both_reversals(self):
        rb = op(OperationKind.REVERSE_BOTTOM_TRIGRAM)
        rt = op(OperationKind.REVERSE_TOP_TRIGRAM)
        mirror = op(OperationKind.MIRROR_TRIGRAMS)
        for h in HEXAGRAMS:
            self.assertEqual(mirror.apply(h), rt.apply(rb.apply(h)))

    def test_inverse_line_changes_one_line(self):
        for h in HEXAGRAMS:
            for p in range(6):
                result = SearchOperation.inverse_line(p).apply(h)
                self.assertEqual(h.changing_lines(result), [p])

    def test_transition_table(self):
        table = transition_table(ALL_OPERATIONS)
        self.assertEqual(len(table), 17)
        for operation, targets in table:
            self.assertEqual(len(targets), 64)
            self.assertEqual(targets[10], operation.apply(get_hexagram(11)))


class TestExamples(unittest.TestCase):
    def check(self, kind, start, expected, position=None):
        self.assertEqual(op(kind, position).apply(get_hexagram(start)).number, expected)

    def test_inverse_line(self):
        self.check(OperationKind.INVERSE_LINE, 2, 24, position=0)

    def test_inverse_trigrams(self):
        self.check(OperationKind.INVERSE_BOTTOM_TRIGRAM, 1, 12)
        self.check(OperationKind.INVERSE_TOP_TRIGRAM, 1, 11)

    def test_reverse_trigrams(self):
        self.check(OperationKind.REVERSE_BOTTOM_TRIGRAM, 24, 15)
        self.check(OperationKind.REVERSE_TOP_TRIGRAM, 23, 16)

    def test_flip_trigrams(self):
        self.check(OperationKind.FLIP_TRIGRAMS, 11, 12)

    def test_mirror_trigrams(self):
        self.check(OperationKind.MIRROR_TRIGRAMS, 3, 39)

    def test_nuclear_trigrams(self):
        self.check(OperationKind.NUCLEAR_TRIGRAMS, 1, 1)
        self.check(OperationKind.NUCLEAR_TRIGRAMS, 63, 64)

    def test_whole_hexagram(self):
        self.check(OperationKind.INVERSE_HEXAGRAM, 1, 2)
        self.check(OperationKind.REVERSE_HEXAGRAM, 3, 4)

    def test_mix_trigrams(self):
        self.check(OperationKind.MIX_TRIGRAMS_BOTTOM_FIRST, 11, 63)
        self.check(OperationKind.MIX_TRIGRAMS_TOP_FIRST, 11, 64)


if __name__ == "__main__":
    unittest.main()
