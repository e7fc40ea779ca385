"""Smoke tests for rich rendering."""
import io
import unittest

from rich.console import Console

from iching import display
from iching.hexagrams import get_hexagram
from iching.reading import reading_from_values
from iching.search import HexagramAnalysis, HexagramSearcher
from iching.sequence import analyze_sequence


def recording_console():
    return Console(record=True, width=120, file=io.StringIO())


class TestFormatLines(unittest.TestCase):
    def test_top_first(self):
        lines = display.format_lines(get_hexagram(24).lines)
        self.assertEqual(lines[-1], display.YANG)
        self.assertEqual(lines[:5], [display.YIN] * 5)

    def test_changing_marked(self):
        lines = display.format_lines(get_hexagram(1).lines, changing=[5])
        self.assertTrue(lines[0].endswith("✦"))
        self.assertFalse(lines[1].endswith("✦"))


class TestPrinting(unittest.TestCase):
    def test_search_result(self):
        out = recording_console()
        paths = HexagramSearcher(1, 2).find_shortest_paths()
        display.print_search_result(1, 2, paths, out)
        text = out.export_text()
        self.assertIn("found 1 path(s)", text)
        self.assertIn("Path #1", text)
        self.assertIn("InverseHexagram", text)
        self.assertIn("#1 → InverseHexagram #2", text)

    def test_sequence_analysis(self):
        out = recording_console()
        display.print_sequence_analysis(analyze_sequence([1, 2, 1]), show_paths=True, out=out)
        text = out.export_text()
        self.assertIn("Total operations", text)
        self.assertIn("6.000", text)
        self.assertIn("Path #1 from hexagram 2 to hexagram 1", text)

    def test_comparison(self):
        out = recording_console()
        display.print_comparison(analyze_sequence([1, 2]), analyze_sequence([1, 2, 1]), out=out)
        text = out.export_text()
        self.assertIn("King Wen", text)
        self.assertIn("Random", text)
        self.assertIn("Total line changes", text)

    def test_hexagram_analysis(self):
        out = recording_console()
        display.print_hexagram_analysis(HexagramAnalysis.new(11), out)
        text = out.export_text()
        self.assertIn("Analysis of hexagram 11", text)
        self.assertIn("Bottom nuclear", text)
        self.assertIn("FlipTrigrams", text)

    def test_reading(self):
        out = recording_console()
        display.print_reading(reading_from_values([6, 8, 8, 8, 8, 8], question="Now?"), out)
        text = out.export_text()
        self.assertIn("Present Hexagram", text)
        self.assertIn("Future Hexagram", text)
        self.assertIn("Changing lines: 1", text)

    def test_reading_without_changes(self):
        out = recording_console()
        display.print_reading(reading_from_values([7] * 6), out)
        self.assertIn("No changing lines", out.export_text())


if __name__ == "__main__":
    unittest.main()
