"""
Lines, trigrams and hexagrams, plus the static King Wen catalogue.

Lines are always listed bottom to top: index 0 is the bottom line. The
canonical numbers are data, not a formula over the bit pattern, so both
tables below are embedded verbatim and indexed once at import.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterable, List, Tuple

from iching.errors import CatalogueError, InvalidHexagramError, InvalidTrigramError

logger = logging.getLogger(__name__)


class Line(IntEnum):
    """A single line: open (yin, broken) or closed (yang, solid)."""
    OPEN = 0
    CLOSED = 1

    @classmethod
    def from_bit(cls, bit: int) -> "Line":
        return cls.CLOSED if bit else cls.OPEN

    def inverse(self) -> "Line":
        return Line.OPEN if self is Line.CLOSED else Line.CLOSED


Lines = Tuple[Line, ...]

# === Trigram table ===
# Fu Xi numbering. Bits are written bottom line first.
TRIGRAM_TABLE: Tuple[Tuple[int, str], ...] = (
    (1, "111"),
    (2, "110"),
    (3, "101"),
    (4, "100"),
    (5, "011"),
    (6, "010"),
    (7, "001"),
    (8, "000"),
)

# number: (symbol, name, attributes)
TRIGRAM_META: Dict[int, Tuple[str, str, str]] = {
    1: ("☰", "Qian (Heaven/Creative)", "strong, creative, initiating"),
    2: ("☱", "Dui (Lake/Joyous)", "joyous, open, reflecting"),
    3: ("☲", "Li (Fire/Clinging)", "clinging, illuminating, clarifying"),
    4: ("☳", "Zhen (Thunder/Arousing)", "arousing, stirring, shocking"),
    5: ("☴", "Xun (Wind/Wood/Gentle)", "gentle, penetrating, flexible"),
    6: ("☵", "Kan (Water/Abysmal)", "dangerous, flowing, profound"),
    7: ("☶", "Gen (Mountain/Keeping Still)", "still, stopping, resting"),
    8: ("☷", "Kun (Earth/Receptive)", "receptive, yielding, devoted"),
}

# === Hexagram table (King Wen sequence) ===
# Bits are written bottom line first: "100010" is thunder below water.
HEXAGRAM_TABLE: Tuple[Tuple[int, str], ...] = (
    (1, "111111"),
    (2, "000000"),
    (3, "100010"),
    (4, "010001"),
    (5, "111010"),
    (6, "010111"),
    (7, "010000"),
    (8, "000010"),
    (9, "111011"),
    (10, "110111"),
    (11, "111000"),
    (12, "000111"),
    (13, "101111"),
    (14, "111101"),
    (15, "001000"),
    (16, "000100"),
    (17, "100110"),
    (18, "011001"),
    (19, "110000"),
    (20, "000011"),
    (21, "100101"),
    (22, "101001"),
    (23, "000001"),
    (24, "100000"),
    (25, "100111"),
    (26, "111001"),
    (27, "100001"),
    (28, "011110"),
    (29, "010010"),
    (30, "101101"),
    (31, "001110"),
    (32, "011100"),
    (33, "001111"),
    (34, "111100"),
    (35, "000101"),
    (36, "101000"),
    (37, "101011"),
    (38, "110101"),
    (39, "001010"),
    (40, "010100"),
    (41, "110001"),
    (42, "100011"),
    (43, "111110"),
    (44, "011111"),
    (45, "000110"),
    (46, "011000"),
    (47, "010110"),
    (48, "011010"),
    (49, "101110"),
    (50, "011101"),
    (51, "100100"),
    (52, "001001"),
    (53, "001011"),
    (54, "110100"),
    (55, "101100"),
    (56, "001101"),
    (57, "011011"),
    (58, "110110"),
    (59, "010011"),
    (60, "110010"),
    (61, "110011"),
    (62, "001100"),
    (63, "101010"),
    (64, "010101"),
)

# number: (name, chinese)
HEXAGRAM_NAMES: Dict[int, Tuple[str, str]] = {
    1: ("Qian / The Creative", "乾"),
    2: ("Kun / The Receptive", "坤"),
    3: ("Zhun / Difficulty at the Beginning", "屯"),
    4: ("Meng / Youthful Folly", "蒙"),
    5: ("Xu / Waiting (Nourishment)", "需"),
    6: ("Song / Conflict", "訟"),
    7: ("Shi / The Army", "師"),
    8: ("Bi / Holding Together (Union)", "比"),
    9: ("Xiao Chu / The Taming Power of the Small", "小畜"),
    10: ("Lu / Treading (Conduct)", "履"),
    11: ("Tai / Peace", "泰"),
    12: ("Pi / Standstill (Stagnation)", "否"),
    13: ("Tong Ren / Fellowship with Men", "同人"),
    14: ("Da You / Possession in Great Measure", "大有"),
    15: ("Qian / Modesty", "謙"),
    16: ("Yu / Enthusiasm", "豫"),
    17: ("Sui / Following", "隨"),
    18: ("Gu / Work on What Has Been Spoiled (Decay)", "蠱"),
    19: ("Lin / Approach", "臨"),
    20: ("Guan / Contemplation (View)", "觀"),
    21: ("Shi He / Biting Through", "噬嗑"),
    22: ("Bi / Grace", "賁"),
    23: ("Bo / Splitting Apart", "剝"),
    24: ("Fu / Return (The Turning Point)", "復"),
    25: ("Wu Wang / Innocence (The Unexpected)", "無妄"),
    26: ("Da Chu / The Taming Power of the Great", "大畜"),
    27: ("Yi / The Corners of the Mouth (Providing Nourishment)", "頤"),
    28: ("Da Guo / Preponderance of the Great", "大過"),
    29: ("Kan / The Abysmal (Water)", "坎"),
    30: ("Li / The Clinging (Fire)", "離"),
    31: ("Xian / Influence (Wooing)", "咸"),
    32: ("Heng / Duration", "恆"),
    33: ("Dun / Retreat", "遯"),
    34: ("Da Zhuang / The Power of the Great", "大壯"),
    35: ("Jin / Progress", "晉"),
    36: ("Ming Yi / Darkening of the Light", "明夷"),
    37: ("Jia Ren / The Family", "家人"),
    38: ("Kui / Opposition", "睽"),
    39: ("Jian / Obstruction", "蹇"),
    40: ("Xie / Deliverance", "解"),
    41: ("Sun / Decrease", "損"),
    42: ("Yi / Increase", "益"),
    43: ("Guai / Break-through (Resoluteness)", "夬"),
    44: ("Gou / Coming to Meet", "姤"),
    45: ("Cui / Gathering Together (Massing)", "萃"),
    46: ("Sheng / Pushing Upward", "升"),
    47: ("Kun / Oppression (Exhaustion)", "困"),
    48: ("Jing / The Well", "井"),
    49: ("Ge / Revolution (Molting)", "革"),
    50: ("Ding / The Caldron", "鼎"),
    51: ("Zhen / The Arousing (Shock, Thunder)", "震"),
    52: ("Gen / Keeping Still (Mountain)", "艮"),
    53: ("Jian / Development (Gradual Progress)", "漸"),
    54: ("Gui Mei / The Marrying Maiden", "歸妹"),
    55: ("Feng / Abundance (Fullness)", "豐"),
    56: ("Lu / The Wanderer", "旅"),
    57: ("Xun / The Gentle (Wind)", "巽"),
    58: ("Dui / The Joyous (Lake)", "兌"),
    59: ("Huan / Dispersion (Dissolution)", "渙"),
    60: ("Jie / Limitation", "節"),
    61: ("Zhong Fu / Inner Truth", "中孚"),
    62: ("Xiao Guo / Preponderance of the Small", "小過"),
    63: ("Ji Ji / After Completion", "既濟"),
    64: ("Wei Ji / Before Completion", "未濟"),
}


def lines_from_bits(bits: str) -> Lines:
    """Convert a bottom-first bit string such as "100010" into lines."""
    return tuple(Line.from_bit(int(b)) for b in bits)


def lines_to_bits(lines: Iterable[Line]) -> str:
    return "".join(str(int(line)) for line in lines)


# === Entities ===
@dataclass(frozen=True)
class Trigram:
    """One of the eight trigrams."""
    number: int
    lines: Lines

    @property
    def symbol(self) -> str:
        return TRIGRAM_META[self.number][0]

    @property
    def name(self) -> str:
        return TRIGRAM_META[self.number][1]

    @property
    def attributes(self) -> str:
        return TRIGRAM_META[self.number][2]

    def __str__(self) -> str:
        return f"{self.symbol} {self.name}"


@dataclass(frozen=True)
class Hexagram:
    """One of the 64 hexagrams, lines stored bottom to top."""
    number: int
    lines: Lines

    # --- metadata ---

    @property
    def name(self) -> str:
        return HEXAGRAM_NAMES[self.number][0]

    @property
    def chinese(self) -> str:
        return HEXAGRAM_NAMES[self.number][1]

    @property
    def symbol(self) -> str:
        """Unicode hexagram character, U+4DC0 for hexagram 1."""
        return chr(0x4DC0 + self.number - 1)

    @property
    def bits(self) -> str:
        return lines_to_bits(self.lines)

    def __str__(self) -> str:
        return f"#{self.number} {self.symbol} {self.name}"

    # --- component trigrams ---

    def bottom_trigram(self) -> Trigram:
        return lookup_trigram(self.lines[0:3])

    def top_trigram(self) -> Trigram:
        return lookup_trigram(self.lines[3:6])

    def trigrams(self) -> Tuple[Trigram, Trigram]:
        return self.bottom_trigram(), self.top_trigram()

    def bottom_nuclear_trigram(self) -> Trigram:
        """Trigram formed by the second, third and fourth lines."""
        return lookup_trigram(self.lines[1:4])

    def top_nuclear_trigram(self) -> Trigram:
        """Trigram formed by the third, fourth and fifth lines."""
        return lookup_trigram(self.lines[2:5])

    def nuclear_trigrams(self) -> Tuple[Trigram, Trigram]:
        return self.bottom_nuclear_trigram(), self.top_nuclear_trigram()

    # --- comparison ---

    def num_line_changes(self, other: "Hexagram") -> int:
        """Number of positions where the two hexagrams differ."""
        return sum(1 for a, b in zip(self.lines, other.lines) if a != b)

    def changing_lines(self, other: "Hexagram") -> List[int]:
        """0-based positions where the two hexagrams differ."""
        return [i for i, (a, b) in enumerate(zip(self.lines, other.lines)) if a != b]

    # --- structural edits ---

    def inverse_line(self, position: int) -> "Hexagram":
        if not 0 <= position < 6:
            raise ValueError(f"line position must be 0..5, got {position}")
        lines = list(self.lines)
        lines[position] = lines[position].inverse()
        return lookup_hexagram(lines)

    def inverse(self) -> "Hexagram":
        return lookup_hexagram(line.inverse() for line in self.lines)

    def inverse_bottom_trigram(self) -> "Hexagram":
        bottom = [line.inverse() for line in self.lines[0:3]]
        return lookup_hexagram(bottom + list(self.lines[3:6]))

    def inverse_top_trigram(self) -> "Hexagram":
        top = [line.inverse() for line in self.lines[3:6]]
        return lookup_hexagram(list(self.lines[0:3]) + top)

    def reverse(self) -> "Hexagram":
        return lookup_hexagram(self.lines[::-1])

    def reverse_bottom_trigram(self) -> "Hexagram":
        return lookup_hexagram(self.lines[2::-1] + self.lines[3:6])

    def reverse_top_trigram(self) -> "Hexagram":
        return lookup_hexagram(self.lines[0:3] + self.lines[:2:-1])

    def flip_trigrams(self) -> "Hexagram":
        return lookup_hexagram(self.lines[3:6] + self.lines[0:3])

    def mirror_trigrams(self) -> "Hexagram":
        return lookup_hexagram(self.lines[2::-1] + self.lines[:2:-1])

    def use_nuclear_trigrams(self) -> "Hexagram":
        return lookup_hexagram(self.lines[1:4] + self.lines[2:5])

    def mix_trigrams_bottom_first(self) -> "Hexagram":
        bottom, top = self.lines[0:3], self.lines[3:6]
        return lookup_hexagram(line for pair in zip(bottom, top) for line in pair)

    def mix_trigrams_top_first(self) -> "Hexagram":
        bottom, top = self.lines[0:3], self.lines[3:6]
        return lookup_hexagram(line for pair in zip(top, bottom) for line in pair)


# === Catalogue ===
def _build_trigrams() -> Tuple[Tuple[Trigram, ...], Dict[Lines, Trigram]]:
    trigrams = []
    index: Dict[Lines, Trigram] = {}
    for number, bits in TRIGRAM_TABLE:
        trigram = Trigram(number=number, lines=lines_from_bits(bits))
        trigrams.append(trigram)
        index[trigram.lines] = trigram
    return tuple(trigrams), index


def _build_hexagrams() -> Tuple[Tuple[Hexagram, ...], Dict[Lines, Hexagram]]:
    hexagrams = []
    index: Dict[Lines, Hexagram] = {}
    for number, bits in HEXAGRAM_TABLE:
        hexagram = Hexagram(number=number, lines=lines_from_bits(bits))
        hexagrams.append(hexagram)
        index[hexagram.lines] = hexagram
    return tuple(hexagrams), index


TRIGRAMS, _TRIGRAM_INDEX = _build_trigrams()
HEXAGRAMS, _HEXAGRAM_INDEX = _build_hexagrams()


def lookup_trigram(lines: Iterable[Line]) -> Trigram:
    """Return the trigram with the given three lines (bottom to top)."""
    key = tuple(Line(line) for line in lines)
    try:
        return _TRIGRAM_INDEX[key]
    except KeyError:
        raise CatalogueError(f"No trigram with lines {lines_to_bits(key)}") from None


def lookup_hexagram(lines: Iterable[Line]) -> Hexagram:
    """Return the hexagram with the given six lines (bottom to top)."""
    key = tuple(Line(line) for line in lines)
    try:
        return _HEXAGRAM_INDEX[key]
    except KeyError:
        raise CatalogueError(f"No hexagram with lines {lines_to_bits(key)}") from None


def validate_hexagram_number(number: object, role: str = "hexagram") -> int:
    if isinstance(number, bool) or not isinstance(number, int) or not 1 <= number <= 64:
        raise InvalidHexagramError(number, role)
    return number


def get_hexagram(number: int) -> Hexagram:
    """Return hexagram by King Wen number (1-64)."""
    return HEXAGRAMS[validate_hexagram_number(number) - 1]


def get_trigram(number: int) -> Trigram:
    """Return trigram by Fu Xi number (1-8)."""
    if isinstance(number, bool) or not isinstance(number, int) or not 1 <= number <= 8:
        raise InvalidTrigramError(number)
    return TRIGRAMS[number - 1]


def hexagram_from_trigrams(bottom: Trigram, top: Trigram) -> Hexagram:
    return lookup_hexagram(bottom.lines + top.lines)

