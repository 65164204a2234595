"""
Test suite for text ranges, the line index and position conversion.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, project_root)

from parsetree.lexer.errors import TextRangeError
from parsetree.lexer.text_range import (
    Position, TextRange, TextRangeCollection, build_line_ranges,
    convert_offset_to_position, convert_position_to_offset,
)


class TestTextRange(unittest.TestCase):

    def test_end(self):
        self.assertEqual(TextRange(3, 4).end, 7)

    def test_contains_is_inclusive_at_both_ends(self):
        text_range = TextRange(3, 4)
        self.assertTrue(text_range.contains(3))
        self.assertTrue(text_range.contains(7))
        self.assertFalse(text_range.contains(2))
        self.assertFalse(text_range.contains(8))

    def test_extend(self):
        self.assertEqual(TextRange(5, 2).extend(TextRange(1, 1)), TextRange(1, 6))

    def test_negative_values_raise(self):
        with self.assertRaises(TextRangeError) as context:
            TextRange(-1, 2)
        self.assertEqual(context.exception.diagnostic.code, "R001")

        with self.assertRaises(TextRangeError) as context:
            TextRange(0, -2)
        self.assertEqual(context.exception.diagnostic.code, "R002")

    def test_error_is_a_value_error(self):
        with self.assertRaises(ValueError):
            TextRange(0, -1)


class TestLineIndex(unittest.TestCase):

    def test_lines_include_terminators(self):
        lines = build_line_ranges("ab\ncd\r\ne\rf")
        self.assertEqual(list(lines), [
            TextRange(0, 3), TextRange(3, 4), TextRange(7, 2), TextRange(9, 1),
        ])

    def test_trailing_newline_adds_empty_line(self):
        lines = build_line_ranges("a\n")
        self.assertEqual(lines.count, 2)
        self.assertEqual(lines.get_item_at(1), TextRange(2, 0))

    def test_empty_text_has_one_line(self):
        self.assertEqual(build_line_ranges("").count, 1)

    def test_overlapping_lines_are_rejected(self):
        with self.assertRaises(TextRangeError):
            TextRangeCollection([TextRange(0, 5), TextRange(3, 2)])

    def test_get_item_containing(self):
        lines = build_line_ranges("ab\ncd\n")
        self.assertEqual(lines.get_item_containing(0), 0)
        self.assertEqual(lines.get_item_containing(2), 0)
        self.assertEqual(lines.get_item_containing(3), 1)
        self.assertEqual(lines.get_item_containing(6), 2)
        self.assertEqual(lines.get_item_containing(7), -1)


class TestPositionConversion(unittest.TestCase):

    def setUp(self):
        self.lines = build_line_ranges("def f():\n    return 1\n")

    def test_position_to_offset(self):
        self.assertEqual(convert_position_to_offset(Position(0, 0), self.lines), 0)
        self.assertEqual(convert_position_to_offset(Position(1, 4), self.lines), 13)

    def test_invalid_positions(self):
        self.assertIsNone(convert_position_to_offset(Position(3, 0), self.lines))
        self.assertIsNone(convert_position_to_offset(Position(0, 10), self.lines))
        self.assertIsNone(convert_position_to_offset(Position(-1, 0), self.lines))

    def test_column_at_line_length_is_next_line(self):
        # "def f():\n" has length 9; offset 9 is line 1, column 0
        self.assertIsNone(convert_position_to_offset(Position(0, 9), self.lines))
        self.assertEqual(convert_position_to_offset(Position(0, 8), self.lines), 8)
        self.assertEqual(convert_position_to_offset(Position(1, 0), self.lines), 9)

    def test_end_of_file_position(self):
        self.assertEqual(convert_position_to_offset(Position(2, 0), self.lines), 22)
        last_line = build_line_ranges("a\nbc")
        self.assertEqual(convert_position_to_offset(Position(1, 2), last_line), 4)

    def test_offset_to_position(self):
        self.assertEqual(convert_offset_to_position(13, self.lines), Position(1, 4))
        self.assertEqual(convert_offset_to_position(0, self.lines), Position(0, 0))
        self.assertIsNone(convert_offset_to_position(100, self.lines))

    def test_round_trip_on_every_offset(self):
        for offset in range(self.lines.end + 1):
            with self.subTest(offset=offset):
                position = convert_offset_to_position(offset, self.lines)
                self.assertEqual(convert_position_to_offset(position, self.lines), offset)


if __name__ == "__main__":
    unittest.main()
