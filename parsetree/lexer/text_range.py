"""
Text ranges, the line index, and position/offset conversion.

Every parse node and token covers a range of the source text given as a start
offset and a length. Editors address text by zero-based line and column, so
this module also provides the line index used to translate between the two.

Author: xwest
"""

import bisect
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .errors import create_invalid_range_error, create_unordered_lines_error

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextRange:
    """A span of source text (start offset and length)."""
    start: int
    length: int

    def __post_init__(self):
        if self.start < 0 or self.length < 0:
            raise create_invalid_range_error(self.start, self.length)

    @property
    def end(self) -> int:
        return self.start + self.length

    def contains(self, offset: int) -> bool:
        """Check if ``offset`` lies within the range; both boundaries count."""
        return self.start <= offset <= self.end

    def extend(self, other: 'TextRange') -> 'TextRange':
        """Return the smallest range covering both ranges."""
        start = min(self.start, other.start)
        return TextRange(start, max(self.end, other.end) - start)

    def __str__(self) -> str:
        return f"[{self.start}, {self.end})"


@dataclass(frozen=True)
class Position:
    """A zero-based line/column location."""
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line + 1}:{self.column + 1}"


class TextRangeCollection:
    """
    Ordered collection of non-overlapping ranges.

    Used as the line index: item ``i`` is the range of line ``i`` including
    its line terminator.
    """

    def __init__(self, ranges: Sequence[TextRange]):
        self._ranges: List[TextRange] = list(ranges)
        for previous, current in zip(self._ranges, self._ranges[1:]):
            if current.start < previous.end:
                raise create_unordered_lines_error(previous.end, current.start)
        self._starts = [r.start for r in self._ranges]

    @property
    def count(self) -> int:
        return len(self._ranges)

    @property
    def start(self) -> int:
        return self._ranges[0].start if self._ranges else 0

    @property
    def end(self) -> int:
        return self._ranges[-1].end if self._ranges else 0

    def get_item_at(self, index: int) -> TextRange:
        return self._ranges[index]

    def get_item_at_position(self, offset: int) -> int:
        """
        Return the index of the last range starting at or before ``offset``.

        Returns -1 when the collection is empty or ``offset`` precedes it.
        """
        return bisect.bisect_right(self._starts, offset) - 1

    def get_item_containing(self, offset: int) -> int:
        """Return the index of the range containing ``offset``, or -1 if none does."""
        index = self.get_item_at_position(offset)
        if index < 0:
            return -1

        item = self._ranges[index]
        if item.start <= offset < item.end:
            return index

        # The end of the final range still belongs to it (end of file)
        if index == len(self._ranges) - 1 and offset == item.end:
            return index

        return -1

    def __len__(self) -> int:
        return len(self._ranges)

    def __iter__(self):
        return iter(self._ranges)

    def __getitem__(self, index: int) -> TextRange:
        return self._ranges[index]


def build_line_ranges(text: str) -> TextRangeCollection:
    """
    Build the line index for ``text``.

    Each line range includes its terminator (``\\n``, ``\\r\\n`` or ``\\r``).
    Text ending in a terminator gets a final empty line.
    """
    ranges = []
    line_start = 0
    index = 0
    length = len(text)

    while index < length:
        char = text[index]
        if char == '\r':
            if index + 1 < length and text[index + 1] == '\n':
                index += 1
            ranges.append(TextRange(line_start, index + 1 - line_start))
            line_start = index + 1
        elif char == '\n':
            ranges.append(TextRange(line_start, index + 1 - line_start))
            line_start = index + 1
        index += 1

    ranges.append(TextRange(line_start, length - line_start))
    return TextRangeCollection(ranges)


def convert_position_to_offset(position: Position,
                               lines: TextRangeCollection) -> Optional[int]:
    """
    Convert a line/column position to an absolute offset.

    Returns None if the position does not fall within the indexed text.
    """
    if position.line < 0 or position.column < 0:
        logger.debug("Negative position %s cannot be converted", position)
        return None

    if position.line >= lines.count:
        logger.debug("Line %d is past the last line (%d lines)", position.line, lines.count)
        return None

    line_range = lines.get_item_at(position.line)

    # Past the terminator is the next line; only the last line may end at its length
    is_last_line = position.line == lines.count - 1
    if position.column > line_range.length or (
            position.column == line_range.length and not is_last_line):
        logger.debug("Column %d is past the end of line %d", position.column, position.line)
        return None

    return line_range.start + position.column


def convert_offset_to_position(offset: int,
                               lines: TextRangeCollection) -> Optional[Position]:
    """
    Convert an absolute offset to a line/column position.

    Returns None if the offset lies outside the indexed text.
    """
    if offset < lines.start or offset > lines.end:
        return None

    item_index = lines.get_item_containing(offset)
    if item_index < 0:
        return None

    line_range = lines.get_item_at(item_index)
    return Position(item_index, offset - line_range.start)
