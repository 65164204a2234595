"""
Error handling for text ranges and the line index.

Provides diagnostics with a location and help text for malformed spans
handed to this package by a tokenizer or parser.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass


@dataclass
class Diagnostic:
    """A diagnostic message attached to an offset in the source text."""
    message: str
    offset: int
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> offset {self.offset}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class TextRangeError(ValueError):
    """
    Exception raised when a text range or line index is malformed.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        offset: int,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            offset=offset,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


def create_invalid_range_error(start: int, length: int) -> TextRangeError:
    """Create an error for a range with a negative start or length."""
    if start < 0:
        return TextRangeError(
            message=f"Range start must not be negative, got {start}",
            offset=start,
            code="R001",
            help_text="Offsets are measured from the beginning of the file and start at zero.",
        )

    return TextRangeError(
        message=f"Range length must not be negative, got {length}",
        offset=start,
        code="R002",
        help_text="A range covers the text from its start up to start + length.",
    )


def create_unordered_lines_error(previous_end: int, start: int) -> TextRangeError:
    """Create an error for line ranges that overlap or are out of order."""
    return TextRangeError(
        message=f"Line starting at {start} begins before the previous line ends at {previous_end}",
        offset=start,
        code="R003",
        help_text="Line ranges must be sorted and must not overlap.",
        suggestions=["Build the line index with build_line_ranges()"],
    )
