"""
Parse Tree Utilities Package

Expression printing and parse tree navigation for the front end of a
statically analyzed, Python-like language. Consumed by type printers,
diagnostics, and hover/signature tooling.

Architecture:
    parsetree/
    ├── lexer/           # Tokens, text ranges, line index
    ├── parser/          # Parse node model
    └── analyzer/        # Tree walker, navigation queries, expression printer

Author: xwest
License: MIT
"""

__version__ = "0.1.0-alpha"
__author__ = "xwest"
__email__ = "dev@neuralscript.org"
__license__ = "MIT"

from .lexer import Position, TextRange, TextRangeCollection, build_line_ranges
from .analyzer import (
    PrintExpressionFlags, print_expression, print_operator,
    get_node_depth, find_node_by_offset, find_node_by_position,
    get_enclosing_class, get_enclosing_class_or_module, get_enclosing_function,
    is_node_contained_within,
)

__all__ = [
    # Printing
    "PrintExpressionFlags",
    "print_expression",
    "print_operator",

    # Navigation
    "get_node_depth",
    "find_node_by_offset",
    "find_node_by_position",
    "get_enclosing_class",
    "get_enclosing_class_or_module",
    "get_enclosing_function",
    "is_node_contained_within",

    # Text ranges
    "Position",
    "TextRange",
    "TextRangeCollection",
    "build_line_ranges",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
