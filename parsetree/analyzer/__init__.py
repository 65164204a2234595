"""
Parse Tree Analysis Package

Read-only queries over parse trees and the expression printer used to
display them.

Key Features:
- Generic pre-order walker over node children
- Offset and position search for the deepest containing node
- Enclosing class, module and function lookup
- Source text reconstruction for expressions and operators

Author: xwest
"""

from .parse_tree_walker import ParseTreeVisitor, ParseTreeWalker
from .parse_tree_utils import (
    get_node_depth, find_node_by_offset, find_node_by_position,
    get_enclosing_class, get_enclosing_class_or_module, get_enclosing_function,
    is_node_contained_within,
)
from .expression_printer import (
    PrintExpressionFlags, print_expression, print_operator, OPERATOR_SYMBOLS,
)

__all__ = [
    # Traversal
    "ParseTreeVisitor", "ParseTreeWalker",

    # Navigation
    "get_node_depth", "find_node_by_offset", "find_node_by_position",
    "get_enclosing_class", "get_enclosing_class_or_module", "get_enclosing_function",
    "is_node_contained_within",

    # Printing
    "PrintExpressionFlags", "print_expression", "print_operator", "OPERATOR_SYMBOLS",
]
