"""
Navigation queries over a parse tree.

All queries are read-only walks, either up the parent chain or down through the
children reported by the tree walker. A query that finds nothing returns None.

Author: xwest
"""

from typing import Optional, Union

from ..lexer.text_range import Position, TextRangeCollection, convert_position_to_offset
from ..parser.parse_nodes import ParseNode, ParseNodeType, ClassNode, FunctionNode, ModuleNode
from .parse_tree_walker import ParseTreeWalker


def get_node_depth(node: ParseNode) -> int:
    """Count the nodes on the parent chain from ``node`` up to the root, inclusive."""
    depth = 0
    cur_node: Optional[ParseNode] = node

    while cur_node:
        depth += 1
        cur_node = cur_node.parent

    return depth


def find_node_by_position(node: ParseNode, position: Position,
                          lines: TextRangeCollection) -> Optional[ParseNode]:
    """Return the deepest node that contains the specified line/column position."""
    offset = convert_position_to_offset(position, lines)
    if offset is None:
        return None

    return find_node_by_offset(node, offset)


def find_node_by_offset(node: ParseNode, offset: int) -> Optional[ParseNode]:
    """Return the deepest node that contains the specified offset."""
    if offset < node.start or offset > node.end:
        return None

    parse_tree_walker = ParseTreeWalker()

    # The offset is within this node. Descend while a child narrows it down further.
    while True:
        containing_child = next(
            (child for child in parse_tree_walker.visit_node(node)
             if child is not None and child.start <= offset <= child.end),
            None,
        )
        if containing_child is None:
            return node
        node = containing_child


def get_enclosing_class(node: ParseNode, stop_at_function: bool = False) -> Optional[ClassNode]:
    """
    Return the nearest class enclosing ``node``.

    The search ends at the module. With ``stop_at_function`` it also ends at
    the first enclosing function.
    """
    cur_node = node.parent
    while cur_node:
        if cur_node.node_type == ParseNodeType.CLASS:
            return cur_node

        if cur_node.node_type == ParseNodeType.MODULE:
            return None

        if cur_node.node_type == ParseNodeType.FUNCTION and stop_at_function:
            return None

        cur_node = cur_node.parent

    return None


def get_enclosing_class_or_module(node: ParseNode,
                                  stop_at_function: bool = False) -> Optional[Union[ClassNode, ModuleNode]]:
    """Like ``get_enclosing_class``, but the module itself counts as a match."""
    cur_node = node.parent
    while cur_node:
        if cur_node.node_type in (ParseNodeType.CLASS, ParseNodeType.MODULE):
            return cur_node

        if cur_node.node_type == ParseNodeType.FUNCTION and stop_at_function:
            return None

        cur_node = cur_node.parent

    return None


def get_enclosing_function(node: ParseNode) -> Optional[FunctionNode]:
    """Return the nearest function enclosing ``node``; a class in between ends the search."""
    cur_node = node.parent
    while cur_node:
        if cur_node.node_type == ParseNodeType.FUNCTION:
            return cur_node

        if cur_node.node_type == ParseNodeType.CLASS:
            return None

        cur_node = cur_node.parent

    return None


def is_node_contained_within(node: ParseNode, potential_container: ParseNode) -> bool:
    """Check if ``potential_container`` is a proper ancestor of ``node``."""
    cur_node = node.parent
    while cur_node:
        if cur_node is potential_container:
            return True

        cur_node = cur_node.parent

    return False
