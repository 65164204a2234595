"""
Generic traversal over parse trees.

The walker is the only place that knows how to enumerate a node's children;
consumers such as offset search depend on it rather than on per-node fields.

Author: xwest
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ..parser.parse_nodes import ParseNode


class ParseTreeVisitor(ABC):
    """Abstract visitor interface for traversing parse nodes."""

    @abstractmethod
    def visit(self, node: ParseNode) -> bool:
        """Visit a node; return True to descend into its children."""
        pass


class ParseTreeWalker(ParseTreeVisitor):
    """
    Pre-order walker over a parse tree.

    Subclasses override ``visit`` to inspect nodes and decide whether to
    descend further.
    """

    def walk(self, node: ParseNode):
        # Explicit stack so deeply nested trees do not hit the recursion limit
        pending: List[ParseNode] = [node]
        while pending:
            current = pending.pop()
            if current.accept(self):
                children = self.visit_node(current)
                pending.extend(child for child in reversed(children) if child is not None)

    def walk_multiple(self, nodes: Sequence[Optional[ParseNode]]):
        for node in nodes:
            if node is not None:
                self.walk(node)

    def visit_node(self, node: ParseNode) -> List[Optional[ParseNode]]:
        """Return the children of ``node`` in document order (absent children are None)."""
        return node.children()

    def visit(self, node: ParseNode) -> bool:
        return True
