"""
Parse Tree Package

Defines the parse tree produced by the parser: a closed set of node types,
each carrying its source span, a parent back reference and its children in
document order.

Key Features:
- Structural nodes (module, class, function) for scope queries
- Expression nodes covering the full expression grammar
- Spans derived from children so every node contains its children

Author: xwest
"""

from .parse_nodes import *

__all__ = [
    # Base classes and enumerations
    "ParseNode", "ExpressionNode", "ParseNodeType",
    "ArgumentCategory", "ParameterCategory", "is_expression_node",

    # Structural nodes
    "ModuleNode", "ClassNode", "FunctionNode", "ParameterNode", "ReturnNode",

    # Expressions
    "ErrorNode", "NameNode", "MemberAccessNode", "CallNode", "ArgumentNode",
    "IndexNode", "UnaryOperationNode", "BinaryOperationNode", "AssignmentNode",
    "TypeAnnotationNode", "AugmentedAssignmentNode", "AwaitNode", "TernaryNode",
    "UnpackNode", "YieldNode", "YieldFromNode", "LambdaNode", "SliceNode",

    # Literals
    "NumberNode", "StringNode", "StringListNode", "ConstantNode", "EllipsisNode",

    # Collections and comprehensions
    "ListNode", "TupleNode", "SetNode", "DictionaryNode",
    "DictionaryKeyEntryNode", "DictionaryExpandEntryNode",
    "ListComprehensionNode", "ListComprehensionForNode", "ListComprehensionIfNode",
]
