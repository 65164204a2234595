"""
Test suite for parse tree navigation.

Tests cover:
- Node depth
- Offset and position search
- Enclosing class, module and function lookup
- Containment tests

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, project_root)

from parsetree.lexer.text_range import Position, build_line_ranges
from parsetree.lexer.tokens import OperatorType, create_name_token, create_number_token
from parsetree.parser.parse_nodes import (
    AssignmentNode, BinaryOperationNode, ClassNode, FunctionNode, ModuleNode, NameNode,
    NumberNode, ParameterNode, ReturnNode,
)
from parsetree.analyzer.parse_tree_utils import (
    find_node_by_offset, find_node_by_position, get_enclosing_class,
    get_enclosing_class_or_module, get_enclosing_function, get_node_depth,
    is_node_contained_within,
)


def name(value, start=0):
    return NameNode(create_name_token(value, start))


class TestFindNode(unittest.TestCase):
    """Offset and position search over ``x = 1`` / ``y = a + b``."""

    def setUp(self):
        self.source = "x = 1\ny = a + b\n"
        self.lines = build_line_ranges(self.source)

        self.x = name("x", 0)
        self.one = NumberNode(create_number_token(1, 4))
        self.first = AssignmentNode(self.x, self.one)

        self.y = name("y", 6)
        self.a = name("a", 10)
        self.b = name("b", 14)
        self.sum = BinaryOperationNode(self.a, OperatorType.ADD, self.b)
        self.second = AssignmentNode(self.y, self.sum)

        self.module = ModuleNode([self.first, self.second], 0, len(self.source))

    def test_finds_leaf(self):
        self.assertIs(find_node_by_offset(self.module, 10), self.a)
        self.assertIs(find_node_by_offset(self.module, 4), self.one)

    def test_end_offset_is_inclusive(self):
        self.assertIs(find_node_by_offset(self.module, 11), self.a)

    def test_falls_back_to_enclosing_node(self):
        self.assertIs(find_node_by_offset(self.module, 12), self.sum)
        self.assertIs(find_node_by_offset(self.module, 2), self.first)

    def test_first_matching_child_wins(self):
        # Offset 5 is the end of "1"; the assignment also contains it
        self.assertIs(find_node_by_offset(self.module, 5), self.one)

    def test_offset_outside_node(self):
        self.assertIsNone(find_node_by_offset(self.module, len(self.source) + 1))
        self.assertIsNone(find_node_by_offset(self.sum, 3))

    def test_returned_node_contains_offset_and_is_deepest(self):
        for offset in range(len(self.source) + 1):
            with self.subTest(offset=offset):
                found = find_node_by_offset(self.module, offset)
                self.assertIsNotNone(found)
                self.assertTrue(found.start <= offset <= found.end)
                for child in found.children():
                    if child is not None:
                        self.assertFalse(child.start <= offset <= child.end)

    def test_find_by_position(self):
        self.assertIs(find_node_by_position(self.module, Position(1, 4), self.lines), self.a)
        self.assertIs(find_node_by_position(self.module, Position(0, 0), self.lines), self.x)

    def test_position_past_last_line(self):
        self.assertIsNone(find_node_by_position(self.module, Position(5, 0), self.lines))

    def test_position_past_end_of_line(self):
        self.assertIsNone(find_node_by_position(self.module, Position(0, 40), self.lines))


class TestDeepTrees(unittest.TestCase):
    """Offset search over ``x + x + ... + x`` with 2000 terms."""

    TERMS = 2000

    def setUp(self):
        self.first = name("x", 0)
        self.last = name("x", 4 * (self.TERMS - 1))
        node = self.first
        for index in range(1, self.TERMS - 1):
            node = BinaryOperationNode(node, OperatorType.ADD, name("x", 4 * index))
        self.root = BinaryOperationNode(node, OperatorType.ADD, self.last)

    def test_span_covers_whole_chain(self):
        self.assertEqual((self.root.start, self.root.end), (0, 4 * (self.TERMS - 1) + 1))

    def test_finds_deepest_leaf(self):
        self.assertIs(find_node_by_offset(self.root, 0), self.first)
        self.assertEqual(get_node_depth(self.first), self.TERMS)

    def test_finds_last_leaf(self):
        self.assertIs(find_node_by_offset(self.root, 4 * (self.TERMS - 1)), self.last)

    def test_offset_between_terms_returns_operation(self):
        found = find_node_by_offset(self.root, 2)
        self.assertIs(found, self.first.parent)


class TestEnclosingScopes(unittest.TestCase):
    """
    Tree shaped like::

        class Outer:
            def method(self):
                class Local:
                    inner = 1
                return value
    """

    def setUp(self):
        self.inner = name("inner", 60)
        self.local_class = ClassNode(name("Local", 45), [AssignmentNode(self.inner, NumberNode(
            create_number_token(1, 68)))])
        self.value = name("value", 80)
        self.return_statement = ReturnNode(self.value, 73, 12)
        self.self_param = ParameterNode(name("self", 25))
        self.method = FunctionNode(name("method", 18), [self.self_param],
                                   [self.local_class, self.return_statement])
        self.outer_class = ClassNode(name("Outer", 6), [self.method])
        self.module_level = name("module_level", 90)
        self.module = ModuleNode([self.outer_class, self.module_level])

    def test_node_depth(self):
        self.assertEqual(get_node_depth(self.module), 1)
        self.assertEqual(get_node_depth(self.outer_class), 2)
        self.assertEqual(get_node_depth(self.value), 5)

    def test_enclosing_class(self):
        self.assertIs(get_enclosing_class(self.value), self.outer_class)
        self.assertIs(get_enclosing_class(self.inner), self.local_class)

    def test_enclosing_class_stops_at_function(self):
        self.assertIsNone(get_enclosing_class(self.value, stop_at_function=True))
        self.assertIs(get_enclosing_class(self.inner, stop_at_function=True), self.local_class)

    def test_enclosing_class_stops_at_module(self):
        self.assertIsNone(get_enclosing_class(self.module_level))
        self.assertIsNone(get_enclosing_class(self.outer_class))
        self.assertIsNone(get_enclosing_class(self.module))

    def test_function_directly_in_module_has_no_class(self):
        target = name("target", 20)
        function = FunctionNode(name("f", 4), [], [target])
        ModuleNode([function])
        self.assertIsNone(get_enclosing_class(target))
        self.assertIsNone(get_enclosing_class(target, stop_at_function=True))

    def test_enclosing_class_or_module(self):
        self.assertIs(get_enclosing_class_or_module(self.module_level), self.module)
        self.assertIs(get_enclosing_class_or_module(self.value), self.outer_class)
        self.assertIs(get_enclosing_class_or_module(self.outer_class), self.module)
        self.assertIsNone(get_enclosing_class_or_module(self.value, stop_at_function=True))
        self.assertIsNone(get_enclosing_class_or_module(self.module))

    def test_enclosing_function(self):
        self.assertIs(get_enclosing_function(self.value), self.method)
        self.assertIs(get_enclosing_function(self.self_param), self.method)

    def test_enclosing_function_stops_at_class(self):
        self.assertIsNone(get_enclosing_function(self.inner))
        self.assertIsNone(get_enclosing_function(self.method))
        self.assertIsNone(get_enclosing_function(self.module_level))

    def test_containment(self):
        self.assertTrue(is_node_contained_within(self.value, self.return_statement))
        self.assertTrue(is_node_contained_within(self.value, self.method))
        self.assertTrue(is_node_contained_within(self.value, self.module))
        self.assertFalse(is_node_contained_within(self.value, self.local_class))
        self.assertFalse(is_node_contained_within(self.method, self.value))

    def test_node_does_not_contain_itself(self):
        self.assertFalse(is_node_contained_within(self.value, self.value))
        self.assertFalse(is_node_contained_within(self.module, self.module))


if __name__ == "__main__":
    unittest.main()
