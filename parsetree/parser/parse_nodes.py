"""
Parse tree node definitions.

Defines the closed set of parse node types produced by the parser for a
Python-like language. Each node records the span of source text it covers,
a back reference to its parent, and its children in document order.

Spans default to the smallest range covering a node's children (or its token)
so that a node's span always contains the spans of its children. A parser that
knows the exact extent of keywords and punctuation passes ``start`` and
``length`` explicitly; a ``start`` alone is stretched to reach the children.

Author: xwest
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Any, Union
from enum import Enum

from ..lexer.tokens import (
    NameToken, NumberToken, StringToken, KeywordToken, OperatorType,
)
from ..lexer.text_range import TextRange


class ParseNodeType(Enum):
    """Enumeration of all parse node types."""

    # Errors
    ERROR = "Error"

    # Structural nodes
    MODULE = "Module"
    CLASS = "Class"
    FUNCTION = "Function"
    PARAMETER = "Parameter"
    RETURN = "Return"

    # Expressions
    NAME = "Name"
    MEMBER_ACCESS = "MemberAccess"
    CALL = "Call"
    ARGUMENT = "Argument"
    INDEX = "Index"
    UNARY_OPERATION = "UnaryOperation"
    BINARY_OPERATION = "BinaryOperation"
    ASSIGNMENT = "Assignment"
    TYPE_ANNOTATION = "TypeAnnotation"
    AUGMENTED_ASSIGNMENT = "AugmentedAssignment"
    AWAIT = "Await"
    TERNARY = "Ternary"
    UNPACK = "Unpack"
    YIELD = "Yield"
    YIELD_FROM = "YieldFrom"
    LAMBDA = "Lambda"
    SLICE = "Slice"

    # Literals
    NUMBER = "Number"
    STRING = "String"
    STRING_LIST = "StringList"
    CONSTANT = "Constant"
    ELLIPSIS = "Ellipsis"

    # Collections
    LIST = "List"
    TUPLE = "Tuple"
    SET = "Set"
    DICTIONARY = "Dictionary"
    DICTIONARY_KEY_ENTRY = "DictionaryKeyEntry"
    DICTIONARY_EXPAND_ENTRY = "DictionaryExpandEntry"

    # Comprehensions
    LIST_COMPREHENSION = "ListComprehension"
    LIST_COMPREHENSION_FOR = "ListComprehensionFor"
    LIST_COMPREHENSION_IF = "ListComprehensionIf"


class ArgumentCategory(Enum):
    """How an argument is passed at a call site."""
    SIMPLE = "simple"
    UNPACKED_LIST = "unpacked_list"                 # *args
    UNPACKED_DICTIONARY = "unpacked_dictionary"     # **kwargs


class ParameterCategory(Enum):
    """How a parameter collects its arguments."""
    SIMPLE = "simple"
    VAR_ARG_LIST = "var_arg_list"                   # *args
    VAR_ARG_DICTIONARY = "var_arg_dictionary"       # **kwargs


class ParseNode(ABC):
    """Base class for all parse nodes."""

    def __init__(self, node_type: ParseNodeType, start: Optional[int] = None,
                 length: Optional[int] = None):
        self.node_type = node_type
        self.parent: Optional['ParseNode'] = None
        self.range: Optional[TextRange] = None
        self._start_hint = start
        if start is not None and length is not None:
            self.range = TextRange(start, length)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    @abstractmethod
    def children(self) -> List[Optional['ParseNode']]:
        """Get the direct child nodes in document order; absent optional children are None."""
        pass

    def set_parent(self, parent: 'ParseNode'):
        """Set the parent node."""
        self.parent = parent

    def _adopt_children(self):
        """
        Point every child back at this node and derive the span if none was given.

        A ``start`` given without a ``length`` is extended to cover the children.
        """
        covered: Optional[TextRange] = None
        for child in self.children():
            if child is None:
                continue
            child.set_parent(self)
            covered = child.range if covered is None else covered.extend(child.range)

        if self.range is None:
            if self._start_hint is not None:
                self.range = TextRange(self._start_hint, 0)
                if covered is not None:
                    self.range = self.range.extend(covered)
            else:
                self.range = covered if covered is not None else TextRange(0, 0)

    @property
    def start(self) -> int:
        return self.range.start

    @property
    def length(self) -> int:
        return self.range.length

    @property
    def end(self) -> int:
        return self.range.end

    def __str__(self) -> str:
        return f"{self.node_type.value}@{self.range}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(range={self.range})"


# ============================================================================
# Structural nodes
# ============================================================================

class ModuleNode(ParseNode):
    """Root node representing a complete source file."""
    statements: List[ParseNode]

    def __init__(self, statements: List[ParseNode], start: Optional[int] = None,
                 length: Optional[int] = None):
        super().__init__(ParseNodeType.MODULE, start, length)
        self.statements = statements
        self._adopt_children()

    def children(self) -> List[Optional[ParseNode]]:
        return list(self.statements)


class ClassNode(ParseNode):
    """Class definition."""
    name: 'NameNode'
    arguments: List['ArgumentNode']
    suite: List[ParseNode]

    def __init__(self, name: 'NameNode', suite: List[ParseNode],
                 arguments: Optional[List['ArgumentNode']] = None,
                 start: Optional[int] = None, length: Optional[int] = None):
        super().__init__(ParseNodeType.CLASS, start, length)
        self.name = name
        self.arguments = arguments or []
        self.suite = suite
        self._adopt_children()

    def children(self) -> List[Optional[ParseNode]]:
        return [self.name] + self.arguments + self.suite


class FunctionNode(ParseNode):
    """Function definition."""
    name: 'NameNode'
    parameters: List['ParameterNode']
    return_annotation: Optional['ExpressionNode']
    suite: List[ParseNode]
    is_async: bool = False

    def __init__(self, name: 'NameNode', parameters: List['ParameterNode'],
                 suite: List[ParseNode], return_annotation: Optional['ExpressionNode'] = None,
                 is_async: bool = False, start: Optional[int] = None,
                 length: Optional[int] = None):
        super().__init__(ParseNodeType.FUNCTION, start, length)
        self.name = name
        self.parameters = parameters
        self.return_annotation = return_annotation
        self.suite = suite
        self.is_async = is_async
        self._adopt_children()

    def children(self) -> List[Optional[ParseNode]]:
        return [self.name] + self.parameters + [self.return_annotation] + self.suite


class ParameterNode(ParseNode):
    """Function or lambda parameter."""
    category: ParameterCategory
    name: Optional['NameNode']
    type_annotation: Optional['ExpressionNode']
    default_value: Optional['ExpressionNode']

    def __init__(self, name: Optional['NameNode'] = None,
                 category: ParameterCategory = ParameterCategory.SIMPLE,
                 type_annotation: Optional['ExpressionNode'] = None,
                 default_value: Optional['ExpressionNode'] = None,
                 start: Optional[int] = None, length: Optional[int] = None):
        super().__init__(ParseNodeType.PARAMETER, start, length)
        self.category = category
        self.name = name
        self.type_annotation = type_annotation
        self.default_value = default_value
        self._adopt_children()

    def children(self) -> List[Optional[ParseNode]]:
        return [self.name, self.type_annotation, self.default_value]


class ReturnNode(ParseNode):
    """Return statement."""
    return_expression: Optional['ExpressionNode']

    def __init__(self, return_expression: Optional['ExpressionNode'] = None,
                 start: Optional[int] = None, length: Optional[int] = None):
        super().__init__(ParseNodeType.RETURN, start, length)
        self.return_expression = return_expression
        self._adopt_children()

    def children(self) -> List[Optional[ParseNode]]:
        return [self.return_expression]


# ============================================================================
# Expressions
# ============================================================================

class ExpressionNode(ParseNode):
    """Base class for expressions."""
    pass


class ErrorNode(ExpressionNode):
    """Placeholder for an expression the parser could not make sense of."""
    child: Optional[ExpressionNode]

    def __init__(self, child: Optional[ExpressionNode] = None, start: Optional[int] = None,
                 length: Optional[int] = None):
        super().__init__(ParseNodeType.ERROR, start, length)
        self.child = child
        self._adopt_children()

    def children(self) -> List[Optional[ParseNode]]:
        return [self.child]


class NameNode(ExpressionNode):
    """Identifier expression."""
    token: NameToken

    def __init__(self, token: NameToken):
        super().__init__(ParseNodeType.NAME, token.start, token.length)
        self.token = token

    @property
    def value(self) -> str:
        return self.token.value

    def children(self) -> List[Optional[ParseNode]]:
        return []


class MemberAccessNode(ExpressionNode):
    """Member access expression (``left.member``)."""
    left_expression: ExpressionNode
    member_name: NameNode

    def __init__(self, left_expression: ExpressionNode, member_name: NameNode,
                 start: Optional[int] = None, length: Optional[int] = None):
        super().__init__(ParseNodeType.MEMBER_ACCESS, start, length)
        self.left_expression = left_expression
        self.member_name = member_name
        self._adopt_children()

    def children(self) -> List[Optional[ParseNode]]:
        return [self.left_expression, self.member_name]


class ArgumentNode(ParseNode):
    """Call argument, optionally named or unpacked."""
    category: ArgumentCategory
    name: Optional[NameNode]
    value_expression: ExpressionNode

    def __init__(self, value_expression: ExpressionNode,
                 category: ArgumentCategory = ArgumentCategory.SIMPLE,
                 name: Optional[NameNode] = None, start: Optional[int] = None,
                 length: Optional[int] = None):
        super().__init__(ParseNodeType.ARGUMENT, start, length)
        self.category = category
        self.name = name
        self.value_expression = value_expression
        self._adopt_children()

    def children(self) -> List[Optional[ParseNode]]:
        return [self.name, self.value_expression]


class CallNode(ExpressionNode):
    """Call expression."""
    left_expression: ExpressionNode
    arguments: List[ArgumentNode]

    def __init__(self, left_expression: ExpressionNode, arguments: List[ArgumentNode],
                 start: Optional[int] = None, length: Optional[int] = None):
        super().__init__(ParseNodeType.CALL, start, length)
        self.left_expression = left_expression
        self.arguments = arguments
        self._adopt_children()

    def children(self) -> List[Optional[ParseNode]]:
        return [self.left_expression] + self.arguments


class IndexNode(ExpressionNode):
    """Subscript expression (``base[items]``)."""
    base_expression: ExpressionNode
    items: List[ExpressionNode]

    def __init__(self, base_expression: ExpressionNode, items: List[ExpressionNode],
                 start: Optional[int] = None, length: Optional[int] = None):
        super().__init__(ParseNodeType.INDEX, start, length)
        self.base_expression = base_expression
        self.items = items
        self._adopt_children()

    def children(self) -> List[Optional[ParseNode]]:
        return [self.base_expression] + self.items


class UnaryOperationNode(ExpressionNode):
    """Unary operation expression."""
    operator: OperatorType
    expression: ExpressionNode

    def __init__(self, operator: OperatorType, expression: ExpressionNode,
                 start: Optional[int] = None, length: Optional[int] = None):
        super().__init__(ParseNodeType.UNARY_OPERATION, start, length)
        self.operator = operator
        self.expression = expression
        self._adopt_children()

    def children(self) -> List[Optional[ParseNode]]:
        return [self.expression]


class BinaryOperationNode(ExpressionNode):
    """Binary operation expression."""
    left_expression: ExpressionNode
    operator: OperatorType
    right_expression: ExpressionNode

    def __init__(self, left_expression: ExpressionNode, operator: OperatorType,
                 right_expression: ExpressionNode, start: Optional[int] = None,
                 length: Optional[int] = None):
        super().__init__(ParseNodeType.BINARY_OPERATION, start, length)
        self.left_expression = left_expression
        self.operator = operator
        self.right_expression = right_expression
        self._adopt_children()

    def children(self) -> List[Optional[ParseNode]]:
        return [self.left_expression, self.right_expression]


class AssignmentNode(ExpressionNode):
    """Assignment (``left = right``)."""
    left_expression: ExpressionNode
    right_expression: ExpressionNode

    def __init__(self, left_expression: ExpressionNode, right_expression: ExpressionNode,
                 start: Optional[int] = None, length: Optional[int] = None):
        super().__init__(ParseNodeType.ASSIGNMENT, start, length)
        self.left_expression = left_expression
        self.right_expression = right_expression
        self._adopt_children()

    def children(self) -> List[Optional[ParseNode]]:
        return [self.left_expression, self.right_expression]


class TypeAnnotationNode(ExpressionNode):
    """Annotated expression (``value: annotation``)."""
    value_expression: ExpressionNode
    type_annotation: ExpressionNode

    def __init__(self, value_expression: ExpressionNode, type_annotation: ExpressionNode,
                 start: Optional[int] = None, length: Optional[int] = None):
        super().__init__(ParseNodeType.TYPE_ANNOTATION, start, length)
        self.value_expression = value_expression
        self.type_annotation = type_annotation
        self._adopt_children()

    def children(self) -> List[Optional[ParseNode]]:
        return [self.value_expression, self.type_annotation]


class AugmentedAssignmentNode(ExpressionNode):
    """Augmented assignment (``left += right``)."""
    left_expression: ExpressionNode
    operator: OperatorType
    right_expression: ExpressionNode

    def __init__(self, left_expression: ExpressionNode, operator: OperatorType,
                 right_expression: ExpressionNode, start: Optional[int] = None,
                 length: Optional[int] = None):
        super().__init__(ParseNodeType.AUGMENTED_ASSIGNMENT, start, length)
        self.left_expression = left_expression
        self.operator = operator
        self.right_expression = right_expression
        self._adopt_children()

    def children(self) -> List[Optional[ParseNode]]:
        return [self.left_expression, self.right_expression]


class AwaitNode(ExpressionNode):
    """Await expression."""
    expression: ExpressionNode

    def __init__(self, expression: ExpressionNode, start: Optional[int] = None,
                 length: Optional[int] = None):
        super().__init__(ParseNodeType.AWAIT, start, length)
        self.expression = expression
        self._adopt_children()

    def children(self) -> List[Optional[ParseNode]]:
        return [self.expression]


class TernaryNode(ExpressionNode):
    """Conditional expression (``a if test else b``)."""
    if_expression: ExpressionNode
    test_expression: ExpressionNode
    else_expression: ExpressionNode

    def __init__(self, if_expression: ExpressionNode, test_expression: ExpressionNode,
                 else_expression: ExpressionNode, start: Optional[int] = None,
                 length: Optional[int] = None):
        super().__init__(ParseNodeType.TERNARY, start, length)
        self.if_expression = if_expression
        self.test_expression = test_expression
        self.else_expression = else_expression
        self._adopt_children()

    def children(self) -> List[Optional[ParseNode]]:
        return [self.if_expression, self.test_expression, self.else_expression]


class UnpackNode(ExpressionNode):
    """Star expression (``*expr``)."""
    expression: ExpressionNode

    def __init__(self, expression: ExpressionNode, start: Optional[int] = None,
                 length: Optional[int] = None):
        super().__init__(ParseNodeType.UNPACK, start, length)
        self.expression = expression
        self._adopt_children()

    def children(self) -> List[Optional[ParseNode]]:
        return [self.expression]


class YieldNode(ExpressionNode):
    """Yield expression; the value is optional."""
    expression: Optional[ExpressionNode]

    def __init__(self, expression: Optional[ExpressionNode] = None,
                 start: Optional[int] = None, length: Optional[int] = None):
        super().__init__(ParseNodeType.YIELD, start, length)
        self.expression = expression
        self._adopt_children()

    def children(self) -> List[Optional[ParseNode]]:
        return [self.expression]


class YieldFromNode(ExpressionNode):
    """Yield-from expression."""
    expression: ExpressionNode

    def __init__(self, expression: ExpressionNode, start: Optional[int] = None,
                 length: Optional[int] = None):
        super().__init__(ParseNodeType.YIELD_FROM, start, length)
        self.expression = expression
        self._adopt_children()

    def children(self) -> List[Optional[ParseNode]]:
        return [self.expression]


class LambdaNode(ExpressionNode):
    """Lambda expression."""
    parameters: List[ParameterNode]
    expression: ExpressionNode

    def __init__(self, parameters: List[ParameterNode], expression: ExpressionNode,
                 start: Optional[int] = None, length: Optional[int] = None):
        super().__init__(ParseNodeType.LAMBDA, start, length)
        self.parameters = parameters
        self.expression = expression
        self._adopt_children()

    def children(self) -> List[Optional[ParseNode]]:
        return self.parameters + [self.expression]


class SliceNode(ExpressionNode):
    """Slice expression (``start:end:step``); every part is optional."""
    start_value: Optional[ExpressionNode]
    end_value: Optional[ExpressionNode]
    step_value: Optional[ExpressionNode]

    def __init__(self, start_value: Optional[ExpressionNode] = None,
                 end_value: Optional[ExpressionNode] = None,
                 step_value: Optional[ExpressionNode] = None,
                 start: Optional[int] = None, length: Optional[int] = None):
        super().__init__(ParseNodeType.SLICE, start, length)
        self.start_value = start_value
        self.end_value = end_value
        self.step_value = step_value
        self._adopt_children()

    def children(self) -> List[Optional[ParseNode]]:
        return [self.start_value, self.end_value, self.step_value]


# ============================================================================
# Literals
# ============================================================================

class NumberNode(ExpressionNode):
    """Numeric literal."""
    token: NumberToken

    def __init__(self, token: NumberToken):
        super().__init__(ParseNodeType.NUMBER, token.start, token.length)
        self.token = token

    def children(self) -> List[Optional[ParseNode]]:
        return []


class StringNode(ExpressionNode):
    """Single string literal."""
    token: StringToken

    def __init__(self, token: StringToken):
        super().__init__(ParseNodeType.STRING, token.start, token.length)
        self.token = token

    def children(self) -> List[Optional[ParseNode]]:
        return []


class StringListNode(ExpressionNode):
    """
    One or more adjacent string literals.

    When the strings are used as a forward-declared type annotation, the parser
    attaches the parsed annotation expression as ``type_annotation``.
    """
    strings: List[StringNode]
    type_annotation: Optional[ExpressionNode]

    def __init__(self, strings: List[StringNode],
                 type_annotation: Optional[ExpressionNode] = None,
                 start: Optional[int] = None, length: Optional[int] = None):
        super().__init__(ParseNodeType.STRING_LIST, start, length)
        self.strings = strings
        self.type_annotation = type_annotation
        self._adopt_children()

    def children(self) -> List[Optional[ParseNode]]:
        return [self.type_annotation] + self.strings


class ConstantNode(ExpressionNode):
    """Keyword constant (``True``, ``False``, ``None``, ``__debug__``)."""
    token: KeywordToken

    def __init__(self, token: KeywordToken):
        super().__init__(ParseNodeType.CONSTANT, token.start, token.length)
        self.token = token

    def children(self) -> List[Optional[ParseNode]]:
        return []


class EllipsisNode(ExpressionNode):
    """The ``...`` literal."""

    def __init__(self, start: int = 0, length: int = 3):
        super().__init__(ParseNodeType.ELLIPSIS, start, length)

    def children(self) -> List[Optional[ParseNode]]:
        return []


# ============================================================================
# Collections
# ============================================================================

class ListNode(ExpressionNode):
    """List display."""
    entries: List[ExpressionNode]

    def __init__(self, entries: List[ExpressionNode], start: Optional[int] = None,
                 length: Optional[int] = None):
        super().__init__(ParseNodeType.LIST, start, length)
        self.entries = entries
        self._adopt_children()

    def children(self) -> List[Optional[ParseNode]]:
        return list(self.entries)


class TupleNode(ExpressionNode):
    """Tuple display."""
    expressions: List[ExpressionNode]

    def __init__(self, expressions: List[ExpressionNode], start: Optional[int] = None,
                 length: Optional[int] = None):
        super().__init__(ParseNodeType.TUPLE, start, length)
        self.expressions = expressions
        self._adopt_children()

    def children(self) -> List[Optional[ParseNode]]:
        return list(self.expressions)


class SetNode(ExpressionNode):
    """Set display."""
    entries: List[ExpressionNode]

    def __init__(self, entries: List[ExpressionNode], start: Optional[int] = None,
                 length: Optional[int] = None):
        super().__init__(ParseNodeType.SET, start, length)
        self.entries = entries
        self._adopt_children()

    def children(self) -> List[Optional[ParseNode]]:
        return list(self.entries)


class DictionaryKeyEntryNode(ParseNode):
    """``key: value`` entry of a dictionary display or comprehension."""
    key_expression: ExpressionNode
    value_expression: ExpressionNode

    def __init__(self, key_expression: ExpressionNode, value_expression: ExpressionNode,
                 start: Optional[int] = None, length: Optional[int] = None):
        super().__init__(ParseNodeType.DICTIONARY_KEY_ENTRY, start, length)
        self.key_expression = key_expression
        self.value_expression = value_expression
        self._adopt_children()

    def children(self) -> List[Optional[ParseNode]]:
        return [self.key_expression, self.value_expression]


class DictionaryExpandEntryNode(ExpressionNode):
    """``**mapping`` entry of a dictionary display."""
    expand_expression: ExpressionNode

    def __init__(self, expand_expression: ExpressionNode, start: Optional[int] = None,
                 length: Optional[int] = None):
        super().__init__(ParseNodeType.DICTIONARY_EXPAND_ENTRY, start, length)
        self.expand_expression = expand_expression
        self._adopt_children()

    def children(self) -> List[Optional[ParseNode]]:
        return [self.expand_expression]


DictionaryEntryNode = Union[DictionaryKeyEntryNode, DictionaryExpandEntryNode]


class DictionaryNode(ExpressionNode):
    """Dictionary display."""
    entries: List[DictionaryEntryNode]

    def __init__(self, entries: List[DictionaryEntryNode], start: Optional[int] = None,
                 length: Optional[int] = None):
        super().__init__(ParseNodeType.DICTIONARY, start, length)
        self.entries = entries
        self._adopt_children()

    def children(self) -> List[Optional[ParseNode]]:
        return list(self.entries)


# ============================================================================
# Comprehensions
# ============================================================================

class ListComprehensionForNode(ParseNode):
    """``[async] for target in iterable`` clause."""
    target_expression: ExpressionNode
    iterable_expression: ExpressionNode
    is_async: bool = False

    def __init__(self, target_expression: ExpressionNode, iterable_expression: ExpressionNode,
                 is_async: bool = False, start: Optional[int] = None,
                 length: Optional[int] = None):
        super().__init__(ParseNodeType.LIST_COMPREHENSION_FOR, start, length)
        self.target_expression = target_expression
        self.iterable_expression = iterable_expression
        self.is_async = is_async
        self._adopt_children()

    def children(self) -> List[Optional[ParseNode]]:
        return [self.target_expression, self.iterable_expression]


class ListComprehensionIfNode(ParseNode):
    """``if test`` clause."""
    test_expression: ExpressionNode

    def __init__(self, test_expression: ExpressionNode, start: Optional[int] = None,
                 length: Optional[int] = None):
        super().__init__(ParseNodeType.LIST_COMPREHENSION_IF, start, length)
        self.test_expression = test_expression
        self._adopt_children()

    def children(self) -> List[Optional[ParseNode]]:
        return [self.test_expression]


ComprehensionClauseNode = Union[ListComprehensionForNode, ListComprehensionIfNode]


class ListComprehensionNode(ExpressionNode):
    """
    Comprehension body followed by its clauses.

    Used for list, set and generator comprehensions as well as dictionary
    comprehensions, whose body is a ``DictionaryKeyEntryNode``.
    """
    expression: Union[ExpressionNode, DictionaryKeyEntryNode]
    comprehensions: List[ComprehensionClauseNode]

    def __init__(self, expression: Union[ExpressionNode, DictionaryKeyEntryNode],
                 comprehensions: List[ComprehensionClauseNode],
                 start: Optional[int] = None, length: Optional[int] = None):
        super().__init__(ParseNodeType.LIST_COMPREHENSION, start, length)
        self.expression = expression
        self.comprehensions = comprehensions
        self._adopt_children()

    def children(self) -> List[Optional[ParseNode]]:
        return [self.expression] + self.comprehensions


def is_expression_node(node: Optional[ParseNode]) -> bool:
    """Check if ``node`` belongs to the expression family."""
    return isinstance(node, ExpressionNode)
