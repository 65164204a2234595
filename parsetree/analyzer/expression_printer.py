"""
Expression printer for parse trees.

Reconstructs single-line source text from an expression subtree. The output is
used in diagnostics and in hover and signature displays, so every node type
prints as something: node types without a template fall back to the
``<Expression>`` sentinel and operators missing from the table print as
``unknown``.

Author: xwest
"""

import logging
from enum import Flag, auto
from typing import Callable, Dict, List

from ..lexer.tokens import KeywordType, OperatorType, StringTokenFlags
from ..parser.parse_nodes import (
    ParseNode, ParseNodeType, ArgumentCategory, ParameterCategory, ArgumentNode,
    ParameterNode, DictionaryKeyEntryNode, ListComprehensionForNode, is_expression_node,
)

logger = logging.getLogger(__name__)

EXPRESSION_SENTINEL = "<Expression>"
LIST_EXPRESSION_SENTINEL = "<ListExpression>"
UNKNOWN_OPERATOR = "unknown"


class PrintExpressionFlags(Flag):
    """Options that change how expressions are printed."""

    NONE = 0

    # Print the parsed form of forward-declared (string) annotations
    # instead of the string literal.
    FORWARD_DECLARATIONS = auto()


OPERATOR_SYMBOLS: Dict[OperatorType, str] = {
    OperatorType.ADD: '+',
    OperatorType.ADD_EQUAL: '+=',
    OperatorType.ASSIGN: '=',
    OperatorType.BITWISE_AND: '&',
    OperatorType.BITWISE_AND_EQUAL: '&=',
    OperatorType.BITWISE_INVERT: '~',
    OperatorType.BITWISE_OR: '|',
    OperatorType.BITWISE_OR_EQUAL: '|=',
    OperatorType.BITWISE_XOR: '^',
    OperatorType.BITWISE_XOR_EQUAL: '^=',
    OperatorType.DIVIDE: '/',
    OperatorType.DIVIDE_EQUAL: '/=',
    OperatorType.EQUALS: '==',
    OperatorType.FLOOR_DIVIDE: '//',
    OperatorType.FLOOR_DIVIDE_EQUAL: '//=',
    OperatorType.GREATER_THAN: '>',
    OperatorType.GREATER_THAN_OR_EQUAL: '>=',
    OperatorType.LEFT_SHIFT: '<<',
    OperatorType.LEFT_SHIFT_EQUAL: '<<=',
    OperatorType.LESS_THAN: '<',
    OperatorType.LESS_THAN_OR_EQUAL: '<=',
    OperatorType.MATRIX_MULTIPLY: '@',
    OperatorType.MATRIX_MULTIPLY_EQUAL: '@=',
    OperatorType.MOD: '%',
    OperatorType.MOD_EQUAL: '%=',
    OperatorType.MULTIPLY: '*',
    OperatorType.MULTIPLY_EQUAL: '*=',
    OperatorType.NOT_EQUALS: '!=',
    OperatorType.POWER: '**',
    OperatorType.POWER_EQUAL: '**=',
    OperatorType.RIGHT_SHIFT: '>>',
    OperatorType.RIGHT_SHIFT_EQUAL: '>>=',
    OperatorType.SUBTRACT: '-',
    OperatorType.SUBTRACT_EQUAL: '-=',
    OperatorType.AND: 'and',
    OperatorType.OR: 'or',
    OperatorType.NOT: 'not',
    OperatorType.IS: 'is',
    OperatorType.IS_NOT: 'is not',
    OperatorType.IN: 'in',
    OperatorType.NOT_IN: 'not in',
}

CONSTANT_KEYWORDS: Dict[KeywordType, str] = {
    KeywordType.TRUE: 'True',
    KeywordType.FALSE: 'False',
    KeywordType.DEBUG: '__debug__',
    KeywordType.NONE: 'None',
}

# Prefix letters in the order they are emitted
STRING_PREFIXES = [
    (StringTokenFlags.RAW, 'r'),
    (StringTokenFlags.UNICODE, 'u'),
    (StringTokenFlags.BYTES, 'b'),
    (StringTokenFlags.FORMAT, 'f'),
]


def print_operator(operator: OperatorType) -> str:
    """Return the source symbol for ``operator``, or ``unknown``."""
    symbol = OPERATOR_SYMBOLS.get(operator)
    if symbol is None:
        logger.debug("No symbol for operator %r", operator)
        return UNKNOWN_OPERATOR
    return symbol


def print_expression(node: ParseNode, flags: PrintExpressionFlags = PrintExpressionFlags.NONE) -> str:
    """
    Reconstruct the source text of an expression subtree.

    Left-nested operator and member access chains (``a + b + c``, ``a.b.c``)
    are unrolled into a loop, so their length is not limited by the
    interpreter's recursion limit.
    """
    chain: List[ParseNode] = []
    while node.node_type in _LEFT_CHAIN_SUFFIXES:
        chain.append(node)
        node = node.left_expression

    printer = _PRINTERS.get(node.node_type)
    if printer is None:
        logger.debug("No print template for %s", node.node_type.value)
        expr_string = EXPRESSION_SENTINEL
    else:
        expr_string = printer(node, flags)

    for link in reversed(chain):
        expr_string += _LEFT_CHAIN_SUFFIXES[link.node_type](link, flags)
    return expr_string


def _print_name(node, flags):
    return node.token.value


def _member_access_suffix(node, flags):
    return '.' + node.member_name.token.value


def _print_argument(arg: ArgumentNode, flags: PrintExpressionFlags) -> str:
    arg_str = ''
    if arg.category == ArgumentCategory.UNPACKED_LIST:
        arg_str = '*'
    elif arg.category == ArgumentCategory.UNPACKED_DICTIONARY:
        arg_str = '**'
    if arg.name:
        arg_str += arg.name.token.value + '='
    return arg_str + print_expression(arg.value_expression, flags)


def _print_call(node, flags):
    args = ', '.join(_print_argument(arg, flags) for arg in node.arguments)
    return print_expression(node.left_expression, flags) + '(' + args + ')'


def _print_index(node, flags):
    items = ', '.join(print_expression(item, flags) for item in node.items)
    return print_expression(node.base_expression, flags) + '[' + items + ']'


def _print_unary_operation(node, flags):
    return print_operator(node.operator) + ' ' + print_expression(node.expression, flags)


def _binary_operation_suffix(node, flags):
    return ' ' + print_operator(node.operator) + ' ' + print_expression(node.right_expression, flags)


def _print_number(node, flags):
    return str(node.token.value)


def _print_string_list(node, flags):
    if flags & PrintExpressionFlags.FORWARD_DECLARATIONS and node.type_annotation:
        return print_expression(node.type_annotation, flags)
    return ' '.join(print_expression(string, flags) for string in node.strings)


def _print_string(node, flags):
    token_flags = node.token.flags
    expr_string = ''.join(letter for flag, letter in STRING_PREFIXES if token_flags & flag)

    quote = "'" if token_flags & StringTokenFlags.SINGLE_QUOTE else '"'
    if token_flags & StringTokenFlags.TRIPLICATE:
        quote *= 3

    return expr_string + quote + node.token.escaped_value + quote


def _print_assignment(node, flags):
    return (print_expression(node.left_expression, flags) + ' = ' +
            print_expression(node.right_expression, flags))


def _print_type_annotation(node, flags):
    return (print_expression(node.value_expression, flags) + ': ' +
            print_expression(node.type_annotation, flags))


def _print_await(node, flags):
    return 'await ' + print_expression(node.expression, flags)


def _print_ternary(node, flags):
    return (print_expression(node.if_expression, flags) + ' if ' +
            print_expression(node.test_expression, flags) + ' else ' +
            print_expression(node.else_expression, flags))


def _print_list(node, flags):
    expressions = [print_expression(expr, flags) for expr in node.entries]
    return f"[{', '.join(expressions)}]"


def _print_unpack(node, flags):
    return '*' + print_expression(node.expression, flags)


def _print_tuple(node, flags):
    expressions = [print_expression(expr, flags) for expr in node.expressions]
    if len(expressions) == 1:
        return f"({expressions[0]}, )"
    return f"({', '.join(expressions)})"


def _print_yield(node, flags):
    if node.expression is None:
        return 'yield'
    return 'yield ' + print_expression(node.expression, flags)


def _print_yield_from(node, flags):
    return 'yield from ' + print_expression(node.expression, flags)


def _print_ellipsis(node, flags):
    return '...'


def _print_key_entry(entry: DictionaryKeyEntryNode, flags: PrintExpressionFlags) -> str:
    return (f"{print_expression(entry.key_expression, flags)}: "
            f"{print_expression(entry.value_expression, flags)}")


def _print_list_comprehension(node, flags):
    list_str = LIST_EXPRESSION_SENTINEL
    if is_expression_node(node.expression):
        list_str = print_expression(node.expression, flags)
    elif node.expression.node_type == ParseNodeType.DICTIONARY_KEY_ENTRY:
        list_str = _print_key_entry(node.expression, flags)

    clauses: List[str] = []
    for clause in node.comprehensions:
        if isinstance(clause, ListComprehensionForNode):
            clauses.append(
                f"{'async ' if clause.is_async else ''}for "
                f"{print_expression(clause.target_expression, flags)} "
                f"in {print_expression(clause.iterable_expression, flags)}"
            )
        else:
            clauses.append(f"if {print_expression(clause.test_expression, flags)}")

    return list_str + ' ' + ' '.join(clauses)


def _print_slice(node, flags):
    result = ''
    if node.start_value:
        result += print_expression(node.start_value, flags)
    if node.end_value:
        result += ':' + print_expression(node.end_value, flags)
    if node.step_value:
        result += ':' + print_expression(node.step_value, flags)
    return result


def _print_parameter(param: ParameterNode, flags: PrintExpressionFlags) -> str:
    param_str = ''
    if param.category == ParameterCategory.VAR_ARG_LIST:
        param_str += '*'
    elif param.category == ParameterCategory.VAR_ARG_DICTIONARY:
        param_str += '**'

    if param.name:
        param_str += param.name.token.value

    if param.default_value:
        param_str += ' = ' + print_expression(param.default_value, flags)
    return param_str


def _print_lambda(node, flags):
    params = ', '.join(_print_parameter(param, flags) for param in node.parameters)
    return 'lambda ' + params + ': ' + print_expression(node.expression, flags)


def _print_constant(node, flags):
    text = CONSTANT_KEYWORDS.get(node.token.keyword_type)
    if text is None:
        logger.debug("Keyword %s is not a printable constant", node.token.keyword_type.name)
        return EXPRESSION_SENTINEL
    return text


def _print_dictionary(node, flags):
    entries = []
    for entry in node.entries:
        if entry.node_type == ParseNodeType.DICTIONARY_KEY_ENTRY:
            entries.append(_print_key_entry(entry, flags))
        else:
            entries.append(print_expression(entry, flags))
    return f"{{ {', '.join(entries)} }}"


def _print_dictionary_expand_entry(node, flags):
    return f"**{print_expression(node.expand_expression, flags)}"


def _print_set(node, flags):
    return ', '.join(print_expression(entry, flags) for entry in node.entries)


# Nodes printed as their left_expression followed by a suffix
_LEFT_CHAIN_SUFFIXES: Dict[ParseNodeType, Callable[[ParseNode, PrintExpressionFlags], str]] = {
    ParseNodeType.MEMBER_ACCESS: _member_access_suffix,
    ParseNodeType.BINARY_OPERATION: _binary_operation_suffix,
    # Operator symbols for augmented assignment already carry the '='
    ParseNodeType.AUGMENTED_ASSIGNMENT: _binary_operation_suffix,
}

_PRINTERS: Dict[ParseNodeType, Callable[[ParseNode, PrintExpressionFlags], str]] = {
    ParseNodeType.NAME: _print_name,
    ParseNodeType.CALL: _print_call,
    ParseNodeType.INDEX: _print_index,
    ParseNodeType.UNARY_OPERATION: _print_unary_operation,
    ParseNodeType.NUMBER: _print_number,
    ParseNodeType.STRING_LIST: _print_string_list,
    ParseNodeType.STRING: _print_string,
    ParseNodeType.ASSIGNMENT: _print_assignment,
    ParseNodeType.TYPE_ANNOTATION: _print_type_annotation,
    ParseNodeType.AWAIT: _print_await,
    ParseNodeType.TERNARY: _print_ternary,
    ParseNodeType.LIST: _print_list,
    ParseNodeType.UNPACK: _print_unpack,
    ParseNodeType.TUPLE: _print_tuple,
    ParseNodeType.YIELD: _print_yield,
    ParseNodeType.YIELD_FROM: _print_yield_from,
    ParseNodeType.ELLIPSIS: _print_ellipsis,
    ParseNodeType.LIST_COMPREHENSION: _print_list_comprehension,
    ParseNodeType.SLICE: _print_slice,
    ParseNodeType.LAMBDA: _print_lambda,
    ParseNodeType.CONSTANT: _print_constant,
    ParseNodeType.DICTIONARY: _print_dictionary,
    ParseNodeType.DICTIONARY_EXPAND_ENTRY: _print_dictionary_expand_entry,
    ParseNodeType.SET: _print_set,
}
