import operator

from typing import List, Optional, Sequence

from .boolean_ast_tree import (Node, NOT, AND, XOR, InvalidExpressionError, VariableNotFoundError,
                               UnsupportedOperatorError, print_expression)
from .i18n import _
from .logging import get_logger

_logger = get_logger(__name__)

TruthTable = List[List[bool]]


def get_unique_variables(node: Optional[Node]) -> List[str]:
    '''
    Variable names in the order they are first met visiting a node before
    its left and then its right subtree.
    '''
    variables = []
    stack = [node]
    while stack:
        n = stack.pop()
        if n is None: continue
        if n.is_variable() and n.token.value not in variables:
            variables.append(n.token.value)
        stack.append(n.right)
        stack.append(n.left)
    return variables

# TODO: add a rule for '|'. until then any OR, including a simplified NOR, cannot be tabulated
_BINARY_RULES = {
    AND: operator.and_,
    XOR: operator.ne,
}

def evaluate_expression(node: Optional[Node], variables: Sequence[str], values: Sequence[bool]) -> bool:
    '''
    Nodes are visited left to right, parents first. Both sides of a binary
    operator are always evaluated so an error on the right is never hidden.
    '''
    results = []  # type: List[bool]
    stack = [(node, False)]
    while stack:
        n, children_done = stack.pop()
        if n is None:
            raise InvalidExpressionError(_('Expression cannot be empty'))

        if n.is_variable():
            try:
                index = variables.index(n.token.value)
            except ValueError:
                raise VariableNotFoundError(_('Variable not found') + f': {n.token.value}') from None
            results.append(values[index])
            continue

        op = n.token.value
        if op != NOT and op not in _BINARY_RULES:
            raise UnsupportedOperatorError(_('Unsupported operator') + f': {op}')
        if not children_done:
            stack.append((n, True))
            if op != NOT:
                stack.append((n.right, False))
            stack.append((n.left, False))
        elif op == NOT:
            results.append(not results.pop())
        else:
            right_value = results.pop()
            left_value = results.pop()
            results.append(_BINARY_RULES[op](left_value, right_value))
    return results.pop()

def generate_truth_table(node: Optional[Node]) -> TruthTable:
    '''
    One row per assignment, the last entry of a row being the result.
    Bit j of the row index is the value of the j-th variable.
    '''
    variables = get_unique_variables(node)
    table = []
    for i in range(1 << len(variables)):
        row = [(i & (1 << j)) > 0 for j in range(len(variables))]
        row.append(evaluate_expression(node, variables, row))
        table.append(row)
    _logger.debug(f'generated {len(table)} rows over {variables}')
    return table

def format_truth_table(table: TruthTable, node: Optional[Node]) -> List[str]:
    headers = get_unique_variables(node) + [print_expression(node)]
    lines = [' | '.join(headers)]
    for row in table:
        lines.append(' | '.join('true' if value else 'false' for value in row))
    return lines
