import attr

from enum import Enum, auto
from typing import List, Mapping, Optional, Sequence, Union

from .i18n import _
from .logging import get_logger

_logger = get_logger(__name__)


class AbstractBooleanASTError(Exception):
    def __init__(self, message: str):
        Exception.__init__(self, message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}: {self.message}'

class BooleanExpressionError(AbstractBooleanASTError): pass
class InvalidCharacterError(BooleanExpressionError): pass
class MismatchedParenthesesError(BooleanExpressionError): pass
class InvalidExpressionError(BooleanExpressionError): pass
class VariableNotFoundError(BooleanExpressionError): pass
class UnsupportedOperatorError(BooleanExpressionError): pass


class TokenType(Enum):
    OPERATOR = auto()
    VARIABLE = auto()

@attr.s(frozen=True)
class Token:
    type = attr.ib(type=TokenType, validator=attr.validators.instance_of(TokenType))
    value = attr.ib(type=str, validator=attr.validators.instance_of(str))

    @classmethod
    def operator(cls, value: str) -> 'Token':
        return cls(TokenType.OPERATOR, value)

    @classmethod
    def variable(cls, name: str) -> 'Token':
        return cls(TokenType.VARIABLE, name)

    def is_operator(self, value: Optional[str] = None) -> bool:
        if self.type != TokenType.OPERATOR: return False
        return value is None or self.value == value

    def __str__(self) -> str:
        return self.value

@attr.s(repr=False)
class Node:
    '''
    A node of the expression tree. Variable nodes have no children, NOT nodes
    only a left child and every other operator both children.
    '''
    token = attr.ib(type=Token, validator=attr.validators.instance_of(Token))
    left = attr.ib(default=None, type=Optional['Node'])
    right = attr.ib(default=None, type=Optional['Node'])

    def is_variable(self) -> bool:
        return self.token.type == TokenType.VARIABLE

    def is_unary(self) -> bool:
        return self.token.is_operator(NOT)

    def __repr__(self) -> str:
        return f'<Node {print_expression(self)}>'


NOT = '!'
AND = '&'
OR = '|'
NAND = 'NAND'
NOR = 'NOR'
XOR = 'XOR'
OPEN_PAREN = '('
CLOSE_PAREN = ')'

_SYMBOL_OPERATORS = (NOT, AND, OR)
# checked in this order, before a letter may start a variable
_KEYWORD_OPERATORS = (NAND, NOR, XOR)

'''
Higher binds tighter. Parentheses are handled structurally by the parser,
their 0 only keeps them from ever being popped by a comparison.
'''
OPERATOR_PRECEDENCE = {
    NOT: 4,
    NAND: 3,
    NOR: 3,
    XOR: 3,
    AND: 2,
    OR: 1,
    OPEN_PAREN: 0,
    CLOSE_PAREN: 0,
}


def tokenize(boolean_equation: str) -> List[Token]:
    tokens = []
    i = 0
    while i < len(boolean_equation):
        ch = boolean_equation[i]
        if ch.isspace():
            i += 1
            continue
        if ch in _SYMBOL_OPERATORS:
            tokens.append(Token.operator(ch))
            i += 1
            continue
        for keyword in _KEYWORD_OPERATORS:
            # a keyword needs at least one character after it
            if boolean_equation.startswith(keyword, i) and i + len(keyword) < len(boolean_equation):
                tokens.append(Token.operator(keyword))
                i += len(keyword)
                break
        else:
            if ch in (OPEN_PAREN, CLOSE_PAREN):
                tokens.append(Token.operator(ch))
            elif ch.isalpha():
                # one letter, one variable
                tokens.append(Token.variable(ch))
            else:
                raise InvalidCharacterError(_('Invalid character in input') + f': {ch!r}')
            i += 1
    _logger.debug(f'tokenized {boolean_equation!r} into {len(tokens)} tokens')
    return tokens

def shunting_yard(tokens: Sequence[Token], precedence: Mapping[str, int] = OPERATOR_PRECEDENCE) -> List[Token]:
    '''
    Reorders infix tokens into postfix. NOT is compared against the stack like
    any other operator, it gets no special treatment for being unary.
    '''
    output = []
    operators = []
    for token in tokens:
        if token.type == TokenType.VARIABLE:
            output.append(token)
        elif token.value == OPEN_PAREN:
            operators.append(token)
        elif token.value == CLOSE_PAREN:
            while operators and operators[-1].value != OPEN_PAREN:
                output.append(operators.pop())
            if not operators:
                raise MismatchedParenthesesError(_('Mismatched parentheses'))
            operators.pop()
        else:
            while operators and precedence[operators[-1].value] >= precedence[token.value]:
                output.append(operators.pop())
            operators.append(token)
    # an unmatched '(' is emitted too, the tree builder rejects it
    while operators:
        output.append(operators.pop())
    _logger.debug(f'postfix: {" ".join(map(str, output))}')
    return output

def build_parse_tree(postfix_tokens: Sequence[Token]) -> Node:
    stack = []  # type: List[Node]
    for token in postfix_tokens:
        if token.type == TokenType.VARIABLE:
            stack.append(Node(token))
        elif token.value == NOT:
            if len(stack) < 1:
                raise InvalidExpressionError(_('Invalid expression'))
            stack.append(Node(token, left=stack.pop()))
        else:
            if len(stack) < 2:
                raise InvalidExpressionError(_('Invalid expression'))
            right = stack.pop()
            left = stack.pop()
            stack.append(Node(token, left=left, right=right))
    if len(stack) != 1:
        raise InvalidExpressionError(_('Invalid expression'))
    return stack[0]

def parse(boolean_equation: str) -> Node:
    tokens = tokenize(boolean_equation)
    postfix_tokens = shunting_yard(tokens, OPERATOR_PRECEDENCE)
    return build_parse_tree(postfix_tokens)


# operator eliminated -> operator it becomes the negation of
_DE_MORGAN_REWRITES = {
    NAND: AND,
    NOR: OR,
}

def simplify(node: Optional[Node]) -> Optional[Node]:
    '''
    Rewrites A NAND B as !(A&B) and A NOR B as !(A|B), bottom-up. The tree is
    modified in place and also returned.
    '''
    # every node is listed before its children, so walk the list backwards
    nodes = []
    stack = [node]
    while stack:
        n = stack.pop()
        if n is None: continue
        nodes.append(n)
        stack.append(n.left)
        stack.append(n.right)
    for n in reversed(nodes):
        if n.token.type == TokenType.OPERATOR and n.token.value in _DE_MORGAN_REWRITES:
            _logger.debug(f'rewriting {n.token.value} into negated {_DE_MORGAN_REWRITES[n.token.value]}')
            n.left = Node(Token.operator(_DE_MORGAN_REWRITES[n.token.value]), left=n.left, right=n.right)
            n.right = None
            n.token = Token.operator(NOT)
    return node

def print_expression(node: Optional[Node]) -> str:
    parts = []
    # nodes still to render, and text to emit as is
    stack = [node]  # type: List[Union[Node, str, None]]
    while stack:
        item = stack.pop()
        if item is None: continue
        if isinstance(item, str):
            parts.append(item)
        elif item.is_variable():
            parts.append(item.token.value)
        elif item.is_unary():
            parts.append(item.token.value)
            stack.append(item.left)
        else:
            stack.extend((')', item.right, item.token.value, item.left, '('))
    return ''.join(parts)
