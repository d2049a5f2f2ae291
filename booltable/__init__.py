from .version import BOOLTABLE_VERSION
from .simple_config import SimpleConfig
from .boolean_ast_tree import (parse, simplify, print_expression, Node, Token, TokenType,
                               BooleanExpressionError)
from .truth_table import generate_truth_table, evaluate_expression, get_unique_variables
from .repl import Repl


__version__ = BOOLTABLE_VERSION
