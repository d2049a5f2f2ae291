import copy
import unittest

from booltable import SimpleConfig
from booltable.boolean_ast_tree import Node, Token


def var(name: str) -> Node:
    return Node(Token.variable(name))

def op(value: str, left: Node, right: Node = None) -> Node:
    return Node(Token.operator(value), left=left, right=right)


class BooltableTestCase(unittest.TestCase):
    """Base class for our unit tests."""

    maxDiff = None

    def setUp(self):
        super().setUp()
        self.config = SimpleConfig({'prompt': False})

    def assertSameTree(self, expected: Node, actual: Node, msg=None):
        self.assertEqual(expected, actual, msg)

    @staticmethod
    def copy_tree(node: Node) -> Node:
        return copy.deepcopy(node)
