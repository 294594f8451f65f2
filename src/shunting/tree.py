'''
Binary expression trees, built from postfix.
'''

import logging

from .util import MalformedExpression
from .lexer import is_numeric
from .operators import apply, convert, evaluable


logger = logging.getLogger(__name__)


class Node:
    '''
    Expression tree node: a numeral leaf, or an operator with two children.

    Child 0 is the right operand, child 1 the left one.
    '''
    __slots__ = 'value', 'children'

    def __init__(self, value, children=()):
        if len(children) not in (0, 2):
            raise MalformedExpression(
                '{!r} needs 0 or 2 children, not {}'.format(value,
                                                            len(children)))
        self.value = value
        self.children = tuple(children)

    def __repr__(self):
        return '{}({!r}, {!r})'.format(type(self).__name__,
                                       self.value,
                                       self.children)

    def __str__(self):
        return self.infix()

    def __len__(self):
        return sum(1 for _ in self.walk())

    def has_children(self):
        return bool(self.children)

    def child(self, index):
        '''
        Return child at index (0 or 1), or None if there is none.
        '''
        if index in (0, 1) and self.children:
            return self.children[index]
        return None

    @property
    def right(self):
        return self.child(0)

    @property
    def left(self):
        return self.child(1)

    def walk(self):
        '''
        Yield every node, pre-order, left operand before right.
        '''
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            # Child 0 (right) pushed first, so left comes out first.
            stack.extend(node.children)

    def depth(self):
        if not self.children:
            return 1
        return 1 + max(child.depth() for child in self.children)

    def postfix(self):
        '''
        Return the postfix tokens this tree was built from.
        '''
        if not self.children:
            return [self.value]
        return self.left.postfix() + self.right.postfix() + [self.value]

    def infix(self):
        '''
        Return fully parenthesised infix rendering.
        '''
        if not self.children:
            return self.value
        return '({} {} {})'.format(self.left.infix(),
                                   self.value,
                                   self.right.infix())

    def pretty(self, indent='  '):
        '''
        Return indented, one node per line rendering; left operand first.
        '''
        lines = []
        stack = [(self, 0)]
        while stack:
            node, level = stack.pop()
            lines.append(indent * level + node.value)
            stack.extend((child, level + 1) for child in node.children)
        return '\n'.join(lines)


def has_children(node):
    return node.has_children()


def get_child(node, index):
    return node.child(index)


def get_value(node):
    return node.value


class TreeBuilder:
    '''
    Builds expression trees from postfix, with a stack of nodes.
    '''

    def build(self, postfix):
        '''
        Return root of the tree for postfix tokens.
        '''
        stack = []
        for token in postfix:
            if is_numeric(token):
                stack.append(Node(token))
                continue
            evaluable(token)
            if len(stack) < 2:
                raise MalformedExpression(
                    'Missing operand for {!r}'.format(token))
            right = stack.pop()
            left = stack.pop()
            stack.append(Node(token, (right, left)))
        if len(stack) != 1:
            raise MalformedExpression(
                'Expected one expression, got {}'.format(len(stack)))
        logger.debug('tree %s', stack[0])
        return stack[0]


def evaluate_tree(node):
    '''
    Evaluate tree rooted at node, in float32.

    Same arithmetic as Machine.run() on the equivalent postfix.
    '''
    if not node.children:
        return convert(node.value)
    return apply(node.value,
                 evaluate_tree(node.left),
                 evaluate_tree(node.right))
