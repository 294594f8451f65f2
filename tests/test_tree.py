'''
Expression tree tests
'''

import math

from shunting.util import (MalformedExpression, UnknownOperator,
                           UnmatchedParenthesis, BadNumeral)
from shunting.tree import (Node, TreeBuilder, has_children, get_child,
                           get_value, evaluate_tree)

from pytest import raises, mark, approx


def test_leaf(engine):
    node = engine.parse('42')
    assert get_value(node) == '42'
    assert not has_children(node)
    assert get_child(node, 0) is None
    assert get_child(node, 1) is None


def test_slots(engine):
    root = engine.parse('3 - 4')
    assert get_value(root) == '-'
    assert has_children(root)
    # Right operand in slot 0, left in slot 1.
    assert get_value(get_child(root, 0)) == '4'
    assert get_value(get_child(root, 1)) == '3'
    assert get_child(root, 2) is None
    assert root.left.value == '3'
    assert root.right.value == '4'


def test_shape(engine):
    root = engine.parse('1 + 2 * 3')
    assert root.value == '+'
    assert root.child(0).value == '*'
    assert root.child(0).child(0).value == '3'
    assert root.child(0).child(1).value == '2'
    assert root.child(1).value == '1'
    assert not root.child(1).has_children()


def test_parenthesised_shape(engine):
    root = engine.parse('(1 + 2) * (3 + 4)')
    assert root.infix() == '((1 + 2) * (3 + 4))'
    assert [n.value for n in root.walk()] == \
        ['*', '+', '1', '2', '+', '3', '4']


def test_left_associative(engine):
    assert engine.parse('2 ^ 3 ^ 2').infix() == '((2 ^ 3) ^ 2)'
    assert engine.parse('1 - 2 - 3').infix() == '((1 - 2) - 3)'


def test_postfix_round_trip(engine):
    for expression in ['1', '1 + 2 * 3', '(1 + 2) ^ (3 - 4) / 5']:
        root = engine.parse(expression)
        assert root.postfix() == engine.tokenize_and_convert(expression)


def test_size_and_depth(engine):
    root = engine.parse('1 + 2 * 3')
    assert len(root) == 5
    assert root.depth() == 3
    assert len(engine.parse('7')) == 1
    assert engine.parse('7').depth() == 1


def test_pretty(engine):
    assert engine.parse('1 + 2 * 3').pretty() == \
        '+\n  1\n  *\n    2\n    3'


def test_str(engine):
    assert str(engine.parse('1+2')) == '(1 + 2)'
    assert repr(Node('1')) == "Node('1', ())"


def test_one_child_is_malformed():
    with raises(MalformedExpression):
        Node('+', (Node('1'),))


@mark.parametrize('expression',
                  ['1 +', '+', '1 2', '', '1 + 2 3', '1 * * 2'])
def test_malformed(engine, expression):
    with raises(MalformedExpression):
        engine.parse(expression)


def test_unknown(engine):
    with raises(UnknownOperator):
        engine.parse('x')
    with raises(UnknownOperator):
        engine.parse('1 + 2x')


def test_parentheses_never_become_nodes():
    with raises(UnknownOperator):
        TreeBuilder().build(['1', '2', '('])


def test_unmatched(engine):
    with raises(UnmatchedParenthesis):
        engine.parse(')1 + 2')
    with raises(UnmatchedParenthesis):
        engine.parse('(1 + 2')


def test_unclosed_lenient(lenient):
    assert lenient.parse('(1 + 2').infix() == '(1 + 2)'


@mark.parametrize('expression', [
    '3 + 4',
    '3 + 4 * 2',
    '(3 + 4) * 2',
    '2 ^ 3 ^ 2',
    '1.5 / 3 - 0.25',
    '0.1 + 0.2 * 0.3 ^ 2',
    '(1 - 2) * (3 - 4) / (5 ^ 0.5)',
    '10 / 0',
])
def test_tree_agrees_with_machine(engine, expression):
    assert evaluate_tree(engine.parse(expression)) == \
        approx(engine.evaluate(expression))


def test_evaluate_tree():
    tree = TreeBuilder().build(['9', '2', '^'])
    assert evaluate_tree(tree) == 81
    assert math.isnan(evaluate_tree(TreeBuilder().build(['0', '0', '/'])))


def test_evaluate_tree_bad_numeral():
    with raises(BadNumeral):
        evaluate_tree(TreeBuilder().build(['1.2.3', '1', '+']))
