'''
Operator table.

Every symbol the engine knows, in lookup order, with its precedence and the
float32 function applied when evaluating it. Parentheses are operators too,
as far as tokenizing and converting go, but have nothing to evaluate.
'''

from collections import namedtuple

import numpy

from .util import UnknownOperator, BadNumeral, wrap_user_errors


Operator = namedtuple('Operator', ['symbol', 'precedence', 'function'])

# Above every real precedence, so unknown operators always get pushed.
UNKNOWN_PRECEDENCE = 256

# Declared order matters: lookup is first prefix match.
OPERATORS = (
    Operator('(', 0, None),
    Operator(')', 1, None),
    Operator('-', 1, numpy.subtract),
    Operator('+', 1, numpy.add),
    Operator('*', 2, numpy.multiply),
    Operator('/', 2, numpy.divide),
    Operator('^', 3, numpy.power),
)

_PRECEDENCES = {operator.symbol: operator.precedence
                for operator
                in OPERATORS}

LPAREN = '('
RPAREN = ')'


def lookup(symbol):
    '''
    Return first operator whose symbol prefixes symbol, or None.
    '''
    for operator in OPERATORS:
        if symbol.startswith(operator.symbol):
            return operator
    return None


def precedence(symbol):
    '''
    Return precedence of exactly symbol, or UNKNOWN_PRECEDENCE.
    '''
    return _PRECEDENCES.get(symbol, UNKNOWN_PRECEDENCE)


def evaluable(symbol):
    '''
    Return the operator for symbol if it can be applied to two operands.
    '''
    operator = lookup(symbol)
    if operator is None or operator.function is None:
        raise UnknownOperator('Unknown operator {!r}'.format(symbol))
    return operator


def apply(symbol, left, right):
    '''
    Apply binary operator symbol to left and right, in float32.

    IEEE semantics throughout: 1/0 is inf, 0/0 and (-8)^(1/3) are NaN.
    '''
    operator = evaluable(symbol)
    with numpy.errstate(all='ignore'):
        return operator.function(numpy.float32(left), numpy.float32(right))


@wrap_user_errors('Cannot convert {0!r}', BadNumeral)
def convert(numeral):
    '''
    Convert numeral token to float32.
    '''
    with numpy.errstate(all='ignore'):
        return numpy.float32(float(numeral))
