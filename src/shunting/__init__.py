'''
Infix arithmetic expression engine.

Tokenizes an infix string, reorders it to postfix with Dijkstra's
shunting-yard, and from there either builds a binary expression tree or
evaluates it on a stack machine, in single precision.

Supports numerals, + - * / ^ and parentheses; nothing more. No unary minus,
no variables, no functions. ^ is left associative, like the rest.

    >>> from shunting import evaluate, parse
    >>> float(evaluate('(3 + 4) * 2'))
    14.0
    >>> parse('1 + 2 * 3').infix()
    '(1 + (2 * 3))'
'''

from .util import (ExpressionError, UnmatchedParenthesis,
                   MalformedExpression, StackUnderflow, TokenOverflow,
                   TooManyTokens, TokenTooLong, UnknownOperator, BadNumeral)
from .lexer import Tokenizer, is_numeric
from .yard import ShuntingYard
from .tree import (Node, TreeBuilder, has_children, get_child, get_value,
                   evaluate_tree)
from .machine import Machine
from .engine import (Engine, tokenize, tokenize_and_convert, parse,
                     evaluate)
from .cli import CLI


__all__ = ('Engine', 'Tokenizer', 'ShuntingYard', 'TreeBuilder', 'Machine',
           'Node', 'CLI',
           'tokenize', 'tokenize_and_convert', 'parse', 'evaluate',
           'evaluate_tree', 'is_numeric',
           'has_children', 'get_child', 'get_value',
           'ExpressionError', 'UnmatchedParenthesis', 'MalformedExpression',
           'StackUnderflow', 'TokenOverflow', 'TooManyTokens',
           'TokenTooLong', 'UnknownOperator', 'BadNumeral')
