'''
Infix to postfix conversion (Dijkstra's shunting-yard).
'''

import logging

from .util import UnmatchedParenthesis
from .operators import lookup, precedence, LPAREN, RPAREN


logger = logging.getLogger(__name__)


class ShuntingYard:
    '''
    Reorders infix tokens into postfix (RPN) order.

    Operators of equal precedence group left to right. That includes ^, so
    2 ^ 3 ^ 2 is (2 ^ 3) ^ 2.
    '''
    # Unclosed ( is an error, rather than silently dropped.
    STRICT = True

    def __init__(self, strict=None):
        self.strict = type(self).STRICT if strict is None else strict

    def convert(self, tokens):
        '''
        Return postfix ordering of infix tokens.

        :param tokens: Iterable of tokens, as from Tokenizer.lex().
        '''
        output = []
        stack = []
        for token in tokens:
            operator = lookup(token)
            if operator is None:
                output.append(token)
            elif operator.symbol == LPAREN:
                stack.append(token)
            elif operator.symbol == RPAREN:
                self._close(stack, output)
            elif not stack or \
                    precedence(token) > _rank(stack[-1]):
                stack.append(token)
            else:
                p = precedence(token)
                while stack and _rank(stack[-1]) >= p:
                    output.append(stack.pop())
                stack.append(token)
        while stack:
            token = stack.pop()
            if _opens(token):
                if self.strict:
                    raise UnmatchedParenthesis('Unclosed {!r}'.format(LPAREN))
                continue
            output.append(token)
        logger.debug('postfix %r', output)
        return output

    def _close(self, stack, output):
        '''
        Pop operators to output up to and including the matching (.
        '''
        while stack:
            token = stack.pop()
            if _opens(token):
                return
            output.append(token)
        raise UnmatchedParenthesis('Unmatched {!r}'.format(RPAREN))


def _opens(token):
    '''
    Return True if token is an opening parenthesis, by the same prefix
    match convert() classifies it with.
    '''
    operator = lookup(token)
    return operator is not None and operator.symbol == LPAREN


def _rank(token):
    '''
    Return precedence of a stacked token; anything opening counts as (.
    '''
    if _opens(token):
        return precedence(LPAREN)
    return precedence(token)
