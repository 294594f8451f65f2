from collections import deque
import logging

from .util import StackUnderflow, MalformedExpression
from .lexer import is_numeric
from .operators import apply, convert, evaluable


logger = logging.getLogger(__name__)


class Machine:
    '''
    Arithmetic stack machine.

    Runs postfix tokens to a single float32. Fresh stack on every run, so
    one machine can serve any number of callers.
    '''

    def run(self, postfix):
        '''
        Evaluate postfix tokens, returning the sole value left on the stack.
        '''
        stack = deque()
        for token in postfix:
            if is_numeric(token):
                self._pshstack(stack, convert(token))
                continue
            operator = evaluable(token)
            # Topmost is the right operand: 9 2 ^ is 9 ** 2, not 2 ** 9.
            right, left = self._popstack(stack, 2, token)
            self._pshstack(stack, apply(operator.symbol, left, right))
        if len(stack) != 1:
            raise MalformedExpression(
                'Expected one value, got {}'.format(len(stack)))
        result = stack.pop()
        logger.debug('%r = %r', postfix, result)
        return result

    def _pshstack(self, stack, *new):
        '''
        Push all elements onto stack, leftmost at the bottom.
        '''
        stack.extend(new)

    def _popstack(self, stack, n, token):
        '''
        Pop n values from stack, topmost first.
        '''
        if len(stack) < n:
            raise StackUnderflow(
                'Less than {} element(s) on stack for {!r}'.format(n, token))
        return [stack.pop() for _ in range(n)]
