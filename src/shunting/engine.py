from .lexer import Tokenizer
from .yard import ShuntingYard
from .tree import TreeBuilder
from .machine import Machine


class Engine:
    '''
    Infix expression pipeline: tokenize, convert, then build or evaluate.
    '''

    def __init__(self, tokenizer=None, converter=None, builder=None,
                 machine=None):
        self.tokenizer = tokenizer or Tokenizer()
        self.converter = converter or ShuntingYard()
        self.builder = builder or TreeBuilder()
        self.machine = machine or Machine()

    @classmethod
    def configured(cls, *, max_tokens=None, max_token_length=None,
                   strict=None):
        '''
        Create engine with non-default tokenizer capacities or strictness.
        '''
        return cls(tokenizer=Tokenizer(max_tokens=max_tokens,
                                       max_token_length=max_token_length),
                   converter=ShuntingYard(strict=strict))

    def tokenize(self, expression):
        return self.tokenizer.tokenize(expression)

    def tokenize_and_convert(self, expression):
        '''
        Return postfix tokens for infix expression.
        '''
        return self.converter.convert(self.tokenizer.lex(expression))

    def parse(self, expression):
        '''
        Return root node of expression's tree.
        '''
        return self.builder.build(self.tokenize_and_convert(expression))

    def evaluate(self, expression):
        '''
        Return float32 value of expression.
        '''
        return self.machine.run(self.tokenize_and_convert(expression))


_default = Engine()

tokenize = _default.tokenize
tokenize_and_convert = _default.tokenize_and_convert
parse = _default.parse
evaluate = _default.evaluate
