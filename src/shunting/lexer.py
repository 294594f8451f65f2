from functools import reduce
import operator
import logging

import regex

from .util import TooManyTokens, TokenTooLong
from .operators import OPERATORS


logger = logging.getLogger(__name__)

# Strictly ASCII; str.isdigit() would let through ², ٣, etc.
NUMERAL = regex.compile(r'[0-9.]*')


def is_numeric(token):
    '''
    Return True if token is made only of digits and decimal points.

    No sign, no exponent, and no opinion on how many dots or where.
    '''
    return NUMERAL.fullmatch(token) is not None


class Tokenizer:
    '''
    Splits infix arithmetic into words: numerals and operator symbols.

    Holds no state besides its capacities; safe to share.
    '''
    MAX_TOKENS = 64
    MAX_TOKEN_LENGTH = 64
    SEPARATORS = ' \t\r,'

    # In table order, so the first declared operator wins, as with lookup().
    OPERATOR = r'(?:' + r'|'.join(regex.escape(operator.symbol)
                                  for operator
                                  in OPERATORS) + r')'
    # Anything else, up to wherever a separator or operator would match.
    WORD = r'''
            (?:
                (?!
                    {SEPARATOR}
                    |
                    {OPERATOR}
                )
                .
            )+
            '''
    FLAGS = reduce(operator.__or__,
                   {regex.DOTALL,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    @classmethod
    def grammar(cls):
        '''
        Return lexeme pattern for this class's separators.
        '''
        if cls.SEPARATORS:
            # Hex escapes, since VERBOSE would eat a literal space.
            separator = r'[' + ''.join(r'\x{:02x}'.format(ord(char))
                                       for char
                                       in cls.SEPARATORS) + r']+'
        else:
            separator = r'(?!)'
        word = cls.WORD.format(SEPARATOR=separator, OPERATOR=cls.OPERATOR)
        # Operators take priority over extending a word.
        return r'(?<separator>' + separator + r')|' \
               r'(?<operator>' + cls.OPERATOR + r')|' \
               r'(?<word>' + word + r')'

    def __init__(self, max_tokens=None, max_token_length=None):
        '''
        Create tokenizer.

        :param max_tokens: Most tokens a single expression may hold.
        :param max_token_length: Longest a single token may be.
        '''
        cls = type(self)
        self.max_tokens = cls.MAX_TOKENS if max_tokens is None \
            else max_tokens
        self.max_token_length = cls.MAX_TOKEN_LENGTH \
            if max_token_length is None else max_token_length
        self.pattern = regex.compile(cls.grammar(), flags=cls.FLAGS)

    def lex(self, text):
        '''
        Yield every token in text, in order, dropping separators.
        '''
        count = 0
        for match in self.pattern.finditer(text):
            if match.group('separator'):
                continue
            token = match.group(0)
            if len(token) > self.max_token_length:
                raise TokenTooLong(
                    'Token {!r}... longer than {} characters'.format(
                        token[:16], self.max_token_length))
            count += 1
            if count > self.max_tokens:
                raise TooManyTokens(
                    'More than {} tokens'.format(self.max_tokens))
            yield token

    def tokenize(self, text):
        '''
        Return list of all tokens in text.
        '''
        tokens = list(self.lex(text))
        logger.debug('tokens %r', tokens)
        return tokens
