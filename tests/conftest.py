from pytest import Item, fixture

from shunting.engine import Engine
from shunting.lexer import Tokenizer


@fixture
def engine():
    return Engine()


@fixture
def lenient():
    '''
    Engine that drops unclosed parentheses instead of failing.
    '''
    return Engine.configured(strict=False)


@fixture
def tokenizer():
    return Tokenizer()


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Excessive in most cases. Use with pytest -rP, and
    enable_assertion_pass_hook set.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!)
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))
