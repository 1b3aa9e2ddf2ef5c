import logging

from pytest import Item, fixture

from basecalc.cursor import Cursor
from basecalc.lexer import Lexer
from basecalc.machine import Machine


@fixture(autouse=True)
def quiet_logging():
    '''
    Drop handlers the CLI installs, so they don't outlive captured streams.
    '''
    yield
    logger = logging.getLogger('basecalc')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@fixture
def lexer():
    return Lexer()


@fixture
def machine():
    return Machine()


@fixture
def cursor_at():
    '''
    Cursor over text, with its first skip characters already read.
    '''
    def make(text, skip=0):
        cursor = Cursor(text)
        for _ in range(skip):
            cursor.read()
        return cursor
    return make


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every passing assertion, for auditing an expression run.

    Use with pytest -rP.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))
