import logging

from pytest import Item, fixture

from rpncalc.engine import Engine
from rpncalc.lexer import Lexer
from rpncalc.shell import Keypad


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Excessive in most cases.

    Use with pytest -rP.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!)
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))


@fixture
def engine() -> Engine:
    return Engine()


@fixture
def lexer() -> Lexer:
    return Lexer()


@fixture
def keypad() -> Keypad:
    return Keypad()


@fixture
def typed(engine: Engine, lexer: Lexer):
    '''
    Press the keys spelt out in a string on the engine fixture.
    '''
    def press(keys: str) -> Engine:
        for command, args in lexer.commands(keys):
            getattr(engine, command)(*args)
        return engine
    return press


@fixture(autouse=True)
def package_logging():
    '''
    Undo the logging setup a CLI run leaves on the package logger.
    '''
    package_log = logging.getLogger('rpncalc')
    yield package_log
    for handler in package_log.handlers[:]:
        package_log.removeHandler(handler)
    package_log.setLevel(logging.NOTSET)
