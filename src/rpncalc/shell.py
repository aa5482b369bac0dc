import logging

from .util import RPNError
from .engine import Engine


log = logging.getLogger(__name__)


class Keypad:
    '''
    Adapter between key presses and an Engine.

    Keeps the display text, re-rendered only when a command reports a
    change, and a status line for the last diagnostic.
    '''

    def __init__(self, engine=None):
        self.engine = Engine() if engine is None else engine
        self.display = self.engine.render()
        self.status = ''

    def press(self, command, *args):
        '''
        Run engine command, refresh the display if it changed anything.

        :return: whether the display changed.
        '''
        if command not in Engine.COMMANDS:
            raise RPNError('Unknown command {0}'.format(command))
        log.debug('Pressed %s%r', command, args)
        self.status = ''
        changed = getattr(self.engine, command)(*args)
        if changed:
            self.display = self.engine.render()
        return changed

    def feed(self, line, lexer):
        '''
        Press every key lexed from line, in order.
        '''
        for command, args in lexer.commands(line):
            self.press(command, *args)


class StatusHandler(logging.Handler):
    '''
    Logging handler showing the latest record on a keypad's status line.
    '''

    def __init__(self, keypad, level=logging.NOTSET):
        super().__init__(level)
        self.keypad = keypad

    def emit(self, record):
        try:
            self.keypad.status = self.format(record)
        except Exception:
            self.handleError(record)
