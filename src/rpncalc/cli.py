import sys
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging

from prompt_toolkit import PromptSession

from .util import RPNError
from .lexer import Lexer
from .shell import Keypad
from .app import PACKAGE_LOGGER, run_application


log = logging.getLogger(__name__)


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    enable_suspend=True,
                                    history=None,
                                    prompt_continuation=' ' * len(self.prompt),
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the keypad calculator.
    '''

    DEFAULT_PROMPT = '> '
    LOG_FORMAT = '%(levelname)s: %(message)s'

    def dumper(self):
        '''
        Dump all lexemes matches and the commands they press.
        '''
        lexer = Lexer()
        print('[groups]\t<repr(lexeme)>\t<command>')
        for line in self._expressions():
            for match in lexer.lex(line.rstrip('\n')):
                groups = lexer.matchedgroups(match)
                command, args = lexer.command(groups)
                print(*groups.keys(),
                      repr(match.group(0)),
                      command + repr(args),
                      sep='\t')

    def executor(self):
        '''
        Press the keys on each line, then show the display.
        '''
        lexer = Lexer()
        for line in self._expressions():
            try:
                self.keypad.feed(line.rstrip('\n'), lexer)
            # Abort entire rest of line, keep the keys already pressed
            except RPNError as e:
                print(e.args[0], file=sys.stderr)
            print(self.keypad.display)

    def interactive(self):
        '''
        Full screen keypad, or reading keys from stdin if not on a tty.
        '''
        if sys.stdin.isatty() and sys.stdout.isatty():
            run_application(self.keypad)
        else:
            self.executor()

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        lexer = Lexer()
        print(lexer.LEXEME)

    def _expressions(self):
        '''
        Lines of keys to press: -e arguments, a prompt, or stdin.
        '''
        if self.args.expressions is not None:
            return self.args.expressions
        elif self.args.prompt:
            return InteractiveInput(prompt=self.args.prompt)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='RPN calculator keypad',
            epilog='Keys: 0-9 . + - * /, whitespace for Enter, and '
                   '<enter> <backspace> <delete> <escape>.')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=None)
        self.keypad = Keypad()

    def _configure_logging(self):
        '''
        Send the package's log records to stderr, at the level -v asks for.

        Replaces whatever an earlier run set up.
        '''
        package_log = logging.getLogger(PACKAGE_LOGGER)
        package_log.setLevel(logging.DEBUG if self.args.verbose
                             else logging.WARNING)
        for handler in package_log.handlers[:]:
            package_log.removeHandler(handler)
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(self.LOG_FORMAT))
        package_log.addHandler(handler)

    def _default_action(self):
        if self.args.expressions is not None or self.args.prompt:
            return self.executor
        return self.interactive

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        self._configure_logging()
        action = self.args.action or self._default_action()
        try:
            action()
        except KeyboardInterrupt:
            sys.exit(1)
        log.info('Exiting normally, display is %s',
                 self.keypad.display.replace('\n', ', '))
