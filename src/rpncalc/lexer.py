from functools import reduce
import operator

import regex

from .util import RPNError
from .engine import Engine


class Lexer:
    '''
    Lexer for keystroke text: one lexeme per key press on the keypad.

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    DIGIT = r'\d'
    DECIMAL = r'\.'

    assert not [operator
                for operator
                in Engine.OPERATORS
                if len(operator) != 1]
    OPERATOR = r'(?:' + r'|'.join(map(regex.escape, Engine.OPERATORS)) + r')'

    # Keys without a printable character, written as <name>.
    KEYS = {
        'enter': 'enter',
        'backspace': 'backspace',
        'delete': 'clear_current',
        'escape': 'clear_all',
    }
    KEY = r'<(?<key>' + r'|'.join(KEYS) + r')>'
    # A gap between numbers is the Enter key.
    SPACE = r'\s+'

    # All possible lexemes.
    LEXEME = r'(?<digit>' + DIGIT + r')|' \
             r'(?<decimal>' + DECIMAL + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<named>' + KEY + r')|' \
             r'(?<space>' + SPACE + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.DOTALL,
                    regex.IGNORECASE,
                    regex.VERSION1},
                   0)

    def lex(self, line):
        '''
        Take a line and return all lexemes.

        Yields the lexemes up to the first bad one, then raises.
        '''
        while line:
            match = regex.match(type(self).LEXEME, line,
                                flags=type(self).FLAGS)
            if match is None:
                break
            yield match
            line = line[len(match.group(0)):]
        if line:
            raise RPNError("Couldn't lex {0}".format(line.strip()))

    def matchedgroups(self, match):
        '''
        Return the named groups the lexeme matched.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value and key != 'named'}

    def command(self, groups):
        '''
        Engine command and arguments for a lexeme's matched groups.
        '''
        if 'digit' in groups:
            return 'digit', (int(groups['digit']),)
        elif 'decimal' in groups:
            return 'decimal_point', ()
        elif 'operator' in groups:
            return Engine.OPERATORS[groups['operator']], ()
        elif 'key' in groups:
            return type(self).KEYS[groups['key'].lower()], ()
        elif 'space' in groups:
            return 'enter', ()
        raise RPNError('No command for {0}'.format(groups))

    def commands(self, line):
        '''
        Yield (command, args) for each key press in line.
        '''
        for match in self.lex(line):
            yield self.command(self.matchedgroups(match))
