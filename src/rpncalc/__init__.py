'''
RPN calculator keypad.

A four function Reverse Polish Notation calculator, driven one key press at
a time, like the pocket kind: type a number, press Enter to push it, type
another, press an operator. The result can be reused straight away, typing
a new number pushes it.

Runs as a full screen terminal keypad, or reads key presses as text (from
the command line, a prompt, or a pipe).
'''

from .cli import CLI
from .engine import Engine
from .lexer import Lexer
from .shell import Keypad


__all__ = 'Engine', 'Keypad', 'Lexer', 'CLI'
