from collections import deque, namedtuple
import logging
import operator
import sys

from .util import RPNError, divide, format_number, rejects_user_errors


log = logging.getLogger(__name__)

# Anything smaller in magnitude counts as zero for the divide guard.
EPSILON = sys.float_info.min


class _Mode:
    '''
    Edit mode that carries no data.
    '''
    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return self.name


# Digits extend the integral part.
APPEND_WHOLE = _Mode('AppendWhole')
# The current value is a finished result; the next entry pushes it first.
PUSH_NEXT = _Mode('PushNext')
# Digits extend the fractional part; scale is the place of the next digit.
AppendFractional = namedtuple('AppendFractional', ['scale'])


class Engine:
    '''
    Keypad-driven RPN calculator: an operand stack plus the value being
    typed in underneath it.

    Every command returns True if the display needs refreshing, False if
    the command was ignored. Commands never raise.
    '''

    OPERATORS = {
        '+': 'add',
        '-': 'subtract',
        '*': 'multiply',
        '/': 'divide',
    }

    COMMANDS = frozenset({
        'digit',
        'decimal_point',
        'enter',
        'clear_current',
        'clear_all',
        'backspace',
    } | set(OPERATORS.values()))

    def __init__(self):
        '''
        Create engine with an empty stack, showing 0.
        '''
        self.stack = deque()
        self.current = 0.0
        self.mode = APPEND_WHOLE

    def __str__(self):
        return self.render()

    def _pshstack(self):
        '''
        Push the current value and start a fresh whole number entry.
        '''
        log.debug('Pushing %s onto stack.', format_number(self.current))
        self.stack.append(self.current)
        self.current = 0.0
        self.mode = APPEND_WHOLE

    def _popstack(self):
        if not self.stack:
            raise RPNError('Nothing on the stack; ignoring.')
        return self.stack.pop()

    def _begin_entry(self):
        '''
        Leave PushNext, if in it, before the current value is edited.

        The only way out of PushNext other than enter.
        '''
        if self.mode is PUSH_NEXT:
            self._pshstack()

    def _result(self, value):
        self.current = value
        self.mode = PUSH_NEXT

    def _binary(self, f):
        # Whatever was entered first is the left operand.
        self._result(f(self._popstack(), self.current))

    @rejects_user_errors
    def digit(self, d):
        '''
        Type digit d (0 to 9) into the current value.
        '''
        if isinstance(d, bool) or not isinstance(d, int) or not 0 <= d <= 9:
            raise RPNError('Not a digit: {!r}'.format(d))
        log.debug('Digit pressed: %d', d)
        self._begin_entry()
        if isinstance(self.mode, AppendFractional):
            self.current += d * self.mode.scale
            self.mode = AppendFractional(self.mode.scale * 0.1)
        else:
            self.current = self.current * 10 + d

    @rejects_user_errors
    def decimal_point(self):
        '''
        Start typing the fractional part. Only one per entry.
        '''
        if isinstance(self.mode, AppendFractional):
            raise RPNError('Decimal point already entered; ignoring.')
        self._begin_entry()
        self.mode = AppendFractional(0.1)

    @rejects_user_errors
    def enter(self):
        self._pshstack()

    @rejects_user_errors
    def add(self):
        self._binary(operator.add)

    @rejects_user_errors
    def subtract(self):
        self._binary(operator.sub)

    @rejects_user_errors
    def multiply(self):
        self._binary(operator.mul)

    @rejects_user_errors
    def divide(self):
        '''
        Divide the top of the stack by the current value.

        Refuses when the top of the stack, the numerator, is zero or too
        close to it. The divisor is not checked; dividing by zero gives
        an infinity.
        '''
        if not self.stack:
            raise RPNError('Nothing on the stack; ignoring.')
        if abs(self.stack[-1]) < EPSILON:
            raise RPNError('Avoiding a divide-by-zero error.')
        self._binary(divide)

    @rejects_user_errors
    def clear_current(self):
        self.current = 0.0

    @rejects_user_errors
    def clear_all(self):
        self.current = 0.0
        self.stack.clear()

    @rejects_user_errors
    def backspace(self):
        # TODO: Undo the last digit of the current entry. Needs the typed
        # digits kept alongside current, float arithmetic can't undo them.
        raise RPNError('Backspace is not implemented; ignoring.')

    def render(self):
        '''
        Display text: the stack bottom first, one value per line, then the
        current value.
        '''
        return '\n'.join(map(format_number, [*self.stack, self.current]))
