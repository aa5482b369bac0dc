from decimal import Decimal
from functools import wraps
import logging
import math


log = logging.getLogger(__name__)


class RPNError(Exception):
    pass


def rejects_user_errors(f):
    '''
    Decorator that turns a command's RPNError into a warning.

    The command reports True if it ran to completion, False if it was
    rejected. Anything other than an RPNError propagates.
    '''
    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            f(*args, **kwargs)
        except RPNError as e:
            log.warning('%s: %s', f.__name__, e.args[0])
            return False
        return True
    return wrapper


def divide(num, denom):
    '''
    Float division, IEEE style: a zero divisor gives a signed infinity.
    '''
    try:
        return num / denom
    except ZeroDivisionError:
        if num == 0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, denom)


def format_number(number):
    '''
    Plain decimal representation of a float, as shown on the display.

    Shortest digits that read back as the same float, spelt out without
    exponent notation. Whole numbers lose their trailing ".0".
    '''
    if math.isnan(number):
        return 'NaN'
    if math.isinf(number):
        return 'inf' if number > 0 else '-inf'
    text = format(Decimal(repr(number)), 'f')
    if text.endswith('.0'):
        return text[:-2]
    return text
