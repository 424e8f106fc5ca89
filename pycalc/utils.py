import math


__version__ = '0.1'


# Faults raised while turning a line into a tree.

class CalcError(Exception):
    pass


class SyntaxFault(CalcError):
    def __init__(self, message, position=None, text=None):
        super(SyntaxFault, self).__init__(message)

        self.position = position
        self.text = text


class MalformedExpression(CalcError):
    pass


# Functions to help the evaluator.

def is_odd_integer(x):
    return math.isfinite(x) and x.is_integer() and x % 2 == 1


def ieee_divide(a, b):
    if b != 0:
        return a / b

    if a == 0 or math.isnan(a):
        return math.nan

    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def ieee_power(base, exponent):
    try:
        return math.pow(base, exponent)

    except OverflowError:
        if base < 0 and is_odd_integer(exponent):
            return -math.inf

        return math.inf

    except ValueError:
        # Zero to a negative power is a pole, anything else is outside the real domain.
        if base == 0:
            return math.copysign(math.inf, base) if is_odd_integer(exponent) else math.inf

        return math.nan


# Functions used to render trees.

def format_number(value):
    return repr(float(value))
