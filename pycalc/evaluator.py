from operator import add, sub, mul

from pycalc.core import ADD, SUB, MUL, DIV, EXP, walk
from pycalc.utils import ieee_divide, ieee_power


__version__ = '0.1'

__all__ = ['evaluate', 'OPERATIONS']

# Division and power keep IEEE-754 results (inf, nan) where Python would raise.
OPERATIONS = {
    ADD: add,
    SUB: sub,
    MUL: mul,
    DIV: ieee_divide,
    EXP: ieee_power,
}


def apply_branch(branch, left, right):
    if branch.operator not in OPERATIONS:
        raise AssertionError('Unreachable: paren marker {!r} labels a branch!'.format(branch.operator))

    return OPERATIONS[branch.operator](left, right)


def evaluate(tree):
    return walk(tree, lambda leaf: leaf.value, apply_branch)
