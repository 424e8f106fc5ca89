import logging

from pycalc.utils import CalcError, SyntaxFault, MalformedExpression
from pycalc.lexer import Token, Lexer, tokenize, lit
from pycalc.core import Operator, Leaf, Branch, TreeBuilder, build_ast
from pycalc.evaluator import evaluate


__version__ = '0.1'

__all__ = ['CalcError', 'SyntaxFault', 'MalformedExpression', 'Token', 'Lexer', 'tokenize', 'lit',
           'Operator', 'Leaf', 'Branch', 'TreeBuilder', 'build_ast', 'evaluate', 'calculate', 'is_valid']

logger = logging.getLogger(__name__)


def calculate(line):
    """Evaluate one line of arithmetic: text -> tokens -> tree -> value.

    Raises SyntaxFault or MalformedExpression (both CalcError) for a bad line.
    """
    value = evaluate(build_ast(tokenize(line)))

    logger.debug('%r = %r', line, value)

    return value


def is_valid(line):
    try:
        build_ast(tokenize(line))

        return True

    except CalcError:
        return False
