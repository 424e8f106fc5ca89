import logging

from collections import deque

from pycalc import lexer
from pycalc.utils import MalformedExpression, format_number


__version__ = '0.1'

__all__ = ['Operator', 'Leaf', 'Branch', 'TreeBuilder', 'build_ast', 'walk', 'PRECEDENCE', 'ARITHMETIC',
           'LPAREN', 'RPAREN', 'ADD', 'SUB', 'MUL', 'DIV', 'EXP']

logger = logging.getLogger(__name__)


# Operators


class Operator:
    __slots__ = ['name', 'symbol']

    def __init__(self, name, symbol):
        self.name = name
        self.symbol = symbol

    def __repr__(self):
        return self.name

    def __str__(self):
        return self.symbol


LPAREN = Operator('LPAREN', '(')
RPAREN = Operator('RPAREN', ')')
ADD = Operator('ADD', '+')
SUB = Operator('SUB', '-')
MUL = Operator('MUL', '*')
DIV = Operator('DIV', '/')
EXP = Operator('EXP', '^')

ARITHMETIC = frozenset([ADD, SUB, MUL, DIV, EXP])

# Higher tier binds tighter; operators of one tier associate to the left.
# The open-paren marker sits below every tier so nothing folds across it.
PRECEDENCE = {
    LPAREN: 0,
    ADD: 1,
    SUB: 1,
    MUL: 2,
    DIV: 2,
    EXP: 3,
}

FROM_TOKEN = {
    lexer.LPAREN: LPAREN,
    lexer.RPAREN: RPAREN,
    lexer.PLUS: ADD,
    lexer.MINUS: SUB,
    lexer.TIMES: MUL,
    lexer.DIVIDE: DIV,
    lexer.POWER: EXP,
}


def binds_tighter(incoming, top):
    return PRECEDENCE[incoming] > PRECEDENCE[top]


# Expression tree


class Leaf:
    __slots__ = ['value']

    def __init__(self, value):
        self.value = float(value)

    def __eq__(self, other):
        if not isinstance(other, Leaf):
            return NotImplemented

        return self.value == other.value

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return 'Leaf({})'.format(format_number(self.value))

    def __str__(self):
        return format_number(self.value)


class Branch:
    __slots__ = ['left', 'right', 'operator']

    def __init__(self, left, right, operator):
        if operator not in ARITHMETIC:
            raise ValueError('Branch needs an arithmetic operator, got {!r} instead!'.format(operator))

        self.left = left
        self.right = right
        self.operator = operator

    def __eq__(self, other):
        if not isinstance(other, Branch):
            return NotImplemented

        pairs = [(self, other)]

        while pairs:
            a, b = pairs.pop()

            if type(a) is Branch and type(b) is Branch:
                if a.operator is not b.operator:
                    return False

                pairs.append((a.left, b.left))
                pairs.append((a.right, b.right))

            elif a != b:
                return False

        return True

    def __hash__(self):
        return walk(self, hash, lambda node, left, right: hash((left, right, node.operator.name)))

    def __repr__(self):
        return walk(self, repr, lambda node, left, right: 'Branch({}, {}, {!r})'.format(left, right, node.operator))

    def __str__(self):
        return walk(self, str, lambda node, left, right: '({} {} {})'.format(left, node.operator, right))


def walk(tree, on_leaf, on_branch):
    """Fold a tree bottom-up without recursion.

    `on_leaf(leaf)` gives a leaf's result, `on_branch(branch, left, right)`
    combines the results of a branch's children. Nodes wait on `pending`
    until both children are done; finished results wait on `values`.
    """
    pending = [(tree, False)]
    values = []

    while pending:
        node, expanded = pending.pop()

        if type(node) is Leaf:
            values.append(on_leaf(node))

        elif type(node) is not Branch:
            raise TypeError('Can\'t walk {}, expected Leaf or Branch!'.format(type(node)))

        elif expanded:
            right = values.pop()
            left = values.pop()

            values.append(on_branch(node, left, right))

        else:
            pending.append((node, True))
            pending.append((node.right, False))
            pending.append((node.left, False))

    return values.pop()


# Tree builder


class TreeBuilder:
    """Turns a token sequence into one expression tree with two stacks.

    Completed subtrees wait on `output`, pending operators (and open-paren
    markers) on `operators`. A fold pops the top operator and the top two
    subtrees and pushes the Branch made of them. Any fold short of operands,
    a stray paren, or leftovers at the end raise MalformedExpression.
    """

    __slots__ = ['input', 'output', 'operators']

    def __init__(self, tokens):
        self.input = deque(tokens)
        self.output = []
        self.operators = []

    def build_ast(self):
        while self.input:
            self.step(self.input.popleft())

        while self.operators:
            if self.operators[-1] is LPAREN:
                raise MalformedExpression('Unmatched "(" in expression!')

            self.fold()

        if len(self.output) != 1:
            raise MalformedExpression('Expected a single expression, got {} instead!'.format(len(self.output)))

        return self.output.pop()

    def step(self, token):
        if token.is_literal:
            self.output.append(Leaf(token.value))

            return

        if token not in FROM_TOKEN:
            raise MalformedExpression('Unexpected token {!r}!'.format(token))

        op = FROM_TOKEN[token]

        if op is LPAREN:
            self.operators.append(op)

        elif op is RPAREN:
            self.close_paren()

        else:
            self.push_operator(op)

    def close_paren(self):
        while self.operators and self.operators[-1] is not LPAREN:
            self.fold()

        if not self.operators:
            raise MalformedExpression('Unmatched ")" in expression!')

        self.operators.pop()

    def push_operator(self, op):
        while self.operators and not binds_tighter(op, self.operators[-1]):
            self.fold()

        self.operators.append(op)

    def fold(self):
        if len(self.output) < 2:
            raise MalformedExpression('Operator "{}" is missing an operand!'.format(self.operators[-1]))

        right = self.output.pop()
        left = self.output.pop()

        self.output.append(Branch(left, right, self.operators.pop()))


def build_ast(tokens):
    tree = TreeBuilder(tokens).build_ast()

    logger.debug('Built tree %s', tree)

    return tree
