import pytest

from pycalc.core import Leaf, Branch, TreeBuilder, build_ast, binds_tighter, ADD, SUB, MUL, DIV, EXP
from pycalc.core import LPAREN as PAREN_MARKER, RPAREN as CLOSE_MARKER, FROM_TOKEN, PRECEDENCE, ARITHMETIC
from pycalc.lexer import tokenize, lit, PLUS, TIMES, LPAREN, RPAREN
from pycalc.utils import MalformedExpression


def test_single_expr():
    assert build_ast([lit(3), PLUS, lit(2)]) == Branch(Leaf(3), Leaf(2), ADD)


def test_multiple_expr():
    assert build_ast([lit(3), PLUS, lit(2), TIMES, lit(4)]) == \
        Branch(Leaf(3), Branch(Leaf(2), Leaf(4), MUL), ADD)


def test_parens():
    assert build_ast([lit(3), TIMES, LPAREN, lit(2), PLUS, lit(4), RPAREN]) == \
        Branch(Leaf(3), Branch(Leaf(2), Leaf(4), ADD), MUL)


def test_single_literal():
    assert build_ast([lit(7)]) == Leaf(7)


def test_same_tier_is_left_associative():
    assert build_ast(tokenize('8 - 3 - 2')) == Branch(Branch(Leaf(8), Leaf(3), SUB), Leaf(2), SUB)
    assert build_ast(tokenize('8 / 4 * 2')) == Branch(Branch(Leaf(8), Leaf(4), DIV), Leaf(2), MUL)


def test_exponent_is_left_associative():
    assert build_ast(tokenize('2 ^ 3 ^ 2')) == Branch(Branch(Leaf(2), Leaf(3), EXP), Leaf(2), EXP)


def test_fold_stops_on_empty_operator_stack():
    assert build_ast(tokenize('2 * 3 + 4')) == Branch(Branch(Leaf(2), Leaf(3), MUL), Leaf(4), ADD)
    assert build_ast(tokenize('2 ^ 3 * 4 - 1')) == \
        Branch(Branch(Branch(Leaf(2), Leaf(3), EXP), Leaf(4), MUL), Leaf(1), SUB)


def test_fold_stops_at_paren_marker():
    assert build_ast(tokenize('(2 * 3 + 4)')) == Branch(Branch(Leaf(2), Leaf(3), MUL), Leaf(4), ADD)


def test_three_tiers():
    assert build_ast(tokenize('1 + 2 * 3 ^ 2')) == \
        Branch(Leaf(1), Branch(Leaf(2), Branch(Leaf(3), Leaf(2), EXP), MUL), ADD)


def test_nested_parens():
    assert build_ast(tokenize('((2))')) == Leaf(2)
    assert build_ast(tokenize('2 ^ (1 + (3 - 1))')) == \
        Branch(Leaf(2), Branch(Leaf(1), Branch(Leaf(3), Leaf(1), SUB), ADD), EXP)


@pytest.mark.parametrize('line', [
    '+',
    '^',
    '+ 3',
    '3 +',
    '3 + * 4',
    '3 )',
    '(1 + 2))',
    ')(',
    '(3',
    '((1 + 2)',
    '()',
    '3 4',
    '(1)(2)',
    '',
])
def test_malformed(line):
    with pytest.raises(MalformedExpression):
        build_ast(tokenize(line))


def test_builder_consumes_all_input():
    builder = TreeBuilder([lit(1), PLUS, lit(2)])

    builder.build_ast()

    assert len(builder.input) == 0
    assert builder.operators == []


def test_tiers():
    assert binds_tighter(MUL, ADD)
    assert binds_tighter(EXP, DIV)
    assert binds_tighter(ADD, PAREN_MARKER)
    assert not binds_tighter(SUB, ADD)
    assert not binds_tighter(ADD, MUL)
    assert not binds_tighter(EXP, EXP)


def test_branch_rejects_paren_marker():
    with pytest.raises(ValueError):
        Branch(Leaf(1), Leaf(2), PAREN_MARKER)


def test_tree_rendering():
    tree = build_ast(tokenize('3 * (2 + 4)'))

    assert str(tree) == '(3.0 * (2.0 + 4.0))'
    assert repr(tree) == 'Branch(Leaf(3.0), Branch(Leaf(2.0), Leaf(4.0), ADD), MUL)'


def test_paren_tokens_map_to_markers():
    assert FROM_TOKEN[LPAREN] is PAREN_MARKER
    assert FROM_TOKEN[RPAREN] is CLOSE_MARKER
    assert CLOSE_MARKER not in PRECEDENCE
    assert CLOSE_MARKER not in ARITHMETIC


def test_deep_tree_rendering_and_equality():
    line = '+'.join(['1'] * 5000)

    tree = build_ast(tokenize(line))

    assert str(tree).count('+') == 4999
    assert repr(tree).startswith('Branch(Branch(')
    assert tree == build_ast(tokenize(line))
    assert tree != build_ast(tokenize(line[:-1] + '2'))
    assert hash(tree) == hash(build_ast(tokenize(line)))
