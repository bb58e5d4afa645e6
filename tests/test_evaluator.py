import pytest

from treewalk import DivisionByZero, Environment, ExpressionEvaluator, evaluate
from treewalk.ast import divide, ident, minus, number, plus, times
from treewalk.types import INT_MAX, INT_MIN


def test_unbound_identifier_is_zero():
    assert evaluate(ident('nope')) == 0
    assert evaluate(ident('nope'), Environment({'other': 4})) == 0


def test_identifier_reads_environment():
    env = Environment({'x': 6})
    assert evaluate(times('x', 7), env) == 42


def test_number_is_returned_unchanged():
    assert evaluate(number(-17)) == -17


def test_arithmetic():
    assert evaluate(plus(2, 3)) == 5
    assert evaluate(minus(2, 3)) == -1
    assert evaluate(times(-4, 3)) == -12
    assert evaluate(divide(7, 2)) == 3


@pytest.mark.parametrize('a,b,expected', [(-7, 2, -3), (7, -2, -3), (-7, -2, 3), (1, 3, 0)])
def test_division_truncates_toward_zero(a, b, expected):
    assert evaluate(divide(a, b)) == expected


def test_division_by_zero_fails():
    with pytest.raises(DivisionByZero) as excinfo:
        evaluate(divide(5, 0))
    assert excinfo.value.err.name == 'DivisionByZero'


def test_division_by_unbound_identifier_fails():
    with pytest.raises(DivisionByZero):
        evaluate(divide(5, 'missing'))


def test_both_operands_are_evaluated():
    # the left operand alone would decide the product
    with pytest.raises(DivisionByZero):
        evaluate(times(0, divide(1, 0)))


def test_operands_are_evaluated_left_to_right():
    seen = []

    class Tracing(ExpressionEvaluator):
        def visit_id(self, node):
            seen.append(node.name)
            return super().visit_id(node)

    Tracing(Environment()).evaluate(plus(minus('a', 'b'), times('c', 'd')))
    assert seen == ['a', 'b', 'c', 'd']


def test_results_wrap_to_32_bits():
    assert evaluate(plus(INT_MAX, 1)) == INT_MIN
    assert evaluate(minus(INT_MIN, 1)) == INT_MAX
    assert evaluate(times(65536, 65536)) == 0
    assert evaluate(divide(INT_MIN, -1)) == INT_MIN


def test_evaluator_does_not_write_environment():
    env = Environment({'x': 1})
    evaluate(plus('x', 'y'), env)
    assert env.to_dict() == {'x': 1}
