import math

import numpy as np
import pytest

from core import (
    tokenize, insert_implicit_multiplication, to_postfix,
    RPNEvaluator, Operators, EvalError, Token, TokenType, PI
)


def calc(text, strict_operators=True):
    postfix = to_postfix(insert_implicit_multiplication(tokenize(text)))
    return RPNEvaluator.evaluate(postfix, strict_operators=strict_operators)


@pytest.mark.parametrize("literal", ["0", "42", "3.25", "-7", ".5", "5."])
def test_single_number_is_identity(literal):
    assert calc(literal) == float(literal)


@pytest.mark.parametrize("text, expected", [
    ("2+3*4", 14.0),
    ("2^3^2", 512.0),
    ("2(3+1)", 8.0),
    ("(3+1)2", 8.0),
    ("2sqrt(9)", 6.0),
    ("(3+1)sqrt(9)", 12.0),
    ("(3+1)(2+3)", 20.0),
    ("10/4/5", 0.5),
    ("10-4-3", 3.0),
    ("2*-3", -6.0),
    ("3 - -2", 5.0),
    ("-2^2", 4.0),
    ("sqrt(16)", 4.0),
    ("log(100)", 2.0),
    ("ln(1)", 0.0),
    ("arccos(1)", 0.0),
    ("0/5", 0.0),
])
def test_exact_results(text, expected):
    assert calc(text) == expected


@pytest.mark.parametrize("text, expected", [
    ("sind(90)", 1.0),
    ("cosd(60)", 0.5),
    ("tand(45)", 1.0),
    ("arctand(1)", 45.0),
    ("arcsend(0.5)", 30.0),
    ("arccosd(0)", 90.0),
    ("sin(0)", 0.0),
    ("arctan(1)", math.pi / 4),
    ("2^0.5", math.sqrt(2)),
])
def test_transcendental_results(text, expected):
    assert calc(text) == pytest.approx(expected, abs=1e-9)


def test_degree_conversion_uses_fixed_pi():
    assert PI == 3.14159265359
    assert calc("sind(30)") == float(np.sin(30 * PI / 180.0))
    assert calc("arcsend(1)") == float(np.arcsin(1.0)) * 180.0 / PI


def test_division_by_zero():
    with pytest.raises(EvalError, match="division by zero"):
        calc("1/0")
    with pytest.raises(EvalError, match="division by zero"):
        calc("5/(2-2)")


def test_square_root_of_negative():
    with pytest.raises(EvalError, match="square root of negative number"):
        calc("sqrt(-1)")


def test_malformed_number():
    with pytest.raises(EvalError, match="invalid number '1.2.3'"):
        calc("1.2.3")
    # 超出 double 范围
    with pytest.raises(EvalError, match="invalid number"):
        calc("9" * 400)
    with pytest.raises(EvalError, match="invalid number"):
        calc("1+-" + "9" * 400)


@pytest.mark.parametrize("text", ["+5", "-(3+2)", "2*", "*"])
def test_not_enough_operands(text):
    with pytest.raises(EvalError, match="not enough operands"):
        calc(text)


def test_function_without_operand():
    postfix = [Token(TokenType.FUNCTION, "sin")]
    with pytest.raises(EvalError, match="not enough operands for function 'sin'"):
        RPNEvaluator.evaluate(postfix)


@pytest.mark.parametrize("text", ["", "2 3", "()"])
def test_invalid_expression(text):
    with pytest.raises(EvalError, match="invalid expression"):
        calc(text)


def test_unknown_operator_strict():
    with pytest.raises(EvalError, match="unknown operator '%'"):
        calc("7%2")


def test_unknown_operator_legacy_drops_operands():
    with pytest.raises(EvalError, match="invalid expression"):
        calc("7%2", strict_operators=False)


def test_unbalanced_parens_are_tolerated():
    assert calc("(2+3") == 5.0
    assert calc("2+3)") == 5.0


def test_non_finite_results_are_returned():
    assert calc("ln(0)") == -math.inf
    assert math.isnan(calc("arcsen(2)"))
    assert math.isnan(calc("(-8)^(1/3)"))


def test_repeated_evaluation_is_stable():
    results = {calc("sind(45) * 3 + 2^0.5") for _ in range(5)}
    assert len(results) == 1


def test_operators_can_be_called_directly():
    assert Operators.sub(5.0, 3.0) == 2.0
    assert Operators.div(1.0, 4.0) == 0.25
    with pytest.raises(EvalError):
        Operators.div(1.0, 0.0)
