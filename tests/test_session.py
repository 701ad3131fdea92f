import pytest

from calculator import CalculatorSession, ExpressionEvaluator
from config.config import REPL_CONFIG
from utils import format_result


def run_session(lines, **kwargs):
    feed = iter(lines)
    output = []

    def fake_input(prompt):
        try:
            return next(feed)
        except StopIteration:
            raise EOFError

    session = CalculatorSession(ExpressionEvaluator(), input_func=fake_input,
                                output_func=output.append, **kwargs)
    session.run()
    return output[len(REPL_CONFIG["banner"]):]


def test_banner_is_printed_first():
    feed = iter(["q"])
    output = []
    CalculatorSession(ExpressionEvaluator(), input_func=lambda prompt: next(feed),
                      output_func=output.append).run()
    assert output == REPL_CONFIG["banner"]


def test_results_and_errors_are_printed():
    assert run_session(["2+3*4", "1/0", "foo(1)"]) == [
        "Result: 14.0",
        "Error: division by zero",
        "Error: unknown function 'foo'",
    ]


@pytest.mark.parametrize("command", ["q", "quit"])
def test_quit_commands_stop_the_loop(command):
    assert run_session(["1+1", command, "2+2"]) == ["Result: 2.0"]


def test_end_of_input_stops_the_loop():
    assert run_session(["3*3"]) == ["Result: 9.0"]


def test_empty_lines_are_skipped():
    assert run_session(["", "4/2", ""]) == ["Result: 2.0"]


def test_errors_do_not_end_the_session():
    assert run_session(["sqrt(-4)", "sqrt(4)"]) == [
        "Error: square root of negative number",
        "Result: 2.0",
    ]


def test_show_rpn():
    assert run_session(["2^3^2"], show_rpn=True) == ["RPN: 2 3 2 ^ ^", "Result: 512.0"]


def test_show_rpn_on_failure():
    assert run_session(["1/0", "foo(1)"], show_rpn=True) == [
        "RPN: 1 0 /",
        "Error: division by zero",
        "Error: unknown function 'foo'",
    ]


def test_precision():
    assert run_session(["2/3"], precision=3) == ["Result: 0.667"]


def test_handle_line_returns_none_for_empty_input():
    session = CalculatorSession(ExpressionEvaluator())
    assert session.handle_line("") is None


@pytest.mark.parametrize("value, precision, text", [
    (14.0, None, "14.0"),
    (0.1 + 0.2, None, "0.30000000000000004"),
    (2 / 3, 4, "0.6667"),
    (float("inf"), 3, "inf"),
])
def test_format_result(value, precision, text):
    assert format_result(value, precision) == text
