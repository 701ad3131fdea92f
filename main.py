"""主程序入口 - 交互式计算器 / 命令行单次求值"""
import argparse
import logging
import sys

import pandas as pd

from config.config import *
from calculator import ExpressionEvaluator, CalculatorSession
from utils import format_result

logger = logging.getLogger(__name__)


def run_expressions(evaluator, expressions, precision=None, show_rpn=False):
    """
    对命令行给出的表达式逐个求值并打印
    Returns:
        失败的表达式数量
    """
    results = evaluator.evaluate_many(expressions)

    for row in results.itertuples(index=False):
        # 后缀形式已生成即打印，失败的表达式也不例外
        if show_rpn and not pd.isna(row.rpn):
            print(f"RPN: {row.rpn}")
        if pd.isna(row.error):
            print(f"{REPL_CONFIG['result_prefix']}{format_result(row.result, precision)}")
        else:
            print(f"{REPL_CONFIG['error_prefix']}{row.error}")

    return int(results['error'].notna().sum())


def positive_int(value):
    """argparse 类型：正整数"""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def main(args):
    validate_config()

    strict = CALCULATOR_CONFIG["strict_operators"] and not args.legacy_operators
    evaluator = ExpressionEvaluator(strict_operators=strict)
    precision = args.precision if args.precision is not None else DISPLAY_CONFIG["precision"]

    if args.expr:
        logger.info(f"Evaluating {len(args.expr)} expressions from the command line")
        failed = run_expressions(evaluator, args.expr, precision=precision, show_rpn=args.show_rpn)
        return 1 if failed else 0

    session = CalculatorSession(evaluator, precision=precision, show_rpn=args.show_rpn)
    session.run()
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Arithmetic / trigonometric line calculator")

    parser.add_argument(
        "--expr",
        type=str,
        action="append",
        help="Evaluate this expression and exit (may be given more than once)"
    )
    parser.add_argument(
        "--show_rpn",
        action="store_true",
        help="Print the postfix (RPN) form of each expression"
    )
    parser.add_argument(
        "--precision",
        type=positive_int,
        default=None,
        help="Number of significant digits in printed results"
    )
    parser.add_argument(
        "--legacy_operators",
        action="store_true",
        help="Silently drop operands of unknown operator symbols instead of failing"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: %(default)s)"
    )
    return parser


def cli():
    args = build_parser().parse_args()

    # 设置日志
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOGGING_CONFIG["format"]
    )
    sys.exit(main(args))


if __name__ == "__main__":
    cli()
