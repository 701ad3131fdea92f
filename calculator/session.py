"""交互式会话 - 逐行读取表达式并输出结果或错误"""
import logging

from config.config import REPL_CONFIG, DISPLAY_CONFIG
from core import CalculatorError
from utils import format_result

logger = logging.getLogger(__name__)


class CalculatorSession:
    """
    读取-求值-打印循环。
    输入输出通过 input_func / output_func 注入，便于测试。
    """

    def __init__(self, evaluator, input_func=input, output_func=print,
                 precision=None, show_rpn=False):
        self.evaluator = evaluator
        self.input_func = input_func
        self.output_func = output_func
        self.precision = DISPLAY_CONFIG["precision"] if precision is None else precision
        self.show_rpn = show_rpn

    def is_quit(self, line):
        return line in REPL_CONFIG["quit_commands"]

    def handle_line(self, line):
        """
        处理一行输入，返回要显示的文本；空行返回 None
        """
        if not line:
            return None
        try:
            postfix = self.evaluator.to_rpn(line)
            if self.show_rpn:
                self.output_func(f"RPN: {self.evaluator.format_rpn(postfix)}")
            result = self.evaluator.rpn_evaluator.evaluate(
                postfix, strict_operators=self.evaluator.strict_operators
            )
        except CalculatorError as e:
            logger.debug(f"Expression failed: {line!r}")
            return f"{REPL_CONFIG['error_prefix']}{e}"
        return f"{REPL_CONFIG['result_prefix']}{format_result(result, self.precision)}"

    def run(self):
        for line in REPL_CONFIG["banner"]:
            self.output_func(line)

        while True:
            try:
                line = self.input_func(REPL_CONFIG["prompt"])
            except EOFError:
                break

            if self.is_quit(line):
                break

            message = self.handle_line(line)
            if message is not None:
                self.output_func(message)

        logger.info("Calculator session finished")
