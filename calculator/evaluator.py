import numpy as np
import pandas as pd
import logging
from typing import Iterable, List

from config.config import CALCULATOR_CONFIG
from core import (
    CalculatorError, Token, TokenType, RPNEvaluator, RPNValidator,
    tokenize, insert_implicit_multiplication, to_postfix
)
from core.token_system import BINARY_OPERATORS

logger = logging.getLogger(__name__)


class ExpressionEvaluator:

    def __init__(self, strict_operators=None):
        if strict_operators is None:
            strict_operators = CALCULATOR_CONFIG["strict_operators"]
        self.strict_operators = strict_operators
        self.rpn_evaluator = RPNEvaluator

    def parse_tokens(self, expression: str) -> List[Token]:
        """词法分析 + 隐式乘法插入"""
        return insert_implicit_multiplication(tokenize(expression))

    def to_rpn(self, expression: str) -> List[Token]:
        return to_postfix(self.parse_tokens(expression))

    @staticmethod
    def format_rpn(token_sequence) -> str:
        return ' '.join(token.text for token in token_sequence)

    def calculate(self, expression: str) -> float:
        """
        完整流水线：tokenize -> 隐式乘法 -> 后缀 -> 求值
        Raises:
            LexError / EvalError
        """
        postfix = self.to_rpn(expression)
        return self.rpn_evaluator.evaluate(postfix, strict_operators=self.strict_operators)

    def evaluate(self, expression: str) -> float:
        """
        与 calculate 相同，但失败时记录日志并返回 NaN
        """
        try:
            return self.calculate(expression)
        except CalculatorError as e:
            logger.error(f"Error evaluating expression '{expression[:50]}': {str(e)}")
            return np.nan

    def is_valid(self, expression: str) -> bool:
        """只检查结构（栈平衡），不做数值计算；严格模式下未知操作符视为无效"""
        try:
            postfix = self.to_rpn(expression)
        except CalculatorError:
            return False
        if self.strict_operators and any(
                token.type == TokenType.OPERATOR and token.text not in BINARY_OPERATORS
                for token in postfix):
            return False
        return RPNValidator.can_terminate(postfix)

    def evaluate_many(self, expressions: Iterable[str]) -> pd.DataFrame:
        """
        批量求值
        Returns:
            DataFrame，列为 expression / rpn / result / error；
            失败行 result 为 NaN，词法失败时 rpn 为 None
        """
        rows = []
        for expression in expressions:
            row = {'expression': expression, 'rpn': None, 'result': np.nan, 'error': None}
            try:
                postfix = self.to_rpn(expression)
                row['rpn'] = self.format_rpn(postfix)
                row['result'] = self.rpn_evaluator.evaluate(
                    postfix, strict_operators=self.strict_operators
                )
            except CalculatorError as e:
                logger.warning(f"Failed expression '{expression[:50]}': {e}")
                row['error'] = str(e)
            rows.append(row)

        df = pd.DataFrame(rows, columns=['expression', 'rpn', 'result', 'error'])
        df['result'] = df['result'].astype(float)
        logger.info(f"Evaluated {len(df)} expressions, {df['error'].notna().sum()} failed")
        return df
