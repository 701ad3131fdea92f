"""RPN表达式求值器 - 调用统一的Operators类"""
import numpy as np
import logging

from core.exceptions import EvalError
from core.token_system import TokenType, BINARY_OPERATORS
from core.operators import Operators

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估后缀Token序列的值"""

    @staticmethod
    def _parse_number(token):
        try:
            value = float(token.text)
        except ValueError:
            raise EvalError(f"invalid number '{token.text}'") from None
        # 超出 double 范围的字面量同样视为非法
        if not np.isfinite(value):
            raise EvalError(f"invalid number '{token.text}'")
        return value

    @staticmethod
    def evaluate(token_sequence, strict_operators=True):
        """
        Args:
            token_sequence: 后缀Token序列
            strict_operators: 为True时未知操作符抛出EvalError；
                为False时弹出两个操作数但不压入结果（旧行为）
        Returns:
            float 结果
        Raises:
            EvalError: 操作数不足、除零、负数开方、非法数值、栈中剩余元素数不为1
        """
        stack = []

        with np.errstate(all='ignore'):  # 溢出/nan 按 IEEE 语义保留，不告警
            for token in token_sequence:

                if token.type == TokenType.NUMBER:
                    stack.append(RPNEvaluator._parse_number(token))

                # ================== 二元操作符处理 ==================
                elif token.type == TokenType.OPERATOR:
                    if len(stack) < 2:
                        raise EvalError(f"not enough operands for operator '{token.text}'")
                    right = stack.pop()
                    left = stack.pop()

                    method_name = BINARY_OPERATORS.get(token.text)
                    if method_name is None:
                        if strict_operators:
                            raise EvalError(f"unknown operator '{token.text}'")
                        logger.warning(f"Unknown operator '{token.text}' dropped its operands")
                        continue
                    stack.append(getattr(Operators, method_name)(left, right))

                # ================== 函数处理 ==================
                elif token.type == TokenType.FUNCTION:
                    if not stack:
                        raise EvalError(f"not enough operands for function '{token.text}'")
                    operand = stack.pop()
                    stack.append(getattr(Operators, token.text)(operand))

                # 未闭合的左括号会出现在后缀序列中，直接跳过

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise EvalError("invalid expression")
        return stack[0]
