"""计算器异常类型"""


class CalculatorError(ValueError):
    """所有输入相关错误的基类"""


class LexError(CalculatorError):
    """词法阶段错误：未知的函数名"""


class EvalError(CalculatorError):
    """求值阶段错误：操作数不足、除零、负数开方、非法数值、栈残留"""
