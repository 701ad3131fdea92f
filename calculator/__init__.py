"""计算器模块 - 表达式求值门面和交互会话"""
from .evaluator import ExpressionEvaluator
from .session import CalculatorSession

__all__ = ['ExpressionEvaluator', 'CalculatorSession']
