"""核心模块 - Token系统、词法分析、隐式乘法、调度场转换、RPN求值器和操作符"""
from .exceptions import CalculatorError, LexError, EvalError
from .token_system import (
    TokenType, Token, FUNCTION_NAMES, PRECEDENCE, RIGHT_ASSOCIATIVE, RPNValidator
)
from .lexer import tokenize
from .implicit_mul import insert_implicit_multiplication
from .shunting_yard import to_postfix
from .rpn_evaluator import RPNEvaluator
from .operators import Operators, PI

__all__ = [
    'CalculatorError', 'LexError', 'EvalError',
    'TokenType', 'Token', 'FUNCTION_NAMES', 'PRECEDENCE', 'RIGHT_ASSOCIATIVE',
    'RPNValidator', 'tokenize', 'insert_implicit_multiplication', 'to_postfix',
    'RPNEvaluator', 'Operators', 'PI'
]
