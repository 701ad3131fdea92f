"""core/token_system.py"""
from enum import Enum


class TokenType(Enum):
    NUMBER = "number"  # 数值字面量
    OPERATOR = "operator"  # + - * / ^ 及其他单字符符号
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"
    FUNCTION = "function"  # 白名单中的函数名


class Token:
    """不可变的Token值：类型 + 原始文本"""

    __slots__ = ('_type', '_text')

    def __init__(self, token_type, text):
        object.__setattr__(self, '_type', token_type)
        object.__setattr__(self, '_text', text)

    @property
    def type(self):
        return self._type

    @property
    def text(self):
        return self._text

    def __setattr__(self, key, value):
        raise AttributeError("Token is immutable")

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self._type == other._type and self._text == other._text

    def __hash__(self):
        return hash((self._type, self._text))

    def __repr__(self):
        return f"Token({self._type.name}, {self._text!r})"


# 函数白名单（区分大小写）；d 后缀表示角度制
FUNCTION_NAMES = frozenset([
    'sqrt',
    'sin', 'cos', 'tan',
    'sind', 'cosd', 'tand',
    'log', 'ln',
    'arcsen', 'arccos', 'arctan',
    'arcsend', 'arccosd', 'arctand',
])

# 操作符优先级，未知符号为0
PRECEDENCE = {
    '^': 3,
    '*': 2,
    '/': 2,
    '+': 1,
    '-': 1,
}

RIGHT_ASSOCIATIVE = frozenset(['^'])

# 二元操作符 -> Operators 方法名
BINARY_OPERATORS = {
    '+': 'add',
    '-': 'sub',
    '*': 'mul',
    '/': 'div',
    '^': 'pow',
}

# 词法阶段直接生成的固定Token
LEFT_PAREN = Token(TokenType.LEFT_PAREN, '(')
RIGHT_PAREN = Token(TokenType.RIGHT_PAREN, ')')
IMPLICIT_MUL = Token(TokenType.OPERATOR, '*')


def is_function(name):
    return name in FUNCTION_NAMES


def get_precedence(op):
    return PRECEDENCE.get(op, 0)


def is_right_associative(op):
    return op in RIGHT_ASSOCIATIVE


class RPNValidator:
    @staticmethod
    def calculate_stack_size(token_sequence):
        """
        计算后缀序列求值后操作数栈中的元素数量（不做数值计算）。
        出现下溢时立即返回 -1。
        """
        stack_size = 0
        for token in token_sequence:
            if token.type == TokenType.NUMBER:
                stack_size += 1
            elif token.type == TokenType.OPERATOR:
                # 二元操作：弹出2个，压入1个
                if stack_size < 2:
                    return -1
                stack_size -= 1
            elif token.type == TokenType.FUNCTION:
                if stack_size < 1:
                    return -1
            # 括号不影响栈
        return stack_size

    @staticmethod
    def can_terminate(token_sequence):
        """检查后缀序列是否恰好归约为一个值"""
        if not token_sequence:
            return False
        return RPNValidator.calculate_stack_size(token_sequence) == 1
