"""隐式乘法插入：2(3+1)、2sqrt(9)、(3+1)2、(3+1)sqrt(9)、(3+1)(2+3)"""
from core.token_system import TokenType, IMPLICIT_MUL

# (当前Token类型, 下一个Token类型) 之间需要插入 *
IMPLICIT_MUL_PAIRS = frozenset([
    (TokenType.NUMBER, TokenType.LEFT_PAREN),
    (TokenType.NUMBER, TokenType.FUNCTION),
    (TokenType.RIGHT_PAREN, TokenType.NUMBER),
    (TokenType.RIGHT_PAREN, TokenType.FUNCTION),
    (TokenType.RIGHT_PAREN, TokenType.LEFT_PAREN),
])


def insert_implicit_multiplication(tokens):
    result = []
    for current, following in zip(tokens, tokens[1:]):
        result.append(current)
        if (current.type, following.type) in IMPLICIT_MUL_PAIRS:
            result.append(IMPLICIT_MUL)
    if tokens:
        result.append(tokens[-1])
    return result
