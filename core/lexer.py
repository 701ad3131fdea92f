"""词法分析 - 将输入文本切分为Token序列"""
import logging

from core.exceptions import LexError
from core.token_system import (
    Token, TokenType, LEFT_PAREN, RIGHT_PAREN, is_function
)

logger = logging.getLogger(__name__)

# 与 C 的 isspace 一致，仅 ASCII 空白
WHITESPACE = ' \t\n\r\v\f'


def _is_number_char(c):
    return (c.isascii() and c.isdigit()) or c == '.'


def _is_name_start(c):
    return c.isascii() and c.isalpha()


def _is_name_char(c):
    return c.isascii() and c.isalnum()


def _read_while(text, start, predicate):
    """从 start 开始读取满足 predicate 的最长片段，返回 (片段, 结束位置)"""
    end = start
    while end < len(text) and predicate(text[end]):
        end += 1
    return text[start:end], end


def _is_unary_position(tokens):
    # 序列开头、操作符或左括号之后的 +/- 视为一元
    if not tokens:
        return True
    return tokens[-1].type in (TokenType.OPERATOR, TokenType.LEFT_PAREN)


def tokenize(text):
    """
    Args:
        text: 用户输入的一行表达式
    Returns:
        Token列表
    Raises:
        LexError: 遇到白名单之外的标识符
    """
    tokens = []
    i = 0

    while i < len(text):
        c = text[i]

        if c in WHITESPACE:
            i += 1

        elif _is_number_char(c):
            # 不检查小数点个数，1.2.3 留给求值阶段报错
            literal, i = _read_while(text, i, _is_number_char)
            tokens.append(Token(TokenType.NUMBER, literal))

        elif _is_name_start(c):
            name, i = _read_while(text, i, _is_name_char)
            if not is_function(name):
                raise LexError(f"unknown function '{name}'")
            tokens.append(Token(TokenType.FUNCTION, name))

        elif c == '(':
            tokens.append(LEFT_PAREN)
            i += 1

        elif c == ')':
            tokens.append(RIGHT_PAREN)
            i += 1

        elif c in '+-':
            unary = _is_unary_position(tokens)
            if unary and c == '-' and i + 1 < len(text) and _is_number_char(text[i + 1]):
                # 一元负号与紧随的数字合并为负数
                literal, i = _read_while(text, i + 1, _is_number_char)
                tokens.append(Token(TokenType.NUMBER, '-' + literal))
            else:
                # 一元正号不合并，作为普通操作符保留
                tokens.append(Token(TokenType.OPERATOR, c))
                i += 1

        else:
            # * / ^ 以及任何其他单字符符号
            tokens.append(Token(TokenType.OPERATOR, c))
            i += 1

    logger.debug(f"Tokens: {tokens}")
    return tokens
