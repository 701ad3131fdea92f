"""中缀 -> 后缀（调度场算法）"""
import logging

from core.token_system import TokenType, get_precedence, is_right_associative

logger = logging.getLogger(__name__)


def _should_pop(top, op):
    """栈顶操作符是否应在 op 入栈前弹出"""
    if top.type != TokenType.OPERATOR:
        return False
    top_prec = get_precedence(top.text)
    op_prec = get_precedence(op.text)
    return top_prec > op_prec or (top_prec == op_prec and not is_right_associative(op.text))


def to_postfix(tokens):
    """
    将中缀Token序列转换为后缀（逆波兰）序列。
    括号不匹配时不报错：多余的右括号忽略，未闭合的左括号原样输出。
    """
    output = []
    stack = []

    for token in tokens:
        if token.type == TokenType.NUMBER:
            output.append(token)

        elif token.type in (TokenType.FUNCTION, TokenType.LEFT_PAREN):
            stack.append(token)

        elif token.type == TokenType.OPERATOR:
            while stack and _should_pop(stack[-1], token):
                output.append(stack.pop())
            stack.append(token)

        elif token.type == TokenType.RIGHT_PAREN:
            while stack and stack[-1].type != TokenType.LEFT_PAREN:
                output.append(stack.pop())
            if stack:
                stack.pop()  # 丢弃左括号
            # 函数紧跟在其括号参数之后输出
            if stack and stack[-1].type == TokenType.FUNCTION:
                output.append(stack.pop())

    while stack:
        output.append(stack.pop())

    logger.debug(f"Postfix: {' '.join(t.text for t in output)}")
    return output
