"""utils/formatting.py"""
import math


def format_result(value, precision=None):
    """结果转文本；precision 为 None 时使用 Python 默认的 float 文本"""
    if precision is None or not math.isfinite(value):
        return str(value)
    return f"{value:.{precision}g}"
