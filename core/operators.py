"""core/operators.py"""
import numpy as np

from core.exceptions import EvalError

# 固定的π字面量，角度换算必须使用此值以保持结果逐位一致
PI = 3.14159265359


class Operators:
    """所有操作符与函数的静态方法集合，输入输出均为 float"""

    # 二元操作符========================================
    @staticmethod
    def add(left, right):
        return float(np.float64(left) + np.float64(right))

    @staticmethod
    def sub(left, right):
        return float(np.float64(left) - np.float64(right))

    @staticmethod
    def mul(left, right):
        return float(np.float64(left) * np.float64(right))

    @staticmethod
    def div(left, right):
        if right == 0:
            raise EvalError("division by zero")
        return float(np.float64(left) / np.float64(right))

    @staticmethod
    def pow(left, right):
        """实数幂；负底数配小数指数得到 nan"""
        with np.errstate(all='ignore'):
            return float(np.power(np.float64(left), np.float64(right)))

    # 一元函数====================
    @staticmethod
    def sqrt(operand):
        if operand < 0:
            raise EvalError("square root of negative number")
        return float(np.sqrt(operand))

    @staticmethod
    def sin(operand):
        return float(np.sin(operand))

    @staticmethod
    def cos(operand):
        return float(np.cos(operand))

    @staticmethod
    def tan(operand):
        return float(np.tan(operand))

    @staticmethod
    def sind(operand):
        return float(np.sin(operand * PI / 180.0))

    @staticmethod
    def cosd(operand):
        return float(np.cos(operand * PI / 180.0))

    @staticmethod
    def tand(operand):
        return float(np.tan(operand * PI / 180.0))

    @staticmethod
    def log(operand):
        """常用对数（以10为底）"""
        with np.errstate(all='ignore'):
            return float(np.log10(operand))

    @staticmethod
    def ln(operand):
        """自然对数"""
        with np.errstate(all='ignore'):
            return float(np.log(operand))

    @staticmethod
    def arcsen(operand):
        with np.errstate(invalid='ignore'):
            return float(np.arcsin(operand))

    @staticmethod
    def arccos(operand):
        with np.errstate(invalid='ignore'):
            return float(np.arccos(operand))

    @staticmethod
    def arctan(operand):
        return float(np.arctan(operand))

    @staticmethod
    def arcsend(operand):
        with np.errstate(invalid='ignore'):
            return float(np.arcsin(operand)) * 180.0 / PI

    @staticmethod
    def arccosd(operand):
        with np.errstate(invalid='ignore'):
            return float(np.arccos(operand)) * 180.0 / PI

    @staticmethod
    def arctand(operand):
        return float(np.arctan(operand)) * 180.0 / PI
