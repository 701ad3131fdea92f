"""配置文件"""

# 计算核心参数
CALCULATOR_CONFIG = {
    "strict_operators": True,  # False: 未知操作符静默丢弃操作数（旧行为）
}

# 交互循环参数
REPL_CONFIG = {
    "prompt": "Enter expression ('q' to quit): ",
    "quit_commands": ("q", "quit"),
    "result_prefix": "Result: ",
    "error_prefix": "Error: ",
    "banner": [
        "Welcome to the calculator!",
        "Please use the following operands ('d' stands for degrees):",
        "+, -, *, /, ^,sqrt(), sin(), cos(), tan(), sind(), cosd(), tand(), log(), ln()",
        "arcsen(), arccos(), arctan(), arcsend(), arccosd(), arctand()",
        "",
    ],
}

# 结果显示
DISPLAY_CONFIG = {
    "precision": None,  # None 使用 Python 默认的 str(float)；整数 N 为 N 位有效数字
}

# 日志
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert isinstance(CALCULATOR_CONFIG["strict_operators"], bool), "strict_operators 必须是布尔值"
    assert REPL_CONFIG["quit_commands"], "至少需要一个退出命令"
    precision = DISPLAY_CONFIG["precision"]
    assert precision is None or (isinstance(precision, int) and precision > 0), "precision 必须为正整数或None"
    assert LOGGING_CONFIG["level"] in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"), "未知的日志级别"
