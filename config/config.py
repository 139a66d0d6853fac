"""配置文件"""

# 引擎参数
ENGINE_CONFIG = {
    "marker_eof": "EOF",  # 扫描结束后弹出剩余运算符
    "marker_reverse": "REVERSE",  # 中缀转前缀：反转输入并交换括号
    "marker_final": "FINAL",  # 中缀转前缀：反转后缀结果
    "absent_text": "None",  # 空栈弹出时拼接进字符串的文本
    "empty_conversion_result": "",
    "empty_evaluation_result": 0.0,
}

# 命令行参数
CLI_CONFIG = {
    "default_operation": "infixToPostfix",
    "default_expression": "A+B*C",
    "steps_path": "steps.csv",
    "results_path": "notation_results.txt",
}

# 日志
LOGGING_CONFIG = {
    "level": "INFO",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}

# 操作标识（固定集合）
OPERATION_NAMES = (
    "infixToPostfix", "infixToPrefix",
    "postfixToInfix", "postfixToPrefix",
    "prefixToInfix", "prefixToPostfix",
    "evaluatePostfix", "evaluatePrefix",
)


# 验证配置
def validate_config():
    """验证配置的合理性"""
    markers = [ENGINE_CONFIG["marker_eof"], ENGINE_CONFIG["marker_reverse"], ENGINE_CONFIG["marker_final"]]
    assert len(set(markers)) == len(markers), "标记token必须互不相同"
    assert all(len(m) > 1 for m in markers), "标记token不能与单字符token混淆"
    assert CLI_CONFIG["default_operation"] in OPERATION_NAMES, "默认操作必须是已知标识"
    assert LOGGING_CONFIG["level"] in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
    return True
