"""日志配置模块"""

import logging
import os
import sys
from typing import List, Optional

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_LEVEL_ENV = "STRING_TOOLS_LOG_LEVEL"

def _default_level() -> int:
    """从环境变量读取默认日志级别，无效值回退到 INFO"""
    level_name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.INFO

def setup_logger(
    name: str = "string_tools",
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    设置并返回一个配置好的logger

    Args:
        name: logger名称
        level: 日志级别，未指定时读取 STRING_TOOLS_LOG_LEVEL
        format_string: 日志格式字符串
        log_file: 日志文件路径（可选）

    Returns:
        配置好的logger实例
    """
    if level is None:
        level = _default_level()

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # 重复配置时关闭旧处理器，避免日志重复输出
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
