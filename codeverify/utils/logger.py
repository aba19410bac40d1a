"""
日志系统配置
提供统一的日志记录功能
"""
import logging
import sys
from pathlib import Path
from typing import Optional

from codeverify.config import settings

# ANSI 颜色码


class Colors:
    RESET = '\033[0m'
    BOLD = '\033[1m'
    RED = '\033[91m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    MAGENTA = '\033[95m'
    CYAN = '\033[96m'


LINE_FORMAT = "%(levelname)-8s | %(asctime)s | %(name)s | %(message)s"
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ColoredFormatter(logging.Formatter):
    """带颜色的日志格式化器"""

    LEVEL_COLORS = {
        logging.DEBUG: Colors.CYAN,
        logging.INFO: Colors.GREEN,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.MAGENTA + Colors.BOLD,
    }

    def format(self, record):
        color = self.LEVEL_COLORS.get(record.levelno, "")
        log_fmt = LINE_FORMAT.replace(
            "%(levelname)-8s", f"{color}%(levelname)-8s{Colors.RESET}", 1)
        formatter = logging.Formatter(log_fmt, datefmt=DATE_FORMAT)
        return formatter.format(record)


def setup_logger(
    name: str,
    level: int = logging.INFO,
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    设置并返回一个配置好的logger

    Args:
        name: logger名称
        level: 日志级别
        log_file: 日志文件路径（可选）

    Returns:
        配置好的Logger实例
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # 防止重复添加handler
    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(ColoredFormatter())
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(LINE_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

    return logger


_default_level = logging.getLevelName(settings.log_level.upper())
if not isinstance(_default_level, int):
    _default_level = logging.INFO

# 预定义的logger
app_logger = setup_logger(
    'app', level=_default_level, log_file=settings.log_file)
api_logger = setup_logger(
    'api', level=_default_level, log_file=settings.log_file)
verification_logger = setup_logger(
    'verification', level=_default_level, log_file=settings.log_file)


def get_logger(name: str) -> logging.Logger:
    """
    获取或创建logger

    Args:
        name: logger名称

    Returns:
        Logger实例
    """
    return setup_logger(name, level=_default_level, log_file=settings.log_file)
