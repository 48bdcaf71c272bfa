"""Docker镜像层级可视化工具包"""

import sys

# 导入loguru并配置logger
from loguru import logger

LOG_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"


def configure_logging(level: str = "INFO") -> None:
    """重新配置日志输出级别"""
    # 移除默认处理器
    logger.remove()
    # 添加标准错误输出处理器，标准输出只用于渲染结果
    logger.add(
        sink=lambda msg: print(msg, end="", file=sys.stderr),
        format=LOG_FORMAT,
        colorize=True,
        level=level,
    )


configure_logging()

__version__ = "0.1.0"

# 导入其他模块
from .cli import app, main

__all__ = [
    "logger",
    "configure_logging",
    "app",
    "main",
]
