"""CLI工具模块，包含CLI命令行接口的辅助函数"""

import sys
from functools import wraps
from typing import Any, Callable, Optional, TypeVar

from loguru import logger

from .constants import ERROR_MESSAGES, EXIT_CODES
from .managers.config_manager import ConfigError
from .managers.image.base import ImageError, ImageSourceError, RootNotFoundError

F = TypeVar('F', bound=Callable[..., Any])


class UsageError(Exception):
    """命令行参数使用错误"""
    pass


def select_mode(dot: bool, tree: bool, short: bool) -> str:
    """
    根据互斥选项确定输出模式

    Returns:
        str: "dot"、"tree" 或 "short"

    Raises:
        UsageError: 未指定或同时指定多个模式时抛出
    """
    selected = [name for name, flag in (("dot", dot), ("tree", tree), ("short", short)) if flag]
    if not selected:
        raise UsageError(ERROR_MESSAGES["mode_required"])
    if len(selected) > 1:
        raise UsageError(ERROR_MESSAGES["mode_conflict"])
    return selected[0]


def stdin_is_piped() -> bool:
    """标准输入是否来自管道或重定向"""
    return not sys.stdin.isatty()


def read_snapshot(input_file: Optional[str]) -> Optional[str]:
    """
    读取JSON快照文本

    Args:
        input_file: 快照文件路径，"-" 表示标准输入；为None时仅在标准输入不是终端时读取

    Returns:
        Optional[str]: 快照文本，需要从Docker引擎获取时返回None

    Raises:
        ImageSourceError: 读取失败时抛出
    """
    if input_file is None and not stdin_is_piped():
        return None

    try:
        if input_file is None or input_file == "-":
            logger.debug("从标准输入读取镜像列表")
            return sys.stdin.read()

        logger.debug(f"从文件读取镜像列表: {input_file}")
        with open(input_file, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ImageSourceError(f"读取输入失败: {e}") from e


def handle_errors(func: F) -> F:
    """
    将命令执行中的错误转换为错误日志和退出码的装饰器

    Args:
        func: 被装饰的函数

    Returns:
        Callable: 装饰后的函数
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (UsageError, RootNotFoundError) as e:
            logger.error(str(e))
            sys.exit(EXIT_CODES["usage"])
        except (ImageError, ConfigError) as e:
            logger.error(str(e))
            sys.exit(EXIT_CODES["error"])
        except RecursionError:
            logger.error("镜像父子关系存在循环引用，无法生成镜像树")
            sys.exit(EXIT_CODES["error"])

    return wrapper  # type: ignore[return-value]
