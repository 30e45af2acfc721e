"""
日志配置 - 使用 Rich 输出到 stderr
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "release_checker"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    配置包级日志

    Args:
        verbose: True 时输出 DEBUG 级别日志，否则只输出 WARNING 及以上

    Returns:
        包级 logger
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # 重复调用时替换旧的 handler
    logger.handlers.clear()
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=verbose,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.propagate = False
    return logger
