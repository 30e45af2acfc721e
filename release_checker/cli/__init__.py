"""
CLI Layer - 命令行接口层

提供命令行入口。
"""

from release_checker.cli.app import app, check, gitmojis, version

__all__ = [
    "app",
    "check",
    "gitmojis",
    "version",
]
