"""
报告器基类 - 定义报告器接口
"""

from typing import Protocol

from release_checker.pipeline import ReleaseReport


class Reporter(Protocol):
    """报告器协议"""

    def report(self, result: ReleaseReport, target: str) -> None:
        """生成报告"""
        ...
