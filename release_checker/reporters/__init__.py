"""
Reporters Layer - 报告层

包含 Rich 终端报告器和 JSON 报告器。
"""

from release_checker.reporters.base import Reporter
from release_checker.reporters.rich_reporter import RichReporter
from release_checker.reporters.json_reporter import JsonReporter

__all__ = [
    "Reporter",
    "RichReporter",
    "JsonReporter",
]
