"""
JSON 报告器 - 输出 JSON 格式报告
"""

import json
import sys
from typing import TextIO

from release_checker.pipeline import ReleaseReport


class JsonReporter:
    """JSON 报告器"""

    def __init__(self, output: TextIO | None = None):
        self.output = output or sys.stdout

    def report(self, result: ReleaseReport, target: str) -> None:
        """生成 JSON 格式报告"""
        latest_tag = None
        if result.latest_tag:
            latest_tag = {
                "name": str(result.latest_tag),
                "version": str(result.latest_tag.version),
                "commit": result.latest_tag.commit,
            }

        report_data = {
            "target": target,
            "latest_tag": latest_tag,
            "changes": result.changes.as_dict(),
            "action": str(result.action),
            "next_version": str(result.next_version) if result.next_version is not None else None,
            "summary": {
                severity: len(commits)
                for severity, commits in result.changes.as_dict().items()
            },
        }

        json_str = json.dumps(report_data, indent=2, ensure_ascii=False)
        print(json_str, file=self.output)
