"""
版本决策 - 根据分组结果给出语义化版本的调整建议

优先级严格为 major > minor > patch > keep，other 分组只用于展示。
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Collection, Iterable, Mapping

import semver

from release_checker.core.classifier import bucket_all
from release_checker.core.gitmoji import Severity
from release_checker.core.models import Commit, GitmojiCommit


class SemanticVersionAction(Enum):
    """语义化版本调整动作"""
    INCREMENT_MAJOR = "increment major version"
    INCREMENT_MINOR = "increment minor version"
    INCREMENT_PATCH = "increment patch version"
    KEEP = "keep version"

    def __str__(self) -> str:
        return self.value

    def apply(self, version: semver.Version) -> semver.Version:
        """
        计算建议的下一个版本

        Args:
            version: 当前版本

        Returns:
            调整后的版本；KEEP 返回原版本
        """
        if self is SemanticVersionAction.INCREMENT_MAJOR:
            return version.bump_major()
        if self is SemanticVersionAction.INCREMENT_MINOR:
            return version.bump_minor()
        if self is SemanticVersionAction.INCREMENT_PATCH:
            return version.bump_patch()
        return version


def decide(buckets: Mapping[Severity, Collection[Commit]]) -> SemanticVersionAction:
    """
    根据分组决定版本动作

    只要 major 分组非空就是 INCREMENT_MAJOR，与其他分组的数量无关；
    依次类推。缺失的分组视为空。
    """
    if buckets.get(Severity.MAJOR):
        return SemanticVersionAction.INCREMENT_MAJOR
    if buckets.get(Severity.MINOR):
        return SemanticVersionAction.INCREMENT_MINOR
    if buckets.get(Severity.PATCH):
        return SemanticVersionAction.INCREMENT_PATCH
    return SemanticVersionAction.KEEP


@dataclass(eq=False)
class Changes:
    """
    仓库中自上个版本标签以来的变更

    相等比较按分组做集合比较，与提交顺序无关。

    Attributes:
        major: 破坏性变更
        minor: 新功能
        patch: 修复与改进
        other: 不影响版本的变更
    """
    major: list[Commit] = field(default_factory=list)
    minor: list[Commit] = field(default_factory=list)
    patch: list[Commit] = field(default_factory=list)
    other: list[Commit] = field(default_factory=list)

    @classmethod
    def from_commits(cls, commits: Iterable[Commit]) -> "Changes":
        """对提交集合分组"""
        buckets = bucket_all(commits)
        return cls(
            major=buckets[Severity.MAJOR],
            minor=buckets[Severity.MINOR],
            patch=buckets[Severity.PATCH],
            other=buckets[Severity.OTHER],
        )

    def bucket(self, severity: Severity) -> list[Commit]:
        return getattr(self, severity.value)

    def buckets(self) -> dict[Severity, list[Commit]]:
        return {severity: self.bucket(severity) for severity in Severity}

    @property
    def total(self) -> int:
        return sum(len(commits) for commits in self.buckets().values())

    @property
    def is_empty(self) -> bool:
        return self.total == 0

    def decide_action(self) -> SemanticVersionAction:
        """给出语义化版本的调整建议"""
        return decide(self.buckets())

    def as_strings(self, severity: Severity) -> list[str]:
        """某个分组中每个提交的展示字符串"""
        return [str(commit) for commit in self.bucket(severity)]

    def gitmoji_commits(self, severity: Severity) -> list[GitmojiCommit]:
        """某个分组中去掉意图符号后的提交（分组内的提交都带有意图）"""
        return [GitmojiCommit.from_commit(commit) for commit in self.bucket(severity)]

    def as_dict(self) -> dict[str, Any]:
        """序列化为字典（用于 JSON 报告）"""
        return {
            severity.value: [
                {"message": commit.message.rstrip(), "hash": commit.hash}
                for commit in self.bucket(severity)
            ]
            for severity in Severity
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Changes):
            return NotImplemented
        return all(
            set(self.bucket(severity)) == set(other.bucket(severity))
            for severity in Severity
        )

    def __str__(self) -> str:
        sections = []
        for severity in Severity:
            sections.append(f"{severity.value}:\n\t" + "\n\t".join(self.as_strings(severity)))
        return "\n".join(sections)
