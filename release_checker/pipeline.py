"""
检查流程 - 解析版本标签、获取提交、分组、给出版本建议

流程为严格的线性管道：
1. resolve_latest 找出边界提交
2. fetch 取出边界之后的提交
3. bucket_all 按版本级别分组
4. decide 给出版本动作
"""

import logging
from dataclasses import dataclass
from typing import Optional

import semver

from release_checker.core.changes import Changes, SemanticVersionAction
from release_checker.core.models import VersionTag
from release_checker.repo.base import RepositoryCapability
from release_checker.repo.commit_fetcher import fetch
from release_checker.repo.version_tag import resolve_latest

logger = logging.getLogger(__name__)


@dataclass
class ReleaseReport:
    """
    一次检查的结果

    Attributes:
        latest_tag: 最新的版本标签（可能不存在）
        changes: 边界之后的变更分组
        action: 版本调整建议
    """
    latest_tag: Optional[VersionTag]
    changes: Changes
    action: SemanticVersionAction

    @property
    def current_version(self) -> Optional[semver.Version]:
        return self.latest_tag.version if self.latest_tag else None

    @property
    def next_version(self) -> Optional[semver.Version]:
        """建议的下一个版本；没有版本标签时为 None"""
        if self.latest_tag is None:
            return None
        return self.action.apply(self.latest_tag.version)


def analyze_repository(repo: RepositoryCapability) -> ReleaseReport:
    """
    对仓库执行完整的检查流程

    Raises:
        NoCommitsError: 仓库中没有提交
        RepositoryError: 仓库读取失败
    """
    latest_tag = resolve_latest(repo)
    commits = fetch(repo, latest_tag.commit if latest_tag else None)
    changes = Changes.from_commits(commits)
    action = changes.decide_action()
    logger.info(
        f"Classified {changes.total}/{len(commits)} commits: "
        f"major={len(changes.major)} minor={len(changes.minor)} "
        f"patch={len(changes.patch)} other={len(changes.other)} -> {action}"
    )
    return ReleaseReport(latest_tag=latest_tag, changes=changes, action=action)


def compute_changes(repo: RepositoryCapability) -> Changes:
    """取出自上个版本标签以来的变更分组"""
    return analyze_repository(repo).changes
