"""
提交获取器 - 取出自上个版本标签以来的提交
"""

import logging
from typing import Optional

from release_checker.core.models import Commit
from release_checker.repo.base import RepositoryCapability
from release_checker.repo.version_tag import resolve_latest

logger = logging.getLogger(__name__)


def fetch(repo: RepositoryCapability, boundary: Optional[str] = None) -> list[Commit]:
    """
    从 HEAD 开始收集提交

    Args:
        repo: 仓库
        boundary: 边界提交哈希（不包含）；为 None 时收集全部可达提交

    Returns:
        提交列表（遍历顺序）

    Raises:
        NoCommitsError: 仓库中没有提交
        RepositoryError: 仓库读取失败
    """
    commits = [Commit.from_handle(handle) for handle in repo.walk_ancestry_from_head(boundary)]
    if boundary:
        logger.info(f"Fetched {len(commits)} commits since {boundary[:7]}")
    else:
        logger.info(f"Fetched {len(commits)} commits (no version tag)")
    return commits


def fetch_commits_since_last_version(repo: RepositoryCapability) -> list[Commit]:
    """取出最新版本标签之后的提交；没有版本标签时取出全部提交"""
    latest = resolve_latest(repo)
    return fetch(repo, latest.commit if latest else None)
