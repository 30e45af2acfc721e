"""
Repository Layer - 仓库层

负责打开仓库、解析版本标签和获取提交历史。
"""

from release_checker.repo.base import RepositoryCapability, TagRef, CommitHandle
from release_checker.repo.git_repository import (
    open_repository,
    GitRepository,
    GitTagRef,
    GitCommitHandle,
)
from release_checker.repo.version_tag import resolve_latest, version_tag_from_reference
from release_checker.repo.commit_fetcher import fetch, fetch_commits_since_last_version

__all__ = [
    # base
    "RepositoryCapability",
    "TagRef",
    "CommitHandle",
    # git_repository
    "open_repository",
    "GitRepository",
    "GitTagRef",
    "GitCommitHandle",
    # version_tag
    "resolve_latest",
    "version_tag_from_reference",
    # commit_fetcher
    "fetch",
    "fetch_commits_since_last_version",
]
