"""
Release-Checker - 根据 gitmoji 提交信息给出语义化版本建议
"""

__version__ = "0.1.0"

from release_checker.core import (
    Changes,
    Commit,
    Gitmoji,
    SemanticVersionAction,
    Severity,
    VersionTag,
)
from release_checker.exceptions import (
    ReleaseCheckerError,
    RepositoryError,
    RepositoryNotFoundError,
    NoCommitsError,
)
from release_checker.pipeline import ReleaseReport, analyze_repository, compute_changes
from release_checker.repo import open_repository

__all__ = [
    "__version__",
    "Changes",
    "Commit",
    "Gitmoji",
    "SemanticVersionAction",
    "Severity",
    "VersionTag",
    "ReleaseCheckerError",
    "RepositoryError",
    "RepositoryNotFoundError",
    "NoCommitsError",
    "ReleaseReport",
    "analyze_repository",
    "compute_changes",
    "open_repository",
]
