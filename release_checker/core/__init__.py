"""
Core Layer - 核心层

包含 Gitmoji 意图目录、提交分类器和版本决策。
"""

from release_checker.core.gitmoji import (
    Gitmoji,
    Emoji,
    Severity,
    SYMBOL_INDEX,
    SEVERITY_INDEX,
    find_intention,
    gitmojis_for,
)
from release_checker.core.models import (
    Commit,
    GitmojiCommit,
    VersionTag,
    MissingIntentionError,
)
from release_checker.core.classifier import (
    classify_one,
    group,
    bucket_all,
)
from release_checker.core.changes import (
    Changes,
    SemanticVersionAction,
    decide,
)

__all__ = [
    # gitmoji
    "Gitmoji",
    "Emoji",
    "Severity",
    "SYMBOL_INDEX",
    "SEVERITY_INDEX",
    "find_intention",
    "gitmojis_for",
    # models
    "Commit",
    "GitmojiCommit",
    "VersionTag",
    "MissingIntentionError",
    # classifier
    "classify_one",
    "group",
    "bucket_all",
    # changes
    "Changes",
    "SemanticVersionAction",
    "decide",
]
