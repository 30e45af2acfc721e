"""
提交分类器 - 将提交按意图归入 major / minor / patch / other 四个分组

纯函数，无 I/O，不修改输入。
"""

from typing import Iterable, Optional

from release_checker.core.gitmoji import SEVERITY_INDEX, Gitmoji, Severity, find_intention
from release_checker.core.models import Commit


def classify_one(commit: Commit) -> Optional[Gitmoji]:
    """
    识别单个提交的意图

    Args:
        commit: 提交记录

    Returns:
        提交意图；提交信息中没有意图符号时返回 None
    """
    return find_intention(commit.message)


def group(commits: Iterable[Commit], intentions: Iterable[Gitmoji]) -> list[Commit]:
    """
    筛选意图属于 intentions 的提交（保持输入顺序）

    Args:
        commits: 提交集合
        intentions: 关注的意图

    Returns:
        命中的提交列表
    """
    wanted = frozenset(intentions)
    return [commit for commit in commits if classify_one(commit) in wanted]


def bucket_all(commits: Iterable[Commit]) -> dict[Severity, list[Commit]]:
    """
    将提交按版本级别分组

    每个提交最多出现在一个分组中；没有意图符号的提交不出现在任何分组。
    返回值总是包含四个级别的键。
    """
    buckets: dict[Severity, list[Commit]] = {severity: [] for severity in Severity}
    for commit in commits:
        intention = classify_one(commit)
        if intention is None:
            continue
        buckets[SEVERITY_INDEX[intention]].append(commit)
    return buckets
