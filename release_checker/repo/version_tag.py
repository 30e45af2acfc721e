"""
版本标签解析器 - 找出仓库中最新的语义化版本标签
"""

import logging
from typing import Optional

from release_checker.core.models import VersionTag
from release_checker.repo.base import RepositoryCapability, TagRef

logger = logging.getLogger(__name__)


def version_tag_from_reference(reference: TagRef) -> Optional[VersionTag]:
    """
    将标签引用转换为版本标签

    附注标签使用标签对象中的名称和它直接指向的提交；
    轻量标签使用引用短名称和引用的直接目标。

    Args:
        reference: 标签引用

    Returns:
        VersionTag 对象；名称不是 v<major>.<minor>.<patch> 时返回 None
    """
    if reference.is_annotated:
        name = reference.annotated_name
        commit = reference.annotated_target_commit_id
    else:
        name = reference.short_name
        commit = reference.target_commit_id

    if commit is None:
        return None
    return VersionTag.from_name(name, commit)


def resolve_latest(repo: RepositoryCapability) -> Optional[VersionTag]:
    """
    找出最新的版本标签

    不合法或无关的标签会被忽略，不会报错。

    Args:
        repo: 仓库

    Returns:
        版本最高的 VersionTag；没有版本标签时返回 None

    Raises:
        RepositoryError: 无法枚举引用
    """
    version_tags = []
    for reference in repo.list_tag_references():
        version_tag = version_tag_from_reference(reference)
        if version_tag is None:
            logger.debug(f"Ignoring non-version tag: {reference.short_name}")
            continue
        version_tags.append(version_tag)

    if not version_tags:
        logger.info("No version tags found")
        return None

    latest = max(version_tags)
    logger.info(f"Latest version tag: {latest} ({latest.commit[:7]})")
    return latest
