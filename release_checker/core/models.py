"""
数据模型定义

包含提交记录、带意图的提交记录和版本标签。
"""

import re
from dataclasses import dataclass, field
from typing import Any, Optional

import semver

from release_checker.core.gitmoji import Gitmoji, find_intention
from release_checker.exceptions import MissingIntentionError


# 短哈希长度（与 git 默认一致）
SHORT_HASH_LENGTH = 7

# 版本标签名称：v<major>.<minor>.<patch>，不允许预发布或构建元数据
VERSION_TAG_PATTERN = re.compile(r"^v\d+\.\d+\.\d+$")


@dataclass(frozen=True)
class Commit:
    """
    提交记录

    Attributes:
        message: 提交信息（原样保留）
        hash: 提交的完整十六进制哈希
    """
    message: str
    hash: str

    @property
    def short_hash(self) -> str:
        return self.hash[:SHORT_HASH_LENGTH]

    @classmethod
    def from_handle(cls, handle: Any) -> "Commit":
        """从仓库遍历得到的提交句柄（message() / id()）创建"""
        return cls(message=handle.message(), hash=handle.id())

    def __str__(self) -> str:
        return f"{self.message.rstrip()} - {self.short_hash}"


@dataclass(frozen=True)
class GitmojiCommit:
    """
    带意图的提交记录

    message 中已去掉意图符号（两种形式）及其前导空白。

    Attributes:
        message: 去掉意图符号后的提交信息
        hash: 提交哈希
        intention: 提交意图
    """
    message: str
    hash: str
    intention: Gitmoji

    @classmethod
    def from_commit(cls, commit: Commit) -> "GitmojiCommit":
        """
        解析提交的意图

        Raises:
            MissingIntentionError: 提交信息中没有意图符号
        """
        intention = find_intention(commit.message)
        if intention is None:
            raise MissingIntentionError(
                f"Commit {commit.short_hash} does not contain a valid gitmoji intention"
            )
        message = (
            commit.message
            .replace(intention.glyph, "")
            .replace(intention.shortcode, "")
            .lstrip()
        )
        return cls(message=message, hash=commit.hash, intention=intention)

    @property
    def short_hash(self) -> str:
        return self.hash[:SHORT_HASH_LENGTH]

    def __str__(self) -> str:
        return f"{self.intention} {self.message.rstrip()} ({self.short_hash})"


@dataclass(frozen=True, order=True)
class VersionTag:
    """
    版本标签

    排序先比较语义化版本，再比较提交哈希。

    Attributes:
        version: 从标签名解析出的语义化版本
        commit: 标签指向的提交哈希
        name: 标签名（不参与比较）
    """
    version: semver.Version
    commit: str
    name: str = field(default="", compare=False)

    @staticmethod
    def is_valid_name(name: str) -> bool:
        return VERSION_TAG_PATTERN.fullmatch(name) is not None

    @classmethod
    def from_name(cls, name: Optional[str], commit: str) -> Optional["VersionTag"]:
        """
        从标签名创建版本标签

        Args:
            name: 标签短名称，例如 ``v1.2.3``
            commit: 标签指向的提交哈希

        Returns:
            VersionTag 对象；名称不合法时返回 None
        """
        if not name or not cls.is_valid_name(name):
            return None
        # 按整数解析，v01.2.3 与 v1.2.3 视为同一版本
        major, minor, patch = (int(part) for part in name[1:].split("."))
        return cls(version=semver.Version(major, minor, patch), commit=commit, name=name)

    def __str__(self) -> str:
        return f"v{self.version}"
