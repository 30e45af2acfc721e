"""
仓库能力接口 - 核心逻辑对版本控制系统的全部依赖

真实实现见 git_repository.GitRepository；测试可以替换为内存实现。
"""

from typing import Iterable, Optional, Protocol


class TagRef(Protocol):
    """标签引用"""

    @property
    def is_annotated(self) -> bool:
        """引用指向标签对象（附注标签）而不是直接指向提交"""
        ...

    @property
    def short_name(self) -> str:
        """引用短名称，例如 ``v1.0.0``"""
        ...

    @property
    def target_commit_id(self) -> Optional[str]:
        """引用的直接目标（附注标签时为标签对象的哈希）"""
        ...

    @property
    def annotated_name(self) -> Optional[str]:
        """标签对象中记录的名称（仅附注标签）"""
        ...

    @property
    def annotated_target_commit_id(self) -> Optional[str]:
        """标签对象指向的提交哈希（仅附注标签）"""
        ...


class CommitHandle(Protocol):
    """遍历得到的提交"""

    def message(self) -> str:
        ...

    def id(self) -> str:
        ...


class RepositoryCapability(Protocol):
    """仓库能力协议"""

    def list_tag_references(self) -> Iterable[TagRef]:
        """
        列出全部标签引用

        Raises:
            RepositoryError: 无法读取引用
        """
        ...

    def walk_ancestry_from_head(self, stop_at: Optional[str] = None) -> Iterable[CommitHandle]:
        """
        从 HEAD 开始遍历祖先提交，遇到 stop_at 时停止（不包含 stop_at）

        Raises:
            NoCommitsError: HEAD 无法解析
            RepositoryError: 仓库读取失败
        """
        ...
