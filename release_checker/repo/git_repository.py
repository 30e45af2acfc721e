"""
Git 仓库适配器 - 基于 GitPython 实现仓库能力协议

支持：
1. 打开本地仓库（可向上查找 .git 目录）
2. 枚举附注标签和轻量标签
3. 从 HEAD 遍历提交历史
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union

from git import GitCommandError, InvalidGitRepositoryError, NoSuchPathError, Repo
from git.exc import BadName, BadObject, GitError

from release_checker.exceptions import NoCommitsError, RepositoryError, RepositoryNotFoundError

logger = logging.getLogger(__name__)


# ============================================================
# 数据模型
# ============================================================

@dataclass(frozen=True)
class GitTagRef:
    """
    标签引用快照

    Attributes:
        short_name: 引用短名称（refs/tags/ 之后的部分）
        target_commit_id: 引用的直接目标哈希
        is_annotated: 是否为附注标签
        annotated_name: 标签对象中的名称
        annotated_target_commit_id: 标签对象指向的对象哈希
    """
    short_name: str
    target_commit_id: Optional[str]
    is_annotated: bool = False
    annotated_name: Optional[str] = None
    annotated_target_commit_id: Optional[str] = None


class GitCommitHandle:
    """GitPython Commit 的轻量包装"""

    def __init__(self, commit):
        self._commit = commit

    def message(self) -> str:
        message = self._commit.message
        if isinstance(message, bytes):
            # 提交编码无法识别时 GitPython 返回原始字节
            message = message.decode("utf-8", errors="replace")
        return message

    def id(self) -> str:
        return self._commit.hexsha

    def __repr__(self) -> str:
        return f"GitCommitHandle({self._commit.hexsha[:7]})"


# ============================================================
# 仓库适配器
# ============================================================

class GitRepository:
    """基于 GitPython 的只读仓库"""

    def __init__(self, repo: Repo):
        self.repo = repo

    @property
    def path(self) -> Path:
        return Path(self.repo.working_tree_dir or self.repo.git_dir)

    def list_tag_references(self) -> list[GitTagRef]:
        """
        列出全部标签引用

        单个标签无法解析（目标对象缺失）或最终不指向提交时跳过该标签。

        Raises:
            RepositoryError: 无法枚举引用
        """
        try:
            tag_references = list(self.repo.tags)
        except (GitError, OSError) as e:
            raise RepositoryError(f"Failed to list tag references: {e}") from e

        snapshots = []
        for reference in tag_references:
            try:
                snapshots.append(self._snapshot(reference))
            except (ValueError, BadName, BadObject) as e:
                logger.debug(f"Skipping unresolvable tag {reference.path}: {e}")
        return snapshots

    @staticmethod
    def _snapshot(reference) -> GitTagRef:
        """
        生成标签快照

        附注标签逐层剥离到最终对象（标签也可以指向另一个标签）。

        Raises:
            ValueError: 最终目标不是提交（例如指向树对象）
        """
        target = reference.object
        if target.type == "tag":
            peeled = target.object
            while peeled.type == "tag":
                peeled = peeled.object
            if peeled.type != "commit":
                raise ValueError(f"tag points to a {peeled.type}, not a commit")
            return GitTagRef(
                short_name=reference.name,
                target_commit_id=target.hexsha,
                is_annotated=True,
                annotated_name=target.tag,
                annotated_target_commit_id=peeled.hexsha,
            )
        if target.type != "commit":
            raise ValueError(f"tag points to a {target.type}, not a commit")
        return GitTagRef(
            short_name=reference.name,
            target_commit_id=target.hexsha,
        )

    def walk_ancestry_from_head(self, stop_at: Optional[str] = None) -> Iterator[GitCommitHandle]:
        """
        从 HEAD 遍历提交（git rev-list 默认顺序）

        stop_at 不为空时，stop_at 本身及其全部祖先都不会出现。

        Raises:
            NoCommitsError: 仓库中没有提交
            RepositoryError: 遍历失败
        """
        if not self.repo.head.is_valid():
            raise NoCommitsError(f"Repository at {self.path} has no commits (HEAD is unresolvable)")

        rev = f"{stop_at}..HEAD" if stop_at else "HEAD"
        try:
            for commit in self.repo.iter_commits(rev):
                yield GitCommitHandle(commit)
        except (GitCommandError, ValueError) as e:
            raise RepositoryError(f"Failed to walk commit history ({rev}): {e}") from e


# ============================================================
# 仓库加载函数
# ============================================================

def open_repository(
    path: Union[str, Path] = ".",
    search_parent_directories: bool = True,
) -> GitRepository:
    """
    打开本地 git 仓库

    Args:
        path: 仓库路径（或其子目录）
        search_parent_directories: 是否向上查找 .git 目录

    Returns:
        GitRepository 对象

    Raises:
        RepositoryNotFoundError: 路径不存在或不是 git 仓库
    """
    repo_path = Path(path).resolve()
    try:
        repo = Repo(repo_path, search_parent_directories=search_parent_directories)
    except (InvalidGitRepositoryError, NoSuchPathError) as e:
        raise RepositoryNotFoundError(str(repo_path)) from e
    logger.debug(f"Opened repository at {repo.git_dir}")
    return GitRepository(repo)
