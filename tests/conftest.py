"""Shared pytest fixtures: real git repositories (GitPython) and an in-memory fake."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import pytest
from git import Repo

from release_checker.exceptions import NoCommitsError


# ── Real repositories ──


class RepoBuilder:
    """Builds a throwaway git repository with one empty commit per message."""

    def __init__(self, path: Path):
        self.path = path
        self.repo = Repo.init(path)
        with self.repo.config_writer() as config:
            config.set_value("user", "name", "name")
            config.set_value("user", "email", "email@example.com")

    def commit(self, message: str):
        return self.repo.index.commit(message)

    def commits(self, messages: list[str]) -> list:
        return [self.commit(message) for message in messages]

    def annotated_tag(self, name: str, commit) -> None:
        self.repo.create_tag(name, ref=commit, message=f"release {name}")

    def lightweight_tag(self, name: str, commit) -> None:
        self.repo.create_tag(name, ref=commit)


@pytest.fixture
def repo_builder(tmp_path):
    def _build(messages: Optional[list[str]] = None) -> RepoBuilder:
        builder = RepoBuilder(tmp_path / "repo")
        if messages:
            builder.commits(messages)
        return builder

    return _build


# ── In-memory repository ──


@dataclass(frozen=True)
class FakeTagRef:
    short_name: str
    target_commit_id: Optional[str]
    is_annotated: bool = False
    annotated_name: Optional[str] = None
    annotated_target_commit_id: Optional[str] = None


@dataclass(frozen=True)
class FakeCommitHandle:
    text: str
    sha: str

    def message(self) -> str:
        return self.text

    def id(self) -> str:
        return self.sha


@dataclass
class FakeRepository:
    """Linear history, newest commit first (the order a walk from HEAD yields)."""

    history: list[FakeCommitHandle] = field(default_factory=list)
    tags: list[FakeTagRef] = field(default_factory=list)

    def list_tag_references(self) -> list[FakeTagRef]:
        return list(self.tags)

    def walk_ancestry_from_head(self, stop_at: Optional[str] = None):
        if not self.history:
            raise NoCommitsError()
        for handle in self.history:
            if handle.sha == stop_at:
                return
            yield handle

    def sha_of(self, message: str) -> str:
        return next(h.sha for h in self.history if h.text == message)

    def tag_lightweight(self, name: str, message: str) -> None:
        self.tags.append(FakeTagRef(short_name=name, target_commit_id=self.sha_of(message)))

    def tag_annotated(self, name: str, message: str) -> None:
        self.tags.append(
            FakeTagRef(
                short_name=name,
                target_commit_id=f"tagobject-{name}",
                is_annotated=True,
                annotated_name=name,
                annotated_target_commit_id=self.sha_of(message),
            )
        )


@pytest.fixture
def fake_repo():
    def _build(messages: Optional[list[str]] = None) -> FakeRepository:
        # oldest first in, newest first out
        history = [
            FakeCommitHandle(text=message, sha=f"{index:040x}")
            for index, message in enumerate(messages or [], start=1)
        ]
        return FakeRepository(history=list(reversed(history)))

    return _build
