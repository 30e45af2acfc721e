"""Tests for fetching the commits since the last version tag."""

from __future__ import annotations

import pytest

from release_checker.exceptions import NoCommitsError, RepositoryError
from release_checker.repo.commit_fetcher import fetch, fetch_commits_since_last_version
from release_checker.repo.git_repository import GitRepository

TAGGED_HISTORY = [
    ":tada: initial release",
    ":sparkles: new feature",
    ":boom: everything is broken",
    ":memo: add some documentation",
    ":recycle: refactor the code base",
    ":rocket: to the moon",
]


def messages(commits) -> set[str]:
    return {commit.message for commit in commits}


# ── In-memory repository ──


class TestFetchFake:
    def test_all_commits_without_boundary(self, fake_repo):
        repo = fake_repo(["commit 1", "commit 2", "commit 3"])
        assert messages(fetch(repo)) == {"commit 1", "commit 2", "commit 3"}

    def test_boundary_is_exclusive(self, fake_repo):
        repo = fake_repo(["c1", "c2", "c3", "c4"])
        assert [c.message for c in fetch(repo, repo.sha_of("c2"))] == ["c4", "c3"]

    def test_boundary_at_head_gives_nothing(self, fake_repo):
        repo = fake_repo(["c1", "c2"])
        assert fetch(repo, repo.sha_of("c2")) == []

    def test_empty_history(self, fake_repo):
        with pytest.raises(NoCommitsError):
            fetch(fake_repo())

    def test_scenario_latest_tag_is_boundary(self, fake_repo):
        repo = fake_repo(["c1", "c2", "c3", "c4"])
        repo.tag_annotated("v1.0.0", "c1")
        repo.tag_annotated("v2.0.0", "c3")
        assert [c.message for c in fetch_commits_since_last_version(repo)] == ["c4"]


# ── Real repositories ──


class TestFetchGit:
    def test_one_commit_without_tags(self, repo_builder):
        builder = repo_builder(["initial commit"])
        assert messages(fetch_commits_since_last_version(GitRepository(builder.repo))) == {"initial commit"}

    def test_multiple_commits_without_tags(self, repo_builder):
        builder = repo_builder(["commit 1", "commit 2", "commit 3"])
        assert messages(fetch_commits_since_last_version(GitRepository(builder.repo))) == {
            "commit 1",
            "commit 2",
            "commit 3",
        }

    def test_hash_and_message_are_copied(self, repo_builder):
        builder = repo_builder()
        commit = builder.commit(":tada: initial commit\n\nbody text\n")
        (result,) = fetch(GitRepository(builder.repo))
        assert result.hash == commit.hexsha
        assert result.message == ":tada: initial commit\n\nbody text\n"

    def test_empty_repository(self, repo_builder):
        builder = repo_builder()
        with pytest.raises(NoCommitsError):
            fetch_commits_since_last_version(GitRepository(builder.repo))

    def test_until_the_last_annotated_version_tag(self, repo_builder):
        builder = repo_builder()
        commits = builder.commits(TAGGED_HISTORY)
        builder.annotated_tag("v1.0.0", commits[0])
        builder.annotated_tag("v1.1.0", commits[1])
        builder.annotated_tag("v2.0.0", commits[2])

        result = fetch_commits_since_last_version(GitRepository(builder.repo))
        assert messages(result) == set(TAGGED_HISTORY[3:])

    def test_until_lightweight_tag(self, repo_builder):
        builder = repo_builder()
        commits = builder.commits(TAGGED_HISTORY)
        builder.lightweight_tag("v1.0.0", commits[2])

        result = fetch_commits_since_last_version(GitRepository(builder.repo))
        assert messages(result) == set(TAGGED_HISTORY[3:])

    def test_fetch_until_commit(self, repo_builder):
        builder = repo_builder()
        commits = builder.commits(TAGGED_HISTORY)

        result = fetch(GitRepository(builder.repo), commits[2].hexsha)
        assert messages(result) == set(TAGGED_HISTORY[3:])

    def test_unknown_boundary_is_a_repository_error(self, repo_builder):
        builder = repo_builder(["c1"])
        with pytest.raises(RepositoryError):
            fetch(GitRepository(builder.repo), "f" * 40)

    def test_walk_is_deterministic(self, repo_builder):
        builder = repo_builder(TAGGED_HISTORY)
        repo = GitRepository(builder.repo)
        assert fetch(repo) == fetch(repo)
