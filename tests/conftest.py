"""Shared fixtures."""

import pytest


class FakeRepository:
    """In-memory Repository that records the commands it receives."""

    def __init__(self, remotes: dict[str, str] | None = None):
        self.remotes = dict(remotes or {})
        self.calls: list[tuple] = []

    def init(self) -> None:
        self.calls.append(("init",))

    def add_remote(self, name: str, url: str) -> None:
        self.calls.append(("add_remote", name, url))
        self.remotes[name] = url

    def remote_url(self, name: str) -> str:
        self.calls.append(("remote_url", name))
        return self.remotes[name]

    def stage_all(self) -> None:
        self.calls.append(("stage_all",))

    def commit(self, message: str) -> None:
        self.calls.append(("commit", message))

    def rename_branch(self, name: str) -> None:
        self.calls.append(("rename_branch", name))

    def push(self, remote: str, branch: str) -> None:
        self.calls.append(("push", remote, branch))

    def pull(self, remote: str, branch: str) -> None:
        self.calls.append(("pull", remote, branch))


class CountingRemoteSource:
    """RemoteURLSource that counts how often it was asked."""

    def __init__(self, url: str):
        self.url = url
        self.asked = 0

    def remote_url(self) -> str:
        self.asked += 1
        return self.url


@pytest.fixture
def fake_repo():
    return FakeRepository()


@pytest.fixture
def remote_source():
    return CountingRemoteSource("git@example.com:me/journal.git")
