from __future__ import annotations

from pathlib import Path

import pytest

from vanitic.sync import SyncError


class FakeToolchain:
    """In-memory stand-in for git and go, keyed by repository URL."""

    def __init__(self, repos: dict[str, tuple[str, list[tuple[str, str]]]], fail_sync: set[str] | None = None) -> None:
        self.repos = repos
        self.fail_sync = fail_sync or set()
        self.synced: list[tuple[str, Path]] = []
        self._url_by_dir: dict[Path, str] = {}

    def synchronize(self, url: str, dest: Path) -> None:
        if url in self.fail_sync:
            raise SyncError(f"Failed cloning {url} into {dest}")
        self.synced.append((url, dest))
        self._url_by_dir[dest] = url

    def list_module(self, repo_dir: Path) -> str:
        return self.repos[self._url_by_dir[repo_dir]][0]

    def list_packages(self, repo_dir: Path) -> list[tuple[str, str]]:
        return list(self.repos[self._url_by_dir[repo_dir]][1])


@pytest.fixture
def make_config(tmp_path: Path):
    """Write a repository list file and return its path."""

    def _make(*urls: str) -> Path:
        path = tmp_path / ".vanitic"
        path.write_text("".join(f"{url}\n" for url in urls), encoding="utf-8")
        return path

    return _make


@pytest.fixture
def fake_toolchain():
    """Return the FakeToolchain class so tests can build one per scenario."""
    return FakeToolchain
