"""
toolchain.py

Responsibility: The only surface the generator uses to touch git and Go.

Tests substitute their own implementation of `Toolchain`; production uses `ShellToolchain`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from vanitic.inspector import GoInspector
from vanitic.sync import GitSynchronizer


class Toolchain(Protocol):
    def synchronize(self, url: str, dest: Path) -> None: ...

    def list_module(self, repo_dir: Path) -> str: ...

    def list_packages(self, repo_dir: Path) -> list[tuple[str, str]]: ...


class ShellToolchain:
    """Toolchain backed by the `git` and `go` executables."""

    def __init__(
        self,
        synchronizer: GitSynchronizer | None = None,
        inspector: GoInspector | None = None,
    ) -> None:
        self._synchronizer = synchronizer or GitSynchronizer()
        self._inspector = inspector or GoInspector()

    def synchronize(self, url: str, dest: Path) -> None:
        self._synchronizer.synchronize(url, dest)

    def list_module(self, repo_dir: Path) -> str:
        return self._inspector.list_module(repo_dir)

    def list_packages(self, repo_dir: Path) -> list[tuple[str, str]]:
        return self._inspector.list_packages(repo_dir)
