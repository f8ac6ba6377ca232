"""
sync.py

Responsibility: Make sure a local working copy of each repository exists and is current.

- Missing destination: `git clone <url> <dest>`.
- Existing destination: `git pull origin HEAD`, i.e. merge the remote's default branch.
- A failed clone leaves no partial directory behind.

No retries; the first failure is raised to the caller.
"""

from __future__ import annotations

import posixpath
import shutil
from pathlib import Path

from vanitic import commands
from vanitic.commands import CommandError, Runner
from vanitic.logging import get_logger

logger = get_logger("sync")


class SyncError(RuntimeError):
    pass


def repo_dir_name(url: str) -> str:
    """
    Last path segment of a repository URL: https://example.com/foo.git -> foo.git

    Returns "" when the URL has no segment to name a directory after.
    """
    return posixpath.basename(url.rstrip("/"))


class GitSynchronizer:
    def __init__(self, runner: Runner | None = None) -> None:
        self._runner = runner or commands.run

    def synchronize(self, url: str, dest: str | Path) -> None:
        dst = Path(dest)
        if dst.exists():
            self._pull(url, dst)
        else:
            self._clone(url, dst)

    def _pull(self, url: str, dst: Path) -> None:
        logger.info("Updating %s in %s", url, dst)
        try:
            self._runner(["git", "pull", "origin", "HEAD"], cwd=dst, capture_output=False)
        except CommandError as e:
            raise SyncError(f"Failed updating {url} in {dst}") from e

    def _clone(self, url: str, dst: Path) -> None:
        logger.info("Cloning %s into %s", url, dst)
        dst.parent.mkdir(parents=True, exist_ok=True)
        try:
            self._runner(["git", "clone", url, str(dst)], cwd=Path("."), capture_output=False)
        except CommandError as e:
            self._remove_partial(dst)
            raise SyncError(f"Failed cloning {url} into {dst}") from e

    @staticmethod
    def _remove_partial(dst: Path) -> None:
        if not dst.exists():
            return
        try:
            shutil.rmtree(dst)
        except OSError as e:
            # The clone failure is what gets raised; this one is only reported.
            logger.warning("Could not remove partial clone %s: %s", dst, e)
