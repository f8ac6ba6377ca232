"""
commands.py

Responsibility: Run external commands (git, go) synchronously.

- stderr is never captured; it goes straight to the process stderr for diagnostics.
- stdout is either streamed to the process stdout or captured and returned.
- There is no timeout: a hung command hangs the run.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable, Sequence

from vanitic.logging import get_logger

logger = get_logger("commands")

# (cmd, *, cwd, capture_output) -> captured stdout, or "" when streaming
Runner = Callable[..., str]


class CommandError(RuntimeError):
    def __init__(self, cmd: Sequence[str], cwd: Path, returncode: int | None = None) -> None:
        self.cmd = list(cmd)
        self.cwd = cwd
        self.returncode = returncode
        if returncode is None:
            detail = "could not be started"
        else:
            detail = f"exited with status {returncode}"
        super().__init__(f"Command {detail}: {' '.join(self.cmd)} (in {cwd})")


def run(cmd: Sequence[str], *, cwd: str | Path, capture_output: bool = False) -> str:
    """
    Run a command in `cwd`, raising CommandError on failure.
    """
    cwd_path = Path(cwd)
    logger.debug("Running %s in %s", " ".join(cmd), cwd_path)
    try:
        completed = subprocess.run(
            list(cmd),
            cwd=str(cwd_path),
            check=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            stdout=subprocess.PIPE if capture_output else None,
        )
    except subprocess.CalledProcessError as e:
        raise CommandError(cmd, cwd_path, e.returncode) from e
    except OSError as e:
        raise CommandError(cmd, cwd_path) from e
    if capture_output:
        return completed.stdout
    return ""
