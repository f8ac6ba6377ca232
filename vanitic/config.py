"""
config.py

Responsibility: Hold run options and read the repository list file.

The repository list is deliberately dumb:
- One repository URL per line, in the order they should be processed.
- No comments, no trimming, no skipped lines.

The generator and CLI should treat `Options` as the single source of truth for a run.
"""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CONFIG = ".vanitic"
DEFAULT_OUTPUT = "pkg"


class ConfigError(RuntimeError):
    pass


def default_source_dir() -> str:
    return os.path.join(tempfile.gettempdir(), "vanitic")


def clean_path(value: str | Path) -> Path:
    """
    Lexically normalize a path (collapse separators, `.` and `..`) without touching the filesystem.
    """
    return Path(os.path.normpath(os.fspath(value)))


@dataclass(frozen=True)
class Options:
    """Settings for one generator run."""

    config: Path = Path(DEFAULT_CONFIG)
    source: Path = Path(default_source_dir())
    output: Path = Path(DEFAULT_OUTPUT)
    clean: bool = False

    @classmethod
    def build(
        cls,
        *,
        config: str | Path = DEFAULT_CONFIG,
        source: str | Path | None = None,
        output: str | Path = DEFAULT_OUTPUT,
        clean: bool = False,
    ) -> "Options":
        return cls(
            config=clean_path(config),
            source=clean_path(source if source is not None else default_source_dir()),
            output=clean_path(output),
            clean=bool(clean),
        )


def _strip_terminator(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def read_repo_urls(config_path: str | Path) -> list[str]:
    """
    Return every line of the config file, in file order, without its line terminator.

    A trailing newline does not produce an extra empty entry; an empty file yields `[]`.
    """
    path = Path(config_path)
    try:
        # Only "\n" splits lines; a "\r" inside a line stays part of it.
        with path.open("r", encoding="utf-8", newline="\n") as fh:
            return [_strip_terminator(line) for line in fh]
    except FileNotFoundError as e:
        raise ConfigError(f"Config file does not exist: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Failed reading config file: {path}: {e}") from e
