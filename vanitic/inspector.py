"""
inspector.py

Responsibility: Ask the Go toolchain what a working copy contains.

- `go list -m` gives the module path.
- `go list -f "{{ .ImportPath }} {{ .Doc }}" ./...` gives one `<import-path> <doc>` line per package.

Parsing is kept separate (`parse_package_listing`) so it can be tested without a toolchain.
"""

from __future__ import annotations

from pathlib import Path

from vanitic import commands
from vanitic.commands import CommandError, Runner
from vanitic.logging import get_logger

logger = get_logger("inspector")

PACKAGE_LIST_FORMAT = "{{ .ImportPath }} {{ .Doc }}"


class InspectError(RuntimeError):
    pass


def parse_package_listing(output: str) -> list[tuple[str, str]]:
    """
    Split `go list` output into (import path, doc) pairs.

    Each line is split on the first space only; docs may contain spaces and may be empty
    (both `path` and `path ` parse to an empty doc).
    """
    text = output.strip()
    if not text:
        return []
    packages: list[tuple[str, str]] = []
    for entry in text.split("\n"):
        import_path, _sep, doc = entry.partition(" ")
        packages.append((import_path, doc))
    return packages


class GoInspector:
    def __init__(self, runner: Runner | None = None, go: str = "go") -> None:
        self._runner = runner or commands.run
        self._go = go

    def _output(self, repo_dir: str | Path, args: list[str]) -> str:
        try:
            return self._runner([self._go, *args], cwd=Path(repo_dir), capture_output=True)
        except CommandError as e:
            raise InspectError(f"Failed inspecting {repo_dir}") from e

    def list_module(self, repo_dir: str | Path) -> str:
        module = self._output(repo_dir, ["list", "-m"]).strip()
        logger.debug("Module of %s: %s", repo_dir, module)
        return module

    def list_packages(self, repo_dir: str | Path) -> list[tuple[str, str]]:
        output = self._output(repo_dir, ["list", "-f", PACKAGE_LIST_FORMAT, "./..."])
        return parse_package_listing(output)
