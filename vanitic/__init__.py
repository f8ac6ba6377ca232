"""
vanitic package

This package implements vanitic, a static generator for Go vanity import pages.

Key responsibilities are split across modules:
- `config.py`: run options and the repository list file
- `commands.py`: synchronous external command execution
- `sync.py`: git clone / pull of each repository into a staging directory
- `inspector.py`: `go list` invocations and output parsing
- `toolchain.py`: the narrow interface the generator talks to
- `renderer.py`: deterministic HTML page rendering into the output tree
- `generator.py`: orchestration (clean -> read config -> sync -> inspect -> render)
- `cli.py`: CLI entrypoint
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
