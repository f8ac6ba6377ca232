"""
cli.py

Responsibility: CLI entrypoint for vanitic.

High-level flow (single command):
1) Parse flags -> `Options`
2) Configure logging
3) Run the generator

Errors are not caught here: they end the process with a traceback and a non-zero status.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from vanitic.config import DEFAULT_CONFIG, DEFAULT_OUTPUT, Options, default_source_dir
from vanitic.generator import generate
from vanitic.logging import configure_logging, get_logger

logger = get_logger("cli")


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="vanitic", description="vanitic - Go vanity import page generator")
    p.add_argument("-c", "--config", default=DEFAULT_CONFIG, help=f"Configuration file path (default: {DEFAULT_CONFIG})")
    p.add_argument(
        "-src",
        "--src",
        dest="source",
        default=default_source_dir(),
        help="Directory where packages source code live",
    )
    p.add_argument(
        "-out",
        "--out",
        dest="output",
        default=DEFAULT_OUTPUT,
        help=f"Directory where Go packages HTML files will be written (default: {DEFAULT_OUTPUT})",
    )
    p.add_argument("-clean", "--clean", action="store_true", help="Remove output directory before generating files")
    p.add_argument("-v", "--verbose", action="store_true", help="Increase log verbosity")
    p.add_argument("-log", "--log-file", dest="log_file", type=Path, default=None, help="Also write log messages to this file")
    return p


def options_from_args(args: argparse.Namespace) -> Options:
    return Options.build(config=args.config, source=args.source, output=args.output, clean=args.clean)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    options = options_from_args(args)
    result = generate(options)
    logger.info("Wrote %d pages for %d repositories into %s", len(result.pages), result.repositories, options.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
