"""
generator.py

Responsibility: Run the whole pipeline for one set of Options.

High-level flow:
1) (Optional) remove the output directory, then make sure it exists
2) Read repository URLs from the config file
3) For each repository, in order: synchronize -> module page -> one page per package

The first error aborts the run. Pages written before it stay on disk.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from pathlib import Path

from vanitic.config import ConfigError, Options, read_repo_urls
from vanitic.inspector import InspectError
from vanitic.logging import get_logger
from vanitic.renderer import Package, PageRenderer
from vanitic.sync import repo_dir_name
from vanitic.toolchain import ShellToolchain, Toolchain

logger = get_logger("generator")


@dataclass
class GenerateResult:
    repositories: int = 0
    pages: list[Path] = field(default_factory=list)


def _prepare_output(output: Path, *, clean: bool) -> None:
    if clean and output.exists():
        logger.info("Removing %s", output)
        shutil.rmtree(output)
    output.mkdir(parents=True, exist_ok=True)


def _add_page(result: GenerateResult, page: Path) -> None:
    if page not in result.pages:
        result.pages.append(page)


def _check_within_module(module: str, import_path: str) -> None:
    if import_path != module and not import_path.startswith(module + "/"):
        raise InspectError(f"Package {import_path} is not inside module {module}")


def generate(
    options: Options,
    *,
    toolchain: Toolchain | None = None,
    renderer: PageRenderer | None = None,
) -> GenerateResult:
    toolchain = toolchain or ShellToolchain()
    renderer = renderer or PageRenderer()
    result = GenerateResult()

    _prepare_output(options.output, clean=options.clean)
    repo_urls = read_repo_urls(options.config)

    for lineno, repo_url in enumerate(repo_urls, start=1):
        if not repo_url:
            raise ConfigError(f"{options.config}:{lineno}: empty repository URL")

        name = repo_dir_name(repo_url)
        if name in ("", ".", ".."):
            raise ConfigError(f"{options.config}:{lineno}: no repository name in {repo_url!r}")
        repo = options.source / name
        toolchain.synchronize(repo_url, repo)

        module = toolchain.list_module(repo)
        root = Package(source=repo_url, module=module, import_path=module)
        _add_page(result, renderer.write(root, options.output))

        for import_path, doc in toolchain.list_packages(repo):
            _check_within_module(module, import_path)
            pkg = Package(source=repo_url, module=module, import_path=import_path, description=doc)
            # The root package usually shows up again in the listing; its page is rewritten, not recounted.
            _add_page(result, renderer.write(pkg, options.output))

        result.repositories += 1
        logger.info("Generated pages for %s (%s)", module, repo_url)

    return result
