"""
renderer.py

Responsibility: Deterministically render one HTML page per import path into an output directory.

Rules:
- The page template is compiled once, when the renderer is built; a broken template fails there.
- Pages land at `<output>/<import-path>/index.html`, creating directories as needed.
- Existing pages are overwritten without comparison.
- Values are HTML-escaped; the VCS kind is always `git`.

This module intentionally does NOT know about git, Go, or CLI parsing.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path, PurePosixPath

from jinja2 import Environment, StrictUndefined, Template, TemplateError

from vanitic.logging import get_logger

logger = get_logger("renderer")

PAGE_FILENAME = "index.html"

PACKAGE_TEMPLATE = """\
<!DOCTYPE html>
<html>
<head>
  <meta http-equiv="Content-Type" content="text/html; charset=utf-8"/>
  <meta name="go-import" content="{{ module }} git {{ source }}"/>
  <meta name="go-source" content="{{ module }} {{ source }} {{ source }}/tree/master{/dir} {{ source }}/blob/master{/dir}/{file}#L{line}"/>
</head>
<body>
  <h1>{{ import_path }}</h1>
  <p>{{ description }}</p>
  <p><a href="https://pkg.go.dev/{{ import_path }}/">See the package documentation.</a></p>
</body>
</html>
"""


class RenderError(RuntimeError):
    pass


@dataclass(frozen=True)
class Package:
    """One page worth of data: a package reachable at `import_path` inside `module`."""

    source: str
    module: str
    import_path: str
    description: str = ""


def page_path(output_dir: str | Path, import_path: str) -> Path:
    """
    Map an import path to its page location under output_dir.
    """
    rel = PurePosixPath(import_path)
    if not import_path or rel.is_absolute() or any(part in (".", "..") for part in import_path.split("/")):
        raise RenderError(f"Refusing to write page for import path: {import_path!r}")
    return Path(output_dir).joinpath(*rel.parts, PAGE_FILENAME)


class PageRenderer:
    def __init__(self, template_text: str = PACKAGE_TEMPLATE) -> None:
        env = Environment(
            autoescape=True,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )
        try:
            self._template: Template = env.from_string(template_text)
        except TemplateError as e:
            raise RenderError("Failed compiling package page template") from e

    def render(self, package: Package) -> str:
        try:
            return self._template.render(**asdict(package))
        except TemplateError as e:
            raise RenderError(f"Failed rendering page for {package.import_path}") from e

    def write(self, package: Package, output_dir: str | Path) -> Path:
        """
        Render `package` and write it under output_dir, returning the page path.
        """
        dst_path = page_path(output_dir, package.import_path)
        out = self.render(package)
        try:
            dst_path.parent.mkdir(parents=True, exist_ok=True)
            dst_path.write_text(out, encoding="utf-8", newline="\n")
        except OSError as e:
            raise RenderError(f"Failed writing page: {dst_path}") from e
        logger.debug("Wrote %s", dst_path)
        return dst_path
