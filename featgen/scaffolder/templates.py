"""Loading of raw content patterns for the feature catalog.

Content patterns live as ``.tmpl`` files under ``featgen/scaffolder/templates/``.
They are located and read through a Jinja2 loader, but never rendered by
Jinja2: placeholder substitution is the literal find/replace performed by the
generator, and the JSX payloads contain braces Jinja2 would try to interpret.
"""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateLoader
# ---------------------------------------------------------------------------


class TemplateLoader:
    """Reads ``.tmpl`` content patterns from a template directory.

    Template names are ``/``-separated paths relative to the template root,
    e.g. ``"api/routes.js.tmpl"``.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir), encoding="utf-8"),
            autoescape=False,
        )

    def source(self, template_name: str) -> str:
        """Return the unrendered text of *template_name*.

        Raises:
            TemplateNotFound: If no such template exists under the root.
        """
        source, _filename, _uptodate = self.env.loader.get_source(self.env, template_name)
        return source
