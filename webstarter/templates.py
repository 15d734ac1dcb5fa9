"""Bundled template payloads and Jinja2 rendering of the index page.

Payload files under ``webstarter/templates/`` are opaque content copied into
generated projects.  Only the index page is a Jinja2 template; it receives
the project ``name`` and the accumulated ``snippets``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

TEMPLATE_DIR = Path(__file__).parent / "templates"


def load_template(name: str) -> str:
    """Return the raw text of a bundled payload file."""
    return (TEMPLATE_DIR / name).read_text(encoding="utf-8")


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for generated projects.

    Autoescaping is disabled: snippets are trusted HTML fragments that must
    reach the index page untouched.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"index.html.j2"``).
            context: Dictionary of variables available inside the template.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_index(self, name: str, snippets: str, template_path: str = "index.html.j2") -> str:
        """Render the generated project's index page."""
        return self.render(template_path, {"name": name, "snippets": snippets})
