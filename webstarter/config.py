"""webstarter configuration.

Typed settings for a single ``new`` run.  Values come from CLI flags only;
no environment variables or persisted configuration files are consulted.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class Config(BaseModel):
    """Global webstarter configuration.

    Created once by the CLI entry point and passed to ``Pipeline``.
    """

    output_dir: Path = Field(
        default=Path("."), description="Directory the project folder is created in"
    )
    fetch_timeout: float = Field(
        default=30.0, gt=0, description="Per-request timeout for remote files in seconds"
    )
    template_dir: Path | None = Field(
        default=None, description="Override directory for the index page template"
    )
    index_template: str = Field(
        default="index.html.j2", description="Template rendered into the index file"
    )

    def project_root(self, name: str) -> Path:
        """Return the root directory for a project called *name*.

        The root equals *name* when the output directory is the current
        directory, so relative paths stay short in console output.
        """
        if self.output_dir == Path("."):
            return Path(name)
        return self.output_dir / name
