"""Pydantic v2 models for the scaffolding pipeline.

Modules and Choices are static, frozen configuration data.  The
``ProjectDescriptor`` is the single mutable object of a run: executed
Choices overwrite its public subdirectory and index filename and append to
its HTML snippet.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Stage(str, Enum):
    """States of the pipeline driver, in the order a successful run visits them."""
    INIT = "init"
    PROMPT_PHP = "prompt_php"
    PROMPT_PHP_BOILERPLATE = "prompt_php_boilerplate"
    PROMPT_CSS = "prompt_css"
    PROMPT_CSS_FRAMEWORK = "prompt_css_framework"
    INITIALIZE_ROOT = "initialize_root"
    EXECUTE = "execute"
    FINALIZE = "finalize"
    DONE = "done"
    FAILED = "failed"


# ---------------------------------------------------------------------------
# Catalog models
# ---------------------------------------------------------------------------

class FileEntry(BaseModel):
    """A file contributed by a Choice.

    When ``remote`` is set, ``payload`` is a URL downloaded at execution
    time; otherwise it is written verbatim.
    """
    model_config = ConfigDict(frozen=True)

    payload: str = Field(..., description="Literal content, or a URL when remote")
    destination: str = Field(..., description="Path relative to the choice's base path")
    remote: bool = Field(default=False, description="Whether payload is a URL to fetch")


class Choice(BaseModel):
    """One selectable option of a Module and the effects it has when executed."""
    model_config = ConfigDict(frozen=True)

    prompt: str = Field(..., description="Label shown in the prompt")
    directories: tuple[str, ...] = Field(default=(), description="Directories to create")
    files: tuple[FileEntry, ...] = Field(default=(), description="Files to write, in order")
    uses_project_root: bool = Field(
        default=True,
        description="Resolve paths against the project root instead of the public subdirectory",
    )
    snippet: Optional[str] = Field(default=None, description="HTML appended to the index page")
    override_public_subdir: Optional[str] = Field(default=None)
    override_index_filename: Optional[str] = Field(default=None)


class Module(BaseModel):
    """A decision point presented to the user as one question.

    A Module with a ``default_label`` is a single-choice question whose
    option 0 skips it; without one, any subset of choices may be picked.
    """
    model_config = ConfigDict(frozen=True)

    prompt: str = Field(..., description="Question text")
    default_label: Optional[str] = Field(default=None, description="Label of the skip option")
    choices: tuple[Choice, ...] = Field(..., min_length=1)

    @property
    def is_single(self) -> bool:
        return self.default_label is not None

    @property
    def labels(self) -> list[str]:
        return [choice.prompt for choice in self.choices]


# ---------------------------------------------------------------------------
# Run state
# ---------------------------------------------------------------------------

class ProjectDescriptor(BaseModel):
    """Mutable state of the project being generated."""

    name: str = Field(..., min_length=1, description="Project display name")
    root: Path = Field(..., description="Project root directory")
    public_subdir: str = Field(default="", description="Directory holding web-facing assets")
    index_filename: str = Field(default="index.html")
    snippet: str = Field(default="", description="Accumulated HTML fragments, in execution order")

    @property
    def public_path(self) -> Path:
        """``root / public_subdir``; equal to ``root`` while no subdirectory is set."""
        return self.root / self.public_subdir

    @property
    def index_path(self) -> Path:
        return self.public_path / self.index_filename

    def base_path(self, choice: Choice) -> Path:
        """Directory that *choice*'s directories and files are resolved against."""
        return self.root if choice.uses_project_root else self.public_path
