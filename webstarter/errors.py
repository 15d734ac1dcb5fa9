"""Exception hierarchy for webstarter.

Every failure during a run is fatal: the first ``ScaffoldError`` aborts the
remaining stages and is surfaced to the caller unchanged.  Partially
created directories and files are left in place.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from webstarter.models import Stage


class ScaffoldError(Exception):
    """Base class for every error raised while scaffolding a project."""

    def __init__(self, message: str, stage: Stage | None = None) -> None:
        self.stage = stage
        super().__init__(message)


class InteractionError(ScaffoldError):
    """The prompt adapter could not read or render a question."""


class DirectoryCreationError(ScaffoldError):
    """A directory could not be created."""


class RootAlreadyExistsError(DirectoryCreationError):
    """The project root directory already exists."""


class NetworkFetchError(ScaffoldError):
    """A remote file could not be downloaded."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        super().__init__(f"Failed to download {url}: {reason}")


class FileWriteError(ScaffoldError):
    """A file could not be written."""
