"""Applies selected Choices to the project descriptor and the filesystem.

Every Choice is plain data; ``ChoiceExecutor.apply`` interprets it in a fixed
order:

1. override the public subdirectory
2. override the index filename
3. append the HTML snippet
4. resolve the base path (project root or public subdirectory)
5. create directories (an existing directory is not an error)
6. write files, downloading remote payloads first

The first failure aborts; nothing already written is rolled back.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Protocol

from webstarter.errors import DirectoryCreationError, FileWriteError, RootAlreadyExistsError
from webstarter.fetcher import Fetcher
from webstarter.models import Choice, ProjectDescriptor
from webstarter.utils import print_created


# ---------------------------------------------------------------------------
# Filesystem collaborator
# ---------------------------------------------------------------------------


class FileSystem(Protocol):
    async def create_directory(self, path: Path, *, exist_ok: bool = True) -> bool: ...

    async def write_file(self, path: Path, content: bytes) -> None: ...


class LocalFileSystem:
    """Filesystem collaborator backed by the local disk."""

    async def create_directory(self, path: Path, *, exist_ok: bool = True) -> bool:
        """Create *path* and any missing parents.

        Returns ``True`` if the directory was created and ``False`` if it
        already existed and *exist_ok* is set.

        Raises:
            RootAlreadyExistsError: If *path* exists and *exist_ok* is false.
            DirectoryCreationError: On any other OS error.
        """
        try:
            await asyncio.to_thread(path.mkdir, parents=True)
        except FileExistsError as exc:
            if not path.is_dir():
                raise DirectoryCreationError(
                    f"Cannot create directory {path}: a file with that name exists"
                ) from exc
            if not exist_ok:
                raise RootAlreadyExistsError(f"Directory {path} already exists") from exc
            return False
        except OSError as exc:
            raise DirectoryCreationError(f"Cannot create directory {path}: {exc}") from exc
        print_created("directory", path)
        return True

    async def write_file(self, path: Path, content: bytes) -> None:
        """Write *content* to *path*, replacing any existing file.

        Missing parent directories are created, so a file entry does not
        need a matching directory entry.

        Raises:
            FileWriteError: If the file cannot be written.
        """
        print_created("file", path)
        try:
            await asyncio.to_thread(_write_bytes, path, content)
        except OSError as exc:
            raise FileWriteError(f"Cannot write {path}: {exc}") from exc


# ---------------------------------------------------------------------------
# ChoiceExecutor
# ---------------------------------------------------------------------------


class ChoiceExecutor:
    """Interprets Choices against a project descriptor."""

    def __init__(self, fs: FileSystem, fetcher: Fetcher) -> None:
        self.fs = fs
        self.fetcher = fetcher

    async def apply(self, choice: Choice, project: ProjectDescriptor) -> None:
        """Apply every effect of *choice* to *project*.

        Raises:
            DirectoryCreationError: If a directory cannot be created.
            NetworkFetchError: If a remote file cannot be downloaded.
            FileWriteError: If a file cannot be written.
        """
        if choice.override_public_subdir is not None:
            project.public_subdir = choice.override_public_subdir
        if choice.override_index_filename is not None:
            project.index_filename = choice.override_index_filename
        if choice.snippet is not None:
            project.snippet += choice.snippet

        base = project.base_path(choice)

        for directory in choice.directories:
            await self.fs.create_directory(base / directory, exist_ok=True)

        for entry in choice.files:
            if entry.remote:
                content = await self.fetcher.fetch(entry.payload)
            else:
                content = entry.payload.encode("utf-8")
            await self.fs.write_file(base / entry.destination, content)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _write_bytes(path: Path, content: bytes) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
