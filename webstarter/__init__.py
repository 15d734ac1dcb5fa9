"""webstarter -- interactive scaffolding for small web projects.

Asks which pieces a project needs (PHP directories and boilerplate, a
stylesheet, CSS frameworks), then creates the project directory, copies or
downloads the matching files and writes an ``index.html`` linking them.

Quick usage::

    import asyncio

    from webstarter import Config, Pipeline, RichPrompter

    pipeline = Pipeline(Config(), RichPrompter())
    project = asyncio.run(pipeline.run("my-site"))
"""

from webstarter.config import Config
from webstarter.errors import (
    DirectoryCreationError,
    FileWriteError,
    InteractionError,
    NetworkFetchError,
    RootAlreadyExistsError,
    ScaffoldError,
)
from webstarter.models import Choice, FileEntry, Module, ProjectDescriptor, Stage
from webstarter.pipeline import Pipeline, new_project
from webstarter.prompts import RichPrompter

__all__ = [
    "Choice",
    "Config",
    "DirectoryCreationError",
    "FileEntry",
    "FileWriteError",
    "InteractionError",
    "Module",
    "NetworkFetchError",
    "Pipeline",
    "ProjectDescriptor",
    "RichPrompter",
    "RootAlreadyExistsError",
    "ScaffoldError",
    "Stage",
    "new_project",
]
