"""webstarter pipeline driver.

Runs one ``new <name>`` invocation through its stages:

INIT -> PROMPT_PHP -> (PROMPT_PHP_BOILERPLATE) -> PROMPT_CSS ->
PROMPT_CSS_FRAMEWORK -> INITIALIZE_ROOT -> EXECUTE -> FINALIZE -> DONE

Any ``ScaffoldError`` moves the pipeline to FAILED and is re-raised to the
caller, which decides the exit code.  Files created before the failure are
left on disk.

Usage::

    pipeline = Pipeline(Config(), RichPrompter())
    project = asyncio.run(pipeline.run("demo"))
"""

from __future__ import annotations

import time

from jinja2 import TemplateError
from pydantic import ValidationError

from webstarter.config import Config
from webstarter.errors import InteractionError, ScaffoldError
from webstarter.executor import ChoiceExecutor, FileSystem, LocalFileSystem
from webstarter.fetcher import Fetcher, HttpFetcher
from webstarter.models import Module, ProjectDescriptor, Stage
from webstarter.prompts import Prompter
from webstarter.registry import CSS, CSS_FRAMEWORK, PHP, PHP_DIRS
from webstarter.selection import SelectionQueue
from webstarter.templates import TemplateRenderer
from webstarter.utils import (
    format_duration,
    print_stage_header,
    print_success,
    print_summary_table,
)


class Pipeline:
    """Drives a single project generation run.

    Attributes:
        config: Run configuration.
        prompter: Source of answers to the module questions.
        stage: The stage the pipeline is currently in (or ended in).
        history: Every stage entered, in order.
        queue: Choices selected so far.
    """

    def __init__(
        self,
        config: Config,
        prompter: Prompter,
        fetcher: Fetcher | None = None,
        fs: FileSystem | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.prompter = prompter
        self.fs = fs or LocalFileSystem()
        self.executor = ChoiceExecutor(
            self.fs, fetcher or HttpFetcher(timeout=config.fetch_timeout)
        )
        self.renderer = renderer or TemplateRenderer(config.template_dir)
        self.queue = SelectionQueue()
        self.stage = Stage.INIT
        self.history: list[Stage] = []

    # ------------------------------------------------------------------
    # Stage bookkeeping
    # ------------------------------------------------------------------

    def _enter(self, stage: Stage) -> None:
        self.stage = stage
        self.history.append(stage)

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------

    async def run(self, name: str) -> ProjectDescriptor:
        """Prompt for every module, then build the project called *name*.

        Returns:
            The final project descriptor.

        Raises:
            ScaffoldError: The first failure of any stage.
        """
        started = time.monotonic()
        self._enter(Stage.INIT)
        try:
            project = self._describe(name)

            self._enter(Stage.PROMPT_PHP)
            if self.prompt_module(PHP_DIRS):
                self._enter(Stage.PROMPT_PHP_BOILERPLATE)
                self.prompt_module(PHP)

            self._enter(Stage.PROMPT_CSS)
            self.prompt_module(CSS)

            self._enter(Stage.PROMPT_CSS_FRAMEWORK)
            self.prompt_module(CSS_FRAMEWORK)

            self._enter(Stage.INITIALIZE_ROOT)
            print_stage_header(f"Creating project {name}")
            await self.initialize_root(project)

            self._enter(Stage.EXECUTE)
            for choice in self.queue.drain():
                await self.executor.apply(choice, project)

            self._enter(Stage.FINALIZE)
            await self.finalize(project)
        except ScaffoldError as exc:
            if exc.stage is None:
                exc.stage = self.stage
            self._enter(Stage.FAILED)
            raise

        self._enter(Stage.DONE)
        self._print_summary(project, time.monotonic() - started)
        return project

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def _describe(self, name: str) -> ProjectDescriptor:
        try:
            return ProjectDescriptor(name=name, root=self.config.project_root(name))
        except ValidationError as exc:
            raise ScaffoldError(f"Invalid project name {name!r}") from exc

    def prompt_module(self, module: Module) -> bool:
        """Ask *module*'s question and queue the answer.

        Returns ``True`` if at least one choice was selected.

        Raises:
            InteractionError: If the prompter fails or answers out of range.
        """
        if module.is_single:
            selection = [
                self.prompter.ask_single_with_skip(
                    module.prompt, module.default_label, module.labels
                )
            ]
        else:
            selection = self.prompter.ask_multiple(module.prompt, module.labels)

        try:
            queued = self.queue.enqueue(module, selection)
        except IndexError as exc:
            raise InteractionError(str(exc)) from exc
        return bool(queued)

    async def initialize_root(self, project: ProjectDescriptor) -> None:
        """Create the project root; fails if it already exists.

        Raises:
            RootAlreadyExistsError: If the root directory exists.
            DirectoryCreationError: If it cannot be created.
        """
        await self.fs.create_directory(project.root, exist_ok=False)

    async def finalize(self, project: ProjectDescriptor) -> None:
        """Render the index page and write it into the public directory."""
        try:
            content = self.renderer.render_index(
                project.name, project.snippet, self.config.index_template
            )
        except TemplateError as exc:
            raise ScaffoldError(
                f"Cannot render {self.config.index_template}: {exc}"
            ) from exc
        await self.fs.write_file(project.index_path, content.encode("utf-8"))

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def _print_summary(self, project: ProjectDescriptor, elapsed: float) -> None:
        print_summary_table(
            {
                "Project": project.name,
                "Root": str(project.root),
                "Public directory": project.public_subdir or "(project root)",
                "Index": str(project.index_path),
                "Duration": format_duration(elapsed),
            },
            title="Project created",
        )
        print_success(f"Project {project.name} is ready in {project.root}")


async def new_project(
    name: str,
    prompter: Prompter,
    config: Config | None = None,
    fetcher: Fetcher | None = None,
) -> ProjectDescriptor:
    """Run the full pipeline for a new project called *name*."""
    pipeline = Pipeline(config or Config(), prompter, fetcher=fetcher)
    return await pipeline.run(name)
