"""Interactive prompts.

The pipeline only depends on the ``Prompter`` protocol, which asks either
"one of N, or skip" or "any subset of N" and returns indices.
``RichPrompter`` implements it on top of ``rich.prompt``.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Protocol

from rich.console import Console
from rich.prompt import IntPrompt, Prompt
from rich.table import Table

from webstarter.errors import InteractionError
from webstarter.utils import console as default_console, print_warning


class Prompter(Protocol):
    """Source of answers for the pipeline's questions."""

    def ask_single_with_skip(
        self, prompt: str, skip_label: str, labels: Sequence[str]
    ) -> int:
        """Return the chosen option; 0 is *skip_label*, k is ``labels[k-1]``."""
        ...

    def ask_multiple(self, prompt: str, labels: Sequence[str]) -> list[int]:
        """Return the chosen indices into *labels* in increasing order."""
        ...


def parse_selection(text: str, count: int) -> list[int]:
    """Parse a multi-choice answer into sorted, zero-based indices.

    The answer lists 1-based option numbers separated by commas and/or
    whitespace.  A blank answer selects nothing.

    Examples::

        parse_selection("1, 2", 2) -> [0, 1]
        parse_selection("2 1 2", 3) -> [0, 1]
        parse_selection("", 2)     -> []

    Raises:
        ValueError: If a token is not a number between 1 and *count*.
    """
    indices: set[int] = set()
    for token in re.split(r"[\s,]+", text.strip()):
        if not token:
            continue
        if not token.isdigit():
            raise ValueError(f"'{token}' is not a number")
        number = int(token)
        if not 1 <= number <= count:
            raise ValueError(f"{number} is not between 1 and {count}")
        indices.add(number - 1)
    return sorted(indices)


class RichPrompter:
    """Asks questions on the terminal using Rich tables and prompts."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or default_console

    def ask_single_with_skip(
        self, prompt: str, skip_label: str, labels: Sequence[str]
    ) -> int:
        options = [skip_label, *labels]
        self._print_options(prompt, options, first=0)
        try:
            return IntPrompt.ask(
                f"[bold]{prompt}[/bold]",
                console=self.console,
                choices=[str(i) for i in range(len(options))],
                default=0,
            )
        except (EOFError, OSError) as exc:
            raise InteractionError(f"Could not read answer to '{prompt}': {exc}") from exc

    def ask_multiple(self, prompt: str, labels: Sequence[str]) -> list[int]:
        self._print_options(prompt, labels, first=1)
        while True:
            try:
                answer = Prompt.ask(
                    f"[bold]{prompt}[/bold] [dim](numbers separated by commas, blank for none)[/dim]",
                    console=self.console,
                    default="",
                    show_default=False,
                )
            except (EOFError, OSError) as exc:
                raise InteractionError(
                    f"Could not read answer to '{prompt}': {exc}"
                ) from exc
            try:
                return parse_selection(answer, len(labels))
            except ValueError as exc:
                print_warning(f"Invalid selection: {exc}", self.console)

    def _print_options(self, prompt: str, labels: Sequence[str], *, first: int) -> None:
        table = Table(title=prompt, show_header=False, box=None, padding=(0, 2))
        table.add_column("#", style="bold cyan", justify="right")
        table.add_column("Option")
        for number, label in enumerate(labels, start=first):
            table.add_row(str(number), label)
        self.console.print(table)
