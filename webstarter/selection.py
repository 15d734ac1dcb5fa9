"""Selection Queue: the ordered list of Choices awaiting execution.

Insertion depends on the kind of Module the selection came from:

* single-choice modules append their choice to the end;
* multi-choice modules insert each choice at the front, in the order the
  prompt returned them, so the last returned index ends up first.

The second rule reverses multi-choice answers.  Directory creation, file
writes and the snippet order of the index page all follow the resulting
queue order.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence

from webstarter.models import Choice, Module


class SelectionQueue:
    """Choices selected across all prompts of one run."""

    def __init__(self) -> None:
        self._items: deque[Choice] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Choice]:
        return iter(list(self._items))

    def append(self, choice: Choice) -> None:
        self._items.append(choice)

    def prepend(self, choice: Choice) -> None:
        self._items.appendleft(choice)

    def enqueue(self, module: Module, selection: Sequence[int]) -> list[Choice]:
        """Queue the choices of *module* picked by *selection*.

        For single-choice modules *selection* holds one prompt index where
        0 is the skip option.  For multi-choice modules it holds choice
        indices in the order the prompt returned them.

        Returns the choices that were queued, in selection order.

        Raises:
            IndexError: If an index does not name a choice of *module*.
        """
        queued: list[Choice] = []
        if module.is_single:
            for index in selection:
                if index == 0:
                    continue
                choice = _choice_at(module, index - 1)
                self.append(choice)
                queued.append(choice)
        else:
            for index in selection:
                choice = _choice_at(module, index)
                self.prepend(choice)
                queued.append(choice)
        return queued

    def drain(self) -> Iterator[Choice]:
        """Yield and remove queued choices front to back."""
        while self._items:
            yield self._items.popleft()


def _choice_at(module: Module, index: int) -> Choice:
    if not 0 <= index < len(module.choices):
        raise IndexError(
            f"Choice index {index} out of range for '{module.prompt}' "
            f"({len(module.choices)} choices)"
        )
    return module.choices[index]
