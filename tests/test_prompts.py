"""Unit tests for the interactive prompts (webstarter.prompts).

Tests cover:
- parse_selection (separators, duplicates, blanks, invalid input)
- RichPrompter.ask_single_with_skip (answer passthrough, option listing, EOF)
- RichPrompter.ask_multiple (parsing, re-prompt on invalid input, EOF)
"""

from __future__ import annotations

from io import StringIO
from unittest.mock import patch

import pytest
from rich.console import Console

from webstarter.errors import InteractionError
from webstarter.prompts import RichPrompter, parse_selection

pytestmark = pytest.mark.unit


@pytest.fixture
def output() -> StringIO:
    return StringIO()


@pytest.fixture
def prompter(output: StringIO) -> RichPrompter:
    return RichPrompter(Console(file=output, width=100, color_system=None))


class TestParseSelection:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("", []),
            ("   ", []),
            ("1", [0]),
            ("1,2", [0, 1]),
            ("2, 1", [0, 1]),
            ("2 1 2", [0, 1]),
        ],
    )
    def test_valid(self, text, expected):
        assert parse_selection(text, 2) == expected

    @pytest.mark.parametrize("text", ["0", "3", "a", "1,x", "-1"])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            parse_selection(text, 2)


class TestAskSingleWithSkip:
    def test_returns_answer(self, prompter, output):
        with patch("webstarter.prompts.IntPrompt.ask", return_value=2) as ask:
            assert prompter.ask_single_with_skip("Create css file", "No", ["a.css", "b.css"]) == 2

        assert ask.call_args.kwargs["choices"] == ["0", "1", "2"]
        assert ask.call_args.kwargs["default"] == 0
        listing = output.getvalue()
        assert "No" in listing
        assert "b.css" in listing

    def test_eof_raises_interaction_error(self, prompter):
        with patch("webstarter.prompts.IntPrompt.ask", side_effect=EOFError):
            with pytest.raises(InteractionError):
                prompter.ask_single_with_skip("Use php", "No", ["Yes"])


class TestAskMultiple:
    def test_returns_sorted_indices(self, prompter):
        with patch("webstarter.prompts.Prompt.ask", return_value="2,1"):
            assert prompter.ask_multiple("Use css framework", ["Bootstrap", "Tailwind"]) == [0, 1]

    def test_blank_selects_nothing(self, prompter):
        with patch("webstarter.prompts.Prompt.ask", return_value=""):
            assert prompter.ask_multiple("Php boilerplate", ["Database", "Jwt"]) == []

    def test_reprompts_on_invalid_input(self, prompter, output):
        with patch("webstarter.prompts.Prompt.ask", side_effect=["7", "2"]) as ask:
            assert prompter.ask_multiple("Php boilerplate", ["Database", "Jwt"]) == [1]

        assert ask.call_count == 2
        assert "Invalid selection" in output.getvalue()

    def test_eof_raises_interaction_error(self, prompter):
        with patch("webstarter.prompts.Prompt.ask", side_effect=EOFError):
            with pytest.raises(InteractionError):
                prompter.ask_multiple("Php boilerplate", ["Database", "Jwt"])
