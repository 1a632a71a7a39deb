"""Interactive prompts used by the selection cascade."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Any

import questionary
from prompt_toolkit.output import create_output

from .errors import PromptAbortedError


def get_questionary_style() -> questionary.Style:
    """Consistent questionary styling across all prompts."""
    return questionary.Style(
        [
            ("qmark", "fg:cyan bold"),
            ("question", "bold"),
            ("answer", "fg:cyan"),
            ("pointer", "fg:cyan bold"),
            ("highlighted", "fg:cyan"),
            ("selected", "fg:green"),
        ]
    )


class Chooser:
    """Blocking prompts sharing a single style. Prompts are drawn on stderr."""

    def __init__(self, style: questionary.Style) -> None:
        self.style = style

    def choose(self, prompt: str, candidates: Sequence[str]) -> int:
        """Let the user pick one candidate. Typing filters the list; the first item is highlighted.

        Returns the zero-based index of the picked candidate.
        """
        choices = [questionary.Choice(candidate, value=index) for index, candidate in enumerate(candidates)]
        question = questionary.select(
            prompt,
            choices=choices,
            style=self.style,
            use_search_filter=True,
            use_jk_keys=False,
            output=create_output(stdout=sys.stderr),
        )
        return _ask(question, prompt)

    def ask_text(self, prompt: str) -> str:
        question = questionary.text(prompt, style=self.style, output=create_output(stdout=sys.stderr))
        return _ask(question, prompt)


def _ask(question: questionary.Question, prompt: str) -> Any:  # noqa: ANN401
    try:
        return question.unsafe_ask()
    except (KeyboardInterrupt, EOFError) as e:
        raise PromptAbortedError(prompt) from e
