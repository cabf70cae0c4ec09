"""PromptAdapter interface - everything that talks to the operator goes here."""

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Union

from .schema import InteractionKind

TRUTHY = ('y', 'yes', 'true', '1')


@dataclass(frozen=True)
class Question:
    """A rendered interaction, ready to be put to the operator."""

    kind: InteractionKind
    message: str
    choices: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ListItem:
    """A choice picked from a select question."""

    index: int
    label: str


Answer = Union[str, ListItem, bool, None]


class PromptAdapter(ABC):
    """
    Asks questions and returns raw answers.

    Subclasses only provide line input and output; the parsing of answers
    for each kind of question is shared, so scripted input behaves exactly
    like typed input.
    """

    @abstractmethod
    def read_line(self, prompt: str) -> str:
        """Read one line of input after showing prompt.

        Raises:
            EOFError: If there is no more input
        """
        pass

    @abstractmethod
    def display(self, message: str) -> None:
        """Show a message to the operator."""
        pass

    def prompt(self, question: Question) -> Answer:
        """Ask a question and return the raw answer.

        Args:
            question: Question to ask

        Returns:
            str for input, bool for confirm, ListItem for select, or None
            when a select question was left unanswered
        """
        if question.kind == InteractionKind.CONFIRM:
            response = self.read_line(f"{question.message} [y/N]: ")
            return response.strip().lower() in TRUTHY

        if question.kind == InteractionKind.SELECT:
            return self._select(question)

        return self.read_line(f"{question.message}: ")

    def _select(self, question: Question) -> Optional[ListItem]:
        if not question.choices:
            self.display(f"{question.message} (no options to choose from)")
            return None

        self.display(question.message)
        for i, choice in enumerate(question.choices, 1):
            self.display(f"  {i}. {choice}")

        while True:
            response = self.read_line(f"Choose 1-{len(question.choices)}: ").strip()
            if not response:
                return None

            if response.isdigit() and 1 <= int(response) <= len(question.choices):
                index = int(response) - 1
                return ListItem(index, question.choices[index])

            if response in question.choices:
                return ListItem(question.choices.index(response), response)

            self.display(f"Error: '{response}' is not one of the options")


class TerminalPromptAdapter(PromptAdapter):
    """Real implementation - reads from stdin, talks on stderr.

    stdout is left to run scripts and to the command line's report.
    """

    def read_line(self, prompt: str) -> str:
        sys.stderr.write(prompt)
        sys.stderr.flush()
        return input()

    def display(self, message: str) -> None:
        """Print message to stderr."""
        print(message, file=sys.stderr)


class ScriptedPromptAdapter(PromptAdapter):
    """Replays pre-scripted input lines, for testing. Records calls."""

    def __init__(self, events: Optional[Iterable[str]] = None):
        self.calls = []
        self.input_queue = list(events or [])

    def prompt(self, question: Question) -> Answer:
        self.calls.append(('prompt', question))
        return super().prompt(question)

    def read_line(self, prompt: str) -> str:
        """Return next value from input_queue."""
        self.calls.append(('read_line', prompt))

        if not self.input_queue:
            raise EOFError(f"no scripted input left for prompt: {prompt!r}")

        return self.input_queue.pop(0)

    def display(self, message: str) -> None:
        """Capture display call for test verification."""
        self.calls.append(('display', message))
