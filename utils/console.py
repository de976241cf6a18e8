"""Text prompt transport for RecordBuilder.

The builder and collector only talk to a ``Prompter``: ``ask`` shows a
prompt and returns one line of input, ``say`` shows a line of output.
``ConsolePrompter`` is the terminal implementation.
"""

from typing import Protocol

YES_ANSWERS = ("y", "yes")


class Prompter(Protocol):
    """Line-oriented prompt transport."""

    def ask(self, question: str) -> str:
        ...

    def say(self, message: str) -> None:
        ...


class ConsolePrompter:
    """Prompter backed by ``input()`` and ``print()``.

    End of input surfaces as ``EOFError`` and Ctrl-C as ``KeyboardInterrupt``;
    both propagate to the caller.
    """

    def ask(self, question: str) -> str:
        return input(question)

    def say(self, message: str) -> None:
        print(message)


def is_yes(answer: str) -> bool:
    """Return True if an answer reads as yes (case-insensitive)."""
    return answer.strip().lower() in YES_ANSWERS


def ask_yes_no(prompter: Prompter, question: str) -> bool:
    """Ask a (y/n) question; anything other than yes counts as no."""
    return is_yes(prompter.ask(f"{question} (y/n): "))


def indent_for(depth: int) -> str:
    """Prompt indentation for a nesting depth (two spaces per level)."""
    return " " * (depth * 2)
