from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable

import pytest

# Ensure workspace root is importable so the top-level packages resolve
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from settings import AppSettings, StorageSettings  # noqa: E402


class ScriptedPrompter:
    """Prompter that replays queued answers and records the conversation."""

    def __init__(self, answers: Iterable[str] = ()):
        self.answers = list(answers)
        self.questions: list[str] = []
        self.messages: list[str] = []

    def ask(self, question: str) -> str:
        self.questions.append(question)
        if not self.answers:
            raise EOFError("no scripted answer left")
        return self.answers.pop(0)

    def say(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def prompter_factory():
    return ScriptedPrompter


@pytest.fixture
def settings(tmp_path: Path) -> AppSettings:
    return AppSettings(storage=StorageSettings(root=str(tmp_path)))
