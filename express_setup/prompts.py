"""Interactive answer collector.

Questions are declared as data in ``QUESTIONS`` and asked in that fixed
order with ``rich.prompt``.  The result is a single frozen ``Answers``
record; nothing is written to disk here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Any, Callable, Literal, Optional

from rich.console import Console
from rich.prompt import Confirm, Prompt

from .models import CURRENT_DIR, Answers, Language, ModuleSystem
from .utils import console as default_console

QuestionKind = Literal["text", "select", "confirm"]


@dataclass(frozen=True)
class Question:
    """One entry of the question sequence."""

    name: str
    kind: QuestionKind
    message: str
    default: Any
    choices: tuple[str, ...] = field(default_factory=tuple)
    # Returns an error message, or None when the input is acceptable.
    validate: Optional[Callable[[str], Optional[str]]] = None


def validate_project_name(value: str) -> Optional[str]:
    value = value.strip()
    if not value:
        return "Project name cannot be empty"
    if PurePath(value).is_absolute():
        return "Project name must be a relative path"
    return None


QUESTIONS: tuple[Question, ...] = (
    Question(
        name="project_name",
        kind="text",
        message="Project name",
        default=CURRENT_DIR,
        validate=validate_project_name,
    ),
    Question(
        name="language",
        kind="select",
        message="Select language",
        default=Language.TYPESCRIPT.value,
        choices=tuple(lang.value for lang in Language),
    ),
    Question(
        name="module_system",
        kind="select",
        message="Select module system",
        default=ModuleSystem.ESM.value,
        choices=tuple(ms.value for ms in ModuleSystem),
    ),
    Question(name="use_src_directory", kind="confirm", message="Use src directory?", default=True),
    Question(name="use_eslint", kind="confirm", message="Setup ESLint?", default=True),
    Question(name="use_prettier", kind="confirm", message="Setup Prettier?", default=True),
    Question(name="create_gitignore", kind="confirm", message="Create .gitignore file?", default=True),
)


def ask(question: Question, console: Console) -> Any:
    """Ask a single question, re-prompting until its validator accepts."""
    if question.kind == "confirm":
        return Confirm.ask(question.message, default=question.default, console=console)

    if question.kind == "select":
        return Prompt.ask(
            question.message,
            choices=list(question.choices),
            default=question.default,
            console=console,
        )

    while True:
        value = Prompt.ask(question.message, default=question.default, console=console)
        error = question.validate(value) if question.validate else None
        if error is None:
            return value
        console.print(f"[red]{error}[/red]")


def collect_answers(console: Console | None = None) -> Answers:
    """Run the full question sequence and return the answer record.

    ``KeyboardInterrupt`` and ``EOFError`` raised while prompting propagate
    to the caller untouched; no partial record is ever returned.
    """
    console = console or default_console
    raw = {question.name: ask(question, console) for question in QUESTIONS}
    return Answers(**raw)
