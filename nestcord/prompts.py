"""Interactive questions asked before a project is generated.

Each ``Question`` may carry a validator.  A validator raises
``AnswerValidationError`` to reject an answer; the message is shown and the
same question is asked again.  Ctrl-C or end-of-input aborts the whole
prompt session with ``PromptAborted``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from nestcord.errors import AnswerValidationError, PromptAborted
from nestcord.models import PackageManager
from nestcord.utils import console as default_console
from nestcord.utils import print_error

Validator = Callable[[str], None]
AskFn = Callable[..., str]


@dataclass(frozen=True)
class Question:
    """One prompt: free text, or a pick from *choices* when given."""

    name: str
    message: str
    choices: Optional[tuple[str, ...]] = None
    default: Optional[str] = None
    validate: Optional[Validator] = None


def require_non_empty(answer: str) -> None:
    if not answer.strip():
        raise AnswerValidationError("The project name cannot be empty.")


PROJECT_QUESTIONS: tuple[Question, ...] = (
    Question(
        name="projectName",
        message="What is the name of your project?",
        validate=require_non_empty,
    ),
    Question(
        name="packageManager",
        message="Which package manager do you want to use?",
        choices=tuple(pm.value for pm in PackageManager),
        default=PackageManager.NPM.value,
    ),
)


def collect_answers(
    questions: Sequence[Question] = PROJECT_QUESTIONS,
    console: Optional[Console] = None,
    ask: AskFn = Prompt.ask,
) -> dict[str, str]:
    """Ask every question in order and return ``{question.name: answer}``.

    Args:
        questions: Questions to ask.
        console: Console the prompts are rendered on.
        ask: Prompt function with the ``rich.prompt.Prompt.ask`` signature.

    Raises:
        PromptAborted: If the user interrupts or input ends.
    """
    out = console or default_console
    answers: dict[str, str] = {}
    for question in questions:
        answers[question.name] = _ask_until_valid(question, out, ask)
    return answers


def _ask_until_valid(question: Question, console: Console, ask: AskFn) -> str:
    kwargs: dict[str, Any] = {"console": console}
    if question.choices is not None:
        kwargs["choices"] = list(question.choices)
    if question.default is not None:
        kwargs["default"] = question.default

    while True:
        try:
            answer = ask(question.message, **kwargs)
        except (KeyboardInterrupt, EOFError) as exc:
            raise PromptAborted(f"Prompt '{question.name}' was aborted") from exc

        answer = answer or ""
        if question.validate is not None:
            try:
                question.validate(answer)
            except AnswerValidationError as exc:
                print_error(escape(str(exc)), out=console)
                continue
        return answer
