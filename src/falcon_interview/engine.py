"""Prompt engines: show questions on a terminal and collect the answers."""

import logging
from dataclasses import dataclass
from typing import Protocol, TextIO

import click

from falcon_interview.exceptions import InterviewConfigError

logger = logging.getLogger(__name__)


class PromptEngine(Protocol):
    """Anything that can ask a list of questions and return the answers."""

    def execute(self, questions: list) -> dict:
        ...


def _normalize_choices(choices):
    normalized = []
    for choice in choices:
        if isinstance(choice, tuple):
            normalized.append(choice)
        else:
            normalized.append((str(choice), choice))
    return normalized


def _default_choice_index(choices, default):
    for i, (_, value) in enumerate(choices):
        if value == default:
            return i + 1
    return 1


@dataclass
class ClickPromptEngine:
    """Terminal prompt engine built on click.

    Questions are asked in order; a question whose ``when`` is false for the
    answers gathered so far is skipped and gets no answer. Values go through
    the question's ``filter`` and then its ``validate``; a failed validation
    prints the message and asks again.

    ``output`` receives the engine's own lines: list choices and validation
    messages. The prompt line itself is written by ``click.prompt`` /
    ``click.confirm``, which always use the terminal (stdout).
    """

    output: TextIO | None = None

    def execute(self, questions: list) -> dict:
        answers = {}
        for question in questions:
            if not question.is_shown(answers):
                logger.debug("question '%s' skipped", question.name)
                continue
            answers[question.name] = self._ask(question, answers)
        logger.debug("answers: %s", answers)
        return answers

    def _ask(self, question, answers):
        while True:
            value = self._read(question, answers)
            if question.filter is not None:
                value = question.filter(value)
            verdict = True if question.validate is None else question.validate(value, answers)
            if verdict is True:
                return value
            click.echo(verdict or f"Invalid value for '{question.name}'.", file=self.output)

    def _read(self, question, answers):
        default = question.default_for(answers)
        if question.type == "confirm":
            return click.confirm(question.message, default=bool(default))
        if question.type == "list":
            return self._read_choice(question, answers, default)
        return click.prompt(
            question.message,
            default=default,
            hide_input=question.type == "password",
            show_default=question.type != "password",
        )

    def _read_choice(self, question, answers, default):
        choices = _normalize_choices(question.choices_for(answers))
        if not choices:
            raise InterviewConfigError(
                f"list question '{question.name}' has no choices", "ClickPromptEngine"
            )
        click.echo(question.message, file=self.output)
        for i, (label, _) in enumerate(choices):
            click.echo(f"  {i + 1}) {label}", file=self.output)
        index = click.prompt(
            f"Enter your choice (1-{len(choices)})",
            type=click.IntRange(1, len(choices)),
            default=_default_choice_index(choices, default),
        )
        return choices[index - 1][1]
