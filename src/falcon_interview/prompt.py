"""A set of questions with an optional "try again?" confirmation."""

import logging
from typing import TextIO

import click

from falcon_interview.answers import ConfirmationAnswers, apply_inversion, merge_answers
from falcon_interview.display import show_answers
from falcon_interview.engine import ClickPromptEngine, PromptEngine
from falcon_interview.exceptions import InterviewConfigError
from falcon_interview.questions import question_source, resolve

logger = logging.getLogger(__name__)


class Prompt:
    """Asks one set of questions, optionally confirming and redoing them.

    ``questions`` and ``confirmation`` may be a list of questions, a callable
    (called with ``questions_args`` / ``confirmation_args``), or a builder
    with ``build()``. They are resolved again on every read.
    """

    def __init__(
        self,
        default_answers: dict,
        questions,
        *,
        questions_args=(),
        confirmation=None,
        confirmation_args=(),
        invert_confirmation: bool = False,
        display=None,
        engine: PromptEngine | None = None,
        output: TextIO | None = None,
    ):
        if not isinstance(default_answers, dict):
            raise InterviewConfigError("default_answers must be a dict", "Prompt")
        if display is not None and not callable(display):
            raise InterviewConfigError("display must be callable", "Prompt")
        self.default_answers = default_answers
        self.user_answers = {}
        self.confirmation_answers = ConfirmationAnswers()
        self._questions = question_source(questions)
        self._questions_args = tuple(questions_args or ())
        self._confirmation = None if confirmation is None else question_source(confirmation)
        self._confirmation_args = tuple(confirmation_args or ())
        self._invert_confirmation = bool(invert_confirmation)
        self._display = display
        self._engine = engine or ClickPromptEngine(output=output)
        self._output = output

    @property
    def questions(self) -> list:
        return resolve(self._questions, self._questions_args)

    @property
    def confirmation(self) -> list | None:
        if self._confirmation is None:
            return None
        return resolve(self._confirmation, self._confirmation_args)

    @property
    def final_answers(self) -> dict:
        return merge_answers(self.default_answers, self.user_answers)

    def prompt(self) -> dict:
        """Ask the questions until the user stops asking to redo them.

        Returns:
            The answers from the last attempt. Earlier attempts are discarded.
        """
        while True:
            questions = self.questions
            logger.debug("prompting %d question(s)", len(questions))
            self.user_answers = self._engine.execute(questions)
            show_answers(self._display, self.user_answers, self._output)
            if not self.confirm_restart():
                return self.user_answers

    def confirm_restart(self) -> bool:
        """Return True when the questions should be asked again."""
        if self._confirmation is None:
            self.confirmation_answers = ConfirmationAnswers(proceed=True, restart=False, abort=False)
            return False

        raw_answers = self._engine.execute(self.confirmation)
        self.confirmation_answers = ConfirmationAnswers.from_answers(raw_answers)
        logger.debug("confirmation answers: %s", raw_answers)
        # Only a literal True proceeds; other truthy values fall through to restart.
        if raw_answers.get("proceed") is True:
            return False

        if not apply_inversion(self._invert_confirmation, self.confirmation_answers.restart):
            return False
        click.echo("", file=self._output)
        return True
