"""Interviews: ordered groups of prompts with a final proceed/restart/abort step."""

import asyncio
import inspect
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, TextIO

import click

from falcon_interview.answers import ConfirmationAnswers, apply_inversion, merge_answers
from falcon_interview.builder import ExternalContext
from falcon_interview.display import show_answers
from falcon_interview.engine import ClickPromptEngine, PromptEngine
from falcon_interview.exceptions import InterviewConfigError
from falcon_interview.prompt import Prompt
from falcon_interview.questions import question_source

logger = logging.getLogger(__name__)

ABORT_MESSAGE = "Command Aborted"


def _resolve_predicate(result):
    """Return a predicate's value, running it to completion if it is awaitable.

    Must not be called from inside a running event loop.
    """
    if inspect.isawaitable(result):
        return asyncio.run(_await(result))
    return result


async def _await(awaitable):
    return await awaitable


class Outcome(Enum):
    """What the final confirmation decided."""

    PROCEED = "proceed"
    RESTART = "restart"
    ABORT = "abort"


@dataclass
class InterviewStatus:
    """How the last run of an interview ended."""

    aborted: bool = False
    completed: bool = False
    reason: str | None = None


class InterviewGroup:
    """One step of an interview: a prompt plus its visibility and abort rules.

    ``when`` may be a bool or a callable taking the interview's user answers;
    ``None`` means always shown. ``abort`` is called with
    ``(group_answers, user_answers)`` and returns a falsy value to continue
    or a reason to stop the interview. Either callable may be ``async def``.
    """

    def __init__(
        self,
        prompt: Prompt,
        abort: Callable | None = None,
        when=None,
        title: str | None = None,
        output: TextIO | None = None,
    ):
        self.abort = abort
        self.when = when
        self.title = title
        self._prompt = prompt
        self._output = output

    def is_skipped(self, user_answers: dict) -> bool:
        if self.when is None:
            return False
        if callable(self.when):
            return not _resolve_predicate(self.when(user_answers))
        return not self.when

    def prompt(self) -> dict:
        if self.title:
            click.echo(self.title, file=self._output)
        return self._prompt.prompt()


class Interview:
    """Runs groups of prompts in order and merges their answers.

    Answers live in layers: ``default_answers`` (fixed at construction),
    ``user_answers`` (accumulated group by group) and ``final_answers`` (the
    two merged, user answers winning). After the last group an optional
    confirmation decides whether to proceed, run every group again, or abort.
    The outcome is recorded in ``status``.
    """

    def __init__(
        self,
        default_answers: dict,
        *,
        confirmation=None,
        confirmation_header: str = "",
        invert_confirmation: bool = False,
        display=None,
        display_header: str = "",
        shared_data: dict | None = None,
        engine: PromptEngine | None = None,
        output: TextIO | None = None,
    ):
        if not isinstance(default_answers, dict):
            raise InterviewConfigError("default_answers must be a dict", "Interview")
        if display is not None and not callable(display):
            raise InterviewConfigError("display must be callable", "Interview")
        if shared_data is not None and not isinstance(shared_data, dict):
            raise InterviewConfigError("shared_data must be a dict", "Interview")
        self.default_answers = dict(default_answers)
        self.user_answers = {}
        self.status = InterviewStatus()
        self.shared_data = {} if shared_data is None else shared_data
        self._confirmation = None if confirmation is None else question_source(confirmation)
        self._confirmation_header = confirmation_header or ""
        self._invert_confirmation = bool(invert_confirmation)
        self._display = display
        self._display_header = display_header or ""
        self._engine = engine or ClickPromptEngine(output=output)
        self._output = output
        self._groups = []

    @property
    def final_answers(self) -> dict:
        return merge_answers(self.default_answers, self.user_answers)

    @property
    def groups(self) -> list:
        return list(self._groups)

    def external_context(self, dbg_ns: str = __name__) -> ExternalContext:
        """Context for builders that read this interview's answers."""
        return ExternalContext(dbg_ns, context=self, shared_data=self.shared_data)

    def create_group(
        self,
        questions,
        *,
        questions_args=(),
        confirmation=None,
        confirmation_args=(),
        invert_confirmation: bool = False,
        display=None,
        when=None,
        abort=None,
        title: str | None = None,
    ) -> InterviewGroup:
        """Append a group of questions to the interview. Nothing is asked yet."""
        if questions is None:
            raise InterviewConfigError("questions are required", "Interview.create_group")
        if when is not None and not isinstance(when, bool) and not callable(when):
            raise InterviewConfigError("when must be a bool or a callable", "Interview.create_group")
        if abort is not None and not callable(abort):
            raise InterviewConfigError("abort must be callable", "Interview.create_group")
        if title is not None and not isinstance(title, str):
            raise InterviewConfigError("title must be a string", "Interview.create_group")

        prompt = Prompt(
            self.default_answers,
            questions,
            questions_args=questions_args,
            confirmation=confirmation,
            confirmation_args=confirmation_args,
            invert_confirmation=invert_confirmation,
            display=display,
            engine=self._engine,
            output=self._output,
        )
        group = InterviewGroup(prompt, abort=abort, when=when, title=title, output=self._output)
        self._groups.append(group)
        return group

    def start(self) -> dict:
        """Run every group, then the final confirmation, until the run ends.

        A restart runs the whole group list again from the top. Answers
        gathered so far are kept and later groups merge into them.

        Returns:
            The final answers. Check ``status`` to tell completion from abort.
        """
        self.status = InterviewStatus()
        while True:
            if not self._run_groups():
                return self.final_answers
            if self.proceed_restart_abort() is not Outcome.RESTART:
                return self.final_answers
            click.echo("", file=self._output)
            logger.debug("restarting interview with answers %s", self.user_answers)

    def _run_groups(self) -> bool:
        for group in self._groups:
            if group.is_skipped(self.user_answers):
                logger.debug("group '%s' skipped", group.title or "")
                continue
            group_answers = group.prompt()
            self.user_answers = merge_answers(self.user_answers, group_answers)
            logger.debug("user answers: %s", self.user_answers)
            if group.abort is None:
                continue
            reason = _resolve_predicate(group.abort(group_answers, self.user_answers))
            if reason:
                self._abort(reason)
                return False
        return True

    def proceed_restart_abort(self) -> Outcome:
        """Ask the final confirmation and record the outcome in ``status``."""
        if self._confirmation is None:
            logger.debug("no confirmation questions; proceeding")
            self.status.completed = True
            return Outcome.PROCEED

        show_answers(self._display, self.user_answers, self._output, self._display_header)
        if self._confirmation_header:
            click.echo(self._confirmation_header, file=self._output)

        confirmation_prompt = Prompt(
            {"proceed": False, "restart": False},
            self._confirmation,
            engine=self._engine,
            output=self._output,
        )
        answers = ConfirmationAnswers.from_answers(confirmation_prompt.prompt())
        proceed = apply_inversion(self._invert_confirmation, answers.proceed)
        restart = apply_inversion(self._invert_confirmation, answers.restart)
        logger.debug("confirmation %s -> proceed=%s restart=%s", answers, proceed, restart)

        if not proceed and not restart:
            self._abort(ABORT_MESSAGE)
            return Outcome.ABORT
        if proceed:
            self.status.completed = True
            return Outcome.PROCEED
        return Outcome.RESTART

    def _abort(self, reason):
        message = str(reason)
        click.echo(f"\n{message}", file=self._output)
        self.status = InterviewStatus(aborted=True, completed=False, reason=message)
