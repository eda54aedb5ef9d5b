"""Builders: objects that produce questions from the state of a running interview."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from falcon_interview.exceptions import InterviewConfigError

DEFAULT_DBG_NS = "falcon_interview.builder"

_CONTEXT_ATTRIBUTES = ("default_answers", "user_answers", "final_answers", "shared_data")


@dataclass
class ExternalContext:
    """What a builder needs to know about the session that uses it.

    ``context`` is the object whose answers the builder reads (normally an
    Interview); ``shared_data`` is a mutable dict shared by every builder of
    that session.
    """

    dbg_ns: str
    context: Any = None
    shared_data: dict = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.dbg_ns, str) or not self.dbg_ns:
            raise InterviewConfigError("dbg_ns must be a non-empty string", "ExternalContext")
        if not isinstance(self.shared_data, dict):
            raise InterviewConfigError("shared_data must be a dict", "ExternalContext")

    def copy(self, new_dbg_ns: str) -> "ExternalContext":
        return ExternalContext(new_dbg_ns, context=self.context, shared_data=self.shared_data)


class Builder(ABC):
    """Base class for anything built on demand from an external context."""

    def __init__(self, ext_ctx: ExternalContext | None = None):
        if ext_ctx is None:
            ext_ctx = ExternalContext(DEFAULT_DBG_NS)
        elif not isinstance(ext_ctx, ExternalContext):
            raise InterviewConfigError(
                f"expected an ExternalContext, got {type(ext_ctx).__name__}",
                type(self).__name__,
            )
        self.ext_ctx = ext_ctx
        self.logger = logging.getLogger(f"{ext_ctx.dbg_ns}.{type(self).__name__}")

    @abstractmethod
    def build(self):
        ...


class QuestionsBuilder(Builder):
    """A builder whose ``build()`` returns a list of questions."""

    @abstractmethod
    def build(self) -> list:
        ...


class InterviewQuestionsBuilder(QuestionsBuilder):
    """A questions builder that reads the answers of the interview it serves.

    The external context must point at an object exposing the answer layers
    and the same ``shared_data`` dict the context carries.
    """

    def __init__(self, ext_ctx: ExternalContext):
        if ext_ctx is None:
            raise InterviewConfigError("an ExternalContext is required", type(self).__name__)
        super().__init__(ext_ctx)
        _validate_interview_context(ext_ctx, type(self).__name__)

    @property
    def context(self):
        return self.ext_ctx.context

    @property
    def default_answers(self) -> dict:
        return self.context.default_answers

    @property
    def user_answers(self) -> dict:
        return self.context.user_answers

    @property
    def final_answers(self) -> dict:
        return self.context.final_answers

    @property
    def shared_data(self) -> dict:
        return self.ext_ctx.shared_data


def _validate_interview_context(ext_ctx, source):
    context = ext_ctx.context
    if context is None:
        raise InterviewConfigError("ExternalContext.context is required", source)
    missing = [name for name in _CONTEXT_ATTRIBUTES if not hasattr(context, name)]
    if missing:
        raise InterviewConfigError(
            f"ExternalContext.context is missing: {', '.join(missing)}", source
        )
    if context.shared_data is not ext_ctx.shared_data:
        raise InterviewConfigError(
            "ExternalContext.shared_data must be the same object as the context's shared_data",
            source,
        )


def optional_text(value, name, source):
    """Return an optional prompt string, rejecting empty or non-string overrides."""
    if value is None:
        return None
    if not isinstance(value, str) or not value:
        raise InterviewConfigError(f"{name} must be a non-empty string", source)
    return value
