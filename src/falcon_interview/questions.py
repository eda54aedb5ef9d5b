"""Question descriptors and the sources that produce them.

A "questions" value given to a Prompt or an Interview group can be a static
list, a function that builds the list, or a builder object with a ``build()``
method. Sources are resolved every time they are read, so questions may
depend on state that changes after construction (choice lists, earlier
answers).
"""

from dataclasses import dataclass, field
from typing import Any, Callable

from falcon_interview.exceptions import InterviewConfigError

QUESTION_TYPES = ("input", "confirm", "list", "password")


@dataclass
class Question:
    """One question shown by a prompt engine."""

    name: str
    message: str
    type: str = "input"
    default: Any = None
    choices: Any = None
    when: Any = True
    validate: Callable[[Any, dict], Any] | None = None
    filter: Callable[[Any], Any] | None = None

    def __post_init__(self):
        if not self.name:
            raise InterviewConfigError("question name must be a non-empty string", "Question")
        if self.type not in QUESTION_TYPES:
            raise InterviewConfigError(
                f"unknown question type '{self.type}' for '{self.name}'", "Question"
            )

    def is_shown(self, answers: dict) -> bool:
        return bool(_value_for(self.when, answers))

    def default_for(self, answers: dict):
        return _value_for(self.default, answers)

    def choices_for(self, answers: dict) -> list:
        return list(_value_for(self.choices, answers) or [])


def _value_for(value, answers):
    if callable(value):
        return value(answers)
    return value


@dataclass(frozen=True)
class Static:
    """A fixed, ordered list of questions."""

    questions: list = field(default_factory=list)


@dataclass(frozen=True)
class Computed:
    """A function that returns questions when called with the stored args."""

    fn: Callable[..., list]


@dataclass(frozen=True)
class Buildable:
    """An object whose no-argument ``build()`` returns questions."""

    builder: Any


def question_source(value):
    """Wrap a raw questions value in the matching source variant.

    Args:
        value: A list of questions, a callable returning one, an object with
            a ``build()`` method, or an existing source.

    Returns:
        A ``Static``, ``Computed`` or ``Buildable`` source.

    Raises:
        InterviewConfigError: If the value cannot produce questions.
    """
    if isinstance(value, (Static, Computed, Buildable)):
        return value
    if isinstance(value, (list, tuple)):
        return Static(list(value))
    if callable(getattr(value, "build", None)):
        return Buildable(value)
    if callable(value):
        return Computed(value)
    raise InterviewConfigError(
        f"expected a list, a callable or a builder, got {type(value).__name__}",
        "question_source",
    )


def resolve(source, args=()) -> list:
    """Resolve a source to a concrete list of questions.

    Nothing is cached; builder exceptions propagate unchanged.
    """
    if isinstance(source, Static):
        return list(source.questions)
    if isinstance(source, Computed):
        return list(source.fn(*args))
    if isinstance(source, Buildable):
        return list(source.builder.build())
    return resolve(question_source(source), args)
