"""Answer layers and the confirmation inversion rule."""

from dataclasses import dataclass


@dataclass
class ConfirmationAnswers:
    """Answers to a proceed / restart / abort confirmation."""

    proceed: bool = False
    restart: bool = False
    abort: bool = False

    @classmethod
    def from_answers(cls, answers):
        return cls(
            proceed=bool(answers.get("proceed")),
            restart=bool(answers.get("restart")),
            abort=bool(answers.get("abort")),
        )


def merge_answers(*layers) -> dict:
    """Merge answer mappings left to right; later layers win on shared keys."""
    merged = {}
    for layer in layers:
        merged.update(layer or {})
    return merged


def apply_inversion(invert: bool, raw) -> bool:
    """Return the effective value of a yes/no answer.

    With ``invert`` set, a "yes" counts as "no" and vice versa, so one
    "Try again?" question can serve both senses.
    """
    return ((1 if invert else 0) ^ (1 if raw else 0)) == 1
