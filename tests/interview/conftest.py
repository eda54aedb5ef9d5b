"""Shared fixtures for interview tests."""

import io
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(__file__))

from falcon_interview.questions import Question  # noqa: E402


@pytest.fixture
def output():
    return io.StringIO()


def name_question():
    return Question(name="name", message="What is your name?")


def confirmation_questions():
    return [
        Question(name="proceed", type="confirm", message="Proceed?"),
        Question(name="restart", type="confirm", message="Start over?"),
    ]
