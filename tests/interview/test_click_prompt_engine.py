"""Tests for ClickPromptEngine, driven through a click command with scripted input."""

import click
import pytest
from click.testing import CliRunner

from falcon_interview.engine import ClickPromptEngine
from falcon_interview.exceptions import InterviewConfigError
from falcon_interview.questions import Question


def _run(questions, input_text, output=None):
    captured = {}

    @click.command()
    def ask():
        captured["answers"] = ClickPromptEngine(output=output).execute(questions)

    result = CliRunner().invoke(ask, input=input_text)
    return result, captured.get("answers")


@pytest.mark.unit
class TestInputQuestions:

    def test_returns_typed_value(self):
        result, answers = _run([Question(name="name", message="Name")], "vivek\n")
        assert result.exit_code == 0
        assert answers == {"name": "vivek"}

    def test_empty_input_takes_default(self):
        _, answers = _run([Question(name="name", message="Name", default="anon")], "\n")
        assert answers == {"name": "anon"}

    def test_default_can_depend_on_earlier_answers(self):
        questions = [
            Question(name="first", message="First"),
            Question(name="second", message="Second", default=lambda answers: answers["first"] + "!"),
        ]
        _, answers = _run(questions, "hi\n\n")
        assert answers == {"first": "hi", "second": "hi!"}

    def test_filter_applied_to_value(self):
        _, answers = _run([Question(name="name", message="Name", filter=str.upper)], "abc\n")
        assert answers == {"name": "ABC"}

    def test_password_input(self):
        _, answers = _run([Question(name="token", message="Token", type="password")], "s3cret\n")
        assert answers == {"token": "s3cret"}


@pytest.mark.unit
class TestValidation:

    def test_asks_again_until_valid(self):
        question = Question(
            name="name", message="Name",
            validate=lambda value, answers: True if value == "ok" else "Must be ok",
        )
        result, answers = _run([question], "bad\nok\n")
        assert answers == {"name": "ok"}
        assert "Must be ok" in result.output

    def test_false_verdict_shows_generic_message(self):
        question = Question(name="name", message="Name", validate=lambda value, answers: value == "ok")
        result, answers = _run([question], "bad\nok\n")
        assert answers == {"name": "ok"}
        assert "Invalid value for 'name'." in result.output


@pytest.mark.unit
class TestConfirmQuestions:

    def test_yes_returns_true(self):
        _, answers = _run([Question(name="proceed", type="confirm", message="Proceed?")], "y\n")
        assert answers == {"proceed": True}

    def test_empty_input_takes_default(self):
        question = Question(name="restart", type="confirm", message="Restart?", default=True)
        _, answers = _run([question], "\n")
        assert answers == {"restart": True}


@pytest.mark.unit
class TestListQuestions:

    def test_returns_selected_choice(self):
        question = Question(name="license", type="list", message="License", choices=["MIT", "Apache-2.0"])
        result, answers = _run([question], "2\n")
        assert answers == {"license": "Apache-2.0"}
        assert "1) MIT" in result.output
        assert "2) Apache-2.0" in result.output

    def test_default_choice_on_empty_input(self):
        question = Question(
            name="license", type="list", message="License",
            choices=["MIT", "Apache-2.0"], default="Apache-2.0",
        )
        _, answers = _run([question], "\n")
        assert answers == {"license": "Apache-2.0"}

    def test_labelled_choices_return_value(self):
        question = Question(
            name="org", type="list", message="Org",
            choices=[("Production", "prod@example.com"), ("Sandbox", "dev@example.com")],
        )
        result, answers = _run([question], "2\n")
        assert answers == {"org": "dev@example.com"}
        assert "2) Sandbox" in result.output

    def test_choices_go_to_output_and_prompt_line_to_terminal(self, output):
        question = Question(name="license", type="list", message="License", choices=["MIT", "Apache-2.0"])
        result, answers = _run([question], "1\n", output=output)
        assert answers == {"license": "MIT"}
        assert "1) MIT" in output.getvalue()
        assert "1) MIT" not in result.output
        assert "Enter your choice (1-2)" in result.output
        assert "Enter your choice" not in output.getvalue()

    def test_validation_message_goes_to_output(self, output):
        question = Question(
            name="name", message="Name",
            validate=lambda value, answers: True if value == "ok" else "Must be ok",
        )
        result, _ = _run([question], "bad\nok\n", output=output)
        assert "Must be ok" in output.getvalue()
        assert "Name" in result.output

    def test_no_choices_is_a_configuration_error(self):
        question = Question(name="org", type="list", message="Org", choices=[])
        result, _ = _run([question], "1\n")
        assert isinstance(result.exception, InterviewConfigError)


@pytest.mark.unit
class TestQuestionVisibility:

    def test_hidden_question_gets_no_answer(self):
        questions = [
            Question(name="proceed", type="confirm", message="Proceed?"),
            Question(name="restart", type="confirm", message="Restart?",
                     when=lambda answers: not answers["proceed"]),
        ]
        _, answers = _run(questions, "y\n")
        assert answers == {"proceed": True}

    def test_static_false_when_skips(self):
        _, answers = _run([Question(name="name", message="Name", when=False)], "")
        assert answers == {}
