"""A sample interview that exercises groups, redo prompts and final confirmation."""

import os

from falcon_interview.display import answers_to_rows
from falcon_interview.interview import Interview
from falcon_interview.library.filesystem import ProvideBaseDirectory
from falcon_interview.library.general import ConfirmProceedRestart
from falcon_interview.questions import Question

LICENSES = ["MIT", "Apache-2.0", "BSD-3-Clause"]


def _not_writable(group_answers, _user_answers):
    directory = group_answers["base_directory"]
    if os.access(directory, os.W_OK):
        return False
    return f"Cannot write to {directory}"


def _project_questions():
    return [
        Question(name="project_name", message="Project name", default="my-project"),
        Question(name="description", message="Short description", default=""),
        Question(name="open_source", type="confirm", message="Is this project open source?"),
    ]


def _keep_values():
    return [Question(name="restart", type="confirm", message="Keep these values?", default=True)]


def build_sample_interview(
    base_directory, contains=".", invert_confirmation=False, engine=None, output=None,
):
    """Build the playground interview.

    Args:
        base_directory: Default answer for the base directory question.
        contains: Name that must exist inside the chosen directory.
        invert_confirmation: Flip the meaning of the final confirmation answers.
        engine: Prompt engine (defaults to the click terminal engine).
        output: Stream for titles, tables and status messages.
    """
    default_answers = {
        "base_directory": base_directory,
        "project_name": "my-project",
        "open_source": False,
        "license": None,
    }

    def confirmation():
        return ConfirmProceedRestart(interview.external_context()).build()

    interview = Interview(
        default_answers,
        confirmation=confirmation,
        invert_confirmation=invert_confirmation,
        display=answers_to_rows,
        display_header="Review your settings:",
        engine=engine,
        output=output,
    )
    interview.create_group(
        ProvideBaseDirectory(interview.external_context(), contains),
        abort=_not_writable,
        title="Project location",
    )
    interview.create_group(
        _project_questions,
        confirmation=_keep_values,
        invert_confirmation=True,
        display=answers_to_rows,
        title="Project details",
    )
    interview.create_group(
        [Question(name="license", type="list", message="Which license?", choices=LICENSES, default="MIT")],
        when=lambda answers: answers.get("open_source") is True,
        title="Licensing",
    )
    return interview
