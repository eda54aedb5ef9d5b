"""Question builders for file system locations."""

import os

from falcon_interview.builder import ExternalContext, InterviewQuestionsBuilder, optional_text
from falcon_interview.exceptions import InterviewConfigError
from falcon_interview.questions import Question


def filter_local_path(local_path: str) -> str:
    """Resolve a local path to an absolute path."""
    if not isinstance(local_path, str):
        raise InterviewConfigError("local_path must be a string", "filter_local_path")
    return os.path.abspath(os.path.expanduser(local_path))


class ProvideBaseDirectory(InterviewQuestionsBuilder):
    """Asks for a directory that must contain a given file or directory.

    The answer is stored as ``base_directory``. Its default is the user's
    previous answer, falling back to the interview's default answer, which
    must be present.
    """

    def __init__(
        self,
        ext_ctx: ExternalContext,
        file_or_dir_name: str,
        prompt_provide_path: str | None = None,
        error_not_found: str | None = None,
        validate_function=None,
    ):
        super().__init__(ext_ctx)
        source = type(self).__name__
        if not isinstance(file_or_dir_name, str) or not file_or_dir_name:
            raise InterviewConfigError("file_or_dir_name must be a non-empty string", source)
        if validate_function is not None and not callable(validate_function):
            raise InterviewConfigError("validate_function must be callable", source)
        self.file_or_dir_name = file_or_dir_name
        self.validate_function = validate_function
        self.prompt_provide_path = (
            optional_text(prompt_provide_path, "prompt_provide_path", source)
            or f"Path to the directory containing {file_or_dir_name}?"
        )
        self.error_not_found = (
            optional_text(error_not_found, "error_not_found", source)
            or f"Specified directory does not contain '{file_or_dir_name}'"
        )

    def build(self) -> list:
        default_directory = self.default_answers.get("base_directory")
        if not isinstance(default_directory, str):
            raise InterviewConfigError(
                "default answers must include a 'base_directory' string", type(self).__name__
            )
        return [
            Question(
                name="base_directory",
                type="input",
                message=self.prompt_provide_path,
                default=self.user_answers.get("base_directory", default_directory),
                filter=filter_local_path,
                validate=self._validate,
            )
        ]

    def _validate(self, user_input, _answers):
        complete_path = os.path.join(user_input, self.file_or_dir_name)
        if not os.path.exists(complete_path):
            self.logger.debug("path not found: %s", complete_path)
            return self.error_not_found
        if self.validate_function is not None:
            return self.validate_function(complete_path)
        return True
