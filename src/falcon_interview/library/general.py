"""General-purpose question builders."""

from falcon_interview.builder import ExternalContext, InterviewQuestionsBuilder, optional_text
from falcon_interview.questions import Question

DEFAULT_PROMPT_CONFIRMATION = "Would you like to proceed based on the above settings?"
DEFAULT_PROMPT_START_OVER = "Would you like to start again and enter new values?"


class ConfirmProceedRestart(InterviewQuestionsBuilder):
    """Asks whether to proceed with the answers given so far.

    Answering "no" leads to a second question asking whether to start over.
    Declining both means the operation is aborted.
    """

    def __init__(
        self,
        ext_ctx: ExternalContext,
        prompt_confirmation: str | None = None,
        prompt_start_over: str | None = None,
    ):
        super().__init__(ext_ctx)
        source = type(self).__name__
        self.prompt_confirmation = (
            optional_text(prompt_confirmation, "prompt_confirmation", source)
            or DEFAULT_PROMPT_CONFIRMATION
        )
        self.prompt_start_over = (
            optional_text(prompt_start_over, "prompt_start_over", source)
            or DEFAULT_PROMPT_START_OVER
        )

    def build(self) -> list:
        return [
            Question(
                name="proceed",
                type="confirm",
                message=self.prompt_confirmation,
                default=False,
            ),
            Question(
                name="restart",
                type="confirm",
                message=self.prompt_start_over,
                default=True,
                when=lambda answers: not answers.get("proceed"),
            ),
        ]
