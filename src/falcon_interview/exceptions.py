"""Error types raised while configuring prompts and interviews."""


class InterviewConfigError(ValueError):
    """Malformed options detected before any prompting begins."""

    def __init__(self, message: str, source: str | None = None):
        super().__init__(message)
        self.source = source

    def __str__(self) -> str:
        if self.source:
            return f"{self.source}: {super().__str__()}"
        return super().__str__()
