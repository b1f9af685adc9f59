"""Error types raised by the planner core."""


class MacroPlannerError(Exception):
    """Base class for planner errors."""


class ValidationError(MacroPlannerError):
    """Raised when a profile or ingredient selection is rejected."""

    def __init__(self, problems: list[str]) -> None:
        self.problems = list(problems)
        super().__init__("; ".join(self.problems) or "Invalid input")


class GenerationFailure(MacroPlannerError):
    """Raised when the provider call or its response is unusable.

    ``str(error)`` is safe to show to end users. ``detail`` holds the
    internal diagnostic and is meant for logs only.
    """

    def __init__(self, message: str, detail: str | None = None) -> None:
        self.message = message
        self.detail = detail
        super().__init__(message)
