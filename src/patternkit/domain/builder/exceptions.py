from patternkit.domain.core.exceptions import DomainException


class StepFailedError(DomainException):
    """Raised when a build step fails; assembly is aborted at that step."""
    def __init__(self, step: str, cause: Exception):
        super().__init__(f"Build step '{step}' failed: {cause}")
        self.step = step
        self.cause = cause
