"""Error taxonomy for a review run.

VcsError, ConfigError and UpstreamError abort the run. ParseError is raised
by the response interpreter and always recovered there.
"""


class ReviewAgentError(Exception):
    """Base class for every error raised by the review pipeline."""


class VcsError(ReviewAgentError):
    def __init__(self, message: str, returncode: int | None = None, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr

    def __str__(self) -> str:
        message = super().__str__()
        if self.stderr.strip():
            return f"{message}\n{self.stderr.strip()}"
        return message


class ConfigError(ReviewAgentError):
    pass


class UpstreamError(ReviewAgentError):
    pass


class ParseError(ReviewAgentError):
    pass
