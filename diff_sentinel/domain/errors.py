class DiffSentinelError(Exception):
    """Base class for errors raised by diff-sentinel."""


class ConfigurationError(DiffSentinelError):
    """Raised when inputs are missing or malformed."""


class GitCommandError(DiffSentinelError):
    """Raised when a git invocation exits non-zero."""

    def __init__(self, args: list[str], returncode: int, stderr: str) -> None:
        self.git_args = args
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"git {' '.join(args)} failed ({returncode}): {stderr}")


class SummaryAlreadyWrittenError(DiffSentinelError):
    """Raised when a summary document is written twice."""


def describe_exception(error: BaseException) -> str:
    """Render an exception as a single ``Kind: message`` line."""
    kind = type(error).__name__
    message = " ".join(str(error).split())
    return f"{kind}: {message}" if message else kind
