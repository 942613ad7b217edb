from typing import Self

from pydantic import BaseModel, model_validator


class CommandResult(BaseModel, frozen=True):
    """Outcome of running one shell command."""

    command: str
    ok: bool
    stdout: str = ""
    stderr: str = ""
    exit_code: int | None = None
    signal: str | None = None
    message: str | None = None

    @model_validator(mode="after")
    def check_failure_details(self) -> Self:
        has_details = any(
            detail is not None for detail in (self.exit_code, self.signal, self.message)
        )
        if self.ok and has_details:
            raise ValueError("successful result cannot carry exit_code, signal or message")
        if not self.ok and not has_details:
            raise ValueError("failed result needs an exit_code, signal or message")
        return self

    @classmethod
    def success(cls, command: str, stdout: str = "", stderr: str = "") -> "CommandResult":
        return cls(command=command, ok=True, stdout=stdout, stderr=stderr)

    @classmethod
    def process_failure(
        cls,
        command: str,
        *,
        exit_code: int | None,
        signal: str | None,
        message: str,
        stdout: str = "",
        stderr: str = "",
    ) -> "CommandResult":
        """Child ran and exited non-zero or was killed by a signal."""
        return cls(
            command=command,
            ok=False,
            exit_code=exit_code,
            signal=signal,
            message=message,
            stdout=stdout,
            stderr=stderr,
        )

    @classmethod
    def spawn_failure(cls, command: str, error: BaseException) -> "CommandResult":
        """Child could not be started at all."""
        return cls(command=command, ok=False, message=str(error) or type(error).__name__)
