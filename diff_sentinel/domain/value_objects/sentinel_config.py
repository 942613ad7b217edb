from pydantic import BaseModel, Field, field_validator

DEFAULT_FAIL_MESSAGE = "Generated or formatted files are out of date."


class SentinelConfig(BaseModel, frozen=True):
    """Resolved inputs for one run."""

    commands: list[str] = Field(description="Shell commands, run in order")
    fail_message: str = DEFAULT_FAIL_MESSAGE
    fail_on_command_error: bool = False
    fail_on_diff: bool = True

    @field_validator("commands", mode="before")
    @classmethod
    def split_commands(cls, v: str | list[str]) -> list[str]:
        """Accept a multi-line string or a list; drop blank lines."""
        lines = v.splitlines() if isinstance(v, str) else v
        commands = [line.strip() for line in lines if line.strip()]
        if not commands:
            raise ValueError("at least one command is required")
        return commands

    @field_validator("fail_message", mode="before")
    @classmethod
    def default_blank_fail_message(cls, v: str | None) -> str:
        return v or DEFAULT_FAIL_MESSAGE
