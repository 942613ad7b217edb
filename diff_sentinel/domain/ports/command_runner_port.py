from abc import ABC, abstractmethod

from diff_sentinel.domain.value_objects.command_result import CommandResult


class CommandRunnerPort(ABC):
    """Port for running a single shell command."""

    @abstractmethod
    async def run(self, command: str) -> CommandResult:
        """Run the command and return its classified result.

        Implementations never raise: every failure becomes ``ok=False``.
        """
