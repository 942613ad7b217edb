from pydantic import BaseModel

from diff_sentinel.domain.value_objects.command_result import CommandResult


class PipelineReport(BaseModel, frozen=True):
    """Aggregate view over the results of one pipeline run."""

    results: list[CommandResult]

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def failures(self) -> list[CommandResult]:
        return [r for r in self.results if not r.ok]

    @property
    def failure_count(self) -> int:
        return len(self.failures)

    @property
    def all_passed(self) -> bool:
        return self.failure_count == 0
