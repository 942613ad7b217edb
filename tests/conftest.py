import sys
from collections.abc import Callable, Iterator

import pytest
from loguru import logger

from diff_sentinel.domain.ports.command_runner_port import CommandRunnerPort
from diff_sentinel.domain.ports.diff_port import DiffPort
from diff_sentinel.domain.ports.reporter_port import ReporterPort
from diff_sentinel.domain.value_objects.command_result import CommandResult
from diff_sentinel.domain.value_objects.sentinel_config import SentinelConfig


class RecordingReporter(ReporterPort):
    """In-memory reporter that records every call as (kind, payload)."""

    def __init__(self) -> None:
        super().__init__()
        self.events: list[tuple[str, str]] = []
        self.outputs: dict[str, str] = {}
        self.summaries: list[str] = []

    def start_group(self, title: str) -> None:
        self.events.append(("group", title))

    def end_group(self) -> None:
        self.events.append(("endgroup", ""))

    def info(self, message: str) -> None:
        self.events.append(("info", message))

    def notice(self, message: str) -> None:
        self.events.append(("notice", message))

    def warning(self, message: str) -> None:
        self.events.append(("warning", message))

    def error(self, message: str) -> None:
        self.events.append(("error", message))

    def set_output(self, name: str, value: str) -> None:
        self.outputs[name] = value
        self.events.append(("output", name))

    def _emit_failure(self, message: str) -> None:
        self.events.append(("failed", message))

    def _emit_summary(self, markdown: str) -> None:
        self.summaries.append(markdown)

    def messages(self, kind: str) -> list[str]:
        return [payload for k, payload in self.events if k == kind]


class FakeDiffPort(DiffPort):
    def __init__(self, changed_files: list[str] | None = None) -> None:
        self.changed_files = changed_files or []
        self.printed: list[list[str]] = []
        self.list_calls = 0

    async def has_uncommitted_changes(self) -> bool:
        return bool(self.changed_files)

    async def list_changed_files(self) -> list[str]:
        self.list_calls += 1
        return list(self.changed_files)

    async def print_diff(self, paths: list[str]) -> None:
        self.printed.append(list(paths))


class ScriptedRunner(CommandRunnerPort):
    """Returns canned results keyed by command; unknown commands succeed."""

    def __init__(self, outcomes: dict[str, CommandResult] | None = None) -> None:
        self.outcomes = outcomes or {}
        self.calls: list[str] = []

    async def run(self, command: str) -> CommandResult:
        self.calls.append(command)
        return self.outcomes.get(command, CommandResult.success(command))


def failed(command: str, exit_code: int = 1, stderr: str = "") -> CommandResult:
    return CommandResult.process_failure(
        command,
        exit_code=exit_code,
        signal=None,
        message=f"Command failed with exit code {exit_code}: {command}",
        stderr=stderr,
    )


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def make_config() -> Callable[..., SentinelConfig]:
    def _make(**overrides: object) -> SentinelConfig:
        values: dict[str, object] = {"commands": ["make generate", "make fmt"]}
        values.update(overrides)
        return SentinelConfig(**values)

    return _make


@pytest.fixture
def make_failure() -> Callable[..., CommandResult]:
    return failed


@pytest.fixture
def make_diff_port() -> Callable[..., FakeDiffPort]:
    return FakeDiffPort


@pytest.fixture
def make_runner() -> Callable[..., ScriptedRunner]:
    return ScriptedRunner


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """CLI tests reconfigure loguru; restore a plain stderr sink afterwards."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="WARNING")
