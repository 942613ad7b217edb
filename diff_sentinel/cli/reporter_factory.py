import os
from collections.abc import Mapping
from enum import Enum

from rich.console import Console

from diff_sentinel.cli.formatters.console_reporter import ConsoleReporter
from diff_sentinel.domain.ports.reporter_port import ReporterPort
from diff_sentinel.infrastructure.reporting.github_actions_reporter import GitHubActionsReporter


class ReporterKind(str, Enum):
    AUTO = "auto"
    GITHUB = "github"
    CONSOLE = "console"


def running_in_github_actions(env: Mapping[str, str] | None = None) -> bool:
    env = os.environ if env is None else env
    return env.get("GITHUB_ACTIONS") == "true"


def create_reporter(
    kind: ReporterKind,
    console: Console,
    env: Mapping[str, str] | None = None,
) -> ReporterPort:
    """Pick the reporting sink; ``auto`` follows the GITHUB_ACTIONS variable."""
    if kind == ReporterKind.AUTO:
        kind = ReporterKind.GITHUB if running_in_github_actions(env) else ReporterKind.CONSOLE

    if kind == ReporterKind.GITHUB:
        return GitHubActionsReporter(stream=console.file, env=env)
    return ConsoleReporter(console)
