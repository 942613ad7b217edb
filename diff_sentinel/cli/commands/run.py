import asyncio

import typer
from loguru import logger
from rich.console import Console

from diff_sentinel.application.sentinel import EXIT_FAILURE, DiffSentinel
from diff_sentinel.cli.banner import show_banner
from diff_sentinel.cli.reporter_factory import ReporterKind, create_reporter
from diff_sentinel.domain.errors import ConfigurationError, describe_exception
from diff_sentinel.infrastructure.config.action_inputs import load_action_inputs
from diff_sentinel.infrastructure.git.git_diff_adapter import GitDiffAdapter
from diff_sentinel.infrastructure.process.shell_command_runner import ShellCommandRunner


def run_sentinel(
    commands: list[str] | None = typer.Option(
        None,
        "--run",
        "-r",
        help="Command to run (repeatable). Defaults to the INPUT_RUN lines.",
    ),
    fail_message: str | None = typer.Option(
        None,
        "--fail-message",
        help="Message shown when a diff is detected",
    ),
    fail_on_command_error: bool | None = typer.Option(
        None,
        "--fail-on-command-error/--no-fail-on-command-error",
        help="Fail the run if any command failed [default: INPUT_FAIL-ON-COMMAND-ERROR or false]",
        show_default=False,
    ),
    fail_on_diff: bool | None = typer.Option(
        None,
        "--fail-on-diff/--no-fail-on-diff",
        help="Fail the run if uncommitted changes are found [default: INPUT_FAIL-ON-DIFF or true]",
        show_default=False,
    ),
    reporter_kind: ReporterKind = typer.Option(
        ReporterKind.AUTO,
        "--reporter",
        help="Reporting sink: auto, github or console",
    ),
    banner: bool = typer.Option(True, "--banner/--no-banner", help="Print the startup banner"),
) -> None:
    """Run commands, then fail if they left uncommitted changes."""
    console = Console()
    if banner:
        show_banner(console)

    reporter = create_reporter(reporter_kind, console)

    # Options left unset are None and fall through to the INPUT_* values
    overrides = {
        "commands": commands or None,
        "fail_message": fail_message,
        "fail_on_command_error": fail_on_command_error,
        "fail_on_diff": fail_on_diff,
    }
    try:
        config = load_action_inputs(overrides=overrides)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        reporter.set_failed(describe_exception(e))
        raise typer.Exit(EXIT_FAILURE) from None

    logger.debug(f"Resolved configuration: {config.model_dump()}")

    sentinel = DiffSentinel(
        config=config,
        runner=ShellCommandRunner(),
        diff_port=GitDiffAdapter(".", console=console),
        reporter=reporter,
    )
    exit_code = asyncio.run(sentinel.run())
    raise typer.Exit(exit_code)
