import sys
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console

from diff_sentinel import __version__
from diff_sentinel.cli.banner import build_banner
from diff_sentinel.cli.commands import run


def setup_logging(verbose: bool = False, log_file: Path | None = None) -> None:
    """Configure loguru logging.

    Log lines go to stderr so they never interleave with workflow commands on
    stdout.
    """
    logger.remove()

    logger.add(
        sys.stderr,
        format="{time:HH:mm:ss} | {level: <8} | {message}",
        level="DEBUG" if verbose else "WARNING",
    )

    if log_file is not None:
        logger.add(
            log_file,
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
            level="DEBUG",
            rotation="10 MB",
            encoding="utf-8",
        )


app = typer.Typer(
    name="diff-sentinel",
    help="Diff Sentinel - run commands in CI and fail on uncommitted changes",
    no_args_is_help=True,
)

# Register commands
app.command(name="run")(run.run_sentinel)


@app.command(name="version")
def version() -> None:
    """Show the installed version."""
    Console().print(build_banner())


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output", is_eager=True),
    log_file: Path | None = typer.Option(None, "--log-file", help="Also write logs to this file"),
) -> None:
    """Diff Sentinel - run commands in CI and fail on uncommitted changes."""
    setup_logging(verbose=verbose, log_file=log_file)
    logger.debug(f"diff-sentinel {__version__}")


if __name__ == "__main__":
    app()
