import asyncio
import signal
import time

from loguru import logger

from diff_sentinel.domain.ports.command_runner_port import CommandRunnerPort
from diff_sentinel.domain.value_objects.captured_output import normalize_output
from diff_sentinel.domain.value_objects.command_result import CommandResult


def _signal_name(signum: int) -> str:
    try:
        return signal.Signals(signum).name
    except ValueError:
        return f"SIG{signum}"


def _summarize(command: str, limit: int = 120) -> str:
    first_line = command.splitlines()[0] if command else ""
    if len(first_line) > limit or first_line != command:
        return first_line[:limit] + "..."
    return first_line


class ShellCommandRunner(CommandRunnerPort):
    """Runs commands through the host shell and waits for them to finish."""

    async def run(self, command: str) -> CommandResult:
        start = time.monotonic()
        try:
            proc = await asyncio.create_subprocess_shell(
                command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
            stdout, stderr = await proc.communicate()
        except Exception as e:
            logger.error("Command '{}' could not be started: {}", command, e)
            return CommandResult.spawn_failure(command, e)

        duration_ms = int((time.monotonic() - start) * 1000)
        returncode = proc.returncode

        if returncode == 0:
            logger.debug("Command '{}' succeeded in {}ms", command, duration_ms)
            return CommandResult.success(
                command,
                stdout=normalize_output(stdout),
                stderr=normalize_output(stderr),
            )

        # Negative return codes mean the child was terminated by that signal.
        if returncode is not None and returncode < 0:
            exit_code = None
            signal_name = _signal_name(-returncode)
            message = f"Command was killed with {signal_name}: {_summarize(command)}"
        else:
            exit_code = returncode
            signal_name = None
            message = f"Command failed with exit code {returncode}: {_summarize(command)}"

        logger.warning("{} ({}ms)", message, duration_ms)
        return CommandResult.process_failure(
            command,
            exit_code=exit_code,
            signal=signal_name,
            message=message,
            stdout=normalize_output(stdout),
            stderr=normalize_output(stderr),
        )
