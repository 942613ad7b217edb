from loguru import logger

from diff_sentinel.domain.ports.command_runner_port import CommandRunnerPort
from diff_sentinel.domain.ports.reporter_port import ReporterPort
from diff_sentinel.domain.value_objects.command_result import CommandResult


class CommandPipeline:
    """Runs every configured command in order and collects the results.

    A failing command never stops the batch: later commands still run so the
    diff check sees the combined effect of all of them.
    """

    def __init__(self, runner: CommandRunnerPort, reporter: ReporterPort) -> None:
        self.runner = runner
        self.reporter = reporter

    async def run_all(self, commands: list[str]) -> list[CommandResult]:
        results: list[CommandResult] = []
        with self.reporter.group("Running commands"):
            for index, command in enumerate(commands, start=1):
                logger.info(f"[{index}/{len(commands)}] Running: {command}")
                self.reporter.info(f"$ {command}")
                result = await self.runner.run(command)
                self._echo(result)
                results.append(result)

        failed = sum(1 for r in results if not r.ok)
        logger.info(f"Ran {len(results)} commands, {failed} failed")
        return results

    def _echo(self, result: CommandResult) -> None:
        for stream in (result.stdout, result.stderr):
            text = stream.rstrip("\n")
            if text:
                self.reporter.command_output(text)
