"""Top-level dispatcher: run commands, apply both gates, settle the exit code."""

from loguru import logger

from diff_sentinel.application.command_pipeline import CommandPipeline
from diff_sentinel.application.reporting_gate import ReportingGate
from diff_sentinel.domain.errors import describe_exception
from diff_sentinel.domain.ports.command_runner_port import CommandRunnerPort
from diff_sentinel.domain.ports.diff_port import DiffPort
from diff_sentinel.domain.ports.reporter_port import ReporterPort
from diff_sentinel.domain.value_objects.gate_decision import GateDecision, GateOutcome
from diff_sentinel.domain.value_objects.sentinel_config import SentinelConfig

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class DiffSentinel:
    def __init__(
        self,
        config: SentinelConfig,
        runner: CommandRunnerPort,
        diff_port: DiffPort,
        reporter: ReporterPort,
    ) -> None:
        self.config = config
        self.reporter = reporter
        self.pipeline = CommandPipeline(runner, reporter)
        self.gate = ReportingGate(reporter, diff_port, config)

    async def evaluate(self) -> GateDecision:
        """Run the pipeline and both gates in order; first terminal decision wins."""
        results = await self.pipeline.run_all(self.config.commands)

        decision = self.gate.check_commands(results)
        if decision.is_terminal:
            return decision

        return await self.gate.check_diff()

    async def run(self) -> int:
        """Run everything and return the process exit code.

        Any exception raised along the way is reported as a single fatal
        failure; outputs set before it stay in place.
        """
        try:
            decision = await self.evaluate()
        except Exception as e:
            logger.exception("Unexpected failure during run")
            self.reporter.set_failed(describe_exception(e))
            return EXIT_FAILURE
        return self.dispatch(decision)

    def dispatch(self, decision: GateDecision) -> int:
        match decision.outcome:
            case GateOutcome.FAIL:
                self.reporter.set_failed(f"Error: {decision.message}")
                return EXIT_FAILURE
            case GateOutcome.SUCCEED_EARLY:
                logger.info(f"Finished early: {decision.message}")
                return EXIT_SUCCESS
            case _:
                return EXIT_SUCCESS
