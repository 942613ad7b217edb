from loguru import logger

from diff_sentinel.domain.ports.diff_port import DiffPort
from diff_sentinel.domain.ports.reporter_port import ReporterPort
from diff_sentinel.domain.value_objects.command_result import CommandResult
from diff_sentinel.domain.value_objects.gate_decision import GateDecision
from diff_sentinel.domain.value_objects.pipeline_report import PipelineReport
from diff_sentinel.domain.value_objects.sentinel_config import SentinelConfig
from diff_sentinel.domain.value_objects.summary_document import SummaryDocument

SUMMARY_TITLE = "Diff Sentinel"


def format_exit_code(exit_code: int | None) -> str:
    return "null" if exit_code is None else str(exit_code)


def build_command_failure_message(failures: list[CommandResult]) -> str:
    """One header line plus one line per failed command."""
    lines = [f"Command execution failed ({len(failures)} failures):"]
    lines.extend(
        f"- {f.command} (exit code: {format_exit_code(f.exit_code)}): {f.message}"
        for f in failures
    )
    return "\n".join(lines)


class ReportingGate:
    """Turns command results and working-tree state into gate decisions.

    Both gates emit their outputs and log sections as a side effect and
    return a GateDecision; terminating the process is left to the caller.
    """

    def __init__(
        self,
        reporter: ReporterPort,
        diff_port: DiffPort,
        config: SentinelConfig,
    ) -> None:
        self.reporter = reporter
        self.diff_port = diff_port
        self.config = config

    def check_commands(self, results: list[CommandResult]) -> GateDecision:
        report = PipelineReport(results=results)
        self.reporter.set_output("command_failures", str(report.failure_count))

        if report.all_passed:
            return GateDecision.proceed()

        failures = report.failures
        with self.reporter.group("Command failures"):
            for f in failures:
                self.reporter.warning(f"Command failed: {f.command}")
                if f.exit_code is not None:
                    self.reporter.warning(f"Exit code: {f.exit_code}")
                if f.stderr:
                    self.reporter.error(f.stderr)

        if self.config.fail_on_command_error:
            logger.error(f"{report.failure_count} of {report.total} commands failed")
            return GateDecision.fail_with(build_command_failure_message(failures))

        logger.warning(
            f"{report.failure_count} of {report.total} commands failed, continuing to diff check"
        )
        return GateDecision.proceed()

    async def check_diff(self) -> GateDecision:
        state = await self.diff_port.get_diff_state()
        self.reporter.set_output("has_diff", "true" if state.has_diff else "false")

        if not state.has_diff:
            self.reporter.notice("Working tree is clean")
            self.reporter.write_summary(
                SummaryDocument()
                .add_heading(SUMMARY_TITLE)
                .add_raw("No uncommitted changes detected\n")
            )
            return GateDecision.succeed_early("Working tree is clean")

        changed_files = state.changed_files
        self.reporter.set_output("changed_files", "\n".join(changed_files))
        self.reporter.set_output("diff_count", str(state.count))
        logger.info(f"Detected {state.count} changed files")

        with self.reporter.group("Changed files"):
            for path in changed_files:
                self.reporter.info(f"- {path}")

        with self.reporter.group("Diff"):
            await self.diff_port.print_diff(changed_files)

        self.reporter.write_summary(self.build_diff_summary(changed_files))

        if self.config.fail_on_diff:
            return GateDecision.fail_with(self.config.fail_message)
        return GateDecision.proceed()

    def build_diff_summary(self, changed_files: list[str]) -> SummaryDocument:
        return (
            SummaryDocument()
            .add_heading(f"{SUMMARY_TITLE} Failed", 1)
            .add_raw(f"{self.config.fail_message}\n")
            .add_heading("Changed files", 3)
            .add_list(changed_files)
            .add_heading("How to fix", 3)
            .add_code_block("\n".join(self.config.commands), "bash")
        )
