"""Unit tests for ReportingGate."""

from diff_sentinel.application.reporting_gate import (
    ReportingGate,
    build_command_failure_message,
)
from diff_sentinel.domain.value_objects.command_result import CommandResult
from diff_sentinel.domain.value_objects.gate_decision import GateOutcome


class TestCommandFailureGate:
    def test_no_failures_sets_zero_and_continues(
        self, reporter, make_config, make_diff_port
    ) -> None:
        gate = ReportingGate(reporter, make_diff_port(), make_config())

        decision = gate.check_commands([CommandResult.success("a")])

        assert decision.outcome == GateOutcome.CONTINUE
        assert reporter.outputs["command_failures"] == "0"
        assert reporter.messages("group") == []

    def test_failures_warn_and_continue_by_default(
        self, reporter, make_config, make_diff_port, make_failure
    ) -> None:
        gate = ReportingGate(reporter, make_diff_port(), make_config())
        results = [
            make_failure("make gen", 2, stderr="missing tool"),
            make_failure("make fmt", 1),
        ]

        decision = gate.check_commands(results)

        assert decision.outcome == GateOutcome.CONTINUE
        assert reporter.outputs["command_failures"] == "2"
        assert reporter.messages("group") == ["Command failures"]
        assert reporter.messages("warning") == [
            "Command failed: make gen",
            "Exit code: 2",
            "Command failed: make fmt",
            "Exit code: 1",
        ]
        assert reporter.messages("error") == ["missing tool"]

    def test_signal_failure_omits_exit_code_warning(
        self, reporter, make_config, make_diff_port
    ) -> None:
        gate = ReportingGate(reporter, make_diff_port(), make_config())
        killed = CommandResult.process_failure(
            "sleep 99", exit_code=None, signal="SIGTERM", message="killed"
        )

        gate.check_commands([killed])

        assert reporter.messages("warning") == ["Command failed: sleep 99"]

    def test_fail_on_command_error_aborts_with_every_failure(
        self, reporter, make_config, make_diff_port, make_failure
    ) -> None:
        config = make_config(fail_on_command_error=True)
        gate = ReportingGate(reporter, make_diff_port(), config)
        spawn = CommandResult.spawn_failure("weird", OSError("cannot spawn"))

        decision = gate.check_commands([make_failure("make gen", 2), spawn])

        assert decision.outcome == GateOutcome.FAIL
        assert decision.message == (
            "Command execution failed (2 failures):\n"
            "- make gen (exit code: 2): Command failed with exit code 2: make gen\n"
            "- weird (exit code: null): cannot spawn"
        )

    def test_build_command_failure_message_single(self, make_failure) -> None:
        message = build_command_failure_message([make_failure("x", 3)])

        assert message.splitlines()[0] == "Command execution failed (1 failures):"
        assert len(message.splitlines()) == 2


class TestDiffGate:
    async def test_clean_tree_succeeds_early(self, reporter, make_config, make_diff_port) -> None:
        diff_port = make_diff_port()
        gate = ReportingGate(reporter, diff_port, make_config())

        decision = await gate.check_diff()

        assert decision.outcome == GateOutcome.SUCCEED_EARLY
        assert reporter.outputs == {"has_diff": "false"}
        assert reporter.messages("notice") == ["Working tree is clean"]
        assert reporter.summaries == ["# Diff Sentinel\n\nNo uncommitted changes detected\n"]
        assert diff_port.list_calls == 0
        assert diff_port.printed == []

    async def test_diff_fails_with_configured_message(
        self, reporter, make_config, make_diff_port
    ) -> None:
        diff_port = make_diff_port(["src/gen.py", "README.md"])
        config = make_config(fail_message="Run make gen and commit.")
        gate = ReportingGate(reporter, diff_port, config)

        decision = await gate.check_diff()

        assert decision.outcome == GateOutcome.FAIL
        assert decision.message == "Run make gen and commit."
        assert reporter.outputs["has_diff"] == "true"
        assert reporter.outputs["changed_files"] == "src/gen.py\nREADME.md"
        assert reporter.outputs["diff_count"] == "2"
        assert diff_port.printed == [["src/gen.py", "README.md"]]

    async def test_diff_sections_are_grouped(self, reporter, make_config, make_diff_port) -> None:
        gate = ReportingGate(reporter, make_diff_port(["a.py"]), make_config())

        await gate.check_diff()

        assert reporter.messages("group") == ["Changed files", "Diff"]
        assert "- a.py" in reporter.messages("info")

    async def test_diff_summary_lists_files_and_fix(
        self, reporter, make_config, make_diff_port
    ) -> None:
        gate = ReportingGate(reporter, make_diff_port(["a.py"]), make_config())

        await gate.check_diff()

        (summary,) = reporter.summaries
        assert summary.startswith("# Diff Sentinel Failed\n")
        assert "Generated or formatted files are out of date.\n" in summary
        assert "### Changed files\n\n- a.py\n" in summary
        assert "### How to fix\n" in summary
        assert "```bash\nmake generate\nmake fmt\n```" in summary

    async def test_diff_without_fail_on_diff_continues(
        self, reporter, make_config, make_diff_port
    ) -> None:
        gate = ReportingGate(reporter, make_diff_port(["a.py"]), make_config(fail_on_diff=False))

        decision = await gate.check_diff()

        assert decision.outcome == GateOutcome.CONTINUE
        assert reporter.outputs["changed_files"] == "a.py"
        assert reporter.outputs["diff_count"] == "1"
