from unittest.mock import patch

import pytest

from diff_sentinel.infrastructure.process.shell_command_runner import ShellCommandRunner


@pytest.fixture
def runner() -> ShellCommandRunner:
    return ShellCommandRunner()


class TestShellCommandRunner:
    async def test_successful_command(self, runner: ShellCommandRunner) -> None:
        result = await runner.run("echo hello")

        assert result.ok is True
        assert result.stdout == "hello\n"
        assert result.stderr == ""
        assert result.exit_code is None
        assert result.signal is None
        assert result.message is None

    async def test_non_zero_exit(self, runner: ShellCommandRunner) -> None:
        result = await runner.run("echo oops >&2; exit 2")

        assert result.ok is False
        assert result.exit_code == 2
        assert result.signal is None
        assert result.stderr == "oops\n"
        assert result.message == "Command failed with exit code 2: echo oops >&2; exit 2"

    async def test_shell_features_work(self, runner: ShellCommandRunner) -> None:
        result = await runner.run("printf 'a\\nb\\n' | wc -l | tr -d ' '")

        assert result.ok is True
        assert result.stdout.strip() == "2"

    async def test_killed_by_signal(self, runner: ShellCommandRunner) -> None:
        result = await runner.run("kill -TERM $$")

        assert result.ok is False
        assert result.exit_code is None
        assert result.signal == "SIGTERM"
        assert result.message is not None
        assert "SIGTERM" in result.message

    async def test_spawn_failure_is_captured(self, runner: ShellCommandRunner) -> None:
        with patch(
            "diff_sentinel.infrastructure.process.shell_command_runner."
            "asyncio.create_subprocess_shell",
            side_effect=FileNotFoundError("/bin/sh not found"),
        ):
            result = await runner.run("echo hi")

        assert result.ok is False
        assert result.message == "/bin/sh not found"
        assert result.exit_code is None
        assert result.signal is None
        assert result.stdout == ""
        assert result.stderr == ""

    async def test_unknown_command_is_exit_127(self, runner: ShellCommandRunner) -> None:
        result = await runner.run("definitely-not-a-real-command-xyz")

        assert result.ok is False
        assert result.exit_code == 127

    async def test_multiline_command_message_is_summarized(
        self, runner: ShellCommandRunner
    ) -> None:
        result = await runner.run("true\nfalse")

        assert result.exit_code == 1
        assert result.message == "Command failed with exit code 1: true..."
