from diff_sentinel.infrastructure.process.shell_command_runner import ShellCommandRunner

__all__ = ["ShellCommandRunner"]
