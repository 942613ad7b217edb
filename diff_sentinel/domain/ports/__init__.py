from diff_sentinel.domain.ports.command_runner_port import CommandRunnerPort
from diff_sentinel.domain.ports.diff_port import DiffPort
from diff_sentinel.domain.ports.reporter_port import ReporterPort

__all__ = [
    "CommandRunnerPort",
    "DiffPort",
    "ReporterPort",
]
