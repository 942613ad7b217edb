from diff_sentinel.application.command_pipeline import CommandPipeline
from diff_sentinel.application.reporting_gate import ReportingGate
from diff_sentinel.application.sentinel import EXIT_FAILURE, EXIT_SUCCESS, DiffSentinel

__all__ = [
    "EXIT_FAILURE",
    "EXIT_SUCCESS",
    "CommandPipeline",
    "DiffSentinel",
    "ReportingGate",
]
