from diff_sentinel.domain.value_objects.captured_output import (
    BytesOutput,
    CapturedOutput,
    LinesOutput,
    TextOutput,
    UnrecognizedOutput,
    capture_output,
    normalize_output,
    output_to_text,
)
from diff_sentinel.domain.value_objects.command_result import CommandResult
from diff_sentinel.domain.value_objects.diff_state import DiffState
from diff_sentinel.domain.value_objects.gate_decision import GateDecision, GateOutcome
from diff_sentinel.domain.value_objects.pipeline_report import PipelineReport
from diff_sentinel.domain.value_objects.sentinel_config import (
    DEFAULT_FAIL_MESSAGE,
    SentinelConfig,
)
from diff_sentinel.domain.value_objects.summary_document import (
    BlockKind,
    SummaryBlock,
    SummaryDocument,
)

__all__ = [
    # Captured output
    "BytesOutput",
    "CapturedOutput",
    "LinesOutput",
    "TextOutput",
    "UnrecognizedOutput",
    "capture_output",
    "normalize_output",
    "output_to_text",
    # Results
    "CommandResult",
    "PipelineReport",
    # Diff and gates
    "DiffState",
    "GateDecision",
    "GateOutcome",
    # Config
    "DEFAULT_FAIL_MESSAGE",
    "SentinelConfig",
    # Summary
    "BlockKind",
    "SummaryBlock",
    "SummaryDocument",
]
