from enum import Enum

from pydantic import BaseModel, model_validator


class GateOutcome(str, Enum):
    CONTINUE = "continue"
    SUCCEED_EARLY = "succeed_early"
    FAIL = "fail"


class GateDecision(BaseModel, frozen=True):
    """What a gate wants the dispatcher to do next."""

    outcome: GateOutcome
    message: str | None = None

    @model_validator(mode="after")
    def check_message(self) -> "GateDecision":
        if self.outcome == GateOutcome.FAIL and self.message is None:
            raise ValueError("a failing gate decision needs a message")
        return self

    @classmethod
    def proceed(cls) -> "GateDecision":
        return cls(outcome=GateOutcome.CONTINUE)

    @classmethod
    def succeed_early(cls, message: str | None = None) -> "GateDecision":
        return cls(outcome=GateOutcome.SUCCEED_EARLY, message=message)

    @classmethod
    def fail_with(cls, message: str) -> "GateDecision":
        return cls(outcome=GateOutcome.FAIL, message=message)

    @property
    def is_terminal(self) -> bool:
        return self.outcome != GateOutcome.CONTINUE
