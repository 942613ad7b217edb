"""Captured process output and its conversion to text.

Output reaches the runner in one of a few shapes. Each shape is tagged once at
the capture boundary by ``capture_output``; everything downstream converts the
tagged value with ``output_to_text``, which is total over the union.
"""

from collections.abc import Sequence
from typing import Annotated, Literal

from pydantic import BaseModel, Field


class TextOutput(BaseModel, frozen=True):
    kind: Literal["text"] = "text"
    value: str


class LinesOutput(BaseModel, frozen=True):
    kind: Literal["lines"] = "lines"
    value: list[str]


class BytesOutput(BaseModel, frozen=True):
    kind: Literal["bytes"] = "bytes"
    value: bytes


class UnrecognizedOutput(BaseModel, frozen=True):
    kind: Literal["unrecognized"] = "unrecognized"


CapturedOutput = Annotated[
    TextOutput | LinesOutput | BytesOutput | UnrecognizedOutput,
    Field(discriminator="kind"),
]


def capture_output(value: object) -> CapturedOutput:
    """Tag a raw captured value with its shape."""
    if isinstance(value, str):
        return TextOutput(value=value)
    if isinstance(value, bytes | bytearray | memoryview):
        return BytesOutput(value=bytes(value))
    if isinstance(value, Sequence) and all(isinstance(chunk, str) for chunk in value):
        return LinesOutput(value=list(value))
    return UnrecognizedOutput()


def output_to_text(output: CapturedOutput) -> str:
    match output:
        case TextOutput(value=text):
            return text
        case LinesOutput(value=lines):
            return "\n".join(lines)
        case BytesOutput(value=raw):
            return raw.decode(errors="replace")
        case _:
            return ""


def normalize_output(value: object) -> str:
    """Convert any captured stdout/stderr value to a single string."""
    return output_to_text(capture_output(value))
