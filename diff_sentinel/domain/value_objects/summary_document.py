"""Write-once summary document shown at the end of a run."""

from enum import Enum

from pydantic import BaseModel


class BlockKind(str, Enum):
    HEADING = "heading"
    RAW = "raw"
    LIST = "list"
    CODE = "code"


class SummaryBlock(BaseModel, frozen=True):
    kind: BlockKind
    text: str = ""
    level: int = 1
    items: list[str] = []
    language: str = ""


class SummaryDocument:
    """Fluent builder for the run summary.

    Usage:
        SummaryDocument().add_heading("Title").add_raw("body\\n")
    """

    def __init__(self) -> None:
        self.blocks: list[SummaryBlock] = []

    def add_heading(self, text: str, level: int = 1) -> "SummaryDocument":
        level = min(max(level, 1), 6)
        self.blocks.append(SummaryBlock(kind=BlockKind.HEADING, text=text, level=level))
        return self

    def add_raw(self, text: str) -> "SummaryDocument":
        self.blocks.append(SummaryBlock(kind=BlockKind.RAW, text=text))
        return self

    def add_list(self, items: list[str]) -> "SummaryDocument":
        self.blocks.append(SummaryBlock(kind=BlockKind.LIST, items=list(items)))
        return self

    def add_code_block(self, code: str, language: str = "") -> "SummaryDocument":
        self.blocks.append(SummaryBlock(kind=BlockKind.CODE, text=code, language=language))
        return self

    def to_markdown(self) -> str:
        parts: list[str] = []
        for block in self.blocks:
            match block.kind:
                case BlockKind.HEADING:
                    parts.append(f"{'#' * block.level} {block.text}\n")
                case BlockKind.RAW:
                    parts.append(block.text if block.text.endswith("\n") else block.text + "\n")
                case BlockKind.LIST:
                    parts.append("".join(f"- {item}\n" for item in block.items))
                case BlockKind.CODE:
                    parts.append(f"```{block.language}\n{block.text}\n```\n")
        return "\n".join(parts)
