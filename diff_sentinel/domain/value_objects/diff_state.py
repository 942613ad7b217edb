from pydantic import BaseModel, Field


class DiffState(BaseModel, frozen=True):
    """Working-tree state as reported by the version-control collaborator.

    ``changed_files`` keeps the collaborator's order.
    """

    has_diff: bool
    changed_files: list[str] = Field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.changed_files)
