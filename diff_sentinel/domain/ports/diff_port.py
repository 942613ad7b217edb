from abc import ABC, abstractmethod

from diff_sentinel.domain.value_objects.diff_state import DiffState


class DiffPort(ABC):
    """Port for inspecting uncommitted working-tree changes."""

    @abstractmethod
    async def has_uncommitted_changes(self) -> bool:
        """True if the working tree differs from the last commit."""

    @abstractmethod
    async def list_changed_files(self) -> list[str]:
        """Changed paths, in the order the version-control tool reports them."""

    @abstractmethod
    async def print_diff(self, paths: list[str]) -> None:
        """Display the unified diff for the given paths."""

    async def get_diff_state(self) -> DiffState:
        """Collect both facts in one call."""
        if not await self.has_uncommitted_changes():
            return DiffState(has_diff=False)
        return DiffState(has_diff=True, changed_files=await self.list_changed_files())
