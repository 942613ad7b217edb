import asyncio
from pathlib import Path

from loguru import logger
from rich.console import Console
from rich.syntax import Syntax

from diff_sentinel.domain.errors import GitCommandError
from diff_sentinel.domain.ports.diff_port import DiffPort

# Hash of the empty tree, used as diff base before the first commit
EMPTY_TREE = "4b825dc642cb6eb9a060e54bf8d69288fbee4904"

UNTRACKED = "??"


class GitDiffAdapter(DiffPort):
    """Git implementation of DiffPort using subprocess calls.

    Paths are reported relative to the repository root, in the order
    ``git status`` lists them. Untracked files count as changes.
    """

    def __init__(self, repo_path: str | Path = ".", console: Console | None = None) -> None:
        self.repo_path = Path(repo_path)
        self.console = console or Console()
        self._root: Path | None = None

    async def has_uncommitted_changes(self) -> bool:
        entries = await self._status_entries()
        return bool(entries)

    async def list_changed_files(self) -> list[str]:
        return [path for _, path in await self._status_entries()]

    async def print_diff(self, paths: list[str]) -> None:
        """Print the unified diff for ``paths``.

        Tracked files are diffed against HEAD (or the empty tree in a repo
        without commits); untracked files are diffed against /dev/null.
        """
        if not paths:
            return

        untracked = {path for status, path in await self._status_entries() if status == UNTRACKED}
        tracked = [p for p in paths if p not in untracked]

        chunks: list[str] = []
        if tracked:
            base = "HEAD" if await self._has_head() else EMPTY_TREE
            chunks.append(await self._run_git(["diff", base, "--", *tracked]))
        for path in paths:
            if path in untracked:
                # --no-index exits 1 when the files differ
                chunks.append(
                    await self._run_git(
                        ["diff", "--no-index", "--", "/dev/null", path],
                        ok_returncodes=(0, 1),
                    )
                )

        diff = "".join(chunks).rstrip("\n")
        if not diff:
            logger.debug("No textual diff for {} changed paths", len(paths))
            return
        self._render(diff)

    def _render(self, diff: str) -> None:
        if self.console.is_terminal:
            self.console.print(Syntax(diff, "diff", theme="monokai", line_numbers=False))
        else:
            # CI logs: raw text, no cropping to console width
            self.console.out(diff, highlight=False)

    async def _status_entries(self) -> list[tuple[str, str]]:
        """Parse ``git status --porcelain -z`` into (status, path) pairs."""
        output = await self._run_git(["status", "--porcelain", "-z", "--untracked-files=all"])
        tokens = output.split("\0")
        entries: list[tuple[str, str]] = []
        i = 0
        while i < len(tokens):
            token = tokens[i]
            i += 1
            if len(token) < 4:
                continue
            status, path = token[:2], token[3:]
            # Renames and copies are followed by the original path
            if "R" in status or "C" in status:
                i += 1
            entries.append((status, path))
        return entries

    async def _repo_root(self) -> Path:
        if self._root is None:
            proc = await asyncio.create_subprocess_exec(
                "git",
                "rev-parse",
                "--show-toplevel",
                cwd=str(self.repo_path),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
            stdout, stderr = await proc.communicate()
            if proc.returncode != 0:
                error_msg = stderr.decode(errors="replace").strip()
                raise GitCommandError(
                    ["rev-parse", "--show-toplevel"], proc.returncode or -1, error_msg
                )
            self._root = Path(stdout.decode(errors="replace").strip())
        return self._root

    async def _has_head(self) -> bool:
        """Check if repository has any commits (HEAD exists)."""
        proc = await asyncio.create_subprocess_exec(
            "git",
            "rev-parse",
            "--verify",
            "--quiet",
            "HEAD",
            cwd=str(await self._repo_root()),
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.DEVNULL,
        )
        await proc.communicate()
        return proc.returncode == 0

    async def _run_git(self, args: list[str], ok_returncodes: tuple[int, ...] = (0,)) -> str:
        """Execute a git command at the repository root and return stdout."""
        proc = await asyncio.create_subprocess_exec(
            "git",
            "--no-pager",
            *args,
            cwd=str(await self._repo_root()),
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        stdout, stderr = await proc.communicate()
        if proc.returncode not in ok_returncodes:
            error_msg = stderr.decode(errors="replace").strip()
            logger.error(f"Git command failed: git {' '.join(args)} - {error_msg}")
            raise GitCommandError(args, proc.returncode or -1, error_msg)
        return stdout.decode(errors="replace")
