from diff_sentinel.infrastructure.git.git_diff_adapter import GitDiffAdapter

__all__ = ["GitDiffAdapter"]
