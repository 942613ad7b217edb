from diff_sentinel.infrastructure.reporting.github_actions_reporter import (
    GitHubActionsReporter,
    escape_data,
)

__all__ = ["GitHubActionsReporter", "escape_data"]
