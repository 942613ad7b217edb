from diff_sentinel.cli.formatters.console_reporter import ConsoleReporter

__all__ = ["ConsoleReporter"]
