from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape

from diff_sentinel.cli.theme import theme
from diff_sentinel.domain.ports.reporter_port import ReporterPort


class ConsoleReporter(ReporterPort):
    """Human-oriented reporter for running outside of GitHub Actions."""

    def __init__(self, console: Console | None = None) -> None:
        super().__init__()
        self.console = console or Console()

    def start_group(self, title: str) -> None:
        self.console.rule(f"[{theme.HEADER_SECTION}]{escape(title)}[/]", align="left")

    def end_group(self) -> None:
        self.console.print()

    def info(self, message: str) -> None:
        self.console.print(message, markup=False, highlight=False)

    def notice(self, message: str) -> None:
        self.console.print(f"[{theme.INFO_BOLD}]notice:[/] {escape(message)}", highlight=False)

    def warning(self, message: str) -> None:
        self.console.print(f"[{theme.WARNING_BOLD}]warning:[/] {escape(message)}", highlight=False)

    def error(self, message: str) -> None:
        self.console.print(f"[{theme.ERROR_BOLD}]error:[/] {escape(message)}", highlight=False)

    def set_output(self, name: str, value: str) -> None:
        shown = escape(value).replace("\n", ", ")
        self.console.print(
            f"[{theme.DIM}]output[/] [{theme.OUTPUT_KEY}]{name}[/]=[{theme.OUTPUT_VALUE}]{shown}[/]",
            highlight=False,
        )

    def _emit_failure(self, message: str) -> None:
        self.console.print(f"\n[{theme.ERROR_BOLD}]✗ {escape(message)}[/]", highlight=False)

    def _emit_summary(self, markdown: str) -> None:
        self.console.print()
        self.console.print(Markdown(markdown))
