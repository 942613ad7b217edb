from rich.console import Console
from rich.text import Text

from diff_sentinel import __version__
from diff_sentinel.cli.theme import theme

DISPLAY_NAME = "Diff Sentinel"


def build_banner(version: str = __version__) -> Text:
    banner = Text()
    banner.append(DISPLAY_NAME, style=theme.BANNER_NAME)
    banner.append(" ")
    banner.append(f"v{version}", style=theme.BANNER_VERSION)
    return banner


def show_banner(console: Console) -> None:
    console.print(build_banner())
