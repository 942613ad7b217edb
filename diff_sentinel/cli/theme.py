"""CLI theme configuration - all colors in one place.

Colors use Rich markup syntax (e.g., "green", "bold red", "dim italic").
"""


class Theme:
    """Terminal color theme for the diff-sentinel CLI."""

    # -------------------------------------------------------------------------
    # Status colors
    # -------------------------------------------------------------------------
    SUCCESS = "green"
    SUCCESS_BOLD = "bold green"
    ERROR = "red"
    ERROR_BOLD = "bold red"
    WARNING = "yellow"
    WARNING_BOLD = "bold yellow"
    INFO = "cyan"
    INFO_BOLD = "bold cyan"

    # -------------------------------------------------------------------------
    # Text styles
    # -------------------------------------------------------------------------
    HEADER_SECTION = "bold magenta"
    DIM = "grey62"

    # -------------------------------------------------------------------------
    # Banner
    # -------------------------------------------------------------------------
    BANNER_NAME = "bold cyan"
    BANNER_VERSION = "dim grey62"

    # -------------------------------------------------------------------------
    # Outputs
    # -------------------------------------------------------------------------
    OUTPUT_KEY = "cyan"
    OUTPUT_VALUE = "bold"


# Default theme instance - import this in other modules
theme = Theme()
