"""Console styles used by cmvn output.

Every style here is referenced by markup somewhere in the CLI; the
spinner text, the candidate table and the print_* helpers share them.
"""

from pydantic import BaseModel, ConfigDict
from rich.theme import Theme


class ThemeColors(BaseModel):
    """Colors for cmvn's terminal output."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    # Status lines
    muted: str = "#b2bec3"
    info: str = "#0ec1c8"
    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"

    # Repository paths and the candidate table
    path: str = "#0e8ac8"
    header: str = "#69B9A1"
    border: str = "#29526d"


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Convert ThemeColors to a Rich Theme.

    Args:
        colors: Colors to use. Defaults to ThemeColors().

    Returns:
        Rich Theme with one style per markup tag cmvn prints.
    """
    colors = colors or ThemeColors()
    return Theme(
        {
            "muted": colors.muted,
            "info": colors.info,
            "success": colors.success,
            "warning": colors.warning,
            "error": f"bold {colors.error}",
            "path": colors.path,
            "bold_header": f"bold {colors.header}",
            "border": colors.border,
        }
    )


_cached_theme: Theme | None = None


def get_theme() -> Theme:
    """Get the shared Rich theme, building it on first use."""
    global _cached_theme
    if _cached_theme is None:
        _cached_theme = get_rich_theme()
    return _cached_theme
