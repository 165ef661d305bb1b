"""Theme definitions for Sankey diagrams."""

from flow_sankey.themes.dark import DARK_THEME
from flow_sankey.themes.default import DEFAULT_THEME

THEMES = {
    "default": DEFAULT_THEME,
    "dark": DARK_THEME,
}

__all__ = ["THEMES", "DEFAULT_THEME", "DARK_THEME"]
