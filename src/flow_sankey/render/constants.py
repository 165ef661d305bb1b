"""Render constants used across render modules.

Theme-dependent values remain in style.py.
"""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
CANVAS_PADDING: float = 40.0
"""Default padding around the diagram area."""

TITLE_HEIGHT: float = 40.0
"""Vertical space reserved above the diagram when a title is set."""

TITLE_BASELINE: float = 28.0
"""Y position of the title baseline."""

# ---------------------------------------------------------------------------
# Layout area used when the caller does not size the SVG
# ---------------------------------------------------------------------------
DEFAULT_WIDTH: float = 800.0
"""Default diagram width (excluding canvas padding)."""

DEFAULT_HEIGHT: float = 500.0
"""Default diagram height (excluding canvas padding and title)."""
