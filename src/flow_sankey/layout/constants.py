"""Layout constants used across layout modules.

Centralizes the tunable defaults of the builder, depth assigner, solver
and path emitter.
"""

# ---------------------------------------------------------------------------
# Node sizing defaults (used as function parameter defaults)
# ---------------------------------------------------------------------------
NODE_THICKNESS: float = 20.0
"""Horizontal thickness of every node rectangle."""

NODE_PADDING: float = 8.0
"""Vertical gap between neighbouring nodes in the same layer."""

# ---------------------------------------------------------------------------
# Relaxation
# ---------------------------------------------------------------------------
ITERATIONS: int = 6
"""Number of left-to-right/right-to-left relaxation iterations."""

RELAXATION_FACTOR: float = 0.2
"""Fraction of the center-to-center distance a node moves per link nudge."""

# ---------------------------------------------------------------------------
# Proportional partitioning
# ---------------------------------------------------------------------------
MIN_LAYER_DENOMINATOR: float = 1.0
"""Lower bound on a layer's summed value when computing its vertical scale."""
