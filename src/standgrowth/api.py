"""Public API for standgrowth.

Goodness-of-fit plots of observed stand growth (basal area, volume, biomass,
dominant height, stem density) against age, with optional model predictions.
"""

# Table shaping
from .core.formatting import format_observations, format_predictions

# Output types
from .core.output_types import OutputType, resolve_y_label

# Interval math
from .core.intervals import Z_975

# Plotting
from .plotting.gof import create_gof_plot, save_gof_plot
from .plotting.theme import GOFTheme

# Version
try:
    from importlib.metadata import version
    __version__ = version("standgrowth")
except Exception:
    __version__ = "0.1.0"

# Public API Export List
__all__ = [
    # Table shaping
    "format_observations",
    "format_predictions",

    # Output types
    "OutputType",
    "resolve_y_label",

    # Interval math
    "Z_975",

    # Plotting
    "create_gof_plot",
    "save_gof_plot",
    "GOFTheme",

    # Version
    "__version__",
]
