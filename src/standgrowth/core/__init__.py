"""Table shaping, interval math and output type dispatch for GOF plots."""

from .formatting import format_observations, format_predictions
from .intervals import Z_975
from .output_types import OutputType, resolve_y_label

__all__ = [
    "format_observations",
    "format_predictions",
    "Z_975",
    "OutputType",
    "resolve_y_label",
]
