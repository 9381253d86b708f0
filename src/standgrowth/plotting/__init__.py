"""Goodness-of-fit plotting."""

from .gof import create_gof_plot, save_gof_plot
from .theme import GOFTheme

__all__ = ["create_gof_plot", "save_gof_plot", "GOFTheme"]
