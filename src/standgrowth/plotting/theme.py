"""Fixed visual theme for goodness-of-fit plots.

Black axis text and lines, no grid, no panel border and no panel background,
with a single font size applied to every text element.
"""

from dataclasses import dataclass

from matplotlib.axes import Axes

MM_PER_INCH: float = 25.4
POINTS_PER_INCH: float = 72.0

DEFAULT_TEXTSIZE: float = 20


@dataclass(frozen=True)
class GOFTheme:
    """Visual settings applied to a GOF axes.

    Attributes:
        textsize: Font size (points) of titles, axis labels and tick labels
        tick_length_mm: Length of the axis ticks in millimetres
        color: Color of axis text, spines and ticks
    """
    textsize: float = DEFAULT_TEXTSIZE
    tick_length_mm: float = 3.0
    color: str = "black"

    def __post_init__(self):
        if self.textsize <= 0:
            raise ValueError(f"textsize must be positive, got {self.textsize}")

    @property
    def tick_length_pt(self) -> float:
        return self.tick_length_mm / MM_PER_INCH * POINTS_PER_INCH

    def apply(self, ax: Axes) -> None:
        """Style ``ax`` in place."""
        ax.grid(False)
        ax.set_facecolor("none")
        ax.figure.patch.set_facecolor("white")

        # Left and bottom spines act as axis lines; the rest of the border goes
        for side in ("top", "right"):
            ax.spines[side].set_visible(False)
        for side in ("left", "bottom"):
            ax.spines[side].set_color(self.color)

        ax.tick_params(
            axis="both",
            which="major",
            labelsize=self.textsize,
            labelcolor=self.color,
            color=self.color,
            length=self.tick_length_pt,
        )
        ax.xaxis.label.set_size(self.textsize)
        ax.xaxis.label.set_color(self.color)
        ax.yaxis.label.set_size(self.textsize)
        ax.yaxis.label.set_color(self.color)
        ax.title.set_size(self.textsize)
