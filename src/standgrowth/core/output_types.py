"""Stand growth output types and their axis labels.

Output type values coming from growth simulators are free-form strings such
as ``"AliveVolume_AllSpecies"``. They are mapped to a known category by
substring, in declaration order, so ``BasalArea`` wins over later entries.
"""

from enum import Enum
from typing import Optional


class OutputType(str, Enum):
    """Known categories of stand growth outputs."""
    BASAL_AREA = "BasalArea"
    VOLUME = "Volume"
    BIOMASS = "Biomass"
    DOMINANT_HEIGHT = "DominantHeight"
    STEM_DENSITY = "StemDensity"

    @property
    def y_label(self) -> str:
        """Y-axis label, with units, for this output type."""
        return Y_AXIS_LABELS[self]

    @classmethod
    def match(cls, value: str) -> Optional["OutputType"]:
        """Find the category whose name occurs in ``value``.

        Returns:
            The first matching OutputType, or None when nothing matches
        """
        for output_type in cls:
            if output_type.value in value:
                return output_type
        return None

    @classmethod
    def known_values(cls) -> list[str]:
        return [output_type.value for output_type in cls]


Y_AXIS_LABELS: dict[OutputType, str] = {
    OutputType.BASAL_AREA: "Basal area (m²/ha)",
    OutputType.VOLUME: "Volume (m³/ha)",
    OutputType.BIOMASS: "Biomass (Mg/ha)",
    OutputType.DOMINANT_HEIGHT: "Dominant height (m)",
    OutputType.STEM_DENSITY: "Density (trees/ha)",
}

X_AXIS_LABEL: str = "Age (yr)"


def resolve_y_label(value: str, strict: bool = True) -> Optional[str]:
    """Return the y-axis label for a raw output type string.

    Args:
        value: OutputType value found in the observation table
        strict: Raise when no known category matches instead of returning None

    Raises:
        ValueError: If strict and ``value`` matches no known output type
    """
    output_type = OutputType.match(value)
    if output_type is None:
        if strict:
            raise ValueError(
                f"Unknown output type {value!r}; expected one containing "
                f"{', '.join(OutputType.known_values())}"
            )
        return None
    return output_type.y_label
