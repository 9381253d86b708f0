"""standgrowth: goodness-of-fit plots for stand growth simulations.

Renders observed growth measurements against age, overlaid with model
predictions and their 95% confidence bands.
"""

# Export the public API
from .api import *  # noqa: F403, F401
from .api import __all__, __version__  # noqa: F401
