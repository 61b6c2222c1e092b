"""LongSim - synthetic longitudinal data for statistical graphics.

Generates panel datasets of repeated measurements with correlated random
intercepts and slopes and autocorrelated residual error, plus item response
theory curves, as example input for plotting tutorials.

Example:
    >>> from longsim import LongitudinalModel
    >>>
    >>> model = LongitudinalModel()
    >>> model.set_random_effects(intercept_sd=2.5, slope_sd=2.0, correlation=0.3)
    >>> data = model.generate(200)
    >>> data.to_frame().head()
"""

from importlib.metadata import version as _get_version

from .model import LongitudinalModel
from .progress import ConsoleProgress, PanelProgress, TqdmProgress
from .stats.data_generation import GenerationConfig, LongitudinalDataset, Observation, generate
from .utils.validators import InvalidParameter

__version__ = _get_version("LongSim")

__all__ = [
    "LongitudinalModel",
    "LongitudinalDataset",
    "Observation",
    "GenerationConfig",
    "generate",
    "InvalidParameter",
    "PanelProgress",
    "ConsoleProgress",
    "TqdmProgress",
]
