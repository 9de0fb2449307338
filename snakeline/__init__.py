"""snakeline: Snake-layout geometry for timeline placement games"""

from .config import LayoutConfig, PlotConfig
from .layout import (
    LayoutEngine,
    compute_layout,
    Entry,
    Viewport,
    InteractionContext,
    ChallengeContext,
    LayoutResult,
)
from . import utils
from .visualizer import SnakePlotter

__version__ = "0.1.0"
__all__ = ["LayoutConfig", "PlotConfig", "LayoutEngine", "compute_layout", "Entry", "Viewport",
           "InteractionContext", "ChallengeContext", "LayoutResult", "utils", "SnakePlotter"]
