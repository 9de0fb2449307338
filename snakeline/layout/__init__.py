"""
Layout Module for snakeline
Snake (boustrophedon) layout engine for a player's timeline

Public API:
    - LayoutEngine: Main layout calculation engine
    - compute_layout: One-shot layout pass
    - LayoutResult: Complete layout solution
    - Entry, Viewport, InteractionContext, ChallengeContext: Inputs
    - Slot, YearMarker, PathCommand, GuideStroke: Outputs
"""

from .engine import LayoutEngine, compute_layout
from .path import to_svg_path, sample_arc, path_polyline
from .types import (
    Entry,
    Viewport,
    InteractionContext,
    ChallengeContext,
    GridPosition,
    ScaleTransform,
    LayoutResult,
    Slot,
    YearMarker,
    PathCommand,
    GuideStroke,
)

__all__ = [
    'LayoutEngine',
    'compute_layout',
    'to_svg_path',
    'sample_arc',
    'path_polyline',
    'Entry',
    'Viewport',
    'InteractionContext',
    'ChallengeContext',
    'GridPosition',
    'ScaleTransform',
    'LayoutResult',
    'Slot',
    'YearMarker',
    'PathCommand',
    'GuideStroke',
]
