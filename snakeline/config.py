"""
snakeline configuration

Layout geometry constants and preview styling.
All values are in layout units, which map 1:1 to screen pixels at scale 1.
"""
from dataclasses import dataclass, field
from typing import Dict


@dataclass
class LayoutConfig:
    """
    Geometry of the snake layout

    Pitches are ratios before scaling: the whole layout is shrunk uniformly
    to fit the viewport, never enlarged.
    """

    # ============================================================
    # GRID
    # ============================================================
    col_pitch: float = 100.0
    """Horizontal distance between neighbouring entries in a row"""

    row_pitch: float = 80.0
    """Vertical distance between rows"""

    row_size: int = 3
    """Entries per row before the snake turns"""

    origin_x: float = 100.0
    """Unscaled x of the first entry"""

    origin_y: float = 300.0
    """Unscaled y of the first row (later rows sit above it)"""

    # ============================================================
    # FITTING
    # ============================================================
    margin: float = 50.0
    """Space kept free on every side of the viewport"""

    min_viewport: float = 1.0
    """Smallest viewport/available dimension accepted before clamping"""

    # ============================================================
    # CURVES
    # ============================================================
    curve_spacing: float = 100.0
    """Spacing on the last straight segment before a curve.
    The segment is extended by (curve_spacing - col_pitch)"""

    curve_radius: float = 40.0
    """Radius of the arcs joining rows"""

    # ============================================================
    # GUIDE STROKES
    # ============================================================
    guide_length: float = 20.0
    """Length of the short stroke leading out of each slot"""

    tail_length: float = 60.0
    """Length of the fading stroke after the trailing slot"""

    @property
    def curve_extension(self) -> float:
        """Extra length added to a row's final segment before a curve"""
        return self.curve_spacing - self.col_pitch

    @classmethod
    def compact(cls) -> 'LayoutConfig':
        """
        Tighter fit for small screens

        Example:
            >>> engine = LayoutEngine(LayoutConfig.compact())
        """
        config = cls()
        config.margin = 20.0
        config.guide_length = 12.0
        config.tail_length = 36.0
        return config

    @classmethod
    def spacious(cls) -> 'LayoutConfig':
        """Longer approach into each curve"""
        config = cls()
        config.curve_spacing = 130.0
        return config


@dataclass
class PlotConfig:
    """
    Preview renderer styling

    Colors follow the game board: grey track, green for selected/correct,
    red for incorrect.
    """

    layout: LayoutConfig = field(default_factory=LayoutConfig)
    """Layout configuration"""

    # ============================================================
    # TRACK
    # ============================================================
    track_color: str = '#4a5568'
    """Color of the main path and guide strokes"""

    track_linewidth: float = 16.0
    """Main path width at scale 1 (pt)"""

    track_alpha: float = 0.7
    """Main path transparency"""

    guide_linewidth: float = 3.0
    """Guide stroke width (pt)"""

    guide_alpha: float = 0.4
    """Guide stroke transparency"""

    tail_alpha: float = 0.2
    """Fading tail transparency"""

    arc_resolution: int = 48
    """Number of points used to draw each arc"""

    # ============================================================
    # MARKERS
    # ============================================================
    slot_radius: float = 12.0
    """Slot circle radius at scale 1"""

    year_box_width: float = 40.0
    """Year marker width at scale 1"""

    year_box_height: float = 24.0
    """Year marker height at scale 1"""

    year_fontsize: int = 8
    """Year label font size"""

    slot_colors: Dict[str, str] = field(default_factory=lambda: {
        'normal': '#4b5563',
        'hovered': '#4ade80',
        'selected': '#22c55e',
        'disabled': '#22c55e',
    })
    """Fill color per slot state"""

    year_colors: Dict[str, str] = field(default_factory=lambda: {
        'normal': '#374151',
        'correct': '#16a34a',
        'incorrect': '#dc2626',
    })
    """Fill color per year state"""

    # ============================================================
    # FIGURE SETTINGS
    # ============================================================
    dpi: int = 100
    """DPI for saved figures (figure size follows the viewport)"""

    background: str = '#111827'
    """Figure background"""

    show_hidden_slots: bool = False
    """Draw slots even in phases where the board hides them"""

    @classmethod
    def presentation(cls) -> 'PlotConfig':
        """
        Settings for projector screens

        - Higher DPI
        - Heavier track and guide strokes
        """
        config = cls()
        config.dpi = 200
        config.track_linewidth = 20.0
        config.guide_linewidth = 4.0
        config.year_fontsize = 10
        return config

    @classmethod
    def debug(cls) -> 'PlotConfig':
        """
        Settings for debugging layout issues

        - Thin, opaque track so arcs and slots can be inspected
        - Slots drawn in every phase
        """
        config = cls()
        config.track_linewidth = 2.0
        config.track_alpha = 1.0
        config.guide_alpha = 1.0
        config.tail_alpha = 1.0
        config.show_hidden_slots = True
        return config
