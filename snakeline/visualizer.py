"""
Snake timeline visualizer

Renders a computed layout to a PNG preview: the track, guide strokes,
slots and year markers, in screen coordinates (y down).
"""

from __future__ import annotations
from typing import Optional, Sequence
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Circle, FancyBboxPatch
from matplotlib.axes import Axes
from matplotlib.figure import Figure
import logging

from .config import PlotConfig
from .layout import (
    Entry,
    InteractionContext,
    LayoutEngine,
    LayoutResult,
    Viewport,
    path_polyline,
)

logger = logging.getLogger(__name__)


class SnakePlotter:
    """
    Draws snake layouts with matplotlib

    Line widths and marker sizes shrink with the layout scale so a crowded
    timeline keeps its proportions.
    """

    def __init__(self, config: Optional[PlotConfig] = None) -> None:
        """
        Initialize SnakePlotter

        Args:
            config: Visual configuration. If None, uses default settings.

        Example:
            >>> plotter = SnakePlotter()
            >>> plotter = SnakePlotter(PlotConfig.debug())
        """
        self.config: PlotConfig = config or PlotConfig()
        self.layout_engine = LayoutEngine(self.config.layout)

    def _draw_track(self, ax: Axes, result: LayoutResult) -> None:
        """Main path with arcs sampled to polylines"""
        points = path_polyline(result.path, self.config.arc_resolution)
        if len(points) < 2:
            return
        ax.plot(points[:, 0], points[:, 1],
                color=self.config.track_color,
                linewidth=self.config.track_linewidth * result.scale,
                alpha=self.config.track_alpha,
                solid_capstyle='round', solid_joinstyle='round', zorder=1)

    def _draw_guides(self, ax: Axes, result: LayoutResult) -> None:
        for guide in result.guides:
            ax.plot([guide.x0, guide.x1], [guide.y0, guide.y1],
                    color=self.config.track_color,
                    linewidth=self.config.guide_linewidth * result.scale,
                    alpha=self.config.tail_alpha if guide.fading else self.config.guide_alpha,
                    linestyle='--' if guide.fading else '-',
                    solid_capstyle='round', zorder=2)

    def _draw_slots(self, ax: Axes, result: LayoutResult) -> int:
        """
        Slot circles at their shifted positions

        Returns:
            Number of slots drawn
        """
        radius = self.config.slot_radius * result.scale
        drawn = 0
        for slot in result.slots:
            if not slot.visible and not self.config.show_hidden_slots:
                continue
            color = self.config.slot_colors.get(slot.state, self.config.slot_colors['normal'])
            ax.add_patch(Circle((slot.display_x, slot.y), radius,
                                facecolor=color, edgecolor='white', linewidth=1.0,
                                alpha=0.5 if slot.state == 'disabled' else 1.0, zorder=3))
            drawn += 1
        return drawn

    def _draw_years(self, ax: Axes, result: LayoutResult) -> None:
        """Rounded year boxes"""
        w = self.config.year_box_width * result.scale
        h = self.config.year_box_height * result.scale
        for marker in result.years:
            color = self.config.year_colors.get(marker.state, self.config.year_colors['normal'])
            box = FancyBboxPatch((marker.x - w / 2, marker.y - h / 2), w, h,
                                 boxstyle=f"round,pad=0,rounding_size={h / 4:.3f}",
                                 facecolor=color, edgecolor='none', zorder=4)
            ax.add_patch(box)
            ax.text(marker.x, marker.y, str(marker.year),
                    fontsize=max(self.config.year_fontsize * result.scale, 4),
                    color='white', weight='bold', ha='center', va='center', zorder=5)

    def render(self, result: LayoutResult, title: Optional[str] = None) -> Figure:
        """
        Draw a layout onto a new figure sized like its viewport

        Args:
            result: Layout to draw
            title: Optional caption (e.g. "Alice's timeline")

        Returns:
            matplotlib Figure
        """
        width = result.viewport.width
        height = result.viewport.height
        dpi = self.config.dpi

        fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi)
        fig.patch.set_facecolor(self.config.background)
        ax = fig.add_axes([0, 0, 1, 1])
        ax.set_facecolor(self.config.background)
        ax.set_xlim(0, width)
        # Screen coordinates: y grows downward
        ax.set_ylim(height, 0)
        ax.set_aspect('equal')
        ax.axis('off')

        self._draw_track(ax, result)
        self._draw_guides(ax, result)
        n_slots = self._draw_slots(ax, result)
        self._draw_years(ax, result)

        if title:
            ax.text(width / 2, 16, title, fontsize=12, color='white',
                    weight='semibold', ha='center', va='top')

        logger.debug(f"Rendered {len(result.years)} years, {n_slots} slots, "
                     f"{result.n_arcs} arcs at scale {result.scale:.3f}")
        return fig

    def plot(
        self,
        result: LayoutResult,
        output_file: str,
        title: Optional[str] = None,
        show: bool = False
    ) -> Figure:
        """
        Render a layout and save it

        Args:
            result: Layout to draw
            output_file: Output image path (format from extension)
            title: Optional caption
            show: Whether to display the figure interactively

        Returns:
            matplotlib Figure
        """
        fig = self.render(result, title=title)
        fig.savefig(output_file, dpi=self.config.dpi,
                    facecolor=fig.get_facecolor(), edgecolor='none')
        logger.info(f"Plot saved to {output_file}")

        if show:
            plt.show()
        else:
            plt.close(fig)
        return fig

    def plot_entries(
        self,
        entries: Sequence[Entry],
        viewport: Viewport,
        output_file: str,
        context: Optional[InteractionContext] = None,
        margin: Optional[float] = None,
        title: Optional[str] = None
    ) -> LayoutResult:
        """
        Lay out entries and save the preview in one step

        Returns:
            The LayoutResult that was drawn
        """
        result = self.layout_engine.calculate_layout(entries, viewport, context, margin)
        self.plot(result, output_file, title=title)
        return result

    def track_points(self, result: LayoutResult) -> np.ndarray:
        """Sampled track polyline, as drawn"""
        return path_polyline(result.path, self.config.arc_resolution)
