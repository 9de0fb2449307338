"""
Layout Engine for snakeline
Pure snake-layout geometry

Pipeline:
1. Drop the pending entry while it is being guessed or challenged
2. Place entries on the boustrophedon grid
3. Fit the grid into the viewport (shrink-only) and centre it
4. Build slots and the track from the scaled positions
5. Annotate years and slots with their display state

No state survives between calls; resize handling belongs to the caller.
"""
from __future__ import annotations
from dataclasses import replace
from typing import Optional, Sequence, Tuple
import logging

from ..config import LayoutConfig
from ..utils import clamp_dimension, clamp_margin
from .grid import calculate_grid
from .path import build_guides, build_path
from .scale import resolve_transform, scale_positions
from .slots import build_slots, empty_slot
from .states import (
    disputed_index,
    entry_state,
    is_selectable,
    pending_index,
    slot_state,
    slots_visible,
    visible_entries,
)
from .types import (
    Entry,
    InteractionContext,
    LayoutResult,
    Slot,
    Viewport,
    YearMarker,
)

logger = logging.getLogger(__name__)


class LayoutEngine:
    """
    Snake layout engine

    Algorithm:
    1. Entry i sits in row i // 3; even rows run left to right, odd rows
       right to left, rows stack upward
    2. The raw grid plus half a column on each side is shrunk (never
       enlarged) to fit the viewport minus margins, then centred
    3. Slots sit before, between and after entries; slots on row
       transitions carry a lateral curve shift
    4. The track runs leading slot -> entries -> trailing slot, with arcs
       across row transitions
    """

    def __init__(self, config: Optional[LayoutConfig] = None):
        """
        Initialize layout engine

        Args:
            config: Layout configuration. If None, uses default settings.
        """
        self.config = config or LayoutConfig()

    def calculate_layout(
        self,
        entries: Sequence[Entry],
        viewport: Viewport,
        context: Optional[InteractionContext] = None,
        margin: Optional[float] = None
    ) -> LayoutResult:
        """
        Calculate geometry for one timeline

        Args:
            entries: Entries in placement order, possibly including the
                pending one
            viewport: Available rendering area (px)
            context: Interaction context; defaults to an idle context
            margin: Viewport margin; defaults to config.margin

        Returns:
            LayoutResult with slots, years, path and guides
        """
        context = context or InteractionContext()
        viewport = self._clamp_viewport(viewport)
        margin = clamp_margin(self.config.margin if margin is None else margin)

        shown = visible_entries(entries, context)
        if len(shown) != len(entries):
            logger.debug(f"Hiding {len(entries) - len(shown)} pending entries during {context.phase}")

        if not shown:
            return self._create_empty_layout(viewport, entries, context)

        positions = calculate_grid(shown, self.config)
        transform = resolve_transform(positions, viewport, margin, self.config)
        scaled = scale_positions(positions, transform)

        geometry = build_slots(scaled, transform.scale, self.config)
        path = build_path(scaled, geometry, transform.scale, self.config)
        guides = build_guides(geometry, transform.scale, self.config)

        slots = self._annotate_slots(geometry, entries, context)
        years = tuple(
            YearMarker(
                entry_id=entry.id,
                year=entry.year,
                x=pos.x,
                y=pos.y,
                row=pos.row,
                state=entry_state(entry, context),
            )
            for entry, pos in zip(shown, scaled)
        )

        n_rows = scaled[-1].row + 1
        logger.debug(f"Layout: {len(years)} entries in {n_rows} rows, {len(slots)} slots, "
                     f"scale {transform.scale:.4f} in {viewport.width:.0f}x{viewport.height:.0f}")

        return LayoutResult(
            slots=slots,
            years=years,
            path=path,
            guides=guides,
            transform=transform,
            viewport=viewport,
            layout_stats=(
                ('n_entries', len(years)),
                ('n_hidden', len(entries) - len(shown)),
                ('n_rows', n_rows),
                ('n_arcs', sum(1 for c in path if c.kind == 'arc')),
                ('scale', transform.scale),
            ),
        )

    def _clamp_viewport(self, viewport: Viewport) -> Viewport:
        """Replace unusable viewport dimensions with the configured minimum"""
        minimum = self.config.min_viewport
        width = clamp_dimension(viewport.width, minimum, 'viewport width')
        height = clamp_dimension(viewport.height, minimum, 'viewport height')
        if width == viewport.width and height == viewport.height:
            return viewport
        return Viewport(width=width, height=height)

    def _annotate_slots(
        self,
        geometry: Sequence[Slot],
        entries: Sequence[Entry],
        context: InteractionContext
    ) -> Tuple[Slot, ...]:
        """Apply selectability, state and visibility to slot geometry"""
        selectable = is_selectable(context)
        visible = slots_visible(context)
        disputed = disputed_index(entries, context)
        placed = pending_index(entries, context)

        return tuple(
            replace(
                slot,
                selectable=selectable,
                visible=visible,
                state=slot_state(slot.index, context, disputed=disputed, placed=placed),
            )
            for slot in geometry
        )

    def _create_empty_layout(
        self,
        viewport: Viewport,
        entries: Sequence[Entry],
        context: InteractionContext
    ) -> LayoutResult:
        """Single centred slot and no track when no entry is shown"""
        transform = resolve_transform((), viewport, 0.0, self.config)
        slots = self._annotate_slots((empty_slot(viewport),), entries, context)
        logger.debug("Layout: no entries, single centred slot")
        return LayoutResult(
            slots=slots,
            years=(),
            path=(),
            guides=(),
            transform=transform,
            viewport=viewport,
            layout_stats=(
                ('n_entries', 0),
                ('n_hidden', len(entries)),
                ('n_rows', 0),
                ('n_arcs', 0),
                ('scale', 1.0),
            ),
        )


def compute_layout(
    entries: Sequence[Entry],
    viewport: Viewport,
    context: Optional[InteractionContext] = None,
    margin: Optional[float] = None,
    config: Optional[LayoutConfig] = None
) -> LayoutResult:
    """
    Convenience function: one layout pass with a throwaway engine

    Example:
        >>> result = compute_layout([Entry('a', 1999)], Viewport(800, 600))
        >>> result.n_slots
        2
    """
    return LayoutEngine(config).calculate_layout(entries, viewport, context, margin)
