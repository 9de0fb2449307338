"""
Slot placement builder

Derives the N+1 insertion slots from scaled entry positions: one before the
first entry, one on every section between neighbours, one after the last.
"""
from __future__ import annotations
from dataclasses import replace
from typing import List, Sequence, Tuple, TYPE_CHECKING
import logging

from .types import ScaledPosition, Section, Slot, Viewport
from ..utils import sign

if TYPE_CHECKING:
    from ..config import LayoutConfig

logger = logging.getLogger(__name__)


def build_sections(
    positions: Sequence[ScaledPosition],
    scale: float,
    config: LayoutConfig
) -> List[Section]:
    """
    Pair consecutive entries into straight or curve sections

    A straight section that ends a full row and is followed by a curve is
    extended along the row by (curve_spacing - col_pitch) * scale.

    Args:
        positions: Scaled entry positions in placement order
        scale: Layout scale factor
        config: Layout configuration

    Returns:
        len(positions) - 1 sections
    """
    sections = []
    for start, end in zip(positions, positions[1:]):
        section_type = 'straight' if start.row == end.row else 'curve'
        sections.append(Section(section_type=section_type, start=start, end=end, end_x=end.x))

    extension = config.curve_extension * scale
    last_pos = config.row_size - 1
    for i, section in enumerate(sections[:-1]):
        if section.is_curve or section.end.pos_in_row != last_pos:
            continue
        if sections[i + 1].is_curve:
            sections[i] = replace(section, end_x=section.end.x + section.end.direction * extension)

    return sections


def curve_shift(section: Section, scale: float, config: LayoutConfig) -> float:
    """
    Lateral offset of a slot sitting on a row transition

    Leaving an even row the curve bulges toward +x, leaving an odd row
    toward -x.

    Returns:
        +/- (row_pitch / 2) * scale
    """
    magnitude = (config.row_pitch / 2) * scale
    from_even = section.start.row % 2 == 0
    to_even = section.end.row % 2 == 0

    if from_even and not to_even:
        return magnitude
    if not from_even and to_even:
        return -magnitude

    # Unreachable while rows alternate parity
    going_left = sign(section.end.x - section.start.x) < 0
    logger.debug(f"Curve between rows {section.start.row} and {section.end.row} "
                 f"has no parity change, falling back to x direction")
    return magnitude if going_left else -magnitude


def section_slot(index: int, section: Section, scale: float, config: LayoutConfig) -> Slot:
    """Slot at the midpoint of a section"""
    x = (section.start.x + section.end_x) / 2
    y = (section.start.y + section.end.y) / 2
    if section.is_curve:
        return Slot(index=index, x=x, y=y, curve_shift=curve_shift(section, scale, config))
    return Slot(index=index, x=x, y=y)


def build_slots(
    positions: Sequence[ScaledPosition],
    scale: float,
    config: LayoutConfig
) -> Tuple[Slot, ...]:
    """
    Geometry of all slots for a non-empty layout

    Selectability and state are applied afterwards by the engine.

    Args:
        positions: Scaled entry positions (at least one)
        scale: Layout scale factor
        config: Layout configuration

    Returns:
        len(positions) + 1 slots ordered by index
    """
    half_col = (config.col_pitch / 2) * scale
    first = positions[0]
    last = positions[-1]

    slots = [Slot(index=0, x=first.x - first.direction * half_col, y=first.y)]

    for i, section in enumerate(build_sections(positions, scale, config), start=1):
        slots.append(section_slot(i, section, scale, config))

    slots.append(Slot(index=len(positions), x=last.x + last.direction * half_col, y=last.y))
    return tuple(slots)


def empty_slot(viewport: Viewport) -> Slot:
    """Single starting slot for a timeline with no entries"""
    cx, cy = viewport.center
    return Slot(index=0, x=cx, y=cy)
