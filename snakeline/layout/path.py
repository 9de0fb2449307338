"""
Path builder

Emits the track connecting the slots through all entries: straight lines
within a row, circular arcs across row transitions.
"""
from __future__ import annotations
from typing import Iterable, List, Sequence, Tuple, TYPE_CHECKING
import math
import numpy as np

from .types import GuideStroke, PathCommand, ScaledPosition, Slot

if TYPE_CHECKING:
    from ..config import LayoutConfig


def build_path(
    positions: Sequence[ScaledPosition],
    slots: Sequence[Slot],
    scale: float,
    config: LayoutConfig
) -> Tuple[PathCommand, ...]:
    """
    Drawing commands for the track

    Sweep flags alternate with every row transition so successive curves
    form an S pattern.

    Args:
        positions: Scaled entry positions
        slots: Slots for the same pass (leading first, trailing last)
        scale: Layout scale factor
        config: Layout configuration

    Returns:
        Commands with absolute screen coordinates; empty for no entries
    """
    if not positions:
        return ()

    leading, trailing = slots[0], slots[-1]
    radius = config.curve_radius * scale

    commands = [
        PathCommand('move', leading.x, leading.y),
        PathCommand('line', positions[0].x, positions[0].y),
    ]

    transition_index = 0
    for current, nxt in zip(positions, positions[1:]):
        if current.row == nxt.row:
            commands.append(PathCommand('line', nxt.x, nxt.y))
        else:
            commands.append(PathCommand('arc', nxt.x, nxt.y, radius=radius, sweep=transition_index % 2))
            transition_index += 1

    commands.append(PathCommand('line', trailing.x, trailing.y))
    return tuple(commands)


def build_guides(
    slots: Sequence[Slot],
    scale: float,
    config: LayoutConfig
) -> Tuple[GuideStroke, ...]:
    """
    Short strokes leading out of every slot

    Each slot but the last points toward the next slot; the last one gets a
    longer fading stroke continuing away from its predecessor.
    A lone slot (no entries) gets none.
    """
    if len(slots) < 2:
        return ()

    guide = config.guide_length * scale
    tail = config.tail_length * scale
    guides = []

    for slot, nxt in zip(slots, slots[1:]):
        dx = nxt.x - slot.x
        dy = nxt.y - slot.y
        length = math.hypot(dx, dy)
        if length > 0:
            guides.append(GuideStroke(slot.x, slot.y,
                                      slot.x + dx / length * guide,
                                      slot.y + dy / length * guide))

    last, prev = slots[-1], slots[-2]
    direction = 1 if last.x > prev.x else -1
    guides.append(GuideStroke(last.x, last.y, last.x + direction * tail, last.y, fading=True))
    return tuple(guides)


# ============================================================
# SERIALIZATION
# ============================================================

def _fmt(value: float) -> str:
    """Compact number formatting for path data"""
    text = f"{value:.3f}".rstrip('0').rstrip('.')
    return '0' if text == '-0' else text


def to_svg_path(commands: Iterable[PathCommand]) -> str:
    """
    SVG path data for a command list

    Example:
        >>> to_svg_path([PathCommand('move', 0, 0), PathCommand('line', 10, 0)])
        'M 0 0 L 10 0'
    """
    parts: List[str] = []
    for command in commands:
        if command.kind == 'move':
            parts.append(f"M {_fmt(command.x)} {_fmt(command.y)}")
        elif command.kind == 'line':
            parts.append(f"L {_fmt(command.x)} {_fmt(command.y)}")
        elif command.kind == 'arc':
            r = _fmt(command.radius)
            parts.append(f"A {r} {r} 0 0 {command.sweep} {_fmt(command.x)} {_fmt(command.y)}")
        else:
            raise ValueError(f"Unknown path command: {command.kind}")
    return ' '.join(parts)


# ============================================================
# ARC GEOMETRY
# ============================================================

def arc_center(
    start: Tuple[float, float],
    end: Tuple[float, float],
    radius: float,
    sweep: int
) -> Tuple[float, float, float]:
    """
    Centre of a small SVG arc (rx == ry, no rotation, large-arc flag 0)

    Follows the SVG endpoint-to-centre conversion; a radius too small to
    span the chord is enlarged to half the chord.

    Returns:
        (cx, cy, effective_radius)
    """
    x1, y1 = start
    x2, y2 = end
    hx = (x1 - x2) / 2
    hy = (y1 - y2) / 2
    half_chord_sq = hx * hx + hy * hy
    if half_chord_sq == 0:
        return (x1, y1, radius)

    r = max(radius, math.sqrt(half_chord_sq))
    # large-arc flag is always 0, so the centre side follows the sweep flag
    coef = math.sqrt(max(r * r - half_chord_sq, 0.0) / half_chord_sq)
    if sweep == 0:
        coef = -coef
    cx = coef * hy + (x1 + x2) / 2
    cy = -coef * hx + (y1 + y2) / 2
    return (cx, cy, r)


def sample_arc(
    start: Tuple[float, float],
    end: Tuple[float, float],
    radius: float,
    sweep: int,
    n_points: int = 48
) -> np.ndarray:
    """
    Polyline approximation of an arc command

    Angles are measured in screen coordinates (y down); sweep 1 runs in the
    positive-angle direction, as in SVG.

    Returns:
        (n_points, 2) array from start to end
    """
    cx, cy, r = arc_center(start, end, radius, sweep)
    if r == 0 or start == end:
        return np.array([start, end], dtype=float)

    v1 = ((start[0] - cx) / r, (start[1] - cy) / r)
    v2 = ((end[0] - cx) / r, (end[1] - cy) / r)
    theta1 = math.atan2(v1[1], v1[0])
    cross = v1[0] * v2[1] - v1[1] * v2[0]
    dot = v1[0] * v2[0] + v1[1] * v2[1]
    delta = math.atan2(cross, dot)

    if sweep == 0 and delta > 0:
        delta -= 2 * math.pi
    elif sweep == 1 and delta < 0:
        delta += 2 * math.pi

    thetas = theta1 + np.linspace(0.0, delta, n_points)
    points = np.column_stack((cx + r * np.cos(thetas), cy + r * np.sin(thetas)))
    # pin the endpoints exactly
    points[0] = start
    points[-1] = end
    return points


def path_polyline(commands: Sequence[PathCommand], arc_resolution: int = 48) -> np.ndarray:
    """
    Flatten a command list into one polyline

    Returns:
        (n, 2) array; empty (0, 2) for an empty path
    """
    if not commands:
        return np.empty((0, 2), dtype=float)

    chunks = [np.array([commands[0].point], dtype=float)]
    current = commands[0].point
    for command in commands[1:]:
        if command.kind == 'arc':
            arc = sample_arc(current, command.point, command.radius, command.sweep, arc_resolution)
            chunks.append(arc[1:])
        else:
            chunks.append(np.array([command.point], dtype=float))
        current = command.point
    return np.vstack(chunks)
