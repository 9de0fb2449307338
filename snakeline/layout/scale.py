"""
Bounding box and scale resolver

Fits the raw grid into the viewport with a uniform, shrink-only scale and
centres the result.
"""
from __future__ import annotations
from typing import Sequence, Tuple, TYPE_CHECKING
import logging
import numpy as np

from .types import GridPosition, ScaledPosition, ScaleTransform, Viewport

if TYPE_CHECKING:
    from ..config import LayoutConfig

logger = logging.getLogger(__name__)


def raw_bounds(
    positions: Sequence[GridPosition],
    config: LayoutConfig
) -> Tuple[float, float, float, float]:
    """
    Raw extent of the grid, reserving room for the leading/trailing slots

    Args:
        positions: Unscaled entry positions (non-empty)
        config: Layout configuration

    Returns:
        (min_x, max_x, min_y, max_y)
    """
    coords = np.array([(p.x, p.y) for p in positions], dtype=float)
    min_x, min_y = coords.min(axis=0)
    max_x, max_y = coords.max(axis=0)

    # Leading and trailing slots sit half a column outside the entries
    half_col = config.col_pitch / 2
    return (float(min_x) - half_col, float(max_x) + half_col, float(min_y), float(max_y))


def fit_scale(
    width: float,
    height: float,
    available_width: float,
    available_height: float
) -> float:
    """
    Shrink-only scale factor

    An axis with zero extent places no constraint, so a single row (or a
    single entry) is only limited by its width.

    Returns:
        scale in (0, 1]
    """
    candidates = [1.0]
    if width > 0:
        candidates.append(available_width / width)
    if height > 0:
        candidates.append(available_height / height)
    return min(candidates)


def resolve_transform(
    positions: Sequence[GridPosition],
    viewport: Viewport,
    margin: float,
    config: LayoutConfig
) -> ScaleTransform:
    """
    Scale and centring offsets for a layout pass

    Args:
        positions: Unscaled entry positions
        viewport: Clamped viewport
        margin: Clamped margin
        config: Layout configuration

    Returns:
        ScaleTransform; the identity-scale centring transform when there
        are no positions
    """
    if not positions:
        cx, cy = viewport.center
        return ScaleTransform(scale=1.0, offset_x=cx, offset_y=cy)

    min_x, max_x, min_y, max_y = raw_bounds(positions, config)
    width = max_x - min_x
    height = max_y - min_y

    available_width = max(viewport.width - 2 * margin, config.min_viewport)
    available_height = max(viewport.height - 2 * margin, config.min_viewport)

    scale = fit_scale(width, height, available_width, available_height)

    offset_x = viewport.width / 2 - (width * scale) / 2 - min_x * scale
    offset_y = viewport.height / 2 - (height * scale) / 2 - min_y * scale

    logger.debug(f"Raw bounds x=[{min_x:.1f}, {max_x:.1f}] y=[{min_y:.1f}, {max_y:.1f}], "
                 f"available {available_width:.1f}x{available_height:.1f}, scale {scale:.4f}")

    return ScaleTransform(
        scale=scale,
        offset_x=offset_x,
        offset_y=offset_y,
        min_x=min_x,
        max_x=max_x,
        min_y=min_y,
        max_y=max_y,
    )


def scale_positions(
    positions: Sequence[GridPosition],
    transform: ScaleTransform
) -> Tuple[ScaledPosition, ...]:
    """Apply the transform to every grid position"""
    scaled = []
    for p in positions:
        x, y = transform.apply(p.x, p.y)
        scaled.append(ScaledPosition(index=p.index, x=x, y=y, row=p.row, pos_in_row=p.pos_in_row))
    return tuple(scaled)
