"""
Grid position calculator

Places entries on a boustrophedon grid: rows of `row_size` entries,
alternating direction, stacking upward.
"""
from __future__ import annotations
from typing import List, Sequence, TYPE_CHECKING

from .types import GridPosition

if TYPE_CHECKING:
    from ..config import LayoutConfig
    from .types import Entry


def row_of(index: int, row_size: int = 3) -> int:
    """Row (section) index of the entry at `index`"""
    return index // row_size


def grid_position(index: int, config: LayoutConfig) -> GridPosition:
    """
    Unscaled position of the entry at `index`

    Even rows run left to right, odd rows right to left, so the last entry
    of one row sits directly below the first entry of the next.

    Args:
        index: Position in the confirmed entry list
        config: Layout configuration

    Returns:
        GridPosition in the pre-scale coordinate space
    """
    row = row_of(index, config.row_size)
    pos = index % config.row_size

    if row % 2 == 0:
        column = pos
    else:
        column = (config.row_size - 1) - pos

    x = config.origin_x + column * config.col_pitch
    y = config.origin_y - row * config.row_pitch
    return GridPosition(index=index, x=x, y=y, row=row, pos_in_row=pos)


def calculate_grid(entries: Sequence[Entry], config: LayoutConfig) -> List[GridPosition]:
    """
    Grid positions for every entry, in placement order

    Args:
        entries: Confirmed entries (pending entry already filtered out)
        config: Layout configuration

    Returns:
        One GridPosition per entry; empty for no entries
    """
    return [grid_position(i, config) for i in range(len(entries))]
