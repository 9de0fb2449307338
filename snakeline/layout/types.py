"""
Layout types for snakeline
Data structures for layout engine inputs and results

All types are immutable (frozen) for safety and testability.
"""
from dataclasses import dataclass, field
from typing import List, Tuple, Optional, Any

from ..types import (
    EntryId,
    EntryRole,
    EntryState,
    Phase,
    PathKind,
    SectionType,
    SlotState,
)


# ============================================================
# INPUTS
# ============================================================

@dataclass(frozen=True)
class Entry:
    """
    A confirmed, dated item on a player's timeline

    Attributes:
        id: Stable identity (card id)
        year: Display year, never used for positioning
        pending: Whether this entry is awaiting confirmation/challenge
        role: 'original' or 'challenger' for the two copies of a disputed card
    """
    id: EntryId
    year: int
    pending: bool = False
    role: Optional[EntryRole] = None


@dataclass(frozen=True)
class Viewport:
    """Available rendering area (px)"""
    width: float
    height: float

    @property
    def center(self) -> Tuple[float, float]:
        """Centre point of the viewport"""
        return (self.width / 2, self.height / 2)


@dataclass(frozen=True)
class ChallengeContext:
    """
    Dispute over the last placement

    Attributes:
        target_entry_id: Entry under dispute
        resolved: Whether the dispute has been decided
        original_correct: Whether the original placement was right
        challenger_correct: Whether the challenger's placement was right
    """
    target_entry_id: Optional[EntryId] = None
    resolved: bool = False
    original_correct: Optional[bool] = None
    challenger_correct: Optional[bool] = None


@dataclass(frozen=True)
class InteractionContext:
    """
    Slice of game state the layout reads

    Attributes:
        is_my_turn: Whether the viewing player is the active one
        phase: Current round phase
        pending_id: Entry awaiting confirmation, if any
        pending_correct: Outcome of the pending placement once known
        challenge: Dispute information, if a challenge is running
        hovered_index: Slot under the pointer
        selected_index: Slot chosen as drop target
    """
    is_my_turn: bool = False
    phase: Phase = 'waiting'
    pending_id: Optional[EntryId] = None
    pending_correct: Optional[bool] = None
    challenge: Optional[ChallengeContext] = None
    hovered_index: Optional[int] = None
    selected_index: Optional[int] = None


# ============================================================
# INTERMEDIATE GEOMETRY
# ============================================================

@dataclass(frozen=True)
class GridPosition:
    """
    Unscaled grid position of one entry

    Attributes:
        index: Position in the confirmed entry list
        x: Unscaled x
        y: Unscaled y
        row: Row (section) index
        pos_in_row: Position within the row (0..row_size-1)
    """
    index: int
    x: float
    y: float
    row: int
    pos_in_row: int

    @property
    def flows_right(self) -> bool:
        """Even rows run left to right"""
        return self.row % 2 == 0

    @property
    def direction(self) -> int:
        """+1 for left-to-right rows, -1 otherwise"""
        return 1 if self.flows_right else -1


@dataclass(frozen=True)
class ScaleTransform:
    """
    Uniform shrink-and-centre transform

    Attributes:
        scale: Shrink-only factor in (0, 1]
        offset_x: Horizontal translation after scaling
        offset_y: Vertical translation after scaling
        min_x, max_x, min_y, max_y: Raw bounds including slot reserve
    """
    scale: float
    offset_x: float
    offset_y: float
    min_x: float = 0.0
    max_x: float = 0.0
    min_y: float = 0.0
    max_y: float = 0.0

    @property
    def width(self) -> float:
        """Raw bounding box width"""
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        """Raw bounding box height"""
        return self.max_y - self.min_y

    def apply(self, x: float, y: float) -> Tuple[float, float]:
        """Map a raw point to screen coordinates"""
        return (x * self.scale + self.offset_x, y * self.scale + self.offset_y)

    def scaled_bounds(self) -> Tuple[float, float, float, float]:
        """Screen-space (min_x, min_y, max_x, max_y) of the bounding box"""
        x0, y0 = self.apply(self.min_x, self.min_y)
        x1, y1 = self.apply(self.max_x, self.max_y)
        return (x0, y0, x1, y1)


@dataclass(frozen=True)
class ScaledPosition:
    """Screen position of an entry, carrying its grid placement"""
    index: int
    x: float
    y: float
    row: int
    pos_in_row: int

    @property
    def direction(self) -> int:
        """+1 for left-to-right rows, -1 otherwise"""
        return 1 if self.row % 2 == 0 else -1


@dataclass(frozen=True)
class Section:
    """
    Connection between two consecutive entries

    end_x may differ from end.x when the approach to a curve is extended.
    """
    section_type: SectionType
    start: ScaledPosition
    end: ScaledPosition
    end_x: float

    @property
    def is_curve(self) -> bool:
        return self.section_type == 'curve'


# ============================================================
# OUTPUTS
# ============================================================

@dataclass(frozen=True)
class Slot:
    """
    Interactive insertion point

    Attributes:
        index: 0 (before the first entry) .. N (after the last)
        x, y: Screen position
        curve_shift: Lateral offset for slots on a row transition
        selectable: Whether the viewing player may choose this slot
        state: Display state
        visible: Whether the board shows slots in the current phase
    """
    index: int
    x: float
    y: float
    curve_shift: float = 0.0
    selectable: bool = False
    state: SlotState = 'normal'
    visible: bool = True

    @property
    def display_x(self) -> float:
        """x with the curve shift applied"""
        return self.x + self.curve_shift

    @property
    def interactive(self) -> bool:
        """Selectable and not disabled"""
        return self.selectable and self.state != 'disabled'


@dataclass(frozen=True)
class YearMarker:
    """Rendered entry"""
    entry_id: EntryId
    year: int
    x: float
    y: float
    row: int
    state: EntryState = 'normal'


@dataclass(frozen=True)
class PathCommand:
    """
    One drawing command with absolute screen coordinates

    radius and sweep are set for 'arc' only.
    """
    kind: PathKind
    x: float
    y: float
    radius: Optional[float] = None
    sweep: Optional[int] = None

    @property
    def point(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class GuideStroke:
    """Short stroke leading out of a slot; the last one fades out"""
    x0: float
    y0: float
    x1: float
    y1: float
    fading: bool = False


@dataclass(frozen=True)
class LayoutResult:
    """
    Complete geometry for one layout pass

    This is the output of LayoutEngine and input to SnakePlotter
    and the layout writers.

    Attributes:
        slots: Insertion slots, ordered by index
        years: Year markers for entries that currently render
        path: Drawing commands for the track
        guides: Guide strokes leading out of each slot
        transform: Scale and offsets used for this pass
        viewport: Viewport after clamping
        layout_stats: Summary numbers for logging
    """
    slots: Tuple[Slot, ...]
    years: Tuple[YearMarker, ...]
    path: Tuple[PathCommand, ...]
    guides: Tuple[GuideStroke, ...]
    transform: ScaleTransform
    viewport: Viewport
    layout_stats: Tuple[Tuple[str, Any], ...] = field(default_factory=tuple)

    @property
    def scale(self) -> float:
        """Shrink-only scale factor"""
        return self.transform.scale

    @property
    def n_slots(self) -> int:
        return len(self.slots)

    @property
    def n_years(self) -> int:
        return len(self.years)

    @property
    def n_arcs(self) -> int:
        """Number of row transitions drawn"""
        return sum(1 for command in self.path if command.kind == 'arc')

    @property
    def is_empty(self) -> bool:
        """True for the zero-entry layout"""
        return not self.years

    @property
    def svg_path(self) -> str:
        """Track as SVG path data"""
        from .path import to_svg_path
        return to_svg_path(self.path)

    @property
    def stats(self) -> dict:
        return dict(self.layout_stats)

    def get_slot(self, index: int) -> Slot:
        """Slot by index"""
        return self.slots[index]

    def get_year(self, entry_id: EntryId) -> Optional[YearMarker]:
        """Year marker for an entry, or None if it does not render"""
        for marker in self.years:
            if marker.entry_id == entry_id:
                return marker
        return None

    def years_in_row(self, row: int) -> List[YearMarker]:
        """Year markers sharing a row"""
        return [marker for marker in self.years if marker.row == row]
