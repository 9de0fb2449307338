"""
Type definitions for snakeline

Common types used throughout the package for type checking and documentation.
"""

from __future__ import annotations
from typing import TypedDict, Literal, Union, FrozenSet, Hashable
from pathlib import Path

# Type aliases
PathLike = Union[str, Path]
"""File path as string or Path object"""

EntryId = Hashable
"""Stable identity of a placed entry (card id from the game state)"""

Phase = Literal[
    'waiting',
    'player-turn',
    'song-guess',
    'challenge-window',
    'challenge',
    'challenge-resolved',
    'reveal',
    'game-over',
]
"""Round phase supplied by the turn/phase state machine"""

EntryRole = Literal['original', 'challenger']
"""Display copy of a disputed card during challenge resolution"""

EntryState = Literal['normal', 'pending-hidden', 'correct', 'incorrect']
"""Display state of a year marker"""

SlotState = Literal['normal', 'hovered', 'selected', 'disabled']
"""Display state of an insertion slot"""

SectionType = Literal['straight', 'curve']
"""Connection between two consecutive entries"""

PathKind = Literal['move', 'line', 'arc']
"""Drawing command kind"""

# Phase groups

HIDDEN_PENDING_PHASES: FrozenSet[str] = frozenset({'song-guess', 'challenge-window', 'challenge'})
"""Phases during which the pending entry is left out of the layout"""

SELECTABLE_PHASES: FrozenSet[str] = frozenset({'player-turn', 'challenge'})
"""Phases in which the active player may pick a slot"""

DISPUTE_PHASES: FrozenSet[str] = frozenset({'challenge', 'challenge-window'})
"""Phases in which the disputed slot is disabled"""

RESOLVED_PHASES: FrozenSet[str] = frozenset({'reveal', 'challenge-resolved'})
"""Phases in which slots are hidden and results are shown"""


# Structured data types

class EntryRecord(TypedDict, total=False):
    """One row of an entry table as read from TSV"""
    id: str
    year: int
    pending: bool
    role: str

