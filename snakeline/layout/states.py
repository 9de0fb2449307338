"""
Visual state resolver

Stateless mapping from (entry or slot, interaction context) to a display
state. Recomputed on every layout pass.
"""
from __future__ import annotations
from typing import Optional, Sequence

from .types import ChallengeContext, Entry, InteractionContext
from ..types import (
    DISPUTE_PHASES,
    HIDDEN_PENDING_PHASES,
    RESOLVED_PHASES,
    SELECTABLE_PHASES,
    EntryId,
    EntryState,
    SlotState,
)


def is_pending(entry: Entry, context: InteractionContext) -> bool:
    """Entry flagged pending, or named by the context's pending id"""
    if entry.pending:
        return True
    return context.pending_id is not None and entry.id == context.pending_id


def is_hidden(entry: Entry, context: InteractionContext) -> bool:
    """Pending entries stay off the board while they are being guessed or challenged"""
    return context.phase in HIDDEN_PENDING_PHASES and is_pending(entry, context)


def visible_entries(entries: Sequence[Entry], context: InteractionContext) -> list:
    """Entries that take part in positioning for this phase"""
    return [entry for entry in entries if not is_hidden(entry, context)]


def _outcome(correct: Optional[bool]) -> EntryState:
    if correct is None:
        return 'normal'
    return 'correct' if correct else 'incorrect'


def _resolved(challenge: Optional[ChallengeContext]) -> bool:
    return challenge is not None and challenge.resolved


def entry_state(entry: Entry, context: InteractionContext) -> EntryState:
    """
    Display state of a year marker

    Rules:
    - pending entry during guessing/challenge -> 'pending-hidden'
    - challenger/original copies after a resolved challenge -> their outcome
    - any other entry after a resolved challenge -> 'normal'
    - visible pending entry -> its outcome, 'normal' while unknown
    """
    if is_hidden(entry, context):
        return 'pending-hidden'

    challenge = context.challenge
    if context.phase == 'challenge-resolved' and _resolved(challenge):
        if entry.role == 'challenger':
            return _outcome(challenge.challenger_correct)
        if entry.role == 'original':
            return _outcome(challenge.original_correct)
        return 'normal'

    if not is_pending(entry, context):
        return 'normal'

    if _resolved(challenge):
        return _outcome(challenge.original_correct)
    return _outcome(context.pending_correct)


def index_of(entries: Sequence[Entry], entry_id: Optional[EntryId]) -> Optional[int]:
    """Position of an entry id in the full list, None if absent"""
    if entry_id is None:
        return None
    for i, entry in enumerate(entries):
        if entry.id == entry_id:
            return i
    return None


def pending_index(entries: Sequence[Entry], context: InteractionContext) -> Optional[int]:
    """Full-list index of the pending entry (the gap it was dropped into)"""
    if context.pending_id is not None:
        return index_of(entries, context.pending_id)
    for i, entry in enumerate(entries):
        if entry.pending:
            return i
    return None


def disputed_index(entries: Sequence[Entry], context: InteractionContext) -> Optional[int]:
    """Full-list index of the entry under challenge"""
    challenge = context.challenge
    if challenge is not None and challenge.target_entry_id is not None:
        return index_of(entries, challenge.target_entry_id)
    return pending_index(entries, context)


def is_selectable(context: InteractionContext) -> bool:
    """Slots are pickable only by the active player during placement or challenge"""
    return context.is_my_turn and context.phase in SELECTABLE_PHASES


def slots_visible(context: InteractionContext) -> bool:
    """The board hides slots while results are shown"""
    return context.phase not in RESOLVED_PHASES


def slot_state(
    index: int,
    context: InteractionContext,
    disputed: Optional[int] = None,
    placed: Optional[int] = None
) -> SlotState:
    """
    Display state of a slot

    Precedence: disabled > selected > hovered > normal.

    Args:
        index: Slot index
        context: Interaction context
        disputed: Full-list index of the disputed entry
        placed: Full-list index of the pending entry

    Returns:
        Slot state
    """
    if context.phase in DISPUTE_PHASES and disputed is not None and index == disputed:
        return 'disabled'
    if context.selected_index is not None and index == context.selected_index:
        return 'selected'
    if context.phase == 'song-guess' and placed is not None and index == placed:
        return 'selected'
    if is_selectable(context) and context.hovered_index is not None and index == context.hovered_index:
        return 'hovered'
    return 'normal'
