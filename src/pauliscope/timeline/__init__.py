# src/pauliscope/timeline/__init__.py
"""
Timeline scheduling.

Reconciles the sequential gate list replayed by the propagation engine
with the parallel time-slot grid the user edits.

Modules
-------
store
    ``TimelineStore``: ordered ``(gate, slot)`` pairs.
conflicts
    Gates displaced by a placement.
placement, removal, resize
    Pure timeline transforms for each kind of edit.
state
    ``TimelineState`` and the single engine rebuild path.
stepping
    ``StepController``: slot-by-slot forward stepping, replay backward.
history
    Sparse per-slot error history.
"""
from pauliscope.timeline.conflicts import find_conflicts
from pauliscope.timeline.history import ErrorHistory, ErrorHistoryEntry, ErrorHistoryRecorder
from pauliscope.timeline.placement import (
    PlacementResult,
    default_partner,
    next_available_slot,
    place_gate,
)
from pauliscope.timeline.removal import remove_gate
from pauliscope.timeline.resize import resize
from pauliscope.timeline.state import TimelineState
from pauliscope.timeline.stepping import StepController
from pauliscope.timeline.store import ScheduledGate, TimelineStore, asap_slots

__all__ = [
    "ScheduledGate",
    "TimelineStore",
    "asap_slots",
    "find_conflicts",
    "PlacementResult",
    "place_gate",
    "next_available_slot",
    "default_partner",
    "remove_gate",
    "resize",
    "TimelineState",
    "StepController",
    "ErrorHistory",
    "ErrorHistoryEntry",
    "ErrorHistoryRecorder",
]
