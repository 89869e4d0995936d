# src/pauliscope/timeline/placement.py
"""
Gate placement on the timeline.

Placing a gate at a slot either replaces every conflicting gate at that
slot or, when nothing conflicts, splices the new gate in before the first
gate scheduled later than the target slot. Slots of all surviving gates
are never changed.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List

from pauliscope.gates import Gate
from pauliscope.timeline.conflicts import find_conflicts
from pauliscope.timeline.store import ScheduledGate, TimelineStore

logger = logging.getLogger(__name__)


@dataclass
class PlacementResult:
    """
    Outcome of a placement.

    Attributes
    ----------
    store : TimelineStore
        The rebuilt timeline.
    index : int
        Sequential index of the new gate in ``store``.
    displaced : List[ScheduledGate]
        Gates removed because they conflicted with the new gate.
    """
    store: TimelineStore
    index: int
    displaced: List[ScheduledGate] = field(default_factory=list)


def place_gate(store: TimelineStore, gate: Gate, slot: int) -> PlacementResult:
    """
    Place ``gate`` at ``slot`` and return the rebuilt timeline.

    With conflicts, the surviving gates keep their relative order and the
    new gate takes the sequential position of the earliest conflicting
    gate. Without conflicts, it is inserted before the first gate whose
    slot is strictly greater than ``slot`` (or appended).
    """
    if slot < 0:
        raise ValueError(f"Time slot must be non-negative, got {slot}")

    new_entry = ScheduledGate(gate, slot)
    conflicts = find_conflicts(store, gate.qubits, slot)

    if conflicts:
        dropped = set(conflicts)
        earliest = conflicts[0]
        entries: List[ScheduledGate] = []
        index = -1
        for i, entry in enumerate(store):
            if i == earliest:
                index = len(entries)
                entries.append(new_entry)
            elif i not in dropped:
                entries.append(entry)
        displaced = [store[i] for i in conflicts]
        logger.debug(
            "Placed %s at slot %d replacing %s",
            gate, slot, ", ".join(str(e.gate) for e in displaced),
        )
        return PlacementResult(store=TimelineStore(entries), index=index, displaced=displaced)

    index = len(store)
    for i, entry in enumerate(store):
        if entry.slot > slot:
            index = i
            break
    entries = list(store.entries)
    entries.insert(index, new_entry)
    logger.debug("Placed %s at slot %d (sequential index %d)", gate, slot, index)
    return PlacementResult(store=TimelineStore(entries), index=index)


def next_available_slot(store: TimelineStore, qubits: Iterable[int]) -> int:
    """One past the latest slot used on any of ``qubits`` (0 if unused)."""
    wanted = frozenset(qubits)
    latest = max((entry.slot for entry in store if entry.touches(wanted)), default=-1)
    return latest + 1


def default_partner(qubit: int, num_qubits: int) -> int:
    """
    Partner qubit for two-qubit gates placed without an explicit second qubit.

    This is the neighbour ``(qubit + 1) % num_qubits``. It is a layout
    convenience, not a physical pairing rule.
    """
    return (qubit + 1) % num_qubits
