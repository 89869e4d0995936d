# src/pauliscope/timeline/removal.py
"""Gate removal from the timeline."""
from __future__ import annotations

import logging
from typing import Optional, Tuple

from pauliscope.timeline.store import ScheduledGate, TimelineStore

logger = logging.getLogger(__name__)


def remove_gate(
    store: TimelineStore,
    qubit: int,
    slot: int,
) -> Optional[Tuple[TimelineStore, ScheduledGate]]:
    """
    Remove the gate acting on ``qubit`` at ``slot``.

    Later gates move down one sequential index but keep their slot, so the
    removed gate leaves a gap in the timeline.

    Returns
    -------
    Optional[Tuple[TimelineStore, ScheduledGate]]
        The rebuilt timeline and the removed entry, or None when no gate
        occupies the cell.
    """
    index = store.find_gate(qubit, slot)
    if index is None:
        logger.debug("No gate on qubit %d at slot %d to remove", qubit, slot)
        return None
    removed = store[index]
    entries = store.entries[:index] + store.entries[index + 1:]
    logger.debug("Removed %s from slot %d (sequential index %d)", removed.gate, slot, index)
    return TimelineStore(entries), removed
