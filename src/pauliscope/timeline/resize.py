# src/pauliscope/timeline/resize.py
"""Qubit-count changes."""
from __future__ import annotations

import logging
from typing import Dict, Tuple

from pauliscope.timeline.store import TimelineStore

logger = logging.getLogger(__name__)


def resize(
    store: TimelineStore,
    errors: Dict[int, str],
    new_count: int,
) -> Tuple[TimelineStore, Dict[int, str]]:
    """
    Drop everything that does not fit on ``new_count`` qubits.

    A gate touching any qubit ``>= new_count`` is dropped whole. Surviving
    gates keep their relative order and their slots; only their
    sequential indices are compacted. Injected errors on removed qubits are
    dropped as well.

    Parameters
    ----------
    store : TimelineStore
        Current timeline.
    errors : Dict[int, str]
        Current initial error map (qubit -> Pauli label).
    new_count : int
        New number of qubits.

    Returns
    -------
    Tuple[TimelineStore, Dict[int, str]]
        Filtered timeline and error map. An empty map means no errors.
    """
    kept = [entry for entry in store if max(entry.qubits) < new_count]
    kept_errors = {q: p for q, p in errors.items() if q < new_count}
    dropped = len(store) - len(kept)
    if dropped or len(kept_errors) != len(errors):
        logger.debug(
            "Resize to %d qubits dropped %d gate(s) and %d error(s)",
            new_count, dropped, len(errors) - len(kept_errors),
        )
    return TimelineStore(kept), kept_errors
