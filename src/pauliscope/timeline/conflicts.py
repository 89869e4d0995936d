# src/pauliscope/timeline/conflicts.py
"""Conflict detection for gate placement."""
from __future__ import annotations

from typing import Iterable, List

from pauliscope.timeline.store import TimelineStore


def find_conflicts(store: TimelineStore, qubits: Iterable[int], slot: int) -> List[int]:
    """
    Indices of existing gates at ``slot`` that share a qubit with ``qubits``.

    Any overlap marks the whole gate: a two-qubit gate with only one qubit
    in ``qubits`` is still reported. Indices are returned in ascending
    (sequential) order.

    Examples
    --------
    >>> from pauliscope.gates import make_gate
    >>> from pauliscope.timeline.store import ScheduledGate
    >>> store = TimelineStore([ScheduledGate(make_gate("CNOT", 1, 4), 0)])
    >>> find_conflicts(store, {1, 3}, 0)
    [0]
    >>> find_conflicts(store, {1, 3}, 1)
    []
    """
    wanted = frozenset(qubits)
    return [i for i, entry in enumerate(store) if entry.slot == slot and entry.touches(wanted)]
