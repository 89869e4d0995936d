# src/pauliscope/timeline/history.py
"""
Per-slot record of the error pattern.

The history is sparse: slots that were skipped (empty slots) have no
entry. An entry, once written, is only replaced by a forced record, so
revisiting a slot while stepping back and forth keeps what was seen the
first time.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, TYPE_CHECKING

import numpy as np

from pauliscope.engine.pauli import PAULI_LABELS, ErrorPattern

if TYPE_CHECKING:
    from pauliscope.timeline.state import TimelineState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ErrorHistoryEntry:
    """Error pattern observed after the gates of ``slot`` were applied."""
    slot: int
    pattern: str
    phase: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"slot": self.slot, "pattern": self.pattern, "phase": self.phase}


class ErrorHistory:
    """Sparse list of :class:`ErrorHistoryEntry` indexed by slot."""

    def __init__(self):
        self._entries: List[Optional[ErrorHistoryEntry]] = []

    def __len__(self) -> int:
        """One past the highest recorded slot."""
        return len(self._entries)

    def __getitem__(self, slot: int) -> Optional[ErrorHistoryEntry]:
        if 0 <= slot < len(self._entries):
            return self._entries[slot]
        return None

    def __contains__(self, slot: int) -> bool:
        return self[slot] is not None

    def __iter__(self) -> Iterator[ErrorHistoryEntry]:
        """Recorded entries in slot order, skipping gaps."""
        return (entry for entry in self._entries if entry is not None)

    def write(self, slot: int, pattern: ErrorPattern, force: bool = False) -> bool:
        """
        Store ``pattern`` at ``slot`` unless an entry exists (or ``force``).

        Returns
        -------
        bool
            True if the entry was written.
        """
        if slot < 0:
            raise ValueError(f"Time slot must be non-negative, got {slot}")
        if slot < len(self._entries) and self._entries[slot] is not None and not force:
            return False
        if slot >= len(self._entries):
            self._entries.extend([None] * (slot + 1 - len(self._entries)))
        self._entries[slot] = ErrorHistoryEntry(slot=slot, pattern=pattern.pattern, phase=pattern.phase)
        return True

    def clear(self) -> None:
        self._entries = []

    def as_list(self) -> List[Optional[ErrorHistoryEntry]]:
        return list(self._entries)

    def to_array(self, num_qubits: int) -> np.ndarray:
        """
        Pauli codes per slot for charting.

        Returns
        -------
        np.ndarray
            ``int8`` array of shape ``(len(self), num_qubits)`` using
            ``I=0, X=1, Y=2, Z=3``. Unrecorded slots are rows of ``-1``;
            qubits missing from a shorter pattern are ``0``.
        """
        data = np.zeros((len(self._entries), num_qubits), dtype=np.int8)
        for slot, entry in enumerate(self._entries):
            if entry is None:
                data[slot, :] = -1
                continue
            for q, label in enumerate(entry.pattern[:num_qubits]):
                data[slot, q] = PAULI_LABELS.index(label)
        return data


class ErrorHistoryRecorder:
    """Writes the engine's current error pattern into the state's history."""

    def __init__(self, state: "TimelineState"):
        self.state = state

    def record(self, slot: int, force_update: bool = False) -> bool:
        pattern = self.state.simulator.get_error_pattern()
        written = self.state.history.write(slot, pattern, force=force_update)
        if written:
            logger.debug("History slot %d: %s", slot, pattern)
        return written
