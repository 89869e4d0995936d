# src/pauliscope/timeline/store.py
"""
Timeline data model.

The timeline is a single ordered tuple of :class:`ScheduledGate` entries.
The tuple order is the sequential order the propagation engine replays;
each entry also carries the logical time slot the gate is drawn in. The
sequential index of a gate is simply its position in the tuple, so the
gate list and the slot map can never drift apart.

Invariants
----------
1. Every gate has a slot (a non-negative integer).
2. Gates sharing a slot act on disjoint qubits.
3. Removing a gate never changes the slot of another gate.

A :class:`TimelineStore` is immutable. Every edit builds a new store.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np
import stim

from pauliscope.gates import Gate


@dataclass(frozen=True)
class ScheduledGate:
    """A gate together with the time slot it occupies."""
    gate: Gate
    slot: int

    @property
    def qubits(self) -> Tuple[int, ...]:
        return self.gate.qubits

    def touches(self, qubits) -> bool:
        """True if this gate acts on any of ``qubits``."""
        return not self.gate.qubit_set.isdisjoint(qubits)


class TimelineStore:
    """
    Ordered ``(gate, slot)`` pairs.

    Parameters
    ----------
    entries : Sequence[ScheduledGate], optional
        Entries in sequential (engine) order.

    Examples
    --------
    >>> from pauliscope.gates import make_gate
    >>> store = TimelineStore([ScheduledGate(make_gate("H", 0), 0),
    ...                        ScheduledGate(make_gate("X", 0), 2)])
    >>> store.depth
    3
    >>> store.slot_of
    {0: 0, 1: 2}
    """

    def __init__(self, entries: Optional[Sequence[ScheduledGate]] = None):
        self._entries: Tuple[ScheduledGate, ...] = tuple(entries or ())
        for entry in self._entries:
            if entry.slot < 0:
                raise ValueError(f"Time slot must be non-negative, got {entry.slot} for {entry.gate}")

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_gates(
        cls,
        gates: Sequence[Gate],
        slots: Optional[Sequence[int]] = None,
    ) -> "TimelineStore":
        """
        Build a store from a gate list.

        Parameters
        ----------
        gates : Sequence[Gate]
            Gates in sequential order.
        slots : Sequence[int], optional
            Slot per gate. When omitted every gate is placed as early as
            possible: one slot after the latest gate already on any of
            its qubits.

        Raises
        ------
        ValueError
            If ``slots`` has the wrong length or breaks the one-gate-per-qubit
            rule.
        """
        if slots is None:
            slots = asap_slots(gates)
        elif len(slots) != len(gates):
            raise ValueError(f"Got {len(slots)} slots for {len(gates)} gates")
        store = cls(ScheduledGate(gate, slot) for gate, slot in zip(gates, slots))
        store.validate()
        return store

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    @property
    def entries(self) -> Tuple[ScheduledGate, ...]:
        return self._entries

    @property
    def gates(self) -> List[Gate]:
        """Gates in the order the engine must replay them."""
        return [entry.gate for entry in self._entries]

    @property
    def slot_of(self) -> Dict[int, int]:
        """Sequential gate index -> time slot."""
        return {i: entry.slot for i, entry in enumerate(self._entries)}

    @property
    def depth(self) -> int:
        """``max(slot) + 1``, or 0 for an empty timeline."""
        if not self._entries:
            return 0
        return max(entry.slot for entry in self._entries) + 1

    def slot(self, index: int) -> int:
        return self._entries[index].slot

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ScheduledGate]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> ScheduledGate:
        return self._entries[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimelineStore):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        body = ", ".join(f"{e.gate}@{e.slot}" for e in self._entries)
        return f"TimelineStore([{body}])"

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def indices_at_slot(self, slot: int) -> List[int]:
        """Sequential indices of every gate in ``slot``."""
        return [i for i, entry in enumerate(self._entries) if entry.slot == slot]

    def find_gate(self, qubit: int, slot: int) -> Optional[int]:
        """Index of the gate acting on ``qubit`` at ``slot``, if any."""
        for i, entry in enumerate(self._entries):
            if entry.slot == slot and qubit in entry.gate.qubit_set:
                return i
        return None

    def validate(self) -> None:
        """
        Check that no two gates in the same slot share a qubit.

        Raises
        ------
        ValueError
            Naming the first pair of clashing gates.
        """
        seen: Dict[Tuple[int, int], int] = {}
        for i, entry in enumerate(self._entries):
            for q in entry.qubits:
                key = (entry.slot, q)
                if key in seen:
                    other = self._entries[seen[key]]
                    raise ValueError(
                        f"Gates {other.gate} (index {seen[key]}) and {entry.gate} "
                        f"(index {i}) both act on qubit {q} at slot {entry.slot}"
                    )
                seen[key] = i

    def occupancy(self, num_qubits: int) -> np.ndarray:
        """
        Grid of gate indices per ``(qubit, slot)`` cell.

        Returns
        -------
        np.ndarray
            Integer array of shape ``(num_qubits, depth)``; ``-1`` marks an
            empty cell. Qubits at or beyond ``num_qubits`` are ignored.
        """
        grid = np.full((num_qubits, self.depth), -1, dtype=np.int64)
        for i, entry in enumerate(self._entries):
            for q in entry.qubits:
                if q < num_qubits:
                    grid[q, entry.slot] = i
        return grid

    def to_stim(self) -> stim.Circuit:
        """
        Emit the timeline as a Stim circuit.

        Gates are emitted slot by slot (sequential order within a slot) and
        consecutive slots are separated by ``TICK``, so empty slots are
        kept as bare ``TICK`` layers.
        """
        circuit = stim.Circuit()
        by_slot: Dict[int, List[ScheduledGate]] = {}
        for entry in self._entries:
            by_slot.setdefault(entry.slot, []).append(entry)
        for slot in range(self.depth):
            if slot > 0:
                circuit.append("TICK")
            for entry in by_slot.get(slot, []):
                circuit.append(entry.gate.stim_name, list(entry.qubits))
        return circuit


def asap_slots(gates: Sequence[Gate]) -> List[int]:
    """
    Assign each gate the earliest slot after every earlier gate on its qubits.

    >>> from pauliscope.gates import make_gate
    >>> asap_slots([make_gate("H", 0), make_gate("H", 1), make_gate("CNOT", 0, 1)])
    [0, 0, 1]
    """
    last_slot: Dict[int, int] = {}
    slots: List[int] = []
    for gate in gates:
        slot = max((last_slot.get(q, -1) for q in gate.qubits), default=-1) + 1
        for q in gate.qubits:
            last_slot[q] = slot
        slots.append(slot)
    return slots
