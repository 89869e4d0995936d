# src/pauliscope/editor.py
"""
Timeline editor facade.

:class:`TimelineEditor` is what views and controls talk to. It owns one
:class:`~pauliscope.timeline.state.TimelineState` and routes every edit
through the pure timeline transforms, then through the single engine
rebuild path. Stepping goes through the
:class:`~pauliscope.timeline.stepping.StepController`.

Mutating methods return ``True`` on success. If the engine stops
reporting the gate list the timeline expects, the breach is logged and
the method returns ``False`` without touching any state.

Example usage:
    >>> editor = TimelineEditor(num_qubits=2)
    >>> editor.place_single_qubit_gate(0, 0, "H")
    True
    >>> editor.place_two_qubit_gate(0, 1, 1, "CNOT")
    True
    >>> editor.inject_error(0, "X")
    >>> editor.step_to_slot(editor.get_circuit_depth())
    True
    >>> str(editor.error_pattern)
    'ZI'
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Union

from pauliscope.config import EditorConfig
from pauliscope.engine.pauli import ErrorPattern, validate_pauli_label
from pauliscope.gates import (
    Gate,
    SingleGateKind,
    SingleQubitGate,
    TwoGateKind,
    TwoQubitGate,
    parse_kind,
)
from pauliscope.timeline.history import ErrorHistory, ErrorHistoryRecorder
from pauliscope.timeline.placement import default_partner, next_available_slot, place_gate
from pauliscope.timeline.removal import remove_gate
from pauliscope.timeline.resize import resize
from pauliscope.timeline.state import TimelineState
from pauliscope.timeline.stepping import StepController
from pauliscope.timeline.store import TimelineStore

logger = logging.getLogger(__name__)

KindLike = Union[str, SingleGateKind, TwoGateKind]


class TimelineEditor:
    """
    Single-document circuit editor with slot-by-slot error propagation.

    Parameters
    ----------
    num_qubits : int, optional
        Initial qubit count; ``config.default_num_qubits`` when omitted.
    config : EditorConfig, optional
        Editor configuration.
    """

    def __init__(self, num_qubits: Optional[int] = None, config: Optional[EditorConfig] = None):
        self.config = config or EditorConfig()
        self.state = TimelineState(num_qubits or self.config.default_num_qubits)
        self.recorder = ErrorHistoryRecorder(self.state)
        self.stepper = StepController(
            self.state,
            recorder=self.recorder,
            reset_num_qubits=self.config.default_num_qubits,
        )
        self.last_placed_slot = -1

    # =========================================================================
    # Read-only accessors
    # =========================================================================

    @property
    def num_qubits(self) -> int:
        return self.state.num_qubits

    @property
    def store(self) -> TimelineStore:
        return self.state.store

    @property
    def gates(self) -> List[Gate]:
        return self.state.store.gates

    @property
    def slot_of(self) -> Dict[int, int]:
        return self.state.store.slot_of

    @property
    def current_slot(self) -> int:
        return self.state.current_slot

    @property
    def error_history(self) -> ErrorHistory:
        return self.state.history

    @property
    def initial_errors(self) -> Dict[int, str]:
        return dict(self.state.initial_errors)

    @property
    def error_pattern(self) -> ErrorPattern:
        return self.state.simulator.get_error_pattern()

    def get_circuit_depth(self) -> int:
        return self.state.depth

    # =========================================================================
    # Placement
    # =========================================================================

    def place_single_qubit_gate(self, qubit: int, slot: int, kind: KindLike) -> bool:
        """Place a single-qubit gate, replacing whatever conflicts at ``slot``."""
        resolved = parse_kind(kind)
        if not isinstance(resolved, SingleGateKind):
            raise ValueError(f"{resolved.value} is a two-qubit gate; use place_two_qubit_gate")
        return self._place(SingleQubitGate(qubit=qubit, kind=resolved), slot)

    def place_two_qubit_gate(self, qubit_a: int, qubit_b: int, slot: int, kind: KindLike) -> bool:
        """
        Place a two-qubit gate.

        ``qubit_a`` is the control for CNOT/CZ, ``qubit_b`` the target.
        """
        resolved = parse_kind(kind)
        if not isinstance(resolved, TwoGateKind):
            raise ValueError(f"{resolved.value} is a single-qubit gate; use place_single_qubit_gate")
        if qubit_a == qubit_b:
            raise ValueError(f"{resolved.value} needs two distinct qubits, got {qubit_a} twice")
        return self._place(TwoQubitGate(kind=resolved, qubit_a=qubit_a, qubit_b=qubit_b), slot)

    def place_gate_at_next_slot(self, qubit: int, kind: KindLike) -> bool:
        """
        Place a gate one slot after the last gate on its qubits.

        Two-qubit gates pair ``qubit`` with ``(qubit + 1) % num_qubits``.
        """
        resolved = parse_kind(kind)
        if isinstance(resolved, SingleGateKind):
            slot = next_available_slot(self.state.store, (qubit,))
            return self.place_single_qubit_gate(qubit, slot, resolved)
        partner = default_partner(qubit, self.state.num_qubits)
        slot = next_available_slot(self.state.store, (qubit, partner))
        return self.place_two_qubit_gate(qubit, partner, slot, resolved)

    def _place(self, gate: Gate, slot: int) -> bool:
        if not self.state.engine_is_consistent():
            return False
        result = place_gate(self.state.store, gate, slot)
        self.state.rebuild_from(result.store)
        self.last_placed_slot = slot
        return True

    # =========================================================================
    # Removal and resizing
    # =========================================================================

    def remove_gate(self, qubit: int, slot: int) -> bool:
        """Remove the gate on ``qubit`` at ``slot``. False if the cell is empty."""
        if not self.state.engine_is_consistent():
            return False
        removed = remove_gate(self.state.store, qubit, slot)
        if removed is None:
            return False
        store, _ = removed
        self.state.rebuild_from(store)
        return True

    def change_qubit_count(self, new_count: int) -> bool:
        """
        Resize the register, dropping gates and errors that no longer fit.

        Returns False when the count is unchanged.
        """
        if new_count < 1:
            raise ValueError(f"Qubit count must be at least 1, got {new_count}")
        if new_count == self.state.num_qubits:
            return False
        if not self.state.engine_is_consistent():
            return False
        store, errors = resize(self.state.store, self.state.initial_errors, new_count)
        self.state.rebuild_from(store, new_count, errors)
        return True

    # =========================================================================
    # Errors
    # =========================================================================

    def inject_error(self, qubit: int, pauli: str) -> None:
        """
        Record ``pauli`` on ``qubit`` in the initial error map and apply it now.

        The cursor and history are left alone; the error survives every
        later rebuild.
        """
        if qubit < 0 or qubit >= self.state.num_qubits:
            raise ValueError(f"Qubit {qubit} out of range [0, {self.state.num_qubits})")
        label = validate_pauli_label(pauli)
        self.state.simulator.inject_error(qubit, label)
        self.state.initial_errors[qubit] = label

    def clear_errors(self) -> bool:
        if not self.state.engine_is_consistent():
            return False
        self.state.rebuild_from(self.state.store, errors={})
        return True

    # =========================================================================
    # Stepping
    # =========================================================================

    def step_to_slot(self, target: int) -> bool:
        if not self.state.engine_is_consistent():
            return False
        self.stepper.step_to_slot(target)
        return True

    def step_forward(self) -> bool:
        """Advance one slot; False at the end of the timeline."""
        if self.state.current_slot >= self.state.depth:
            return False
        return self.step_to_slot(self.state.current_slot + 1)

    def step_backward(self) -> bool:
        """Go back one slot; False at slot 0."""
        if self.state.current_slot <= 0:
            return False
        return self.step_to_slot(self.state.current_slot - 1)

    def reset(self) -> None:
        """Start over with an empty default-size circuit and no errors."""
        self.stepper.reset()
        self.last_placed_slot = -1

    # =========================================================================
    # Loading
    # =========================================================================

    def load(
        self,
        gates: Sequence[Gate],
        num_qubits: Optional[int] = None,
        slots: Optional[Sequence[int]] = None,
        errors: Optional[Dict[int, str]] = None,
    ) -> None:
        """
        Replace the whole document.

        Missing ``slots`` are assigned as early as possible. History slot 0
        is seeded with the starting error pattern.
        """
        store = TimelineStore.from_gates(gates, slots)
        self.state.rebuild_from(store, num_qubits, errors if errors is not None else {})
        self.last_placed_slot = -1
        self.seed_history()
        logger.debug("Loaded %d gate(s) on %d qubit(s)", len(store), self.state.num_qubits)

    def seed_history(self) -> None:
        """Force-record the current pattern at the current slot."""
        self.recorder.record(self.state.current_slot, force_update=True)

    def __repr__(self) -> str:
        return (
            f"TimelineEditor(num_qubits={self.state.num_qubits}, gates={len(self.state.store)}, "
            f"depth={self.state.depth}, slot={self.state.current_slot})"
        )
