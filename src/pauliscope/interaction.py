# src/pauliscope/interaction.py
"""
User-input boundary for the circuit grid.

Translates palette selections and grid clicks into editor calls. Input
that does not make sense (clicks outside the grid, a two-qubit gate whose
two clicks land in different slots, an invalid qubit count) is reported
through a :class:`~pauliscope.notifications.NotificationCenter` and
leaves the editor untouched. A pending two-qubit selection survives a
rejected second click so the user can try again.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from pauliscope.editor import KindLike, TimelineEditor
from pauliscope.engine.pauli import PAULI_LABELS
from pauliscope.gates import SingleGateKind, TwoGateKind, parse_kind
from pauliscope.notifications import NotificationCenter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PendingTwoQubitGate:
    """First click of a two-qubit placement."""
    kind: TwoGateKind
    qubit: int
    slot: int


class CircuitInteraction:
    """
    Click handling on top of a :class:`TimelineEditor`.

    Parameters
    ----------
    editor : TimelineEditor
        Editor receiving the validated edits.
    notifications : NotificationCenter, optional
        Where rejected input is reported. One is created from the editor
        configuration when omitted.
    """

    def __init__(self, editor: TimelineEditor, notifications: Optional[NotificationCenter] = None):
        self.editor = editor
        self.notifications = notifications or NotificationCenter(
            duration=editor.config.notification_duration
        )
        self.selected_kind: Optional[Union[SingleGateKind, TwoGateKind]] = None
        self.pending: Optional[PendingTwoQubitGate] = None

    def select_gate(self, kind: Optional[KindLike]) -> None:
        """Choose the palette gate (None to deselect). Drops any pending selection."""
        self.selected_kind = None if kind is None else parse_kind(kind)
        self.pending = None

    def cancel_pending(self) -> None:
        self.pending = None

    def _cell_in_grid(self, qubit: int, slot: int) -> bool:
        if 0 <= qubit < self.editor.num_qubits and slot >= 0:
            return True
        self.notifications.notify(
            f"Cell (qubit {qubit}, time {slot}) is outside the circuit"
        )
        return False

    def click(self, qubit: int, slot: int) -> bool:
        """
        Handle a left click on a grid cell.

        Returns
        -------
        bool
            True if a gate was placed by this click.
        """
        if self.selected_kind is None:
            return False
        if not self._cell_in_grid(qubit, slot):
            return False

        if isinstance(self.selected_kind, SingleGateKind):
            return self.editor.place_single_qubit_gate(qubit, slot, self.selected_kind)

        if self.pending is None:
            self.pending = PendingTwoQubitGate(kind=self.selected_kind, qubit=qubit, slot=slot)
            logger.debug("Pending %s on qubit %d at slot %d", self.selected_kind.value, qubit, slot)
            return False

        pending = self.pending
        if slot != pending.slot:
            self.notifications.notify(
                f"{pending.kind.value} must be placed within one time step: "
                f"first qubit is at time {pending.slot}, second click was at time {slot}"
            )
            return False
        if qubit == pending.qubit:
            self.notifications.notify(
                f"{pending.kind.value} needs two different qubits; choose a qubit other than {qubit}"
            )
            return False

        placed = self.editor.place_two_qubit_gate(pending.qubit, qubit, slot, pending.kind)
        if placed:
            self.pending = None
        return placed

    def place_at_next_slot(self, qubit: int) -> bool:
        """Place the selected gate on ``qubit`` one slot after its last gate."""
        if self.selected_kind is None:
            return False
        if not self._cell_in_grid(qubit, 0):
            return False
        if isinstance(self.selected_kind, TwoGateKind) and self.editor.num_qubits < 2:
            self.notifications.notify(
                f"{self.selected_kind.value} needs at least two qubits in the circuit"
            )
            return False
        return self.editor.place_gate_at_next_slot(qubit, self.selected_kind)

    def right_click(self, qubit: int, slot: int) -> bool:
        """Remove the gate under the cursor, if any."""
        if not self._cell_in_grid(qubit, slot):
            return False
        return self.editor.remove_gate(qubit, slot)

    def request_qubit_count(self, value: Union[int, str]) -> bool:
        """
        Apply a qubit count typed by the user.

        Returns
        -------
        bool
            True if the circuit was resized.
        """
        config = self.editor.config
        try:
            count = int(value)
        except (TypeError, ValueError):
            count = None
        if count is None or not config.accepts_qubit_count(count):
            self.notifications.notify(
                f"Please enter a valid number of qubits between "
                f"{config.min_num_qubits} and {config.max_num_qubits}"
            )
            return False
        changed = self.editor.change_qubit_count(count)
        if changed and self.pending is not None and self.pending.qubit >= count:
            self.pending = None
        return changed

    def inject_error(self, qubit: int, pauli: str) -> bool:
        """Inject a user-chosen error, rejecting unknown qubits or labels."""
        if not 0 <= qubit < self.editor.num_qubits:
            self.notifications.notify(f"Qubit {qubit} does not exist")
            return False
        if not isinstance(pauli, str) or pauli.upper() not in PAULI_LABELS:
            self.notifications.notify(f"Unknown error type {pauli!r}")
            return False
        self.editor.inject_error(qubit, pauli)
        return True
