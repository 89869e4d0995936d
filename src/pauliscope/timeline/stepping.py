# src/pauliscope/timeline/stepping.py
"""
Slot-granular stepping over a sequential engine.

The engine only moves forward one gate at a time. Advancing one slot
means stepping the engine through every gate scheduled in that slot, in
sequential order. Stepping backward replays the whole timeline from a
fresh engine.
"""
from __future__ import annotations

import logging
from typing import Optional

from pauliscope.timeline.history import ErrorHistoryRecorder
from pauliscope.timeline.state import TimelineState
from pauliscope.timeline.store import TimelineStore

logger = logging.getLogger(__name__)


class StepController:
    """
    Moves ``state.current_slot`` within ``[0, depth]``.

    Targets outside that range raise ``ValueError``; the controller never
    clamps. Callers are expected to check bounds first.

    Parameters
    ----------
    state : TimelineState
        Shared editor state. Only the cursor, engine and history are
        modified; the timeline itself is read-only here.
    recorder : ErrorHistoryRecorder, optional
        Records the error pattern after each stepped slot.
    reset_num_qubits : int
        Qubit count used by :meth:`reset`.
    """

    def __init__(
        self,
        state: TimelineState,
        recorder: Optional[ErrorHistoryRecorder] = None,
        reset_num_qubits: int = 2,
    ):
        self.state = state
        self.recorder = recorder or ErrorHistoryRecorder(state)
        self.reset_num_qubits = reset_num_qubits

    @property
    def current_slot(self) -> int:
        return self.state.current_slot

    def _check_target(self, target: int) -> None:
        depth = self.state.depth
        if target < 0 or target > depth:
            raise ValueError(f"Target slot {target} outside [0, {depth}]")

    def step_forward_to_slot(self, target: int) -> None:
        """Apply the gates of slots ``current_slot .. target - 1`` and move to ``target``."""
        self._check_target(target)
        if target <= self.state.current_slot:
            raise ValueError(
                f"Cannot step forward from slot {self.state.current_slot} to {target}"
            )
        state = self.state
        store = state.store
        simulator = state.simulator
        slot = state.current_slot
        while slot < target:
            indices = store.indices_at_slot(slot)
            if indices:
                # Drain in sequential order up to the first gate of a later slot.
                while (
                    simulator.current_gate_index() < len(store)
                    and store.slot(simulator.current_gate_index()) <= slot
                ):
                    if not simulator.step_forward():
                        break
                self.recorder.record(slot)
            slot += 1
        state.current_slot = target
        logger.debug(
            "Stepped forward to slot %d (engine at gate %d)",
            target, simulator.current_gate_index(),
        )

    def step_backward_to_slot(self, target: int) -> None:
        """Return to ``target`` by replaying the timeline from slot 0."""
        self._check_target(target)
        if target >= self.state.current_slot:
            raise ValueError(
                f"Cannot step backward from slot {self.state.current_slot} to {target}"
            )
        self.state.replay_engine()
        if target > 0:
            self.step_forward_to_slot(target)
        logger.debug("Stepped backward to slot %d by replay", target)

    def step_to_slot(self, target: int) -> None:
        """Move to ``target`` in whichever direction is needed."""
        if target > self.state.current_slot:
            self.step_forward_to_slot(target)
        elif target < self.state.current_slot:
            self.step_backward_to_slot(target)
        else:
            self._check_target(target)

    def reset(self) -> None:
        """Empty circuit on the reset qubit count, no errors, slot 0."""
        self.state.rebuild_from(TimelineStore(), self.reset_num_qubits, {})
        logger.debug("Reset to an empty %d-qubit circuit", self.reset_num_qubits)
