# src/pauliscope/timeline/state.py
"""
Explicit editor state.

:class:`TimelineState` owns everything the timeline operations read and
write: the :class:`TimelineStore`, the qubit count, the initial error map,
the propagation engine, the slot cursor and the error history. Operations
receive it by reference instead of reaching for shared globals.

The engine has no insert or delete primitive, so every structural change
goes through :meth:`TimelineState.rebuild_from`, which swaps in a freshly
built engine. The previous engine is dropped and never read again.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

from pauliscope.engine.circuit import PropagationCircuit
from pauliscope.engine.pauli import validate_pauli_label
from pauliscope.engine.simulator import PropagationSimulator
from pauliscope.timeline.history import ErrorHistory
from pauliscope.timeline.store import TimelineStore

logger = logging.getLogger(__name__)


class TimelineState:
    """
    Single owner of the timeline, engine, cursor and history.

    Parameters
    ----------
    num_qubits : int
        Initial qubit count.
    """

    def __init__(self, num_qubits: int = 2):
        self.store = TimelineStore()
        self.num_qubits = num_qubits
        self.initial_errors: Dict[int, str] = {}
        self.history = ErrorHistory()
        self.current_slot = 0
        self.circuit, self.simulator = self._build_engine(self.store, num_qubits, self.initial_errors)

    @property
    def depth(self) -> int:
        return self.store.depth

    @staticmethod
    def _build_engine(
        store: TimelineStore,
        num_qubits: int,
        errors: Dict[int, str],
    ) -> Tuple[PropagationCircuit, PropagationSimulator]:
        circuit = PropagationCircuit(num_qubits)
        for gate in store.gates:
            circuit.add_gate(gate)
        simulator = PropagationSimulator(circuit)
        for qubit, label in sorted(errors.items()):
            simulator.inject_error(qubit, label)
        return circuit, simulator

    def rebuild_from(
        self,
        store: TimelineStore,
        num_qubits: Optional[int] = None,
        errors: Optional[Dict[int, str]] = None,
    ) -> None:
        """
        Replace the timeline and rebuild the engine from it.

        The new engine is built before any attribute is touched, so a
        failure (e.g. a gate outside the qubit range) leaves the state as
        it was. On success the cursor returns to slot 0 and the history is
        cleared.

        Parameters
        ----------
        store : TimelineStore
            New timeline.
        num_qubits : int, optional
            New qubit count; defaults to the current one.
        errors : Dict[int, str], optional
            New initial error map; defaults to the current one.
        """
        num_qubits = self.num_qubits if num_qubits is None else num_qubits
        errors = dict(self.initial_errors if errors is None else errors)
        errors = {q: validate_pauli_label(p) for q, p in errors.items()}
        circuit, simulator = self._build_engine(store, num_qubits, errors)

        self.store = store
        self.num_qubits = num_qubits
        self.initial_errors = errors
        self.circuit = circuit
        self.simulator = simulator
        self.current_slot = 0
        self.history.clear()
        logger.debug(
            "Rebuilt engine: %d qubit(s), %d gate(s), depth %d, %d error(s)",
            num_qubits, len(store), store.depth, len(errors),
        )

    def replay_engine(self) -> None:
        """
        Start a fresh engine on the unchanged timeline.

        Used for backward stepping: the cursor returns to slot 0 but the
        history is kept.
        """
        self.circuit, self.simulator = self._build_engine(self.store, self.num_qubits, self.initial_errors)
        self.current_slot = 0

    def engine_is_consistent(self) -> bool:
        """
        Check that the engine still reports the timeline's gate list.

        A mismatch means the engine broke its contract; it is logged and
        callers must abort without mutating anything.
        """
        gates = self.circuit.get_gates()
        if not isinstance(gates, list):
            logger.error("Engine returned %s instead of a gate list", type(gates).__name__)
            return False
        if gates != self.store.gates:
            logger.error(
                "Engine gate list (%d gates) disagrees with timeline (%d gates)",
                len(gates), len(self.store),
            )
            return False
        return True
