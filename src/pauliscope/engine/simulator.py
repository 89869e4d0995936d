# src/pauliscope/engine/simulator.py
"""
Sequential Pauli error propagation.

:class:`PropagationSimulator` walks a :class:`PropagationCircuit` one gate
at a time, conjugating the tracked error ``P -> U P U^dagger`` with Stim.
The gate order is captured when the simulator is built; later changes to
the circuit are not seen.
"""
from __future__ import annotations

from typing import List

import stim

from pauliscope.engine.circuit import PropagationCircuit
from pauliscope.engine.pauli import ErrorPattern, validate_pauli_label
from pauliscope.gates import Gate


class PropagationSimulator:
    """
    Cursor over a fixed gate sequence carrying a Pauli error.

    Parameters
    ----------
    circuit : PropagationCircuit
        Circuit to replay. Its gates are copied at construction.

    Examples
    --------
    >>> circuit = PropagationCircuit(2)
    >>> circuit.add_single_gate(0, "H")
    >>> sim = PropagationSimulator(circuit)
    >>> sim.inject_error(0, "X")
    >>> sim.step_forward()
    True
    >>> str(sim.get_error_pattern())
    'ZI'
    """

    def __init__(self, circuit: PropagationCircuit):
        self._num_qubits = circuit.num_qubits
        self._gates: List[Gate] = circuit.get_gates()
        self._operations: List[stim.Circuit] = []
        for gate in self._gates:
            op = stim.Circuit()
            op.append(gate.stim_name, list(gate.qubits))
            self._operations.append(op)
        self._error = stim.PauliString(self._num_qubits)
        self._cursor = 0

    @property
    def num_qubits(self) -> int:
        return self._num_qubits

    @property
    def num_gates(self) -> int:
        return len(self._gates)

    def current_gate_index(self) -> int:
        """Index of the next gate that has not been applied yet."""
        return self._cursor

    def is_finished(self) -> bool:
        return self._cursor >= len(self._gates)

    def step_forward(self) -> bool:
        """Apply the next gate. Returns False when no gates remain."""
        if self.is_finished():
            return False
        self._error = self._error.after(self._operations[self._cursor])
        self._cursor += 1
        return True

    def inject_error(self, qubit: int, pauli: str) -> None:
        """Overwrite the Pauli on ``qubit``. The phase is left unchanged."""
        if qubit < 0 or qubit >= self._num_qubits:
            raise ValueError(f"Qubit {qubit} out of range [0, {self._num_qubits})")
        label = validate_pauli_label(pauli)
        self._error[qubit] = label

    def get_error_pattern(self) -> ErrorPattern:
        return ErrorPattern.from_pauli_string(self._error)

    def __repr__(self) -> str:
        return (
            f"PropagationSimulator(num_qubits={self._num_qubits}, "
            f"cursor={self._cursor}/{len(self._gates)})"
        )
