# src/pauliscope/engine/circuit.py
"""
Append-only gate circuit consumed by the propagation simulator.

The circuit has a fixed qubit count and only supports appending gates in
call order. There is no insert, delete or reorder: editing a circuit
means building a new one.
"""
from __future__ import annotations

from typing import List, Union

import stim

from pauliscope.gates import (
    Gate,
    SingleGateKind,
    SingleQubitGate,
    TwoGateKind,
    TwoQubitGate,
    parse_kind,
)


class PropagationCircuit:
    """
    Ordered list of Clifford gates on ``num_qubits`` qubits.

    Parameters
    ----------
    num_qubits : int
        Number of qubits; must be at least 1.
    """

    def __init__(self, num_qubits: int):
        if num_qubits < 1:
            raise ValueError(f"Circuit needs at least 1 qubit, got {num_qubits}")
        self._num_qubits = num_qubits
        self._gates: List[Gate] = []

    @property
    def num_qubits(self) -> int:
        return self._num_qubits

    def __len__(self) -> int:
        return len(self._gates)

    def _check_qubit(self, qubit: int) -> None:
        if qubit < 0 or qubit >= self._num_qubits:
            raise ValueError(
                f"Gate acts on qubit {qubit} but circuit has only {self._num_qubits} qubits"
            )

    def add_single_gate(self, qubit: int, kind: Union[str, SingleGateKind]) -> None:
        resolved = parse_kind(kind)
        if not isinstance(resolved, SingleGateKind):
            raise ValueError(f"{resolved.value} is not a single-qubit gate")
        self._check_qubit(qubit)
        self._gates.append(SingleQubitGate(qubit=qubit, kind=resolved))

    def _add_two(self, kind: TwoGateKind, qubit_a: int, qubit_b: int) -> None:
        self._check_qubit(qubit_a)
        self._check_qubit(qubit_b)
        if qubit_a == qubit_b:
            raise ValueError(f"{kind.value} needs two distinct qubits, got {qubit_a} twice")
        self._gates.append(TwoQubitGate(kind=kind, qubit_a=qubit_a, qubit_b=qubit_b))

    def add_cnot(self, control: int, target: int) -> None:
        self._add_two(TwoGateKind.CNOT, control, target)

    def add_cz(self, control: int, target: int) -> None:
        self._add_two(TwoGateKind.CZ, control, target)

    def add_swap(self, qubit1: int, qubit2: int) -> None:
        self._add_two(TwoGateKind.SWAP, qubit1, qubit2)

    def add_gate(self, gate: Gate) -> None:
        """Append any gate by dispatching on its type."""
        if isinstance(gate, SingleQubitGate):
            self.add_single_gate(gate.qubit, gate.kind)
        elif gate.kind is TwoGateKind.CNOT:
            self.add_cnot(gate.qubit_a, gate.qubit_b)
        elif gate.kind is TwoGateKind.CZ:
            self.add_cz(gate.qubit_a, gate.qubit_b)
        else:
            self.add_swap(gate.qubit_a, gate.qubit_b)

    def get_gates(self) -> List[Gate]:
        """Return the gates in append order (a fresh list)."""
        return list(self._gates)

    def to_stim(self) -> stim.Circuit:
        """Emit the gates one instruction each, in order."""
        circuit = stim.Circuit()
        for gate in self._gates:
            circuit.append(gate.stim_name, list(gate.qubits))
        return circuit

    def __repr__(self) -> str:
        return f"PropagationCircuit(num_qubits={self._num_qubits}, gates={len(self._gates)})"
