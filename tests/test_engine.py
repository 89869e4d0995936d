"""
Tests for the Stim-backed propagation engine.

Validates that:
1. PropagationCircuit is append-only and rejects out-of-range qubits.
2. PropagationSimulator steps one gate at a time and reports the cursor.
3. Pauli errors propagate through H, S, CNOT, CZ and SWAP as conjugation.
4. inject_error overwrites a qubit's Pauli and leaves the phase alone.
"""
import pytest
import stim

from pauliscope.engine import (
    ErrorPattern,
    PropagationCircuit,
    PropagationSimulator,
    phase_label,
)
from pauliscope.gates import SingleGateKind, make_gate


def _run(num_qubits, gates, errors):
    circuit = PropagationCircuit(num_qubits)
    for gate in gates:
        circuit.add_gate(gate)
    sim = PropagationSimulator(circuit)
    for qubit, label in errors.items():
        sim.inject_error(qubit, label)
    while sim.step_forward():
        pass
    return sim.get_error_pattern()


# ============================================================================
# Test: circuit construction
# ============================================================================

class TestPropagationCircuit:

    def test_gates_kept_in_append_order(self):
        circuit = PropagationCircuit(3)
        circuit.add_single_gate(0, "H")
        circuit.add_cnot(0, 1)
        circuit.add_cz(1, 2)
        circuit.add_swap(2, 0)
        gates = circuit.get_gates()
        assert isinstance(gates, list)
        assert [str(g) for g in gates] == ["H(0)", "CNOT(0, 1)", "CZ(1, 2)", "SWAP(2, 0)"]

    def test_get_gates_returns_copy(self):
        circuit = PropagationCircuit(1)
        circuit.add_single_gate(0, SingleGateKind.X)
        circuit.get_gates().clear()
        assert len(circuit) == 1

    def test_out_of_range_qubit_rejected(self):
        circuit = PropagationCircuit(2)
        with pytest.raises(ValueError, match="only 2 qubits"):
            circuit.add_single_gate(5, "H")
        with pytest.raises(ValueError, match="only 2 qubits"):
            circuit.add_cnot(0, 2)
        assert len(circuit) == 0

    def test_repeated_qubit_rejected(self):
        circuit = PropagationCircuit(2)
        with pytest.raises(ValueError, match="distinct"):
            circuit.add_swap(1, 1)

    def test_zero_qubits_rejected(self):
        with pytest.raises(ValueError):
            PropagationCircuit(0)

    def test_to_stim(self):
        circuit = PropagationCircuit(2)
        circuit.add_single_gate(1, "Sdg")
        circuit.add_cnot(1, 0)
        assert circuit.to_stim() == stim.Circuit("S_DAG 1\nCX 1 0")


# ============================================================================
# Test: sequential stepping
# ============================================================================

class TestPropagationSimulator:

    def test_cursor_advances_one_gate_per_step(self):
        circuit = PropagationCircuit(2)
        circuit.add_single_gate(0, "H")
        circuit.add_single_gate(1, "H")
        sim = PropagationSimulator(circuit)
        assert sim.current_gate_index() == 0
        assert sim.step_forward() is True
        assert sim.current_gate_index() == 1
        assert sim.step_forward() is True
        assert sim.step_forward() is False
        assert sim.current_gate_index() == 2

    def test_gate_order_captured_at_construction(self):
        circuit = PropagationCircuit(1)
        circuit.add_single_gate(0, "H")
        sim = PropagationSimulator(circuit)
        circuit.add_single_gate(0, "H")
        assert sim.num_gates == 1

    def test_no_error_stays_identity(self):
        pattern = _run(3, [make_gate("H", 0), make_gate("CNOT", 0, 1)], {})
        assert pattern == ErrorPattern("III", "")


# ============================================================================
# Test: propagation rules
# ============================================================================

class TestPropagation:

    def test_hadamard_swaps_x_and_z(self):
        assert _run(1, [make_gate("H", 0)], {0: "X"}).pattern == "Z"
        assert _run(1, [make_gate("H", 0)], {0: "Z"}).pattern == "X"

    def test_hadamard_negates_y(self):
        pattern = _run(1, [make_gate("H", 0)], {0: "Y"})
        assert pattern.pattern == "Y"
        assert pattern.phase == "-"

    def test_s_turns_x_into_y(self):
        assert _run(1, [make_gate("S", 0)], {0: "X"}).pattern == "Y"

    def test_cnot_spreads_x_forward(self):
        assert _run(2, [make_gate("CNOT", 0, 1)], {0: "X"}).pattern == "XX"

    def test_cnot_spreads_z_backward(self):
        assert _run(2, [make_gate("CNOT", 0, 1)], {1: "Z"}).pattern == "ZZ"

    def test_cz_maps_x_to_xz(self):
        assert _run(2, [make_gate("CZ", 0, 1)], {0: "X"}).pattern == "XZ"

    def test_swap_moves_error(self):
        assert _run(3, [make_gate("SWAP", 0, 2)], {0: "Y"}).pattern == "IIY"

    def test_pauli_gates_leave_pattern_unchanged(self):
        for kind in ("X", "Y", "Z"):
            assert _run(1, [make_gate(kind, 0)], {0: "Z"}).pattern == "Z"


# ============================================================================
# Test: error injection
# ============================================================================

class TestInjection:

    def test_inject_overwrites_qubit(self):
        sim = PropagationSimulator(PropagationCircuit(2))
        sim.inject_error(1, "X")
        sim.inject_error(1, "z")
        assert str(sim.get_error_pattern()) == "IZ"
        sim.inject_error(1, "I")
        assert str(sim.get_error_pattern()) == "II"

    def test_inject_rejects_bad_label(self):
        sim = PropagationSimulator(PropagationCircuit(1))
        with pytest.raises(ValueError, match="Invalid Pauli label"):
            sim.inject_error(0, "Q")

    def test_inject_rejects_bad_qubit(self):
        sim = PropagationSimulator(PropagationCircuit(1))
        with pytest.raises(ValueError, match="out of range"):
            sim.inject_error(1, "X")

    def test_phase_labels(self):
        assert phase_label(1) == ""
        assert phase_label(-1) == "-"
        assert phase_label(1j) == "i"
        assert phase_label(-1j) == "-i"
        with pytest.raises(ValueError):
            phase_label(2)

    def test_error_pattern_helpers(self):
        pattern = ErrorPattern("XIZ", "-i")
        assert pattern.weight == 2
        assert pattern.get_pauli(2) == "Z"
        assert str(pattern) == "-iXIZ"
        assert pattern.to_dict() == {"pattern": "XIZ", "phase": "-i"}
