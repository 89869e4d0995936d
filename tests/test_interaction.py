"""
Tests for click handling, notifications and editor configuration.
"""
import pytest

from pauliscope import CircuitInteraction, EditorConfig, NotificationCenter, TimelineEditor
from pauliscope.gates import SingleGateKind, TwoGateKind, is_two_qubit_kind, make_gate, parse_kind
from pauliscope.notifications import SUCCESS


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def _make_interaction(num_qubits=2):
    clock = FakeClock()
    notes = NotificationCenter(duration=3.0, clock=clock)
    ui = CircuitInteraction(TimelineEditor(num_qubits=num_qubits), notes)
    return ui, notes, clock


# ============================================================================
# Test: two-click placement
# ============================================================================

class TestTwoQubitClicks:

    def test_second_click_in_other_slot_rejected(self):
        ui, notes, _ = _make_interaction()
        ui.select_gate("CNOT")
        assert not ui.click(0, 0)
        assert ui.pending is not None
        assert not ui.click(1, 1)
        assert "within one time step" in notes.current.message
        assert ui.pending.qubit == 0
        assert ui.editor.gates == []
        assert ui.click(1, 0)
        assert ui.pending is None
        assert [str(g) for g in ui.editor.gates] == ["CNOT(0, 1)"]
        assert ui.editor.slot_of == {0: 0}

    def test_same_qubit_twice_rejected(self):
        ui, notes, _ = _make_interaction()
        ui.select_gate(TwoGateKind.SWAP)
        ui.click(1, 0)
        assert not ui.click(1, 0)
        assert "two different qubits" in notes.current.message
        assert ui.pending is not None

    def test_first_click_is_control(self):
        ui, _, _ = _make_interaction(3)
        ui.select_gate("CZ")
        ui.click(2, 1)
        ui.click(0, 1)
        gate = ui.editor.gates[0]
        assert (gate.control, gate.target) == (2, 0)

    def test_reselect_drops_pending(self):
        ui, _, _ = _make_interaction()
        ui.select_gate("CNOT")
        ui.click(0, 0)
        ui.select_gate("H")
        assert ui.pending is None
        assert ui.click(1, 0)
        assert [str(g) for g in ui.editor.gates] == ["H(1)"]


# ============================================================================
# Test: single clicks and removal
# ============================================================================

class TestClicks:

    def test_no_selection_does_nothing(self):
        ui, notes, _ = _make_interaction()
        assert not ui.click(0, 0)
        assert notes.log == []

    def test_click_outside_grid_notifies(self):
        ui, notes, _ = _make_interaction()
        ui.select_gate("X")
        assert not ui.click(2, 0)
        assert "outside the circuit" in notes.current.message
        assert not ui.right_click(0, -1)

    def test_place_at_next_slot(self):
        ui, _, _ = _make_interaction()
        ui.select_gate("H")
        assert ui.place_at_next_slot(1)
        assert ui.place_at_next_slot(1)
        assert ui.editor.slot_of == {0: 0, 1: 1}

    def test_next_slot_two_qubit_needs_two_qubits(self):
        ui, notes, _ = _make_interaction(1)
        ui.select_gate("CNOT")
        assert not ui.place_at_next_slot(0)
        assert "at least two qubits" in notes.current.message
        assert ui.editor.gates == []

    def test_right_click_removes(self):
        ui, _, _ = _make_interaction()
        ui.select_gate("S")
        ui.click(0, 3)
        assert ui.right_click(0, 3)
        assert ui.editor.gates == []
        assert not ui.right_click(0, 3)


# ============================================================================
# Test: qubit count and error input
# ============================================================================

class TestUserInput:

    @pytest.mark.parametrize("value", ["abc", 0, 1001, "", None])
    def test_invalid_qubit_count(self, value):
        ui, notes, _ = _make_interaction()
        assert not ui.request_qubit_count(value)
        assert "between 1 and 1000" in notes.current.message
        assert ui.editor.num_qubits == 2

    def test_valid_qubit_count_string(self):
        ui, notes, _ = _make_interaction()
        assert ui.request_qubit_count("4")
        assert ui.editor.num_qubits == 4
        assert notes.log == []

    def test_shrink_drops_stale_pending(self):
        ui, _, _ = _make_interaction(3)
        ui.select_gate("CNOT")
        ui.click(2, 0)
        ui.request_qubit_count(2)
        assert ui.pending is None

    def test_inject_error_validation(self):
        ui, notes, _ = _make_interaction()
        assert not ui.inject_error(5, "X")
        assert "does not exist" in notes.current.message
        assert not ui.inject_error(0, "Q")
        assert "Unknown error type" in notes.current.message
        assert ui.inject_error(0, "y")
        assert ui.editor.initial_errors == {0: "Y"}


# ============================================================================
# Test: notifications
# ============================================================================

class TestNotifications:

    def test_expires_after_duration(self):
        notes = NotificationCenter(duration=3.0, clock=FakeClock())
        notes.notify("bad input")
        notes.clock.now = 2.9
        assert notes.current is not None
        notes.clock.now = 3.0
        assert notes.current is None
        assert len(notes.log) == 1

    def test_new_notification_replaces_old(self):
        notes = NotificationCenter(clock=FakeClock())
        notes.notify("first")
        notes.notify("saved", level=SUCCESS)
        assert notes.current.message == "saved"
        assert notes.current.level == SUCCESS

    def test_listeners_and_dismiss(self):
        received = []
        notes = NotificationCenter(clock=FakeClock())
        notes.subscribe(received.append)
        notes.notify("hello", duration=10.0)
        assert received[0].duration == 10.0
        notes.dismiss()
        assert notes.current is None


# ============================================================================
# Test: configuration and gate parsing
# ============================================================================

class TestConfigAndGates:

    def test_config_defaults(self):
        config = EditorConfig()
        assert config.default_num_qubits == 2
        assert config.accepts_qubit_count(1000)
        assert not config.accepts_qubit_count(0)

    def test_config_from_dict_ignores_unknown(self):
        config = EditorConfig.from_dict({"default_num_qubits": 5, "theme": "dark"})
        assert config.default_num_qubits == 5

    def test_config_validation(self):
        with pytest.raises(ValueError):
            EditorConfig(min_num_qubits=0)
        with pytest.raises(ValueError):
            EditorConfig(default_num_qubits=20, max_num_qubits=10)

    def test_parse_kind(self):
        assert parse_kind("sdg") is SingleGateKind.SDG
        assert parse_kind("S_DAG") is SingleGateKind.SDG
        assert parse_kind("cnot") is TwoGateKind.CNOT
        assert is_two_qubit_kind("SWAP")
        with pytest.raises(ValueError, match="Unknown gate kind"):
            parse_kind("T")

    def test_make_gate_checks_arity(self):
        with pytest.raises(ValueError):
            make_gate("H", 0, 1)
        with pytest.raises(ValueError):
            make_gate("CZ", 0)

    def test_swap_has_no_control(self):
        gate = make_gate("SWAP", 0, 1)
        assert (gate.qubit1, gate.qubit2) == (0, 1)
        with pytest.raises(AttributeError):
            gate.control
