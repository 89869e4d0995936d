# src/pauliscope/engine/__init__.py
"""
Sequential Pauli propagation engine.

The engine exposes a strictly sequential API: build a circuit by appending
gates, wrap it in a simulator, then step the cursor forward one gate at a
time while reading or injecting the tracked error.
"""
from pauliscope.engine.circuit import PropagationCircuit
from pauliscope.engine.pauli import (
    PAULI_LABELS,
    PHASE_LABELS,
    ErrorPattern,
    phase_label,
    validate_pauli_label,
)
from pauliscope.engine.simulator import PropagationSimulator

__all__ = [
    "PropagationCircuit",
    "PropagationSimulator",
    "ErrorPattern",
    "PAULI_LABELS",
    "PHASE_LABELS",
    "phase_label",
    "validate_pauli_label",
]
