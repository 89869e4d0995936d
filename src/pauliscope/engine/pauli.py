# src/pauliscope/engine/pauli.py
"""
Error pattern values reported by the propagation engine.

An error pattern is a Pauli string with one label per qubit (qubit 0
first, identity written ``I``) plus an overall phase in
``{'', '-', 'i', '-i'}``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

import stim


PAULI_LABELS = ("I", "X", "Y", "Z")

PHASE_LABELS = ("", "-", "i", "-i")

_SIGN_TO_PHASE = {
    complex(1, 0): "",
    complex(-1, 0): "-",
    complex(0, 1): "i",
    complex(0, -1): "-i",
}


def validate_pauli_label(label: str) -> str:
    """Normalise and check a single-qubit Pauli label."""
    normalised = label.upper() if isinstance(label, str) else label
    if normalised not in PAULI_LABELS:
        raise ValueError(f"Invalid Pauli label {label!r}; expected one of {PAULI_LABELS}")
    return normalised


def phase_label(sign: complex) -> str:
    """Map a Stim sign (+1, -1, +i, -i) to its phase label."""
    try:
        return _SIGN_TO_PHASE[complex(sign)]
    except KeyError:
        raise ValueError(f"Not a Pauli phase: {sign!r}") from None


@dataclass(frozen=True)
class ErrorPattern:
    """
    Snapshot of the tracked Pauli error.

    Attributes
    ----------
    pattern : str
        One label from ``IXYZ`` per qubit.
    phase : str
        One of ``''``, ``'-'``, ``'i'``, ``'-i'``.
    """
    pattern: str
    phase: str = ""

    @classmethod
    def from_pauli_string(cls, pauli: stim.PauliString) -> "ErrorPattern":
        labels = "".join(PAULI_LABELS[pauli[q]] for q in range(len(pauli)))
        return cls(pattern=labels, phase=phase_label(pauli.sign))

    @property
    def num_qubits(self) -> int:
        return len(self.pattern)

    @property
    def weight(self) -> int:
        """Number of qubits carrying a non-identity Pauli."""
        return sum(1 for p in self.pattern if p != "I")

    def get_pauli(self, qubit: int) -> str:
        if qubit < 0 or qubit >= self.num_qubits:
            raise ValueError(f"Qubit {qubit} out of range [0, {self.num_qubits})")
        return self.pattern[qubit]

    def to_dict(self) -> Dict[str, Any]:
        return {"pattern": self.pattern, "phase": self.phase}

    def __str__(self) -> str:
        return f"{self.phase}{self.pattern}"
