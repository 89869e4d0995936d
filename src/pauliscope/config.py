# src/pauliscope/config.py
"""Editor configuration."""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict


@dataclass
class EditorConfig:
    """
    Tunables for :class:`~pauliscope.editor.TimelineEditor`.

    Attributes
    ----------
    default_num_qubits : int
        Qubit count of a new or reset circuit.
    min_num_qubits : int
        Smallest qubit count accepted from the user.
    max_num_qubits : int
        Largest qubit count accepted from the user.
    notification_duration : float
        Seconds before a notification is dismissed.
    """
    default_num_qubits: int = 2
    min_num_qubits: int = 1
    max_num_qubits: int = 1000
    notification_duration: float = 3.0

    def __post_init__(self):
        if self.min_num_qubits < 1:
            raise ValueError(f"min_num_qubits must be >= 1, got {self.min_num_qubits}")
        if self.max_num_qubits < self.min_num_qubits:
            raise ValueError(
                f"max_num_qubits ({self.max_num_qubits}) < min_num_qubits ({self.min_num_qubits})"
            )
        if not self.min_num_qubits <= self.default_num_qubits <= self.max_num_qubits:
            raise ValueError(
                f"default_num_qubits {self.default_num_qubits} outside "
                f"[{self.min_num_qubits}, {self.max_num_qubits}]"
            )
        if self.notification_duration < 0:
            raise ValueError("notification_duration must be non-negative")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EditorConfig":
        """Build from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def accepts_qubit_count(self, count: int) -> bool:
        return self.min_num_qubits <= count <= self.max_num_qubits
