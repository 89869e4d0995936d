# src/pauliscope/gates.py
"""
Gate data model for the circuit editor.

A gate is either a :class:`SingleQubitGate` or a :class:`TwoQubitGate`.
Both are immutable, hashable value objects so they can be copied freely
between gate lists when the timeline is rebuilt.

Classes
-------
SingleGateKind, TwoGateKind
    Supported gate kinds and their Stim names.
SingleQubitGate, TwoQubitGate
    Concrete gates placed on the timeline.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Tuple, Union


class SingleGateKind(Enum):
    """Single-qubit Clifford gates available in the palette."""
    H = "H"
    S = "S"
    SDG = "Sdg"
    X = "X"
    Y = "Y"
    Z = "Z"

    @property
    def stim_name(self) -> str:
        """Stim instruction name for this gate."""
        if self is SingleGateKind.SDG:
            return "S_DAG"
        return self.value


class TwoGateKind(Enum):
    """Two-qubit Clifford gates available in the palette."""
    CNOT = "CNOT"
    CZ = "CZ"
    SWAP = "SWAP"

    @property
    def stim_name(self) -> str:
        return self.value


@dataclass(frozen=True)
class SingleQubitGate:
    """A single-qubit gate acting on ``qubit``."""
    qubit: int
    kind: SingleGateKind

    @property
    def qubits(self) -> Tuple[int, ...]:
        return (self.qubit,)

    @property
    def qubit_set(self) -> FrozenSet[int]:
        return frozenset(self.qubits)

    @property
    def stim_name(self) -> str:
        return self.kind.stim_name

    def __str__(self) -> str:
        return f"{self.kind.value}({self.qubit})"


@dataclass(frozen=True)
class TwoQubitGate:
    """
    A two-qubit gate.

    For CNOT and CZ, ``qubit_a`` is the control and ``qubit_b`` the target.
    For SWAP they are ``qubit1`` and ``qubit2``. A two-qubit gate is atomic:
    it is always kept or dropped as a whole.

    Attributes
    ----------
    kind : TwoGateKind
        Gate kind.
    qubit_a : int
        Control (CNOT/CZ) or first qubit (SWAP).
    qubit_b : int
        Target (CNOT/CZ) or second qubit (SWAP).
    """
    kind: TwoGateKind
    qubit_a: int
    qubit_b: int

    @property
    def control(self) -> int:
        if self.kind is TwoGateKind.SWAP:
            raise AttributeError("SWAP has no control qubit")
        return self.qubit_a

    @property
    def target(self) -> int:
        if self.kind is TwoGateKind.SWAP:
            raise AttributeError("SWAP has no target qubit")
        return self.qubit_b

    @property
    def qubit1(self) -> int:
        return self.qubit_a

    @property
    def qubit2(self) -> int:
        return self.qubit_b

    @property
    def qubits(self) -> Tuple[int, ...]:
        return (self.qubit_a, self.qubit_b)

    @property
    def qubit_set(self) -> FrozenSet[int]:
        return frozenset(self.qubits)

    @property
    def stim_name(self) -> str:
        return self.kind.stim_name

    def __str__(self) -> str:
        return f"{self.kind.value}({self.qubit_a}, {self.qubit_b})"


Gate = Union[SingleQubitGate, TwoQubitGate]


def parse_kind(name: Union[str, SingleGateKind, TwoGateKind]) -> Union[SingleGateKind, TwoGateKind]:
    """
    Resolve a palette name ("H", "Sdg", "CNOT", ...) to a gate kind.

    Raises
    ------
    ValueError
        If the name is not a supported gate.
    """
    if isinstance(name, (SingleGateKind, TwoGateKind)):
        return name
    key = name.upper() if isinstance(name, str) else name
    for enum_cls in (SingleGateKind, TwoGateKind):
        for kind in enum_cls:
            if key in (kind.value.upper(), kind.name, kind.stim_name):
                return kind
    raise ValueError(f"Unknown gate kind: {name!r}")


def is_two_qubit_kind(kind: Union[str, SingleGateKind, TwoGateKind]) -> bool:
    return isinstance(parse_kind(kind), TwoGateKind)


def make_gate(kind: Union[str, SingleGateKind, TwoGateKind], *qubits: int) -> Gate:
    """
    Build a gate from a kind and its qubits.

    Examples
    --------
    >>> make_gate("H", 0)
    SingleQubitGate(qubit=0, kind=<SingleGateKind.H: 'H'>)
    >>> str(make_gate("CNOT", 0, 1))
    'CNOT(0, 1)'
    """
    resolved = parse_kind(kind)
    if isinstance(resolved, SingleGateKind):
        if len(qubits) != 1:
            raise ValueError(f"{resolved.value} takes 1 qubit, got {len(qubits)}")
        return SingleQubitGate(qubit=qubits[0], kind=resolved)
    if len(qubits) != 2:
        raise ValueError(f"{resolved.value} takes 2 qubits, got {len(qubits)}")
    return TwoQubitGate(kind=resolved, qubit_a=qubits[0], qubit_b=qubits[1])
