# src/pauliscope/__init__.py
"""
pauliscope: interactive Pauli error propagation over a gate timeline.

Gates are placed on a grid of (qubit, time slot) cells; the timeline is
replayed gate by gate through a Stim-backed propagation engine so the
error pattern can be inspected slot by slot.
"""
import logging

from pauliscope.config import EditorConfig
from pauliscope.editor import TimelineEditor
from pauliscope.engine import ErrorPattern, PropagationCircuit, PropagationSimulator
from pauliscope.gates import (
    Gate,
    SingleGateKind,
    SingleQubitGate,
    TwoGateKind,
    TwoQubitGate,
    make_gate,
)
from pauliscope.interaction import CircuitInteraction, PendingTwoQubitGate
from pauliscope.notifications import Notification, NotificationCenter
from pauliscope.timeline import (
    ErrorHistory,
    ErrorHistoryEntry,
    ScheduledGate,
    StepController,
    TimelineState,
    TimelineStore,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "TimelineEditor",
    "EditorConfig",
    "CircuitInteraction",
    "PendingTwoQubitGate",
    "Notification",
    "NotificationCenter",
    "Gate",
    "SingleGateKind",
    "SingleQubitGate",
    "TwoGateKind",
    "TwoQubitGate",
    "make_gate",
    "ErrorPattern",
    "PropagationCircuit",
    "PropagationSimulator",
    "ScheduledGate",
    "TimelineStore",
    "TimelineState",
    "StepController",
    "ErrorHistory",
    "ErrorHistoryEntry",
]
