"""Abstract robot interface, event callbacks and control modes."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Callable
from datetime import timedelta

from extctl.messages import ControlSignal, MotionState
from extctl.status import Status

_DEFAULT_HISTORY = 64


class EventHandler:
    """Receives controller events; override the callbacks of interest.

    The default callbacks keep a bounded history of the events received,
    available through ``events`` as (event name, reason) pairs.
    """

    def __init__(self, history_size: int = _DEFAULT_HISTORY) -> None:
        self._events: deque[tuple[str, str]] = deque(maxlen=history_size)

    @property
    def events(self) -> tuple[tuple[str, str], ...]:
        """The recorded events, oldest first."""
        return tuple(self._history())

    def _history(self) -> deque[tuple[str, str]]:
        history = getattr(self, "_events", None)
        if history is None:
            history = deque(maxlen=_DEFAULT_HISTORY)
            self._events = history
        return history

    def _record(self, name: str, reason: str = "") -> None:
        self._history().append((name, reason))

    def on_sampling(self) -> None:
        """Called when the controller starts sampling."""
        self._record("sampling")

    def on_control_mode_switch(self, reason: str) -> None:
        """Called when the control mode changes."""
        self._record("control_mode_switch", reason)

    def on_stopped(self, reason: str) -> None:
        """Called when controlling stops."""
        self._record("stopped", reason)

    def on_error(self, reason: str) -> None:
        """Called when the controller reports an error."""
        self._record("error", reason)


class ControlMode(enum.IntEnum):
    UNSPECIFIED = 0
    JOINT_POSITION_CONTROL = 1
    JOINT_IMPEDANCE_CONTROL = 2
    JOINT_VELOCITY_CONTROL = 3
    JOINT_TORQUE_CONTROL = 4
    CARTESIAN_POSITION_CONTROL = 5
    CARTESIAN_IMPEDANCE_CONTROL = 6
    CARTESIAN_VELOCITY_CONTROL = 7
    WRENCH_CONTROL = 8


class OperationMode(enum.IntEnum):
    UNSPECIFIED = 0
    T1 = 1
    T2 = 2
    AUT = 3
    EXT = 4


class Robot(ABC):
    """A robot that can be monitored and controlled externally.

    Operations return a Status for success or warnings and raise
    StatusError when they fail.
    """

    @abstractmethod
    def setup(self) -> Status:
        """Establish the network connections."""

    @abstractmethod
    def start_controlling(self, control_mode: ControlMode) -> Status:
        """Open a control channel in the given mode."""

    @abstractmethod
    def start_monitoring(self) -> Status:
        """Ask the controller to publish motion states."""

    @abstractmethod
    def create_monitoring_subscription(
        self, callback: Callable[[MotionState], None]
    ) -> Status:
        """Deliver each published motion state to callback."""

    @abstractmethod
    def cancel_monitoring_subscription(self) -> Status:
        """Stop delivering published motion states."""

    @abstractmethod
    def has_monitoring_subscription(self) -> bool:
        """Whether a monitoring subscription is active."""

    @abstractmethod
    def stop_controlling(self) -> Status:
        """Send the stop signal and end controlling."""

    @abstractmethod
    def stop_monitoring(self) -> Status:
        """Ask the controller to stop publishing motion states."""

    @abstractmethod
    def send_control_signal(self) -> Status:
        """Send the current control signal."""

    @abstractmethod
    def receive_motion_state(self, timeout: timedelta) -> Status:
        """Wait up to timeout for the next motion state."""

    @property
    @abstractmethod
    def control_signal(self) -> ControlSignal:
        """The control signal to fill before sending."""

    @property
    @abstractmethod
    def last_motion_state(self) -> MotionState:
        """The most recently received motion state."""

    @abstractmethod
    def switch_control_mode(self, control_mode: ControlMode) -> Status:
        """Change the control mode while controlling."""

    @abstractmethod
    def register_event_handler(self, event_handler: EventHandler) -> Status:
        """Replace the handler that receives controller events."""