"""Wire-level messages for the iiQKA controller and their conversions."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from extctl.messages import ControlSignal, MotionState
from extctl.robot_interface import ControlMode


@dataclass
class MotionStatePayload:
    """Measured values carried by a motion state message.

    A field left as None was not sent by the controller.
    """

    measured_positions: list[float] | None = None
    measured_torques: list[float] | None = None


@dataclass
class MotionStateMessage:
    """A motion state as published by the controller."""

    ipoc: int = 0
    motion_state: MotionStatePayload | None = None


@dataclass
class ControlSignalPayload:
    """Commands carried by a control signal message."""

    stop_ipo: bool = False
    control_mode: ControlMode = ControlMode.UNSPECIFIED
    joint_command: list[float] = field(default_factory=list)
    joint_torque_command: list[float] = field(default_factory=list)
    joint_velocity_command: list[float] = field(default_factory=list)
    stiffness: list[float] = field(default_factory=list)
    damping: list[float] = field(default_factory=list)


@dataclass
class ControlSignalMessage:
    """A control signal answering the motion state with the same ipoc."""

    ipoc: int = 0
    control_signal: ControlSignalPayload = field(default_factory=ControlSignalPayload)


def _copy_prefix(target: list[float], values: list[float], dof: int) -> None:
    count = min(dof, len(values))
    target[:count] = [float(v) for v in values[:count]]


class IiqkaMotionState(MotionState):
    """Motion state filled from controller messages.

    The controller reports no velocities, so that list stays empty.
    Positions and torques start as NaN until a message provides them.
    """

    def __init__(self, dof: int, message: MotionStateMessage | None = None) -> None:
        super().__init__(dof)
        self.measured_positions = [math.nan] * dof
        self.measured_torques = [math.nan] * dof
        if message is not None:
            self.update(message)

    def update(self, message: MotionStateMessage) -> None:
        """Take over the measurements present in message."""
        payload = message.motion_state
        positions = payload.measured_positions if payload is not None else None
        torques = payload.measured_torques if payload is not None else None

        self.has_positions = positions is not None
        self.has_torques = torques is not None
        if positions is not None:
            _copy_prefix(self.measured_positions, positions, self.dof)
        if torques is not None:
            _copy_prefix(self.measured_torques, torques, self.dof)


class IiqkaControlSignal(ControlSignal):
    """Control signal that builds controller messages."""

    def __init__(self, dof: int) -> None:
        super().__init__(dof)
        self.joint_position_values = [0.0] * dof
        self.joint_torque_values = [0.0] * dof
        self.joint_velocity_values = [0.0] * dof
        self.joint_impedance_stiffness_values = [0.0] * dof
        self.joint_impedance_damping_values = [0.0] * dof

    def create_message(
        self, last_ipoc: int, control_mode: int, stop_control: bool = False
    ) -> ControlSignalMessage:
        """Build the message answering the motion state with last_ipoc."""
        payload = ControlSignalPayload(
            stop_ipo=bool(stop_control),
            control_mode=ControlMode(control_mode),
        )
        if self.has_positions:
            payload.joint_command = list(self.joint_position_values)
        if self.has_torques:
            payload.joint_torque_command = list(self.joint_torque_values)
        if self.has_velocities:
            payload.joint_velocity_command = list(self.joint_velocity_values)
        if self.has_stiffness_and_damping:
            payload.stiffness = list(self.joint_impedance_stiffness_values)
            payload.damping = list(self.joint_impedance_damping_values)
        return ControlSignalMessage(ipoc=last_ipoc, control_signal=payload)