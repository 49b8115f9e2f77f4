"""Generic motion state and control signal containers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from extctl.gpio import GPIOValue


def _as_values(values: Iterable[float] | Mapping[object, float]) -> list[float]:
    if isinstance(values, Mapping):
        return [float(v) for _, v in sorted(values.items())]
    return [float(v) for v in values]


def _check_dof(dof: int) -> int:
    if dof < 0:
        raise ValueError(f"degrees of freedom must not be negative, got {dof}")
    return dof


class MotionState:
    """Measurements reported by the robot for one cycle."""

    def __init__(self, dof: int) -> None:
        self.dof = _check_dof(dof)
        self.has_positions = False
        self.has_torques = False
        self.has_velocities = False
        self.has_cartesian_positions = False
        self.measured_positions: list[float] = []
        self.measured_torques: list[float] = []
        self.measured_velocities: list[float] = []
        self.measured_cartesian_positions: list[float] = []
        self.gpio_values: list[GPIOValue] = []


class ControlSignal:
    """Commands sent to the robot for one cycle.

    Every value list holds one entry per degree of freedom; extra input
    values are ignored and missing ones leave earlier entries unchanged.
    Mappings are read in key order.
    """

    def __init__(self, dof: int) -> None:
        self.dof = _check_dof(dof)
        self.has_positions = False
        self.has_torques = False
        self.has_velocities = False
        self.has_stiffness_and_damping = False
        self.has_cartesian_positions = False
        self.joint_position_values = [0.0] * dof
        self.joint_torque_values = [0.0] * dof
        self.joint_velocity_values = [0.0] * dof
        self.joint_impedance_stiffness_values = [0.0] * dof
        self.joint_impedance_damping_values = [0.0] * dof
        self.cartesian_position_values = [0.0] * dof
        self.gpio_values: list[GPIOValue] = []

    def _fill(self, target: list[float], values: list[float]) -> None:
        count = min(self.dof, len(values))
        target[:count] = values[:count]

    def add_joint_position_values(self, values) -> None:
        values = _as_values(values)
        if values:
            self.has_positions = True
            self._fill(self.joint_position_values, values)

    def add_torque_values(self, values) -> None:
        values = _as_values(values)
        if values:
            self.has_torques = True
            self._fill(self.joint_torque_values, values)

    def add_velocity_values(self, values) -> None:
        values = _as_values(values)
        if values:
            self.has_velocities = True
            self._fill(self.joint_velocity_values, values)

    def add_stiffness_and_damping_values(self, stiffness, damping) -> None:
        """Store impedance values; each list is written only when the other is non-empty."""
        stiffness = _as_values(stiffness)
        damping = _as_values(damping)
        if damping:
            self.has_stiffness_and_damping = True
            self._fill(self.joint_impedance_stiffness_values, stiffness)
        if stiffness:
            self.has_stiffness_and_damping = True
            self._fill(self.joint_impedance_damping_values, damping)

    def add_cartesian_position_values(self, values) -> None:
        values = _as_values(values)
        if values:
            self.has_cartesian_positions = True
            self._fill(self.cartesian_position_values, values)

    def add_gpio_values(self, values: Iterable[float]) -> None:
        """Set I/O values in order; stops with GPIOValueError at the first rejected one."""
        for gpio, value in zip(self.gpio_values, values):
            gpio.set_value(value)