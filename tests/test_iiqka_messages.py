import math

import pytest

from extctl.iiqka_messages import (
    ControlSignalMessage,
    IiqkaControlSignal,
    IiqkaMotionState,
    MotionStateMessage,
    MotionStatePayload,
)
from extctl.robot_interface import ControlMode


def test_motion_state_starts_with_nan():
    state = IiqkaMotionState(3)
    assert len(state.measured_positions) == 3
    assert len(state.measured_torques) == 3
    assert all(math.isnan(v) for v in state.measured_positions)
    assert all(math.isnan(v) for v in state.measured_torques)
    assert state.measured_velocities == []
    assert state.has_positions is False


def test_motion_state_from_message():
    msg = MotionStateMessage(
        ipoc=7,
        motion_state=MotionStatePayload(
            measured_positions=[0.1, 0.2, 0.3], measured_torques=[1.0, 2.0, 3.0]
        ),
    )
    state = IiqkaMotionState(3, msg)
    assert state.measured_positions == [0.1, 0.2, 0.3]
    assert state.measured_torques == [1.0, 2.0, 3.0]
    assert state.has_positions and state.has_torques


def test_update_partial_values_keep_rest():
    state = IiqkaMotionState(4)
    state.update(
        MotionStateMessage(motion_state=MotionStatePayload(measured_positions=[5.0, 6.0]))
    )
    assert state.measured_positions[:2] == [5.0, 6.0]
    assert all(math.isnan(v) for v in state.measured_positions[2:])
    assert state.has_positions is True
    assert state.has_torques is False
    assert all(math.isnan(v) for v in state.measured_torques)


def test_update_ignores_extra_values():
    state = IiqkaMotionState(2)
    state.update(
        MotionStateMessage(motion_state=MotionStatePayload(measured_torques=[1.0, 2.0, 3.0]))
    )
    assert state.measured_torques == [1.0, 2.0]


def test_update_without_payload_clears_flags_not_values():
    state = IiqkaMotionState(
        2, MotionStateMessage(motion_state=MotionStatePayload(measured_positions=[1.5, 2.5]))
    )
    state.update(MotionStateMessage())
    assert state.has_positions is False
    assert state.measured_positions == [1.5, 2.5]


def test_control_message_empty_by_default():
    signal = IiqkaControlSignal(3)
    msg = signal.create_message(42, ControlMode.JOINT_POSITION_CONTROL)
    assert isinstance(msg, ControlSignalMessage)
    assert msg.ipoc == 42
    payload = msg.control_signal
    assert payload.stop_ipo is False
    assert payload.control_mode is ControlMode.JOINT_POSITION_CONTROL
    assert payload.joint_command == []
    assert payload.joint_torque_command == []
    assert payload.stiffness == [] and payload.damping == []


def test_control_message_carries_positions_padded_to_dof():
    signal = IiqkaControlSignal(3)
    signal.add_joint_position_values([0.5, 0.25])
    msg = signal.create_message(1, 1)
    assert msg.control_signal.joint_command == [0.5, 0.25, 0.0]
    assert msg.control_signal.joint_velocity_command == []


def test_control_message_torques_and_velocities():
    signal = IiqkaControlSignal(2)
    signal.add_torque_values([3.0, 4.0])
    signal.add_velocity_values([0.1, 0.2])
    payload = signal.create_message(9, ControlMode.JOINT_TORQUE_CONTROL).control_signal
    assert payload.joint_torque_command == [3.0, 4.0]
    assert payload.joint_velocity_command == [0.1, 0.2]
    assert payload.joint_command == []


def test_control_message_stiffness_and_damping():
    signal = IiqkaControlSignal(2)
    signal.add_stiffness_and_damping_values([100.0, 200.0], [0.7, 0.8])
    payload = signal.create_message(3, ControlMode.JOINT_IMPEDANCE_CONTROL).control_signal
    assert payload.stiffness == [100.0, 200.0]
    assert payload.damping == [0.7, 0.8]


def test_stop_flag_and_mode_value():
    signal = IiqkaControlSignal(1)
    payload = signal.create_message(0, 4, stop_control=True).control_signal
    assert payload.stop_ipo is True
    assert payload.control_mode is ControlMode.JOINT_TORQUE_CONTROL


def test_message_is_snapshot():
    signal = IiqkaControlSignal(2)
    signal.add_joint_position_values([1.0, 2.0])
    msg = signal.create_message(0, 1)
    signal.add_joint_position_values([3.0, 4.0])
    assert msg.control_signal.joint_command == [1.0, 2.0]
    assert signal.create_message(0, 1).control_signal.joint_command == [3.0, 4.0]


def test_invalid_control_mode_raises():
    signal = IiqkaControlSignal(2)
    with pytest.raises(ValueError):
        signal.create_message(0, 99)