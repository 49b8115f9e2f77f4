# extctl

Building blocks for controlling a robot from an external machine in real time:
operation statuses, typed GPIO values, measured motion states, control signals,
controller messages and the abstract robot interface a concrete driver
implements.

## Installation

```
pip install extctl
```

## Overview

- `extctl.status`: `ReturnCode`, `Status` and `StatusError`. A `Status` carries
  a return code and a message of at most 255 characters. The `ok` property is
  true only for `ReturnCode.OK`; `raise_for_error()` raises `StatusError` for
  `ERROR`, `TIMEOUT` and `UNSUPPORTED` and otherwise returns the status itself.
- `extctl.gpio`: `GPIOValueType`, `GPIOConfig`, `GPIOValue` and
  `GPIOValueError`. A `GPIOValue` holds a bool, double or long value as its
  config describes. The `value`, `bool_value`, `double_value` and `long_value`
  properties return `None` when the channel holds another type. `set_value`,
  `set_bool`, `set_double` and `set_long` raise `GPIOValueError` on a type
  mismatch or, when limits are enabled, on a value outside
  `[min_value, max_value]`.
- `extctl.messages`: `MotionState` (measured positions, torques, velocities,
  Cartesian positions and GPIO values) and `ControlSignal` (joint position,
  torque, velocity, stiffness and damping, Cartesian and GPIO commands). The
  `add_*_values` methods accept any iterable of numbers, or a mapping read in
  key order; values beyond the degrees of freedom are ignored.
- `extctl.robot_interface`: `ControlMode`, `OperationMode`, `EventHandler` and
  the abstract `Robot` class.
- `extctl.configuration`: `Configuration` for the connection settings (with the
  fixed ports and multicast address as class constants) and `QoSConfiguration`
  for packet-loss limits. Out-of-range numbers raise `ValueError`.
- `extctl.iiqka_messages`: the message dataclasses `MotionStateMessage`,
  `MotionStatePayload`, `ControlSignalMessage` and `ControlSignalPayload`, plus
  `IiqkaMotionState`, which takes measurements from a motion-state message
  (positions and torques start as NaN), and `IiqkaControlSignal`, whose
  `create_message` builds the outgoing control-signal message.

## Example

```python
from extctl.gpio import GPIOConfig, GPIOValue, GPIOValueType
from extctl.iiqka_messages import IiqkaControlSignal
from extctl.robot_interface import ControlMode

gripper = GPIOValue(GPIOConfig("gripper", GPIOValueType.BOOL))
gripper.set_value(1.0)
print(gripper.bool_value)  # True

signal = IiqkaControlSignal(6)
signal.add_joint_position_values([0.0, -1.57, 1.57, 0.0, 0.5, 0.0])
message = signal.create_message(
    last_ipoc=42,
    control_mode=ControlMode.JOINT_POSITION_CONTROL,
    stop_control=False,
)
print(message.control_signal.joint_command)
```

## Events

`EventHandler` has the callbacks `on_sampling`, `on_control_mode_switch`,
`on_stopped` and `on_error`. By default each one records an
`(event name, reason)` pair in a bounded history, read through the `events`
property. Subclass it and override the callbacks you need, then pass an
instance to `Robot.register_event_handler` of your robot implementation.

## What this package does not do

`Robot` is an abstract interface only. The package contains no network
transport: it opens no connections, sends or receives no packets, and does not
encode messages to bytes. A concrete `Robot` subclass has to supply setup,
controlling, monitoring and the exchange of `MotionStateMessage` and
`ControlSignalMessage` with the controller.

## Running the tests

```
pip install extctl[test]
pytest
```