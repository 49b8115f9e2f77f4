"""Statuses, GPIO values, motion states, control signals, controller messages and the abstract robot interface for external robot control."""

__version__ = "0.1.0"

__all__ = [
    "configuration",
    "gpio",
    "iiqka_messages",
    "messages",
    "robot_interface",
    "status",
]