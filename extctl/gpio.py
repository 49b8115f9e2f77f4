"""Typed general purpose I/O values with optional limits."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class GPIOValueType(enum.IntEnum):
    """Kind of value an I/O channel carries."""

    UNSPECIFIED = 0
    BOOL = 1
    DOUBLE = 2
    LONG = 3


@dataclass(frozen=True)
class GPIOConfig:
    """Static description of an I/O channel."""

    name: str = ""
    value_type: GPIOValueType = GPIOValueType.UNSPECIFIED
    initial_value: float = 0.0
    enable_limits: bool = False
    min_value: float = 0.0
    max_value: float = 0.0


class GPIOValueError(ValueError):
    """Raised when a value does not fit an I/O channel's type or limits."""


_DEFAULTS = {
    GPIOValueType.BOOL: False,
    GPIOValueType.DOUBLE: 0.0,
    GPIOValueType.LONG: 0,
}


class GPIOValue:
    """The current value of one I/O channel, typed by its configuration."""

    def __init__(self, config: GPIOConfig) -> None:
        self.config = config
        self._value = _DEFAULTS.get(config.value_type)
        try:
            self.set_value(config.initial_value)
        except GPIOValueError:
            pass

    def __repr__(self) -> str:
        return f"GPIOValue(name={self.config.name!r}, value={self._value!r})"

    @property
    def value_type(self) -> GPIOValueType:
        return self.config.value_type

    @property
    def value(self) -> float | None:
        """The value as a float, or None for an unspecified channel type."""
        if self.value_type is GPIOValueType.UNSPECIFIED:
            return None
        return float(self._value)

    @property
    def bool_value(self) -> bool | None:
        return self._value if self.value_type is GPIOValueType.BOOL else None

    @property
    def double_value(self) -> float | None:
        return self._value if self.value_type is GPIOValueType.DOUBLE else None

    @property
    def long_value(self) -> int | None:
        return self._value if self.value_type is GPIOValueType.LONG else None

    def set_value(self, value: float) -> None:
        """Store a numeric value converted to the channel's type."""
        kind = self.value_type
        if kind is GPIOValueType.BOOL:
            self.set_bool(bool(value))
        elif kind is GPIOValueType.DOUBLE:
            self.set_double(value)
        elif kind is GPIOValueType.LONG:
            try:
                number = int(value)
            except (ValueError, OverflowError) as exc:
                raise GPIOValueError(f"{value!r} cannot be stored as an integer") from exc
            self.set_long(number)
        else:
            raise GPIOValueError(f"GPIO {self.config.name!r} has no value type")

    def set_bool(self, value: bool) -> None:
        self._require(GPIOValueType.BOOL)
        self._value = bool(value)

    def set_double(self, value: float) -> None:
        self._require(GPIOValueType.DOUBLE)
        value = float(value)
        self._check_limits(value)
        self._value = value

    def set_long(self, value: int) -> None:
        self._require(GPIOValueType.LONG)
        value = int(value)
        self._check_limits(value)
        self._value = value

    def _require(self, kind: GPIOValueType) -> None:
        if self.value_type is not kind:
            raise GPIOValueError(
                f"GPIO {self.config.name!r} holds {self.value_type.name}, not {kind.name}"
            )

    def _check_limits(self, value: float) -> None:
        cfg = self.config
        if cfg.enable_limits and not cfg.min_value <= value <= cfg.max_value:
            raise GPIOValueError(
                f"{value!r} outside [{cfg.min_value}, {cfg.max_value}] for GPIO {cfg.name!r}"
            )