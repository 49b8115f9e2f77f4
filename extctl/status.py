"""Operation status values reported by robot interfaces."""

from __future__ import annotations

import enum
from dataclasses import dataclass

MAX_MESSAGE_LENGTH = 255


class ReturnCode(enum.Enum):
    """Outcome category of an operation."""

    UNSPECIFIED = enum.auto()
    OK = enum.auto()
    WARN = enum.auto()
    ERROR = enum.auto()
    TIMEOUT = enum.auto()
    UNSUPPORTED = enum.auto()


_FAILURE_CODES = frozenset({ReturnCode.ERROR, ReturnCode.TIMEOUT, ReturnCode.UNSUPPORTED})


class StatusError(Exception):
    """Raised for a status whose return code marks a failure."""

    def __init__(self, status: Status) -> None:
        super().__init__(status.message or status.return_code.name)
        self.status = status

    @property
    def return_code(self) -> ReturnCode:
        return self.status.return_code


@dataclass
class Status:
    """A return code with an optional human readable message."""

    return_code: ReturnCode = ReturnCode.UNSPECIFIED
    message: str = ""

    def __post_init__(self) -> None:
        self.message = self.message[:MAX_MESSAGE_LENGTH]

    @property
    def ok(self) -> bool:
        """True when the operation succeeded without remarks."""
        return self.return_code is ReturnCode.OK

    def raise_for_error(self) -> Status:
        """Raise StatusError on a failure code, otherwise return this status."""
        if self.return_code in _FAILURE_CODES:
            raise StatusError(self)
        return self