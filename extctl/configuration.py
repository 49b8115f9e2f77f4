"""Connection and quality-of-service settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

_UINT8_MAX = 2**8 - 1
_UINT32_MAX = 2**32 - 1


def _check_range(name: str, value: int, maximum: int) -> None:
    if not 0 <= value <= maximum:
        raise ValueError(f"{name} must be between 0 and {maximum}, got {value}")


@dataclass
class Configuration:
    """Network and robot settings for external control.

    Timeouts are in milliseconds.
    """

    koni_ip_address: str = ""
    client_ip_address: str = ""
    is_secure: bool = False
    certificate_path: str = ""
    private_key_path: str = ""
    dof: int = 6
    connection_timeout: int = 5000
    monitoring_timeout: int = 6

    CYCLE_TIME: ClassVar[int] = 4
    UDP_REPLIER_PORT: ClassVar[int] = 44444
    ECS_GRPC_PORT: ClassVar[int] = 49335
    UDP_SUBSCRIBER_PORT: ClassVar[int] = 44446
    UDP_SUBSCRIBER_MULTICAST_ADDRESS: ClassVar[str] = "239.255.123.250"

    def __post_init__(self) -> None:
        _check_range("dof", self.dof, _UINT8_MAX)
        _check_range("connection_timeout", self.connection_timeout, _UINT32_MAX)
        _check_range("monitoring_timeout", self.monitoring_timeout, _UINT32_MAX)


@dataclass
class QoSConfiguration:
    """Packet loss limits beyond which the connection counts as lost."""

    packet_loss_in_timeframe_limit: int = 3
    timeframe_ms: int = 200
    consecutive_packet_loss_limit: int = 2

    def __post_init__(self) -> None:
        _check_range("packet_loss_in_timeframe_limit", self.packet_loss_in_timeframe_limit, _UINT32_MAX)
        _check_range("timeframe_ms", self.timeframe_ms, _UINT32_MAX)
        _check_range("consecutive_packet_loss_limit", self.consecutive_packet_loss_limit, _UINT32_MAX)