"""Session state, errors and results for the read-only chain connection."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


class SessionStatus(str, Enum):
    """Lifecycle status of a read-only chain session."""
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    FAILED = "failed"


class ChainConnectionError(Exception):
    """The chain id request failed or the endpoint could not be used."""


class NetworkMismatchError(ChainConnectionError):
    """The endpoint answered for a different chain than the configured one."""

    def __init__(self, expected_chain_id: int, actual_chain_id: int):
        self.expected_chain_id = expected_chain_id
        self.actual_chain_id = actual_chain_id
        super().__init__(
            f"Connected to chain {actual_chain_id}, expected chain {expected_chain_id}"
        )


@dataclass(frozen=True)
class ConnectResult:
    """Outcome of connect()/switch_network(): ``ok`` plus the error when it failed."""
    ok: bool
    error: Optional[ChainConnectionError] = None

    @classmethod
    def success(cls) -> "ConnectResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, error: ChainConnectionError) -> "ConnectResult":
        return cls(ok=False, error=error)

    @property
    def value(self) -> bool:
        return self.ok

    def __bool__(self) -> bool:
        return self.ok


@dataclass(frozen=True)
class Session:
    """
    Snapshot of one connection attempt.

    A manager never mutates a Session; every transition builds a new one.
    ``bindings`` is only populated while connected and ``last_error`` is
    only set while failed.
    """
    endpoint: str
    network_identity: int
    status: SessionStatus = SessionStatus.DISCONNECTED
    transport: Any = None
    bindings: Dict[str, Any] = field(default_factory=dict)
    last_error: Optional[str] = None
    placeholder_account: str = ""
    chain_id: Optional[int] = None

    def __post_init__(self):
        if self.bindings and self.status != SessionStatus.CONNECTED:
            raise ValueError(f"Contract bindings are only allowed while connected (status={self.status.value})")
        if self.last_error is not None and self.status != SessionStatus.FAILED:
            raise ValueError(f"last_error is only allowed while failed (status={self.status.value})")

    @classmethod
    def disconnected(cls, endpoint: str, network_identity: int) -> "Session":
        return cls(endpoint=endpoint, network_identity=network_identity)

    def connecting(self) -> "Session":
        return Session(
            endpoint=self.endpoint,
            network_identity=self.network_identity,
            status=SessionStatus.CONNECTING,
        )

    def connected(self, transport: Any, bindings: Dict[str, Any], chain_id: int) -> "Session":
        return Session(
            endpoint=self.endpoint,
            network_identity=self.network_identity,
            status=SessionStatus.CONNECTED,
            transport=transport,
            bindings=dict(bindings),
            placeholder_account=ZERO_ADDRESS,
            chain_id=chain_id,
        )

    def failed(self, message: str) -> "Session":
        return Session(
            endpoint=self.endpoint,
            network_identity=self.network_identity,
            status=SessionStatus.FAILED,
            last_error=message,
        )
