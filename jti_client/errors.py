"""Error taxonomy for the telemetry client."""

from __future__ import annotations

from typing import Optional

import grpc


class ConfigurationError(ValueError):
    """Raised when configuration or channel options cannot be applied."""


class ConnectivityError(RuntimeError):
    """Raised when the channel is shut down, terminated or was never built."""


class TelemetryRpcError(RuntimeError):
    """A failed call against the telemetry agent."""

    def __init__(self, status: grpc.StatusCode, message: str) -> None:
        super().__init__(f"{status.name}: {message}")
        self.status = status
        self.message = message

    @classmethod
    def from_grpc(cls, exc: grpc.RpcError) -> "TelemetryRpcError":
        """Build from a ``grpc.RpcError``, which usually also implements ``grpc.Call``."""

        code = getattr(exc, "code", None)
        details = getattr(exc, "details", None)
        status: Optional[grpc.StatusCode] = code() if callable(code) else None
        message: Optional[str] = details() if callable(details) else None
        return cls(status or grpc.StatusCode.UNKNOWN, message or str(exc))


class OperationalStateError(TelemetryRpcError):
    """The operational-state query failed."""


class SubscriptionError(TelemetryRpcError):
    """The subscription call or its stream failed."""


class StreamCancelledError(SubscriptionError):
    """The active stream was cancelled by the caller."""

    def __init__(self, message: str = "stream cancelled by caller") -> None:
        super().__init__(grpc.StatusCode.CANCELLED, message)
