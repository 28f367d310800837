"""Streaming subscription primitives."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

import grpc
from google.protobuf import text_format

from .errors import StreamCancelledError, SubscriptionError
from .protocol import key_values_to_dict

LOGGER = logging.getLogger(__name__)


class CancellationToken:
    """Thread-safe cancel signal shared by a run and its active stream."""

    def __init__(self) -> None:
        self._event = threading.Event()
        self._lock = threading.RLock()
        self._callbacks: List[Callable[[], None]] = []

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        with self._lock:
            if self._event.is_set():
                return
            self._event.set()
            callbacks = list(self._callbacks)

        for callback in callbacks:
            try:
                callback()
            except Exception:
                LOGGER.warning("Cancellation callback failed", exc_info=True)

    def add_callback(self, callback: Callable[[], None]) -> None:
        """Register ``callback``; it runs immediately if already cancelled."""

        with self._lock:
            if not self._event.is_set():
                self._callbacks.append(callback)
                return
        callback()

    def remove_callback(self, callback: Callable[[], None]) -> None:
        with self._lock:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

    def wait(self, timeout: Optional[float] = None) -> bool:
        return self._event.wait(timeout)


@dataclass(slots=True, frozen=True)
class TelemetryUpdate:
    """One sample pushed by the agent on a subscription stream."""

    system_id: str
    component_id: int
    sub_component_id: int
    path: str
    sequence_number: int
    timestamp: int
    values: Dict[str, Any]
    sync_response: bool = False
    raw: Any = field(default=None, repr=False, compare=False)

    @classmethod
    def from_message(cls, message: Any) -> "TelemetryUpdate":
        return cls(
            system_id=message.system_id,
            component_id=message.component_id,
            sub_component_id=message.sub_component_id,
            path=message.path,
            sequence_number=message.sequence_number,
            timestamp=message.timestamp,
            values=key_values_to_dict(message.kv),
            sync_response=message.sync_response,
            raw=message,
        )

    @property
    def sampled_at(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp / 1000, tz=timezone.utc)

    def format(self) -> str:
        if self.raw is not None:
            return text_format.MessageToString(self.raw, as_one_line=True)
        return repr(self)


class TelemetryStream:
    """Iterator over the updates of exactly one subscription call.

    The wrapped call handle is both the "has next" and the "read next" side of
    the iteration. Once the server closes the stream, an error is raised or
    the stream is cancelled, no further reads are issued on the handle.
    """

    def __init__(self, call: Any, *, cancel_token: Optional[CancellationToken] = None) -> None:
        self._call = call
        self._cancel_token = cancel_token
        self._closed = False
        self._cancelled = False
        self._received = 0

        if cancel_token is not None:
            cancel_token.add_callback(self.cancel)

    @property
    def received(self) -> int:
        return self._received

    @property
    def closed(self) -> bool:
        return self._closed

    def __iter__(self) -> "TelemetryStream":
        return self

    def __next__(self) -> TelemetryUpdate:
        if self._closed:
            raise StopIteration
        if self._cancelled:
            self._close()
            raise StreamCancelledError()

        try:
            message = next(self._call)
        except StopIteration:
            LOGGER.info("Subscription stream closed by server after %d updates", self._received)
            self._close()
            raise
        except grpc.RpcError as exc:
            self._close()
            cancelled = self._cancelled or (
                callable(getattr(exc, "code", None))
                and exc.code() == grpc.StatusCode.CANCELLED
            )
            if cancelled:
                raise StreamCancelledError() from exc
            raise SubscriptionError.from_grpc(exc) from exc

        self._received += 1
        return TelemetryUpdate.from_message(message)

    def cancel(self) -> None:
        """Cancel the call; a blocked read returns with ``StreamCancelledError``."""

        if self._closed or self._cancelled:
            return
        self._cancelled = True
        LOGGER.info("Cancelling subscription stream")
        self._call.cancel()

    def close(self) -> None:
        """Cancel if still open and detach from the cancellation token."""

        if not self._closed:
            self.cancel()
        self._close()

    def _close(self) -> None:
        self._closed = True
        if self._cancel_token is not None:
            self._cancel_token.remove_callback(self.cancel)
