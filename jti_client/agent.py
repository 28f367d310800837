"""Blocking client for the ``telemetry.OpenConfigTelemetry`` service."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence

import grpc

from . import agent_pb2, agent_pb2_grpc, constants, protocol
from .channel import ChannelManager
from .config import SensorPath
from .errors import ConnectivityError, OperationalStateError, SubscriptionError
from .protocol import VerbosityLevel
from .stream import CancellationToken, TelemetryStream

LOGGER = logging.getLogger(__name__)


def operational_state_to_dict(reply: agent_pb2.GetOperationalStateReply) -> Dict[str, Any]:
    """Decode a ``GetOperationalStateReply`` into a plain mapping."""
    return protocol.key_values_to_dict(reply.kv)


class OpenConfigTelemetryClient:
    """Issues operational-state queries and subscriptions over a managed channel.

    Every call checks the channel first; nothing is sent on a channel that is
    shut down or terminated.
    """

    def __init__(self, channels: ChannelManager) -> None:
        self._channels = channels

    def _stub(self, operation: str) -> agent_pb2_grpc.OpenConfigTelemetryStub:
        if not self._channels.is_usable():
            raise ConnectivityError(
                f"Refusing {operation}: channel to {self._channels.device.target} is not usable"
            )
        return agent_pb2_grpc.OpenConfigTelemetryStub(self._channels.channel)

    def get_operational_state(
        self,
        *,
        subscription_id: int = constants.ALL_SUBSCRIPTIONS,
        verbosity: VerbosityLevel = VerbosityLevel.BRIEF,
        timeout: Optional[float] = None,
    ) -> agent_pb2.GetOperationalStateReply:
        """Query the agent's operational state.

        Args:
            subscription_id: Subscription to report on; the default sentinel
                covers every subscription plus agent-level statistics.
            verbosity: Level of detail requested from the agent.
            timeout: Optional deadline in seconds; blocks indefinitely when None.

        Raises:
            ConnectivityError: If the channel is not usable.
            OperationalStateError: If the call fails for any reason.
        """

        stub = self._stub("operational-state query")
        request = protocol.build_operational_state_request(subscription_id, verbosity)

        LOGGER.debug(
            "Requesting operational state (subscription_id=%#x, verbosity=%s)",
            subscription_id,
            verbosity.name,
        )
        try:
            return stub.getTelemetryOperationalState(request, timeout=timeout)
        except grpc.RpcError as exc:
            raise OperationalStateError.from_grpc(exc) from exc

    def subscribe(
        self,
        paths: Sequence[SensorPath],
        *,
        limit_records: int = 0,
        limit_time_seconds: int = 0,
        need_eos: bool = False,
        timeout: Optional[float] = None,
        cancel_token: Optional[CancellationToken] = None,
    ) -> TelemetryStream:
        """Open one subscription and return its stream of updates.

        ``timeout`` bounds the whole stream, not each read.
        """

        if not paths:
            raise ValueError("At least one sensor path is required")

        stub = self._stub("subscription")
        request = protocol.build_subscription_request(
            ((sensor.path, sensor.frequency_ms) for sensor in paths),
            limit_records=limit_records,
            limit_time_seconds=limit_time_seconds,
            need_eos=need_eos,
        )

        LOGGER.info(
            "Subscribing to %d sensor path(s): %s",
            len(paths),
            ", ".join(str(sensor) for sensor in paths),
        )
        try:
            call = stub.telemetrySubscribe(request, timeout=timeout)
        except grpc.RpcError as exc:
            raise SubscriptionError.from_grpc(exc) from exc
        return TelemetryStream(call, cancel_token=cancel_token)
