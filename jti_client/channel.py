"""Channel lifecycle management for the telemetry agent.

This module owns the single gRPC channel to the device: building it with the
tracing workaround applied, observing its connectivity state, and releasing it
exactly once.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, List, Optional, Sequence, Tuple

import grpc

from .config import ChannelOptionValue, ConnectOptions, DeviceConfig
from .errors import ConfigurationError, ConnectivityError

LOGGER = logging.getLogger(__name__)

ChannelFactory = Callable[..., grpc.Channel]

# Core channel argument (GRPC_ARG_ENABLE_CENSUS) gating the census tracing
# filter. The Junos agent fails to parse the trace context that filter attaches
# and resets the stream ("EOF", UNAVAILABLE).
TRACING_CHANNEL_ARG = "grpc.census"


def disable_tracing(
    options: Sequence[Tuple[str, ChannelOptionValue]],
) -> List[Tuple[str, ChannelOptionValue]]:
    """Return ``options`` with the tracing filter switched off.

    Raises:
        ConfigurationError: If an explicit option already forces tracing on.
    """

    result: List[Tuple[str, ChannelOptionValue]] = []
    for key, value in options:
        if key == TRACING_CHANNEL_ARG:
            if value not in (0, "0"):
                raise ConfigurationError(
                    f"Cannot disable tracing: channel option {key}={value!r} enables it"
                )
            continue
        result.append((key, value))

    result.append((TRACING_CHANNEL_ARG, 0))
    return result


def build_channel_options(options: ConnectOptions) -> List[Tuple[str, ChannelOptionValue]]:
    channel_options: List[Tuple[str, ChannelOptionValue]] = []
    for entry in options.channel_options:
        if len(entry) != 2 or not isinstance(entry[0], str) or not entry[0]:
            raise ConfigurationError(f"Malformed channel option: {entry!r}")
        channel_options.append((entry[0], entry[1]))

    if options.disable_tracing:
        channel_options = disable_tracing(channel_options)
    return channel_options


class ChannelManager:
    """Builds, inspects and releases the channel to one device.

    A manager is single-use: once shut down it never opens another channel.
    """

    def __init__(
        self,
        device: DeviceConfig,
        options: Optional[ConnectOptions] = None,
        *,
        channel_factory: Optional[ChannelFactory] = None,
    ) -> None:
        self.device = device
        self.options = options or ConnectOptions()
        self._channel_factory = channel_factory or grpc.insecure_channel

        self._channel: Optional[grpc.Channel] = None
        self._last_state: Optional[grpc.ChannelConnectivity] = None
        self._shutdown = False
        self._terminated = False

    def __enter__(self) -> "ChannelManager":
        self.connect()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.shutdown()

    @property
    def channel(self) -> grpc.Channel:
        if self._shutdown:
            raise ConnectivityError("Channel has been shut down")
        if self._channel is None:
            raise ConnectivityError("Channel has not been built")
        return self._channel

    @property
    def is_shutdown(self) -> bool:
        return self._shutdown

    @property
    def is_terminated(self) -> bool:
        return self._terminated

    @property
    def last_state(self) -> Optional[grpc.ChannelConnectivity]:
        """Most recent connectivity state reported by the transport."""
        return self._last_state

    def connect(self) -> grpc.Channel:
        """Build the plaintext channel; no connection is attempted yet.

        Raises:
            ConfigurationError: If the channel options cannot be applied.
            ConnectivityError: If a channel is already open or was released.
        """

        if self._shutdown:
            raise ConnectivityError("Channel manager already shut down")
        if self._channel is not None:
            raise ConnectivityError("Channel already open")

        channel_options = build_channel_options(self.options)
        if self.device.username or self.device.password:
            LOGGER.debug("Device credentials configured but not applied")

        LOGGER.info(
            "Building plaintext channel to %s (tracing %s)",
            self.device.target,
            "disabled" if self.options.disable_tracing else "enabled",
        )
        self._channel = self._channel_factory(self.device.target, options=channel_options)
        self._channel.subscribe(self._on_state_change, try_to_connect=False)
        return self._channel

    def get_state(
        self, try_to_connect: bool = False, timeout: Optional[float] = None
    ) -> grpc.ChannelConnectivity:
        """Return the channel's connectivity state.

        With ``try_to_connect`` an IDLE channel starts connecting as a side
        effect of the query. If the transport reports nothing within
        ``timeout`` seconds the last observed state is returned.
        """

        if self._channel is None or self._shutdown:
            return grpc.ChannelConnectivity.SHUTDOWN

        observed: List[grpc.ChannelConnectivity] = []
        delivered = threading.Event()

        def _capture(state: grpc.ChannelConnectivity) -> None:
            if not delivered.is_set():
                observed.append(state)
                delivered.set()

        wait = self.options.state_wait_seconds if timeout is None else timeout
        self._channel.subscribe(_capture, try_to_connect=try_to_connect)
        try:
            if not delivered.wait(wait):
                LOGGER.debug("No connectivity state reported within %.1fs", wait)
                return self._last_state or grpc.ChannelConnectivity.IDLE
        finally:
            self._channel.unsubscribe(_capture)

        if self._last_state is None:
            self._last_state = observed[0]
        return observed[0]

    def is_usable(self) -> bool:
        """Whether new calls may be issued on the channel."""

        if self._channel is None or self._shutdown or self._terminated:
            return False
        return self._last_state is not grpc.ChannelConnectivity.SHUTDOWN

    def shutdown(self) -> None:
        """Release the channel. Safe to call repeatedly or before ``connect``."""

        if self._shutdown:
            LOGGER.debug("Channel already shut down")
            return

        self._shutdown = True
        channel, self._channel = self._channel, None
        if channel is None:
            self._terminated = True
            return

        LOGGER.info("Shutting down channel to %s", self.device.target)
        try:
            channel.unsubscribe(self._on_state_change)
        finally:
            channel.close()
            self._terminated = True
            self._last_state = grpc.ChannelConnectivity.SHUTDOWN

    def _on_state_change(self, state: grpc.ChannelConnectivity) -> None:
        previous, self._last_state = self._last_state, state
        if previous is not state:
            LOGGER.info(
                "Connectivity state: %s -> %s",
                previous.name if previous is not None else "UNKNOWN",
                state.name,
            )
