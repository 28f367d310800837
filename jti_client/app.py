"""Main application entry-point for jti-client."""

from __future__ import annotations

import logging
import signal
from enum import Enum, IntEnum
from typing import Callable, Optional

from google.protobuf import text_format

from .agent import OpenConfigTelemetryClient
from .channel import ChannelFactory, ChannelManager
from .config import ClientConfig, load_config
from .errors import (
    ConfigurationError,
    ConnectivityError,
    OperationalStateError,
    StreamCancelledError,
    SubscriptionError,
)
from .logging import configure_logging
from .stream import CancellationToken, TelemetryUpdate

LOGGER = logging.getLogger(__name__)

UpdateHandler = Callable[[TelemetryUpdate], None]


class RunState(str, Enum):
    INIT = "init"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    ABORTED = "aborted"
    PROBED_STATE = "probed_state"
    SUBSCRIBED = "subscribed"
    SHUTTING_DOWN = "shutting_down"
    TERMINATED = "terminated"


class ExitCode(IntEnum):
    OK = 0
    FAILURE = 1
    CONFIGURATION_ERROR = 2
    CHANNEL_UNUSABLE = 3
    OPERATIONAL_STATE_FAILED = 4
    SUBSCRIPTION_FAILED = 5
    CANCELLED = 130


def log_update(update: TelemetryUpdate) -> None:
    LOGGER.info("Telemetry update: %s", update.format())


class TelemetryClientApp:
    """Runs one connect -> probe -> subscribe -> shutdown sequence.

    All failures are caught at :meth:`run`, which always releases the channel
    before returning an :class:`ExitCode`.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        channel_factory: Optional[ChannelFactory] = None,
        on_update: Optional[UpdateHandler] = None,
        cancel_token: Optional[CancellationToken] = None,
    ) -> None:
        self._config = config or load_config()
        self._channels = ChannelManager(
            self._config.device,
            self._config.transport,
            channel_factory=channel_factory,
        )
        self._client = OpenConfigTelemetryClient(self._channels)
        self._on_update = on_update or log_update
        self._cancel_token = cancel_token or CancellationToken()
        self._state = RunState.INIT

    @property
    def state(self) -> RunState:
        return self._state

    @property
    def channels(self) -> ChannelManager:
        return self._channels

    def cancel(self) -> None:
        """Request cancellation; safe to call from a signal handler or another thread."""
        self._cancel_token.cancel()

    def _transition(self, state: RunState) -> None:
        if state is self._state:
            return
        LOGGER.debug("Run state %s -> %s", self._state.value, state.value)
        self._state = state

    def run(self, *, subscribe: bool = True) -> ExitCode:
        """Execute the sequence; ``subscribe=False`` stops after the state probe."""

        exit_code = ExitCode.OK
        try:
            self._connect()
            self._probe()
            if subscribe:
                self._consume()
        except ConfigurationError as exc:
            LOGGER.error("Configuration error: %s", exc)
            exit_code = ExitCode.CONFIGURATION_ERROR
        except ConnectivityError as exc:
            LOGGER.warning("Halting execution: %s", exc)
            self._transition(RunState.ABORTED)
            exit_code = ExitCode.CHANNEL_UNUSABLE
        except StreamCancelledError as exc:
            LOGGER.info("Subscription cancelled: %s", exc)
            exit_code = ExitCode.CANCELLED
        except OperationalStateError as exc:
            LOGGER.error("Operational state query failed: %s", exc)
            exit_code = ExitCode.OPERATIONAL_STATE_FAILED
        except SubscriptionError as exc:
            LOGGER.error("Subscription failed: %s", exc)
            exit_code = ExitCode.SUBSCRIPTION_FAILED
        except KeyboardInterrupt:
            LOGGER.info("jti-client received shutdown signal")
            exit_code = ExitCode.CANCELLED
        except Exception as exc:
            LOGGER.exception("Unexpected failure: %s", exc)
            exit_code = ExitCode.FAILURE
        finally:
            self._teardown()

        return exit_code

    def _connect(self) -> None:
        self._transition(RunState.CONNECTING)
        self._channels.connect()

        state = self._channels.get_state(try_to_connect=True)
        LOGGER.info("Value of connectivity state: %s", state.name)
        LOGGER.info("Value of channel shutdown: %s", self._channels.is_shutdown)
        LOGGER.info("Value of channel terminated: %s", self._channels.is_terminated)

        if not self._channels.is_usable():
            raise ConnectivityError("gRPC channel is shut down or terminated")
        self._transition(RunState.CONNECTED)

    def _probe(self) -> None:
        settings = self._config.operational_state
        reply = self._client.get_operational_state(
            subscription_id=settings.subscription_id,
            verbosity=settings.verbosity,
            timeout=settings.timeout_seconds,
        )
        LOGGER.info("Operational state:\n%s", text_format.MessageToString(reply))
        self._transition(RunState.PROBED_STATE)

    def _consume(self) -> None:
        if self._cancel_token.cancelled:
            raise StreamCancelledError("cancelled before subscribing")

        settings = self._config.subscription
        stream = self._client.subscribe(
            settings.paths,
            limit_records=settings.limit_records,
            limit_time_seconds=settings.limit_time_seconds,
            need_eos=settings.need_eos,
            timeout=settings.timeout_seconds,
            cancel_token=self._cancel_token,
        )
        self._transition(RunState.SUBSCRIBED)

        try:
            for update in stream:
                self._on_update(update)
        finally:
            stream.close()

        LOGGER.info("Subscription ended after %d updates", stream.received)

    def _teardown(self) -> None:
        self._transition(RunState.SHUTTING_DOWN)
        try:
            self._channels.shutdown()
        except Exception:
            LOGGER.exception("Channel shutdown failed")

        state = self._channels.get_state(try_to_connect=True)
        LOGGER.info("Value of connectivity state: %s", state.name)
        self._transition(RunState.TERMINATED)

    @classmethod
    def start(
        cls,
        config: Optional[ClientConfig] = None,
        *,
        subscribe: bool = True,
        channel_factory: Optional[ChannelFactory] = None,
        on_update: Optional[UpdateHandler] = None,
    ) -> ExitCode:
        """Configure logging, route SIGTERM to :meth:`cancel` and run to completion.

        The previous SIGTERM handler is restored before returning.
        """

        config = config or load_config()
        configure_logging(
            config.logging.level,
            log_path=config.logging.path,
            log_network=config.logging.log_network,
        )
        app = cls(config, channel_factory=channel_factory, on_update=on_update)

        previous = signal.getsignal(signal.SIGTERM)
        signal.signal(signal.SIGTERM, lambda signum, frame: app.cancel())
        try:
            LOGGER.info("jti-client starting with config: %s", config.path)
            return app.run(subscribe=subscribe)
        finally:
            signal.signal(signal.SIGTERM, previous)
