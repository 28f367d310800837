"""Configuration loader for jti-client."""

from __future__ import annotations

from configparser import ConfigParser
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple, Union

from . import constants
from .errors import ConfigurationError
from .protocol import VerbosityLevel

ChannelOptionValue = Union[int, str]


@dataclass(slots=True, frozen=True)
class SensorPath:
    path: str
    frequency_ms: int = constants.DEFAULT_SENSOR_FREQUENCY_MS

    def __str__(self) -> str:
        return f"{self.path} @ {self.frequency_ms}ms"


@dataclass(slots=True, frozen=True)
class DeviceConfig:
    host: str = constants.DEFAULT_DEVICE_HOST
    port: int = constants.DEFAULT_DEVICE_PORT
    # Carried for completeness; the agent is queried without credentials.
    username: str = ""
    password: str = ""

    @property
    def target(self) -> str:
        return f"{self.host}:{self.port}"


@dataclass(slots=True, frozen=True)
class ConnectOptions:
    disable_tracing: bool = True
    state_wait_seconds: float = constants.DEFAULT_STATE_WAIT_SECONDS
    channel_options: Tuple[Tuple[str, ChannelOptionValue], ...] = ()


@dataclass(slots=True, frozen=True)
class OperationalStateConfig:
    subscription_id: int = constants.ALL_SUBSCRIPTIONS
    verbosity: VerbosityLevel = VerbosityLevel.BRIEF
    timeout_seconds: Optional[float] = None


@dataclass(slots=True, frozen=True)
class SubscriptionConfig:
    paths: Tuple[SensorPath, ...] = (SensorPath(constants.DEFAULT_SENSOR_PATH),)
    limit_records: int = 0
    limit_time_seconds: int = 0
    need_eos: bool = False
    timeout_seconds: Optional[float] = None


@dataclass(slots=True, frozen=True)
class LoggingConfig:
    level: str = "INFO"
    path: Optional[Path] = None
    log_network: bool = False


@dataclass(slots=True)
class ClientConfig:
    device: DeviceConfig
    transport: ConnectOptions
    operational_state: OperationalStateConfig
    subscription: SubscriptionConfig
    logging: LoggingConfig
    raw: ConfigParser
    path: Path


def parse_sensor_path(value: str, *, default_frequency: int) -> SensorPath:
    """Parse ``"<path> [frequency_ms]"``; the path itself may contain spaces."""

    text = value.strip()
    if not text:
        raise ConfigurationError("Empty sensor path")

    frequency = default_frequency
    parts = text.rsplit(None, 1)
    if len(parts) == 2 and parts[1].isdigit():
        text, frequency = parts[0], int(parts[1])

    if not 0 < frequency <= constants.UINT32_MAX:
        raise ConfigurationError(f"Sample frequency out of range for {text!r}: {frequency}")
    return SensorPath(path=text, frequency_ms=frequency)


def parse_channel_option(line: str) -> Tuple[str, ChannelOptionValue]:
    key, sep, value = line.partition("=")
    key = key.strip()
    value = value.strip()
    if not sep or not key:
        raise ConfigurationError(f"Malformed channel option {line!r} (expected key = value)")
    if value.lstrip("-").isdigit():
        return key, int(value)
    return key, value


def _lines(value: str) -> List[str]:
    return [line.strip() for line in value.splitlines() if line.strip()]


def _optional_timeout(value: float) -> Optional[float]:
    return value if value > 0 else None


def _bounded_int(parser: ConfigParser, section: str, option: str, *, maximum: int) -> int:
    """Read a non-negative integer option; hex such as ``0xFFFFFFFF`` is accepted."""

    raw = parser.get(section, option).strip()
    try:
        value = int(raw, 0)
    except ValueError:
        raise ConfigurationError(f"{section}.{option} must be an integer, got {raw!r}") from None
    if not 0 <= value <= maximum:
        raise ConfigurationError(f"{section}.{option} out of range (0..{maximum:#x}): {value}")
    return value


def load_config(path: Optional[Path] = None) -> ClientConfig:
    """Load configuration from disk, applying defaults where necessary."""

    config_path = path or constants.DEFAULT_CONFIG_PATH
    parser = ConfigParser(interpolation=None)
    parser.read_dict(
        {
            "device": {
                "host": constants.DEFAULT_DEVICE_HOST,
                "port": str(constants.DEFAULT_DEVICE_PORT),
                "username": "",
                "password": "",
            },
            "transport": {
                "disable_tracing": "true",
                "state_wait_seconds": str(constants.DEFAULT_STATE_WAIT_SECONDS),
                "channel_options": "",
            },
            "operational_state": {
                "subscription_id": f"{constants.ALL_SUBSCRIPTIONS:#x}",
                "verbosity": "brief",
                "timeout_seconds": "0",
            },
            "subscription": {
                "paths": constants.DEFAULT_SENSOR_PATH,
                "sample_frequency_ms": str(constants.DEFAULT_SENSOR_FREQUENCY_MS),
                "limit_records": "0",
                "limit_time_seconds": "0",
                "need_eos": "false",
                "timeout_seconds": "0",
            },
            "logging": {
                "level": "INFO",
                "path": "",
                "log_network": "false",
            },
        }
    )

    if config_path.exists():
        parser.read(config_path)

    try:
        return _build_config(parser, config_path)
    except ConfigurationError:
        raise
    except ValueError as exc:
        raise ConfigurationError(f"Invalid configuration in {config_path}: {exc}") from exc


def _build_config(parser: ConfigParser, config_path: Path) -> ClientConfig:
    host_value = parser.get("device", "host")
    port_value = parser.getint("device", "port")

    if ":" in host_value:
        host_part, port_part = host_value.rsplit(":", 1)
        try:
            parsed_port = int(port_part)
        except ValueError:
            pass
        else:
            host_value = host_part
            port_value = parsed_port
            parser.set("device", "host", host_part)
            parser.set("device", "port", str(parsed_port))

    if not 0 < port_value < 65536:
        raise ConfigurationError(f"Device port out of range: {port_value}")

    device = DeviceConfig(
        host=host_value,
        port=port_value,
        username=parser.get("device", "username", fallback=""),
        password=parser.get("device", "password", fallback=""),
    )

    transport = ConnectOptions(
        disable_tracing=parser.getboolean("transport", "disable_tracing", fallback=True),
        state_wait_seconds=max(
            0.0,
            parser.getfloat(
                "transport",
                "state_wait_seconds",
                fallback=constants.DEFAULT_STATE_WAIT_SECONDS,
            ),
        ),
        channel_options=tuple(
            parse_channel_option(line)
            for line in _lines(parser.get("transport", "channel_options", fallback=""))
        ),
    )

    operational_state = OperationalStateConfig(
        subscription_id=_bounded_int(
            parser, "operational_state", "subscription_id", maximum=constants.UINT32_MAX
        ),
        verbosity=VerbosityLevel.parse(
            parser.get("operational_state", "verbosity", fallback="brief")
        ),
        timeout_seconds=_optional_timeout(
            parser.getfloat("operational_state", "timeout_seconds", fallback=0.0)
        ),
    )

    default_frequency = _bounded_int(
        parser, "subscription", "sample_frequency_ms", maximum=constants.UINT32_MAX
    )
    if default_frequency == 0:
        raise ConfigurationError("sample_frequency_ms must be positive")

    paths = tuple(
        parse_sensor_path(line, default_frequency=default_frequency)
        for line in _lines(parser.get("subscription", "paths", fallback=""))
    )
    if not paths:
        raise ConfigurationError("At least one sensor path is required")

    subscription = SubscriptionConfig(
        paths=paths,
        limit_records=_bounded_int(
            parser, "subscription", "limit_records", maximum=constants.INT32_MAX
        ),
        limit_time_seconds=_bounded_int(
            parser, "subscription", "limit_time_seconds", maximum=constants.INT32_MAX
        ),
        need_eos=parser.getboolean("subscription", "need_eos", fallback=False),
        timeout_seconds=_optional_timeout(
            parser.getfloat("subscription", "timeout_seconds", fallback=0.0)
        ),
    )

    log_path_value = parser.get("logging", "path", fallback="").strip()
    logging_config = LoggingConfig(
        level=parser.get("logging", "level", fallback="INFO"),
        path=Path(log_path_value).expanduser() if log_path_value else None,
        log_network=parser.getboolean("logging", "log_network", fallback=False),
    )

    return ClientConfig(
        device=device,
        transport=transport,
        operational_state=operational_state,
        subscription=subscription,
        logging=logging_config,
        raw=parser,
        path=config_path,
    )
