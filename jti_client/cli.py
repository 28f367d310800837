"""Command-line interface for jti-client."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import Optional

from . import constants
from .app import ExitCode, TelemetryClientApp
from .config import ClientConfig, SensorPath, load_config
from .errors import ConfigurationError
from .version import __version__

LOGGER = logging.getLogger(__name__)


def parse_sensor_argument(value: str, *, default_frequency: int) -> SensorPath:
    """Parse ``PATH[:FREQ_MS]`` as given to ``run --sensor``."""

    path, sep, frequency = value.rpartition(":")
    if sep and frequency.isdigit() and path:
        sensor = SensorPath(path=path, frequency_ms=int(frequency))
    else:
        sensor = SensorPath(path=value, frequency_ms=default_frequency)

    if not sensor.path.strip():
        raise argparse.ArgumentTypeError("sensor path must not be empty")
    if not 0 < sensor.frequency_ms <= constants.UINT32_MAX:
        raise argparse.ArgumentTypeError(f"sample frequency out of range: {sensor.frequency_ms}")
    return sensor


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=constants.APP_NAME,
        description="Junos OpenConfig telemetry client",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=constants.DEFAULT_CONFIG_PATH,
        help=f"Path to configuration file (default: {constants.DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument("--host", help="Override the device address")
    parser.add_argument("--port", type=int, help="Override the device gRPC port")
    parser.add_argument(
        "--version", "-V", action="version", version=f"%(prog)s {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser(
        "run", help="Query operational state, then stream telemetry"
    )
    run_parser.add_argument(
        "--sensor",
        action="append",
        default=[],
        metavar="PATH[:FREQ_MS]",
        help="Sensor path to subscribe to; repeatable (replaces configured paths)",
    )
    run_parser.add_argument(
        "--frequency",
        type=int,
        metavar="MS",
        help="Sample frequency for --sensor values without an explicit one",
    )

    subparsers.add_parser("state", help="Query the agent's operational state and exit")

    subparsers.add_parser(
        "show-config", help="Print the resolved configuration and exit"
    )

    return parser


def apply_overrides(config: ClientConfig, args: argparse.Namespace) -> ClientConfig:
    device = config.device
    if args.host:
        device = dataclasses.replace(device, host=args.host)
    if args.port is not None:
        if not 0 < args.port < 65536:
            raise ConfigurationError(f"Device port out of range: {args.port}")
        device = dataclasses.replace(device, port=args.port)
    config.device = device

    sensors = getattr(args, "sensor", None)
    frequency = getattr(args, "frequency", None)
    if frequency is not None and not 0 < frequency <= constants.UINT32_MAX:
        raise ConfigurationError(f"Sample frequency out of range: {frequency}")

    if sensors:
        default_frequency = frequency or config.subscription.paths[0].frequency_ms
        paths = tuple(
            parse_sensor_argument(value, default_frequency=default_frequency)
            for value in sensors
        )
    elif frequency is not None:
        paths = tuple(
            dataclasses.replace(sensor, frequency_ms=frequency)
            for sensor in config.subscription.paths
        )
    else:
        return config

    config.subscription = dataclasses.replace(config.subscription, paths=paths)
    return config


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = apply_overrides(load_config(args.config), args)
    except (ConfigurationError, argparse.ArgumentTypeError) as exc:
        print(f"Error loading configuration: {exc}", file=sys.stderr)
        return int(ExitCode.CONFIGURATION_ERROR)

    if args.command == "run":
        return int(TelemetryClientApp.start(config))

    if args.command == "state":
        return int(TelemetryClientApp.start(config, subscribe=False))

    if args.command == "show-config":
        print(f"Configuration loaded from {config.path!s}\n")
        for section in config.raw.sections():
            print(f"[{section}]")
            for key, value in config.raw[section].items():
                print(f"{key} = {value}")
            print()
        return 0

    LOGGER.error("Unknown command: %s", args.command)
    return 1


if __name__ == "__main__":
    sys.exit(main())
