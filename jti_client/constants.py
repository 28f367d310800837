"""Constants used across the jti-client package."""

from __future__ import annotations

from pathlib import Path

APP_NAME = "jti-client"
DEFAULT_CONFIG_FILENAME = f"{APP_NAME}.cfg"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / APP_NAME / DEFAULT_CONFIG_FILENAME

DEFAULT_DEVICE_HOST = "10.49.239.48"
DEFAULT_DEVICE_PORT = 50051

DEFAULT_SENSOR_PATH = "/interfaces/interface[name='ge-0/0/0']/state/"
DEFAULT_SENSOR_FREQUENCY_MS = 5000

# agent.proto: 0xFFFFFFFF selects every subscription, agent-level stats included.
ALL_SUBSCRIPTIONS = 0xFFFFFFFF

UINT32_MAX = 0xFFFFFFFF
INT32_MAX = 0x7FFFFFFF

DEFAULT_STATE_WAIT_SECONDS = 1.0
