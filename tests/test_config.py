from pathlib import Path

import pytest

from jti_client import constants
from jti_client.config import SensorPath, load_config, parse_channel_option, parse_sensor_path
from jti_client.errors import ConfigurationError
from jti_client.protocol import VerbosityLevel


def test_load_config_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "jti-client.cfg"
    config = load_config(config_path)

    assert config.device.host == constants.DEFAULT_DEVICE_HOST
    assert config.device.port == 50051
    assert config.device.username == ""
    assert config.device.password == ""
    assert config.transport.disable_tracing is True
    assert config.transport.channel_options == ()
    assert config.operational_state.subscription_id == 0xFFFFFFFF
    assert config.operational_state.verbosity is VerbosityLevel.BRIEF
    assert config.operational_state.timeout_seconds is None
    assert config.subscription.paths == (
        SensorPath("/interfaces/interface[name='ge-0/0/0']/state/", 5000),
    )
    assert config.subscription.limit_records == 0
    assert config.subscription.timeout_seconds is None
    assert config.logging.level == "INFO"
    assert config.logging.path is None
    assert config.path == config_path


def test_load_config_parses_host_with_port(tmp_path: Path) -> None:
    config_path = tmp_path / "jti-client.cfg"
    config_path.write_text("[device]\nhost = 10.0.0.1:32767\n", encoding="utf-8")

    config = load_config(config_path)

    assert config.device.host == "10.0.0.1"
    assert config.device.port == 32767
    assert config.device.target == "10.0.0.1:32767"
    assert config.raw.get("device", "port") == "32767"


def test_load_config_overrides_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "jti-client.cfg"
    config_path.write_text(
        """
[device]
host = router.example.net
port = 50052

[transport]
disable_tracing = false
channel_options =
    grpc.keepalive_time_ms = 20000
    grpc.primary_user_agent = jti-client

[operational_state]
verbosity = detail
timeout_seconds = 5

[subscription]
sample_frequency_ms = 2000
paths =
    /interfaces/interface[name='ge-0/0/0']/state/
    /components/ 10000
limit_records = 25
need_eos = true
timeout_seconds = 60
""".strip()
        + "\n",
        encoding="utf-8",
    )

    config = load_config(config_path)

    assert config.device.target == "router.example.net:50052"
    assert config.transport.disable_tracing is False
    assert config.transport.channel_options == (
        ("grpc.keepalive_time_ms", 20000),
        ("grpc.primary_user_agent", "jti-client"),
    )
    assert config.operational_state.verbosity is VerbosityLevel.DETAIL
    assert config.operational_state.timeout_seconds == 5.0
    assert config.subscription.paths == (
        SensorPath("/interfaces/interface[name='ge-0/0/0']/state/", 2000),
        SensorPath("/components/", 10000),
    )
    assert config.subscription.limit_records == 25
    assert config.subscription.need_eos is True
    assert config.subscription.timeout_seconds == 60.0


@pytest.mark.parametrize(
    "section, body",
    [
        ("operational_state", "verbosity = loud"),
        ("device", "port = 70000"),
        ("subscription", "sample_frequency_ms = 0"),
        ("subscription", "paths = /interfaces/ 0"),
        ("transport", "channel_options = grpc.census"),
        ("device", "port = fifty"),
    ],
)
def test_load_config_rejects_invalid_values(tmp_path: Path, section, body) -> None:
    config_path = tmp_path / "jti-client.cfg"
    config_path.write_text(f"[{section}]\n{body}\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_config(config_path)


def test_parse_sensor_path_keeps_spaces_in_path() -> None:
    sensor = parse_sensor_path("/interfaces/interface[name='ge 0']/state/", default_frequency=4000)

    assert sensor.path == "/interfaces/interface[name='ge 0']/state/"
    assert sensor.frequency_ms == 4000


def test_parse_channel_option_converts_integers() -> None:
    assert parse_channel_option("grpc.max_receive_message_length = -1") == (
        "grpc.max_receive_message_length",
        -1,
    )
    assert parse_channel_option("grpc.lb_policy_name=round_robin") == (
        "grpc.lb_policy_name",
        "round_robin",
    )


@pytest.mark.parametrize(
    "value, expected",
    [("0xFFFFFFFF", 0xFFFFFFFF), ("4294967295", 0xFFFFFFFF), ("42", 42), ("0", 0)],
)
def test_subscription_id_accepts_decimal_and_hex(tmp_path: Path, value, expected) -> None:
    config_path = tmp_path / "jti-client.cfg"
    config_path.write_text(f"[operational_state]\nsubscription_id = {value}\n", encoding="utf-8")

    assert load_config(config_path).operational_state.subscription_id == expected


@pytest.mark.parametrize(
    "section, body",
    [
        ("operational_state", "subscription_id = -1"),
        ("operational_state", "subscription_id = 0x100000000"),
        ("operational_state", "subscription_id = all"),
        ("subscription", "limit_records = -5"),
        ("subscription", "limit_records = 2147483648"),
        ("subscription", "limit_time_seconds = 0x80000000"),
        ("subscription", "sample_frequency_ms = 4294967296"),
        ("subscription", "paths = /interfaces/ 4294967296"),
    ],
)
def test_load_config_rejects_out_of_range_integers(tmp_path: Path, section, body) -> None:
    config_path = tmp_path / "jti-client.cfg"
    config_path.write_text(f"[{section}]\n{body}\n", encoding="utf-8")

    with pytest.raises(ConfigurationError) as excinfo:
        load_config(config_path)

    assert "range" in str(excinfo.value) or "integer" in str(excinfo.value)


def test_int32_limits_accept_upper_bound(tmp_path: Path) -> None:
    config_path = tmp_path / "jti-client.cfg"
    config_path.write_text(
        "[subscription]\nlimit_records = 2147483647\nlimit_time_seconds = 0x7FFFFFFF\n",
        encoding="utf-8",
    )

    subscription = load_config(config_path).subscription

    assert subscription.limit_records == 0x7FFFFFFF
    assert subscription.limit_time_seconds == 0x7FFFFFFF
