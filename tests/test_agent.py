import grpc
import pytest

from fakes import FakeChannel, FakeChannelFactory, FakeRpcError, make_update
from jti_client import agent_pb2, protocol
from jti_client.agent import OpenConfigTelemetryClient, operational_state_to_dict
from jti_client.channel import ChannelManager
from jti_client.config import ConnectOptions, DeviceConfig, SensorPath
from jti_client.errors import ConnectivityError, OperationalStateError, SubscriptionError
from jti_client.protocol import VerbosityLevel

DEVICE = DeviceConfig(host="192.0.2.10", port=50051)
SENSOR = SensorPath("/interfaces/interface[name='ge-0/0/0']/state/", 5000)


def _client(channel: FakeChannel) -> OpenConfigTelemetryClient:
    manager = ChannelManager(
        DEVICE,
        ConnectOptions(state_wait_seconds=0.1),
        channel_factory=FakeChannelFactory(channel),
    )
    manager.connect()
    return OpenConfigTelemetryClient(manager)


def test_operational_state_defaults_to_all_subscriptions_brief() -> None:
    reply = agent_pb2.GetOperationalStateReply()
    reply.kv.add(key="total_subscriptions", uint_value=1)
    channel = FakeChannel(reply=reply)

    result = _client(channel).get_operational_state()

    method, payload, timeout = channel.unary_requests[0]
    request = agent_pb2.GetOperationalStateRequest.FromString(payload)
    assert method == protocol.GET_OPERATIONAL_STATE
    assert request.subscription_id == 0xFFFFFFFF
    assert request.verbosity == VerbosityLevel.BRIEF
    assert timeout is None
    assert operational_state_to_dict(result) == {"total_subscriptions": 1}


def test_operational_state_passes_deadline_and_verbosity() -> None:
    channel = FakeChannel()

    _client(channel).get_operational_state(
        subscription_id=7, verbosity=VerbosityLevel.DETAIL, timeout=2.5
    )

    _, payload, timeout = channel.unary_requests[0]
    request = agent_pb2.GetOperationalStateRequest.FromString(payload)
    assert request.subscription_id == 7
    assert request.verbosity == VerbosityLevel.DETAIL
    assert timeout == 2.5


def test_operational_state_failure_is_translated() -> None:
    channel = FakeChannel(
        unary_error=FakeRpcError(grpc.StatusCode.UNAVAILABLE, "failed to connect to all addresses")
    )

    with pytest.raises(OperationalStateError) as excinfo:
        _client(channel).get_operational_state()

    assert excinfo.value.status is grpc.StatusCode.UNAVAILABLE
    assert "failed to connect" in str(excinfo.value)


def test_subscribe_issues_exactly_one_call() -> None:
    channel = FakeChannel(stream_messages=[make_update(1), make_update(2)])

    stream = _client(channel).subscribe(
        [SENSOR, SensorPath("/components/", 10000)], limit_records=2, timeout=30.0
    )
    updates = list(stream)

    assert len(channel.stream_requests) == 1
    method, payload, timeout = channel.stream_requests[0]
    request = agent_pb2.SubscriptionRequest.FromString(payload)
    assert method == protocol.TELEMETRY_SUBSCRIBE
    assert [(p.path, p.sample_frequency) for p in request.path_list] == [
        (SENSOR.path, 5000),
        ("/components/", 10000),
    ]
    assert request.additional_config.limit_records == 2
    assert timeout == 30.0
    assert [u.sequence_number for u in updates] == [1, 2]


def test_subscribe_call_failure_is_translated() -> None:
    channel = FakeChannel(
        subscribe_error=FakeRpcError(grpc.StatusCode.INVALID_ARGUMENT, "bad path")
    )

    with pytest.raises(SubscriptionError) as excinfo:
        _client(channel).subscribe([SENSOR])

    assert excinfo.value.status is grpc.StatusCode.INVALID_ARGUMENT


def test_subscribe_requires_paths() -> None:
    channel = FakeChannel()

    with pytest.raises(ValueError):
        _client(channel).subscribe([])
    assert channel.stream_requests == []


def test_no_calls_after_shutdown() -> None:
    channel = FakeChannel()
    client = _client(channel)
    client._channels.shutdown()

    with pytest.raises(ConnectivityError):
        client.get_operational_state()
    with pytest.raises(ConnectivityError):
        client.subscribe([SENSOR])

    assert channel.unary_requests == []
    assert channel.stream_requests == []


def test_no_calls_when_transport_reports_shutdown() -> None:
    channel = FakeChannel(state=grpc.ChannelConnectivity.SHUTDOWN)

    with pytest.raises(ConnectivityError):
        _client(channel).get_operational_state()

    assert channel.unary_requests == []
