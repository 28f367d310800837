"""End-to-end runs against an in-process OpenConfigTelemetry server."""

import socket
import threading
from concurrent import futures
from pathlib import Path
from typing import List

import grpc
import pytest

from fakes import make_update
from jti_client import agent_pb2, agent_pb2_grpc
from jti_client.app import ExitCode, TelemetryClientApp
from jti_client.config import load_config
from jti_client.protocol import VerbosityLevel
from jti_client.stream import CancellationToken


class FakeTelemetryAgent(agent_pb2_grpc.OpenConfigTelemetryServicer):
    """Serves ``updates`` samples, then optionally holds the stream open."""

    def __init__(self, updates: int, *, hold_open: bool = False) -> None:
        self.updates = updates
        self.hold_open = hold_open
        self.state_requests: List[agent_pb2.GetOperationalStateRequest] = []
        self.subscriptions: List[agent_pb2.SubscriptionRequest] = []
        self.stream_released = threading.Event()

    def getTelemetryOperationalState(self, request, context):
        self.state_requests.append(request)
        reply = agent_pb2.GetOperationalStateReply()
        reply.kv.add(key="total_subscriptions", uint_value=len(self.subscriptions))
        reply.kv.add(key="total_streaming_rpcs", uint_value=0)
        reply.kv.add(key="agent_state", str_value="running")
        return reply

    def telemetrySubscribe(self, request, context):
        self.subscriptions.append(request)
        context.add_callback(self.stream_released.set)
        for sequence in range(1, self.updates + 1):
            yield make_update(sequence, path=request.path_list[0].path)
        if self.hold_open:
            self.stream_released.wait(timeout=10)


def _serve(agent: FakeTelemetryAgent):
    server = grpc.server(futures.ThreadPoolExecutor(max_workers=4))
    agent_pb2_grpc.add_OpenConfigTelemetryServicer_to_server(agent, server)
    port = server.add_insecure_port("127.0.0.1:0")
    server.start()
    return server, port


@pytest.fixture
def agent_server():
    agent = FakeTelemetryAgent(updates=3)
    server, port = _serve(agent)
    try:
        yield agent, port
    finally:
        server.stop(grace=None)


@pytest.fixture
def idle_agent_server():
    agent = FakeTelemetryAgent(updates=1, hold_open=True)
    server, port = _serve(agent)
    try:
        yield agent, port
    finally:
        agent.stream_released.set()
        server.stop(grace=None)


def _config(tmp_path: Path, port: int):
    config_path = tmp_path / "jti-client.cfg"
    config_path.write_text(
        f"[device]\nhost = 127.0.0.1\nport = {port}\n\n"
        "[operational_state]\ntimeout_seconds = 10\n\n"
        "[subscription]\ntimeout_seconds = 10\n",
        encoding="utf-8",
    )
    return load_config(config_path)


def test_run_against_live_server(tmp_path: Path, agent_server) -> None:
    agent, port = agent_server
    received = []
    app = TelemetryClientApp(_config(tmp_path, port), on_update=received.append)

    exit_code = app.run()

    assert exit_code is ExitCode.OK
    assert len(agent.state_requests) == 1
    assert agent.state_requests[0].subscription_id == 0xFFFFFFFF
    assert agent.state_requests[0].verbosity == VerbosityLevel.BRIEF
    assert len(agent.subscriptions) == 1
    assert [(p.path, p.sample_frequency) for p in agent.subscriptions[0].path_list] == [
        ("/interfaces/interface[name='ge-0/0/0']/state/", 5000)
    ]
    assert [update.sequence_number for update in received] == [1, 2, 3]
    assert app.channels.is_terminated is True


def test_cancel_interrupts_blocked_read(tmp_path: Path, idle_agent_server) -> None:
    agent, port = idle_agent_server
    token = CancellationToken()
    first_update = threading.Event()
    received = []

    def _on_update(update) -> None:
        received.append(update)
        first_update.set()

    # Cancels from another thread while the client waits for a second sample.
    canceller = threading.Thread(
        target=lambda: first_update.wait(timeout=10) and token.cancel(), daemon=True
    )
    canceller.start()

    app = TelemetryClientApp(
        _config(tmp_path, port), on_update=_on_update, cancel_token=token
    )
    exit_code = app.run()
    canceller.join(timeout=5)

    assert exit_code is ExitCode.CANCELLED
    assert [update.sequence_number for update in received] == [1]
    assert len(agent.subscriptions) == 1
    assert agent.stream_released.wait(timeout=5) is True
    assert app.channels.is_terminated is True


def test_unreachable_agent_fails_state_query(tmp_path: Path) -> None:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    # Nothing listens on the port once the socket is closed.

    config = _config(tmp_path, port)
    app = TelemetryClientApp(config)

    assert app.run() is ExitCode.OPERATIONAL_STATE_FAILED
    assert app.channels.is_shutdown is True
