from pathlib import Path

import pytest

from fakes import FakeChannel, FakeChannelFactory
from jti_client.config import ClientConfig, load_config


@pytest.fixture
def client_config(tmp_path: Path) -> ClientConfig:
    config_path = tmp_path / "jti-client.cfg"
    config_path.write_text(
        "[device]\nhost = 192.0.2.10\nport = 50051\n\n"
        "[transport]\nstate_wait_seconds = 0.1\n",
        encoding="utf-8",
    )
    return load_config(config_path)


@pytest.fixture
def fake_channel() -> FakeChannel:
    return FakeChannel()


@pytest.fixture
def channel_factory(fake_channel: FakeChannel) -> FakeChannelFactory:
    return FakeChannelFactory(fake_channel)
