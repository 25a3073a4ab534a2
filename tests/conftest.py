import pytest

from threejs_bridge import server
from threejs_bridge.bridge.state import BridgeState
from threejs_bridge.tools.dispatcher import ToolDispatcher


class FakeConnection:
    """Stands in for a renderer websocket; records or rejects sends."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.sent: list[str] = []
        self.attempts = 0

    async def send(self, message: str) -> None:
        self.attempts += 1
        if self.fail:
            raise ConnectionError("renderer went away")
        self.sent.append(message)


@pytest.fixture
def make_connection():
    return FakeConnection


@pytest.fixture
def state() -> BridgeState:
    return BridgeState()


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch):
    for name in (
        "THREEJS_BRIDGE_CONFIG",
        "THREEJS_BRIDGE_HOST",
        "THREEJS_BRIDGE_PORT",
        "THREEJS_BRIDGE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_server_state():
    """Give the MCP handlers a fresh bridge state per test."""
    server.state = BridgeState()
    server.dispatcher = ToolDispatcher(server.state)
    yield
    server.state = BridgeState()
    server.dispatcher = ToolDispatcher(server.state)
