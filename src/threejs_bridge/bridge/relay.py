"""WebSocket listener that renderers connect to."""

from __future__ import annotations

from typing import Optional

from websockets.asyncio.server import Server, ServerConnection, serve
from websockets.exceptions import ConnectionClosed

from ..shared.config import RelayConfig
from ..shared.errors import RelayUnavailable
from ..shared.logging import get_logger
from .state import BridgeState

logger = get_logger(__name__)


class RelayListener:
    def __init__(self, state: BridgeState, config: RelayConfig | None = None) -> None:
        self.state = state
        self.config = config or RelayConfig()
        self._server: Optional[Server] = None

    @property
    def address(self) -> tuple[str, int]:
        if self._server is None:
            raise RelayUnavailable("Relay listener is not running")
        sockname = next(iter(self._server.sockets)).getsockname()
        return sockname[0], sockname[1]

    async def start(self) -> tuple[str, int]:
        try:
            self._server = await serve(self.handle, self.config.host, self.config.port)
        except OSError as exc:
            raise RelayUnavailable(
                f"Cannot listen on {self.config.host}:{self.config.port}: {exc}"
            ) from exc
        host, port = self.address
        logger.info("Relay listening on ws://%s:%s", host, port)
        return host, port

    async def stop(self) -> None:
        server, self._server = self._server, None
        if server is not None:
            server.close()
            await server.wait_closed()
            logger.info("Relay closed")
        self.state.close()

    async def __aenter__(self) -> "RelayListener":
        await self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.stop()

    async def handle(self, websocket: ServerConnection) -> None:
        logger.info("Client connected from %s", websocket.remote_address)
        self.state.connect(websocket)
        try:
            async for message in websocket:
                self.state.receive(websocket, message)
        except ConnectionClosed as exc:
            logger.warning("Client connection closed abnormally: %s", exc)
        finally:
            if self.state.disconnect(websocket):
                logger.info("Client disconnected")
            else:
                logger.debug("Superseded client disconnected")
