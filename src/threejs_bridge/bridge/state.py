"""Shared state between the relay listener and the tool dispatcher.

Both transports run on one asyncio loop, so each method here runs to
completion before any other event is handled.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any, Optional, Protocol, Union

from ..shared.logging import get_logger

logger = get_logger(__name__)

_LOG_PREVIEW = 200


class Connection(Protocol):
    async def send(self, message: str) -> None: ...


class ConnectionRegistry:
    """Holds at most one renderer connection."""

    def __init__(self) -> None:
        self._current: Optional[Connection] = None

    def on_connect(self, conn: Connection) -> None:
        if self._current is not None and self._current is not conn:
            logger.info("Renderer connection superseded by a new client")
        self._current = conn

    def on_disconnect(self, conn: Connection) -> bool:
        if self._current is not conn:
            return False
        self._current = None
        return True

    def current(self) -> Optional[Connection]:
        return self._current


class SceneStateCache:
    """Latest full-scene snapshot pushed by the renderer."""

    def __init__(self) -> None:
        self._snapshot: Any = None

    def update(self, raw: Union[str, bytes]) -> bool:
        try:
            snapshot = json.loads(raw)
        except (TypeError, ValueError):
            logger.warning("Invalid scene state message: %r", _preview(raw))
            return False
        self._snapshot = snapshot
        logger.debug("Updated scene state: %s", snapshot)
        return True

    def clear(self) -> None:
        self._snapshot = None

    def read(self) -> Any:
        return self._snapshot


class BridgeState:
    def __init__(self) -> None:
        self.connections = ConnectionRegistry()
        self.scene = SceneStateCache()
        self._pending: set[asyncio.Task[None]] = set()

    def connect(self, conn: Connection) -> None:
        previous = self.connections.current()
        self.connections.on_connect(conn)
        if previous is not None and previous is not conn:
            # The cached scene belongs to the replaced renderer.
            self.scene.clear()

    def disconnect(self, conn: Connection) -> bool:
        cleared = self.connections.on_disconnect(conn)
        if cleared:
            self.scene.clear()
        return cleared

    def receive(self, conn: Connection, raw: Union[str, bytes]) -> bool:
        if self.connections.current() is not conn:
            logger.debug("Ignoring message from superseded renderer connection")
            return False
        return self.scene.update(raw)

    def send_command(self, payload: str) -> bool:
        """Hand ``payload`` to the active connection without awaiting delivery.

        Must be called from a running event loop whenever a renderer is
        connected; the send is scheduled as a task on that loop. Returns
        False when no renderer is connected.
        """
        conn = self.connections.current()
        if conn is None:
            return False
        task = asyncio.get_running_loop().create_task(self._deliver(conn, payload))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return True

    async def _deliver(self, conn: Connection, payload: str) -> None:
        try:
            await conn.send(payload)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Dropping command, renderer send failed: %s", exc)

    async def drain(self) -> None:
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    def close(self) -> None:
        for task in list(self._pending):
            task.cancel()
        self._pending.clear()
        current = self.connections.current()
        if current is not None:
            self.disconnect(current)


def _preview(raw: Union[str, bytes]) -> Union[str, bytes]:
    if len(raw) > _LOG_PREVIEW:
        return raw[:_LOG_PREVIEW] + (b"..." if isinstance(raw, bytes) else "...")
    return raw
