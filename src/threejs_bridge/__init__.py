"""MCP bridge between tool-calling clients and a live three.js renderer."""

from .bridge.relay import RelayListener
from .bridge.state import BridgeState, ConnectionRegistry, SceneStateCache
from .tools.commands import Command, build_command
from .tools.dispatcher import ToolDispatcher

__all__ = [
    "BridgeState",
    "Command",
    "ConnectionRegistry",
    "RelayListener",
    "SceneStateCache",
    "ToolDispatcher",
    "build_command",
]
