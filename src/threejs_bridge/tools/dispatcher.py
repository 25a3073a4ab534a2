from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from ..bridge.state import BridgeState
from ..shared.errors import UnknownTool
from ..shared.logging import get_logger
from .commands import build_command
from .defs import PromptDefinition
from .registry import get_definition, get_prompt, validate_arguments

logger = get_logger(__name__)

NO_CONNECTION = "No client connection available"
SENT = "sent"
NO_SCENE_STATE = "No scene state available"
TOOL_NOT_FOUND = "Tool not found"


class ToolDispatcher:
    """Turns tool calls into renderer commands or cached scene reads.

    ``call`` is synchronous, but a mutating tool with a renderer connected
    schedules its send on the running event loop, so it must then be called
    from inside one. Scene reads and the no-connection reply need no loop.
    """

    def __init__(self, state: BridgeState) -> None:
        self.state = state

    def call(self, name: str, arguments: Mapping[str, Any] | None = None) -> str:
        arguments = arguments or {}
        logger.debug("Tool call %s %s", name, arguments)

        try:
            definition = get_definition(name)
        except UnknownTool:
            logger.info("Tool not found: %s", name)
            return TOOL_NOT_FOUND

        if not definition.mutating:
            return self._scene_state()

        if self.state.connections.current() is None:
            return NO_CONNECTION

        command = build_command(name, validate_arguments(name, arguments))
        if not self.state.send_command(command.serialize()):
            return NO_CONNECTION
        return SENT

    def _scene_state(self) -> str:
        snapshot = self.state.scene.read()
        if snapshot is None:
            return NO_SCENE_STATE
        return json.dumps(snapshot, indent=2)

    def get_prompt(self, name: str) -> PromptDefinition:
        return get_prompt(name)
