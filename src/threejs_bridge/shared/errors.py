from __future__ import annotations


class BridgeError(Exception):
    code = "bridge_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class RelayUnavailable(BridgeError):
    code = "relay_unavailable"


class UnknownTool(BridgeError):
    code = "unknown_tool"


class UnknownPrompt(BridgeError):
    code = "unknown_prompt"


class SchemaValidationError(BridgeError):
    code = "schema_validation_error"


class CommandError(BridgeError):
    code = "command_error"
