from __future__ import annotations

import asyncio
import signal
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import GetPromptResult, Prompt, PromptMessage, TextContent, Tool

from .bridge.relay import RelayListener
from .bridge.state import BridgeState
from .shared.config import load_config
from .shared.errors import BridgeError, RelayUnavailable
from .shared.logging import configure_logging, get_logger
from .tools.dispatcher import ToolDispatcher
from .tools.registry import list_definitions, list_prompts as list_prompt_definitions

SERVER_NAME = "threejs_mcp_server"
SERVER_VERSION = "1.0.0"

app = Server(SERVER_NAME, version=SERVER_VERSION)
logger = get_logger(__name__)
state = BridgeState()
dispatcher = ToolDispatcher(state)


@app.list_tools()
async def list_tools() -> list[Tool]:
    return [
        Tool(name=tool.name, description=tool.description, inputSchema=tool.input_schema)
        for tool in list_definitions()
    ]


@app.list_prompts()
async def list_prompts() -> list[Prompt]:
    return [
        Prompt(name=prompt.name, description=prompt.description, arguments=[])
        for prompt in list_prompt_definitions()
    ]


@app.call_tool()
async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
    text = dispatcher.call(name, arguments or {})
    return [TextContent(type="text", text=text)]


@app.get_prompt()
async def get_prompt(name: str, arguments: dict[str, str] | None = None) -> GetPromptResult:
    prompt = dispatcher.get_prompt(name)
    return GetPromptResult(
        description=prompt.description,
        messages=[
            PromptMessage(role="assistant", content=TextContent(type="text", text=prompt.text)),
        ],
    )


def _install_sigterm_handler(task: asyncio.Task[Any]) -> None:
    # SIGINT is already turned into task cancellation by asyncio.run.
    try:
        asyncio.get_running_loop().add_signal_handler(signal.SIGTERM, task.cancel)
    except (NotImplementedError, RuntimeError):
        logger.debug("SIGTERM handler unavailable on this event loop")


async def run_server() -> None:
    config = load_config()
    configure_logging(config.logging)
    logger.info("Starting %s %s", SERVER_NAME, SERVER_VERSION)

    current = asyncio.current_task()
    if current is not None:
        _install_sigterm_handler(current)

    relay = RelayListener(state, config.relay)
    # The relay is entered last so it is released before stdio closes.
    try:
        async with stdio_server() as (read_stream, write_stream):
            async with relay:
                await app.run(read_stream, write_stream, app.create_initialization_options())
    finally:
        logger.info("Stopped %s", SERVER_NAME)


def main() -> None:
    try:
        asyncio.run(run_server())
    except (KeyboardInterrupt, asyncio.CancelledError):
        logger.info("Shutdown requested")
    except RelayUnavailable as exc:
        logger.error("Relay unavailable: %s", exc)
        raise SystemExit(1) from exc
    except BridgeError as exc:
        logger.error("Bridge error: %s", exc)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
