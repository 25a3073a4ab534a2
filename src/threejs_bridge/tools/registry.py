"""Lookup and argument checking over the tool and prompt catalog."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from jsonschema import Draft7Validator
from jsonschema.exceptions import ValidationError

from ..shared.errors import BridgeError, SchemaValidationError, UnknownPrompt, UnknownTool
from .defs import PROMPT_DEFINITIONS, TOOL_DEFINITIONS, PromptDefinition, ToolDefinition

T = TypeVar("T")

_DEFINITIONS: dict[str, ToolDefinition] = {tool.name: tool for tool in TOOL_DEFINITIONS}
_VALIDATORS: dict[str, Draft7Validator] = {
    name: Draft7Validator(tool.input_schema) for name, tool in _DEFINITIONS.items()
}
_PROMPTS: dict[str, PromptDefinition] = {prompt.name: prompt for prompt in PROMPT_DEFINITIONS}


def _lookup(index: Mapping[str, T], name: str, error: type[BridgeError], kind: str) -> T:
    if name not in index:
        raise error(f"Unknown {kind} '{name}'")
    return index[name]


def list_definitions() -> list[ToolDefinition]:
    return TOOL_DEFINITIONS


def list_prompts() -> list[PromptDefinition]:
    return PROMPT_DEFINITIONS


def get_definition(name: str) -> ToolDefinition:
    return _lookup(_DEFINITIONS, name, UnknownTool, "tool")


def get_prompt(name: str) -> PromptDefinition:
    return _lookup(_PROMPTS, name, UnknownPrompt, "prompt")


def _describe(error: ValidationError) -> str:
    location = "/".join(str(part) for part in error.absolute_path) or "arguments"
    return f"{location}: {error.message}"


def validate_arguments(tool_name: str, arguments: Mapping[str, Any]) -> dict[str, Any]:
    """Return a plain-dict copy of ``arguments`` once they satisfy the tool's schema.

    Every violation is reported in one ``SchemaValidationError``, ordered by
    argument location.
    """
    validator = _lookup(_VALIDATORS, tool_name, UnknownTool, "tool")

    candidate = dict(arguments)
    problems = sorted(_describe(error) for error in validator.iter_errors(candidate))
    if problems:
        raise SchemaValidationError(f"{tool_name}: " + "; ".join(problems))
    return candidate
