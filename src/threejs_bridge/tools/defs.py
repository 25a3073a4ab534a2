from __future__ import annotations

from dataclasses import dataclass
from typing import Any

_POSITION = {"type": "array", "items": {"type": "number"}, "minItems": 3, "maxItems": 3}


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    input_schema: dict[str, Any]
    mutating: bool = True


@dataclass(frozen=True)
class PromptDefinition:
    name: str
    description: str
    text: str


TOOL_DEFINITIONS: list[ToolDefinition] = [
    ToolDefinition(
        name="addObject",
        description="Add an object to the scene",
        input_schema={
            "type": "object",
            "properties": {
                "type": {"type": "string"},
                "position": _POSITION,
                "color": {"type": "string"},
            },
            "required": ["type", "position", "color"],
            "additionalProperties": False,
        },
    ),
    ToolDefinition(
        name="moveObject",
        description="Move an object to a new position",
        input_schema={
            "type": "object",
            "properties": {
                "id": {"type": "string"},
                "position": _POSITION,
            },
            "required": ["id", "position"],
            "additionalProperties": False,
        },
    ),
    ToolDefinition(
        name="removeObject",
        description="Remove an object",
        input_schema={
            "type": "object",
            "properties": {"id": {"type": "string"}},
            "required": ["id"],
            "additionalProperties": False,
        },
    ),
    ToolDefinition(
        name="startRotation",
        description="Start rotating an object around the y-axis",
        input_schema={
            "type": "object",
            "properties": {
                "id": {"type": "string", "description": "The ID of the object (e.g. cube1)"},
                "speed": {"type": "number", "description": "Rotation speed in radians per frame"},
            },
            "required": ["id", "speed"],
            "additionalProperties": False,
        },
    ),
    ToolDefinition(
        name="stopRotation",
        description="Stop rotating an object",
        input_schema={
            "type": "object",
            "properties": {"id": {"type": "string", "description": "The ID of the object"}},
            "required": ["id"],
            "additionalProperties": False,
        },
    ),
    ToolDefinition(
        name="getSceneState",
        description="Get the current scene state",
        input_schema={"type": "object", "properties": {}},
        mutating=False,
    ),
]


ASSET_CREATION_STRATEGY = PromptDefinition(
    name="asset-creation-strategy",
    description="Defines the preferred strategy for creating assets in ThreeJS",
    text="""When creating 3D content in ThreeJS, always start by checking if integrations are available:
0. Before anything, always check the scene from getSceneState() tool
   "No scene state available" means no renderer is connected yet or it has not reported a scene
1. getSceneState() returns the latest snapshot exactly as the renderer sent it, as JSON.
   The scene objects are listed inside it, for example under "data":
   ###
   {
     "data": [
       {
         "id": "cube1",
         "type": "cube",
         "position": [0, 0, 0],
         "color": "red",
         ...
       }
     ]
   }
   ###
2. Always find the id of the object in response of getSceneState() tool
3. Always use the id of the object to manipulate it with other tools
""",
)

PROMPT_DEFINITIONS: list[PromptDefinition] = [ASSET_CREATION_STRATEGY]
