"""Outbound commands sent to the renderer.

Each action has its own frozen dataclass whose fields are exactly the
arguments the tool catalog declares for it. ``build_command`` maps a tool
name and an argument mapping onto the matching variant.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from typing import Any, ClassVar, Union

from ..shared.errors import CommandError, UnknownTool

Position = list[float]


@dataclass(frozen=True)
class _Command:
    action: ClassVar[str] = ""

    def to_message(self) -> dict[str, Any]:
        return {"action": self.action, **asdict(self)}

    def serialize(self) -> str:
        return json.dumps(self.to_message())


@dataclass(frozen=True)
class AddObject(_Command):
    action: ClassVar[str] = "addObject"

    type: str
    position: Position
    color: str


@dataclass(frozen=True)
class MoveObject(_Command):
    action: ClassVar[str] = "moveObject"

    id: str
    position: Position


@dataclass(frozen=True)
class RemoveObject(_Command):
    action: ClassVar[str] = "removeObject"

    id: str


@dataclass(frozen=True)
class StartRotation(_Command):
    action: ClassVar[str] = "startRotation"

    id: str
    speed: float


@dataclass(frozen=True)
class StopRotation(_Command):
    action: ClassVar[str] = "stopRotation"

    id: str


Command = Union[AddObject, MoveObject, RemoveObject, StartRotation, StopRotation]

COMMAND_TYPES: dict[str, type[_Command]] = {
    cls.action: cls for cls in (AddObject, MoveObject, RemoveObject, StartRotation, StopRotation)
}


def build_command(tool_name: str, arguments: Mapping[str, Any]) -> Command:
    try:
        cls = COMMAND_TYPES[tool_name]
    except KeyError as exc:
        raise UnknownTool(f"Unknown tool '{tool_name}'") from exc

    expected = {field.name for field in fields(cls)}
    unknown = sorted(set(arguments) - expected)
    missing = sorted(expected - set(arguments))
    if unknown:
        raise CommandError(f"{tool_name}: unexpected field(s) {', '.join(unknown)}")
    if missing:
        raise CommandError(f"{tool_name}: missing field(s) {', '.join(missing)}")

    return cls(**arguments)
