import pytest

from threejs_bridge.shared.errors import SchemaValidationError, UnknownPrompt, UnknownTool
from threejs_bridge.tools.registry import (
    get_definition,
    get_prompt,
    list_definitions,
    validate_arguments,
)


def test_catalog_names():
    names = [tool.name for tool in list_definitions()]
    assert names == [
        "addObject",
        "moveObject",
        "removeObject",
        "startRotation",
        "stopRotation",
        "getSceneState",
    ]
    assert get_definition("getSceneState").mutating is False


def test_validate_arguments_success():
    args = {"type": "cube", "position": [1, 2, 3], "color": "red"}
    assert validate_arguments("addObject", args) == args


def test_validate_arguments_missing_required():
    with pytest.raises(SchemaValidationError):
        validate_arguments("removeObject", {})


def test_validate_position_length():
    with pytest.raises(SchemaValidationError) as exc:
        validate_arguments("moveObject", {"id": "cube1", "position": [0.0, 1.0]})
    assert "position" in str(exc.value)


def test_validate_rejects_extra_fields():
    with pytest.raises(SchemaValidationError):
        validate_arguments("stopRotation", {"id": "cube1", "speed": 1})


def test_validate_speed_must_be_number():
    with pytest.raises(SchemaValidationError):
        validate_arguments("startRotation", {"id": "cube1", "speed": "fast"})


def test_validate_unknown_tool():
    with pytest.raises(UnknownTool):
        validate_arguments("deleteAll", {})


def test_prompt_lookup():
    prompt = get_prompt("asset-creation-strategy")
    assert "getSceneState" in prompt.text

    with pytest.raises(UnknownPrompt):
        get_prompt("something-else")


def test_validate_reports_every_problem():
    with pytest.raises(SchemaValidationError) as exc:
        validate_arguments("addObject", {"type": 3, "position": [0, 0], "color": "red"})
    message = str(exc.value)
    assert message.startswith("addObject: ")
    assert "position" in message
    assert "type" in message


def test_prompt_does_not_promise_a_bare_list():
    text = get_prompt("asset-creation-strategy").text
    assert '"data": [' in text
    assert "exactly as the renderer sent it" in text
