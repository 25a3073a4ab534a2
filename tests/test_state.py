import json
import logging

from threejs_bridge.bridge.state import ConnectionRegistry, SceneStateCache


def test_registry_starts_empty():
    assert ConnectionRegistry().current() is None


def test_newer_connection_survives_stale_disconnect(make_connection):
    registry = ConnectionRegistry()
    first, second = make_connection(), make_connection()

    registry.on_connect(first)
    registry.on_connect(second)
    assert registry.current() is second

    assert registry.on_disconnect(first) is False
    assert registry.current() is second

    assert registry.on_disconnect(second) is True
    assert registry.current() is None


def test_cache_replaces_snapshot_wholesale():
    cache = SceneStateCache()
    assert cache.read() is None

    assert cache.update(json.dumps({"data": [{"id": "cube1"}], "camera": "main"}))
    assert cache.update(json.dumps({"data": []}))
    assert cache.read() == {"data": []}


def test_cache_accepts_bytes():
    cache = SceneStateCache()
    assert cache.update(b'{"data": [1]}')
    assert cache.read() == {"data": [1]}


def test_malformed_message_keeps_previous_snapshot(caplog):
    cache = SceneStateCache()
    cache.update(json.dumps({"data": [{"id": "cube1"}]}))

    with caplog.at_level(logging.WARNING):
        assert cache.update("not json {") is False

    assert cache.read() == {"data": [{"id": "cube1"}]}
    assert "Invalid scene state message" in caplog.text


def test_disconnect_clears_cached_snapshot(state, make_connection):
    conn = make_connection()
    state.connect(conn)
    assert state.receive(conn, json.dumps({"data": [{"id": "sphere1"}]}))

    assert state.disconnect(conn) is True
    assert state.scene.read() is None
    assert state.connections.current() is None


def test_stale_disconnect_keeps_snapshot(state, make_connection):
    old, new = make_connection(), make_connection()
    state.connect(old)
    state.connect(new)
    state.receive(new, json.dumps({"data": []}))

    assert state.disconnect(old) is False
    assert state.scene.read() == {"data": []}


def test_superseded_connection_messages_ignored(state, make_connection):
    old, new = make_connection(), make_connection()
    state.connect(old)
    state.connect(new)

    assert state.receive(old, json.dumps({"data": ["stale"]})) is False
    assert state.scene.read() is None


def test_close_releases_connection(state, make_connection):
    conn = make_connection()
    state.connect(conn)
    state.receive(conn, "[]")

    state.close()
    assert state.connections.current() is None
    assert state.scene.read() is None


def test_replacing_renderer_drops_its_snapshot(state, make_connection):
    first, second = make_connection(), make_connection()
    state.connect(first)
    state.receive(first, json.dumps({"data": [{"id": "from-first"}]}))

    state.connect(second)
    assert state.scene.read() is None

    assert state.disconnect(first) is False
    assert state.scene.read() is None


def test_reconnecting_same_renderer_keeps_snapshot(state, make_connection):
    conn = make_connection()
    state.connect(conn)
    state.receive(conn, json.dumps({"data": []}))

    state.connect(conn)
    assert state.scene.read() == {"data": []}
