def test_import_package():
    import threejs_bridge  # noqa: F401


def test_entrypoints_importable():
    from threejs_bridge.server import main, run_server

    assert callable(main)
    assert callable(run_server)
