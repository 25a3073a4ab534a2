from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class RelayConfig:
    host: str = "0.0.0.0"
    port: int = 8082


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"
    file: str | None = None


@dataclass(frozen=True)
class AppConfig:
    relay: RelayConfig = RelayConfig()
    logging: LoggingConfig = LoggingConfig()


def _load_json(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def _from_file() -> AppConfig:
    config_path = os.getenv("THREEJS_BRIDGE_CONFIG")
    if not config_path:
        return AppConfig()

    path = Path(config_path)
    if not path.exists():
        return AppConfig()

    raw = _load_json(path)
    relay_raw = raw.get("relay", {})
    logging_raw = raw.get("logging", {})
    return AppConfig(
        relay=RelayConfig(
            host=str(relay_raw.get("host", "0.0.0.0")),
            port=int(relay_raw.get("port", 8082)),
        ),
        logging=LoggingConfig(
            level=str(logging_raw.get("level", "INFO")),
            file=logging_raw.get("file"),
        ),
    )


def load_config() -> AppConfig:
    config = _from_file()

    host = os.getenv("THREEJS_BRIDGE_HOST")
    port = os.getenv("THREEJS_BRIDGE_PORT")
    level = os.getenv("THREEJS_BRIDGE_LOG_LEVEL")
    if host:
        config = replace(config, relay=replace(config.relay, host=host))
    if port:
        config = replace(config, relay=replace(config.relay, port=int(port)))
    if level:
        config = replace(config, logging=replace(config.logging, level=level))
    return config
