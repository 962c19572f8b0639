"""Command trigger configuration, read from takopi.toml."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from takopi.api import ConfigError, get_logger

logger = get_logger(__name__)

TRIGGER_ENV_VARS = ("matrix_command_trigger", "MATRIX_COMMAND_TRIGGER")


@dataclass(frozen=True, slots=True)
class CommandConfig:
    # None means the first word of a message is the command name.
    trigger: str | None = None


def _expand_path(s: str) -> Path:
    return Path(os.path.expandvars(os.path.expanduser(s)))


def _load_takopi_toml(path: Path) -> dict[str, Any]:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Missing config at: {path}") from exc
    try:
        return tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc


def _cfg_get(d: dict[str, Any], *keys: str) -> Any:
    cur: Any = d
    for key in keys:
        if not isinstance(cur, dict) or key not in cur:
            raise ConfigError("Missing config key: " + ".".join(keys))
        cur = cur[key]
    return cur


def _env_trigger() -> str | None:
    for name in TRIGGER_ENV_VARS:
        value = os.environ.get(name)
        if value is not None and value.strip():
            return value.strip()
    return None


def load_command_config(config_path: str | Path) -> CommandConfig:
    """Load the command trigger from `[transports.matrix]`.

    `MATRIX_COMMAND_TRIGGER` in the environment takes precedence over
    `command_trigger` in the file. A blank trigger disables the prefix check.
    """
    path = _expand_path(str(config_path))
    cfg = _load_takopi_toml(path)
    matrix_config = _cfg_get(cfg, "transports", "matrix")
    if not isinstance(matrix_config, dict):
        raise ConfigError("transports.matrix must be a table/dict")

    raw_trigger = matrix_config.get("command_trigger")
    if raw_trigger is not None and not isinstance(raw_trigger, str):
        raise ConfigError("transports.matrix.command_trigger must be a string")
    cfg_trigger = (raw_trigger or "").strip() or None

    env_trigger = _env_trigger()
    trigger = env_trigger or cfg_trigger
    logger.info(
        "matrix.commands.config_loaded",
        path=str(path),
        trigger=trigger,
        trigger_source="env" if env_trigger else "config",
    )
    return CommandConfig(trigger=trigger)
