# pshp/config.py
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from pshp.model.schema import DEFAULT_PROMPT, SHELL_NAME

log = logging.getLogger(__name__)


def _project_root() -> Path:
    # .../pshp/config.py -> project root = parents[1]
    return Path(__file__).resolve().parents[1]


DEFAULT_CONFIG_PATH = _project_root() / "config/shell.json"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ShellConfig:
    prompt: str = DEFAULT_PROMPT
    name: str = SHELL_NAME
    exit_on_eof: bool = True
    log_level: str = "WARNING"
    log_limit: int = 200   # commands kept in Core.log


def _read_json(path: Path) -> dict:
    if not path.exists():
        return {}
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        log.warning("ignoring unreadable config %s: %s", path, e)
        return {}
    if not isinstance(raw, dict):
        log.warning("ignoring config %s: top level is not an object", path)
        return {}
    return raw


def load_config(path: Optional[str | Path] = None) -> ShellConfig:
    """Read config/shell.json (or path). Bad values fall back to defaults."""
    p = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    raw = _read_json(p)
    base = ShellConfig()

    prompt = raw.get("prompt", base.prompt)
    if not isinstance(prompt, str):
        prompt = base.prompt

    name = raw.get("name", base.name)
    if not isinstance(name, str) or not name.strip():
        name = base.name

    exit_on_eof = raw.get("exit_on_eof", base.exit_on_eof)
    if not isinstance(exit_on_eof, bool):
        exit_on_eof = base.exit_on_eof

    log_level = str(raw.get("log_level", base.log_level)).strip().upper()
    if log_level not in _LOG_LEVELS:
        log_level = base.log_level

    log_limit = raw.get("log_limit", base.log_limit)
    if isinstance(log_limit, bool) or not isinstance(log_limit, int) or log_limit < 1:
        log_limit = base.log_limit

    return ShellConfig(
        prompt=prompt,
        name=name.strip(),
        exit_on_eof=exit_on_eof,
        log_level=log_level,
        log_limit=log_limit,
    )
