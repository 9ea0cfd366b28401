"""Centralized configuration ownership for alert presentation."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping


@dataclass(frozen=True, slots=True)
class AlertKitConfig:
    default_animated: bool = True
    trace_enabled: bool = False
    transition_seconds: float = 0.3
    log_level: str = "INFO"
    log_format: str = "text"
    log_file: str | None = None


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _float(
    name: str,
    default: float,
    *,
    minimum: float | None = None,
    env: Mapping[str, str] | None = None,
) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        value = float(default)
    else:
        try:
            value = float(raw.strip())
        except ValueError:
            value = float(default)
    if minimum is None:
        return value
    return max(float(minimum), value)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with alertkit-prefixed override."""
    value = _raw("ALERTKIT_LOG_LEVEL", env=env)
    if value is None:
        value = _text("LOG_LEVEL", default, env=env)
    return value.strip().upper()


def _normalize_log_format(raw: str) -> str:
    value = raw.strip().lower()
    if value not in {"text", "json"}:
        return "text"
    return value


def load_config(*, env: Mapping[str, str] | None = None) -> AlertKitConfig:
    return AlertKitConfig(
        default_animated=_flag("ALERTKIT_DEFAULT_ANIMATED", True, env=env),
        trace_enabled=_flag("ALERTKIT_TRACE", False, env=env),
        transition_seconds=_float("ALERTKIT_TRANSITION_SECONDS", 0.3, minimum=0.0, env=env),
        log_level=resolve_log_level_name(env=env),
        log_format=_normalize_log_format(_text("ALERTKIT_LOG_FORMAT", "text", env=env)),
        log_file=_text("ALERTKIT_LOG_FILE", "", env=env) or None,
    )


def load_env_file(path: str = ".env.alertkit", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = _resolve_env_path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def _resolve_env_path(path: str) -> Path:
    """Resolve env path from cwd, then the frozen executable directory."""
    candidate = Path(path)
    if candidate.exists() or candidate.is_absolute():
        return candidate

    if getattr(sys, "frozen", False):
        executable = getattr(sys, "executable", "")
        if executable:
            frozen_dir_candidate = Path(executable).resolve().parent / path
            if frozen_dir_candidate.exists():
                return frozen_dir_candidate
    return candidate
