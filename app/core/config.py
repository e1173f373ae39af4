"""Service settings, read once from the environment at import time.

Every variable is validated eagerly so a bad deploy fails at startup
with a message naming the variable, not on the first request.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal

AppEnv = Literal["dev", "test", "prod"]
LogLevel = Literal["debug", "info", "warning", "error"]

_APP_ENVS = ("dev", "test", "prod")
_LOG_LEVELS = ("debug", "info", "warning", "error")
_BOOLS = {
    "1": True, "true": True, "yes": True, "on": True,
    "": False, "0": False, "false": False, "no": False, "off": False,
}  # fmt: skip


def _env(name: str, default: str = "") -> str:
    return os.environ.get(name, default).strip()


def _choice(name: str, default: str, allowed: tuple[str, ...]) -> str:
    value = _env(name, default).lower()
    if value not in allowed:
        raise ValueError(f"{name} must be {'|'.join(allowed)} (got {value!r})")
    return value


def _flag(name: str) -> bool:
    value = _env(name).lower()
    if value not in _BOOLS:
        raise ValueError(f"{name} must be a boolean (got {value!r})")
    return _BOOLS[value]


def _port(name: str, default: int) -> int:
    raw = _env(name, str(default))
    try:
        port = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer (got {raw!r})") from None
    if not 0 < port < 65536:
        raise ValueError(f"{name} must be between 1 and 65535 (got {port})")
    return port


@dataclass(frozen=True)
class Settings:
    app_env: AppEnv
    log_level: LogLevel
    log_json: bool
    port: int
    # None selects the in-memory user store
    database_url: str | None

    @property
    def is_dev(self) -> bool:
        return self.app_env == "dev"

    @property
    def is_test(self) -> bool:
        return self.app_env == "test"

    @property
    def is_prod(self) -> bool:
        return self.app_env == "prod"


def load_settings() -> Settings:
    return Settings(
        app_env=_choice("APP_ENV", "dev", _APP_ENVS),  # type: ignore[arg-type]
        log_level=_choice("LOG_LEVEL", "info", _LOG_LEVELS),  # type: ignore[arg-type]
        log_json=_flag("LOG_JSON"),
        port=_port("PORT", 8000),
        database_url=_env("DATABASE_URL") or None,
    )


SETTINGS = load_settings()
