from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path
import re
import tomllib
from typing import cast
import warnings

from .constants import Defaults, EnvVars

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_level(raw: str | None) -> int:
    """Parse a level string the way C ``atoi`` does.

    Leading whitespace and an optional sign are accepted, parsing stops at the
    first non-digit, and anything without leading digits yields 0.
    """
    if raw is None:
        return Defaults.DIAGNOSTIC_LEVEL
    match = _LEADING_INT.match(raw)
    if match is None:
        return Defaults.DIAGNOSTIC_LEVEL
    return int(match.group(1))


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    session_name: str | None = None
    daemon: bool = False
    verbosity: int = Defaults.VERBOSITY
    diagnostic_level: int = Defaults.DIAGNOSTIC_LEVEL
    diagnostic_file: Path | None = None

    def __post_init__(self) -> None:
        if self.verbosity < 0:
            raise ValueError(f"verbosity must be non-negative, got {self.verbosity}")
        if self.session_name is not None and not self.session_name.strip():
            raise ValueError("session_name must not be blank")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> LoggingConfig:
        env = os.environ if environ is None else environ
        raw_file = env.get(EnvVars.DIAGNOSTIC_FILE)
        return cls(
            diagnostic_level=parse_level(env.get(EnvVars.DIAGNOSTIC_LEVEL)),
            diagnostic_file=Path(raw_file) if raw_file else None,
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(
        config_file: Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> LoggingConfig:
        config = LoggingConfig.from_env(environ)
        if config_file is None:
            config_file = Path(Defaults.CONFIG_FILE)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except Exception as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(
        config_file: Path, base_config: LoggingConfig
    ) -> LoggingConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        session = _get_table(data, "session")
        diagnostic = _get_table(data, "diagnostic")
        session_name = base_config.session_name
        if (value := session.get("name")) is not None:
            session_name = str(value).strip() or None
        daemon = base_config.daemon
        if (value := session.get("daemon")) is not None:
            daemon = _coerce_bool(value, key="session.daemon")
        verbosity = base_config.verbosity
        if (value := session.get("verbosity")) is not None:
            verbosity = _coerce_int(value, key="session.verbosity")
        diagnostic_level = base_config.diagnostic_level
        if (value := diagnostic.get("level")) is not None:
            diagnostic_level = _coerce_int(value, key="diagnostic.level")
        diagnostic_file = base_config.diagnostic_file
        if "file" in diagnostic:
            raw = diagnostic.get("file")
            cleaned = str(raw).strip() if raw is not None else ""
            diagnostic_file = Path(cleaned) if cleaned else None
        return LoggingConfig(
            session_name=session_name,
            daemon=daemon,
            verbosity=verbosity,
            diagnostic_level=diagnostic_level,
            diagnostic_file=diagnostic_file,
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_bool(value: object, *, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("1", "true", "yes", "on"):
            return True
        if lowered in ("0", "false", "no", "off", ""):
            return False
    raise ValueError(f"{key} must be a boolean, got {value!r}")


def _coerce_int(value: object, *, key: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an int, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        return int(value)
    raise ValueError(f"{key} must be int-like or string, got {type(value).__name__}")
