"""Writer settings and strict JSON loading of settings files."""

from __future__ import annotations

from dataclasses import dataclass, fields
import hashlib
import json
import logging
from pathlib import Path
from typing import Any, Union

from jsongen.scalars import DEFAULT_FLOAT_PRECISION, MAX_FLOAT_PRECISION

logger = logging.getLogger(__name__)

CONFIG_VERSION = "1"


class ConfigError(ValueError):
    """Raised when writer settings are invalid."""


@dataclass(frozen=True)
class JsonConfig:
    """Settings shared by every context built from them."""

    float_precision: int = DEFAULT_FLOAT_PRECISION
    max_nesting: int | None = None

    def __post_init__(self) -> None:
        p = self.float_precision
        if isinstance(p, bool) or not isinstance(p, int):
            raise ConfigError(f"float_precision must be an integer, got {p!r}")
        if not 0 <= p <= MAX_FLOAT_PRECISION:
            raise ConfigError(
                f"float_precision must be in [0, {MAX_FLOAT_PRECISION}], got {p}"
            )
        n = self.max_nesting
        if n is None:
            return
        if isinstance(n, bool) or not isinstance(n, int) or n < 1:
            raise ConfigError(f"max_nesting must be a positive integer or null, got {n!r}")


DEFAULT_CONFIG = JsonConfig()

ConfigSource = Union[JsonConfig, str, Path, None]


def _settings_object(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    seen: set[str] = set()
    for name, _ in pairs:
        if name in seen:
            raise ConfigError(f"setting given twice: {name}")
        seen.add(name)
    return dict(pairs)


def load_config(path: str | Path) -> tuple[JsonConfig, str]:
    """Read a settings file; return the config and the sha256 hex of its bytes."""
    raw = Path(path).read_bytes()
    try:
        data = json.loads(raw.decode("utf-8"), object_pairs_hook=_settings_object)
    except UnicodeDecodeError as exc:
        raise ConfigError(f"{path}: settings file is not UTF-8") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{path}: malformed JSON ({exc.msg})") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{path}: settings must be a JSON object")
    version = data.pop("config_version", None)
    if version != CONFIG_VERSION:
        raise ConfigError(
            f"{path}: config_version {version!r} is not supported, expected {CONFIG_VERSION!r}"
        )
    unknown = sorted(set(data) - {f.name for f in fields(JsonConfig)})
    if unknown:
        raise ConfigError(f"{path}: unknown settings {unknown}")

    digest = hashlib.sha256(raw).hexdigest()
    logger.debug("loaded writer settings from %s (sha256 %s)", path, digest)
    return JsonConfig(**data), digest


def resolve_config(source: ConfigSource, default: JsonConfig = DEFAULT_CONFIG) -> JsonConfig:
    """Turn a config, a settings file path, or None into a JsonConfig."""
    if source is None:
        return default
    if isinstance(source, JsonConfig):
        return source
    if isinstance(source, (str, Path)):
        return load_config(source)[0]
    raise TypeError(f"expected JsonConfig or settings path, got {type(source)!r}")
