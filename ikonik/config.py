"""Configuration loading for ikonik (.ikonik.yml) and generation options."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import IkonikError

CONFIG_FILENAME = ".ikonik.yml"
DEFAULT_SRC_DIR = "icons-src"
DEFAULT_OUT_DIR = "icons"
DEFAULT_SIZE = 24
DEFAULT_STROKE_WIDTH = 1.5
DEFAULT_NPX = "npx"
NPX_ENV_KEY = "IKONIK_NPX"


class ConfigError(IkonikError):
    """Raised when options or the configuration file are invalid."""


@dataclass(frozen=True)
class GenerationOptions:
    """Immutable settings for one generation run."""

    src_dir: Path
    out_dir: Path
    prefix: Optional[str] = None
    default_size: float = DEFAULT_SIZE
    default_stroke_width: float = DEFAULT_STROKE_WIDTH
    filled: bool = False
    format_output: bool = True
    keep_going: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "src_dir", Path(self.src_dir))
        object.__setattr__(self, "out_dir", Path(self.out_dir))
        _require_positive("default_size", self.default_size)
        _require_positive("default_stroke_width", self.default_stroke_width)

    @property
    def name_prefix(self) -> str:
        return self.prefix or ""


@dataclass
class ToolsConfig:
    """Locations of the Node tooling used by the adapters."""

    npx: Optional[str] = None


@dataclass
class IkonikConfig:
    """Represents the settings defined in .ikonik.yml."""

    root: Path
    src_dir: Optional[Path] = None
    out_dir: Optional[Path] = None
    prefix: Optional[str] = None
    size: Optional[float] = None
    stroke_width: Optional[float] = None
    filled: Optional[bool] = None
    format_output: Optional[bool] = None
    keep_going: Optional[bool] = None
    tools: ToolsConfig = field(default_factory=ToolsConfig)

    def npx_executable(self) -> str:
        return self.tools.npx or os.environ.get(NPX_ENV_KEY) or DEFAULT_NPX


def load_config(config_path: Path) -> IkonikConfig:
    """Load configuration from disk; a missing file yields defaults."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return IkonikConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    src = _as_str(data.get("src"))
    out = _as_str(data.get("out"))

    tools_data = _as_dict(data.get("tools"))
    tools = ToolsConfig(npx=_as_str(tools_data.get("npx"))) if tools_data else ToolsConfig()

    return IkonikConfig(
        root=root,
        src_dir=root / src if src else None,
        out_dir=root / out if out else None,
        prefix=_as_str(data.get("prefix")),
        size=_as_number(data.get("size"), "size"),
        stroke_width=_as_number(data.get("stroke_width"), "stroke_width"),
        filled=_as_bool(data.get("filled")),
        format_output=_as_bool(data.get("format")),
        keep_going=_as_bool(data.get("keep_going")),
        tools=tools,
    )


def resolve_options(
    config: IkonikConfig,
    *,
    src_dir: Path | None = None,
    out_dir: Path | None = None,
    prefix: str | None = None,
    size: float | None = None,
    stroke_width: float | None = None,
    filled: bool | None = None,
    format_output: bool | None = None,
    keep_going: bool | None = None,
) -> GenerationOptions:
    """Merge explicit overrides over file settings over built-in defaults."""
    return GenerationOptions(
        src_dir=_first(src_dir, config.src_dir, config.root / DEFAULT_SRC_DIR),
        out_dir=_first(out_dir, config.out_dir, config.root / DEFAULT_OUT_DIR),
        prefix=_first(prefix, config.prefix, None),
        default_size=_first(size, config.size, DEFAULT_SIZE),
        default_stroke_width=_first(stroke_width, config.stroke_width, DEFAULT_STROKE_WIDTH),
        filled=_first(filled, config.filled, False),
        format_output=_first(format_output, config.format_output, True),
        keep_going=_first(keep_going, config.keep_going, False),
    )


def _first(*values: Any) -> Any:
    for value in values:
        if value is not None:
            return value
    return None


def _require_positive(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise ConfigError(f"{name} must be a finite positive number, got {value!r}")


def _resolve_config_path(config_path: Path) -> Path:
    config_path = Path(config_path).expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_number(value: Any, key: str) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ConfigError(f"{key} must be a number, got {value!r}")
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError as exc:
            raise ConfigError(f"{key} must be a number, got {value!r}") from exc
    raise ConfigError(f"{key} must be a number, got {value!r}")


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "GenerationOptions",
    "IkonikConfig",
    "ToolsConfig",
    "load_config",
    "resolve_options",
]
