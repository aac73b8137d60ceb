"""Runtime configuration for the sampler and the chart grid."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

import yaml

logger = logging.getLogger(__name__)

CONFIG_SECTION = "wavescope"


@dataclass(slots=True)
class WaveScopeConfig:
    """
    Tuning knobs for sampling cadence, history size, and chart layout.

    The defaults sample every 10 ms from a 120 Hz UI timer and keep the last
    100 observations per series.
    """

    sample_interval_ms: float = 10.0
    tick_hz: float = 120.0
    history_capacity: int = 100

    window_size: int = 100
    value_min: float = -100.0
    value_max: float = 100.0

    # Synthetic sine source
    channels: int = 1
    amplitude: float = 100.0
    period_samples: int = 100

    items_per_row: int = 3
    chart_height: float = 300.0

    @property
    def sample_interval_s(self) -> float:
        return self.sample_interval_ms / 1000.0

    @property
    def tick_interval_ms(self) -> int:
        return max(1, int(round(1000.0 / self.tick_hz)))

    def sanitized(self) -> WaveScopeConfig:
        """
        Return a copy with every field coerced to its type and clamped to a usable floor.

        Raises ``ValueError`` naming the field when a value is not a number.
        """
        cleaned: Dict[str, Any] = {}
        for name, (cast, floor) in _FIELD_RULES.items():
            value = _as_number(name, getattr(self, name), cast)
            cleaned[name] = value if floor is None else max(floor, value)
        if cleaned["value_max"] < cleaned["value_min"]:
            cleaned["value_min"], cleaned["value_max"] = cleaned["value_max"], cleaned["value_min"]
        return replace(self, **cleaned)


# field -> (type, lower bound or None)
_FIELD_RULES: Dict[str, Tuple[Callable[[Any], Any], Optional[float]]] = {
    "sample_interval_ms": (float, 0.0),
    "tick_hz": (float, 1.0),
    "history_capacity": (int, 1),
    "window_size": (int, 1),
    "value_min": (float, None),
    "value_max": (float, None),
    "channels": (int, 1),
    "amplitude": (float, None),
    "period_samples": (int, 1),
    "items_per_row": (int, 1),
    "chart_height": (float, 50.0),
}


def _as_number(name: str, value: Any, cast: Callable[[Any], Any]) -> Any:
    if value is None or isinstance(value, (bool, str, bytes)):
        raise ValueError(f"{name} must be a number, got {value!r}")
    try:
        return cast(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be a number, got {value!r}") from exc


def config_from_mapping(data: Mapping[str, Any] | None) -> WaveScopeConfig:
    """
    Build a sanitized :class:`WaveScopeConfig` from a flat mapping or one
    nested under a ``wavescope:`` key. Unknown keys are logged and ignored.
    """
    if not data:
        return WaveScopeConfig()
    section = data.get(CONFIG_SECTION, data)
    if not isinstance(section, Mapping):
        raise ValueError(f"'{CONFIG_SECTION}' must be a mapping, got {type(section).__name__}")

    known = {f.name for f in fields(WaveScopeConfig)}
    ignored = sorted(str(key) for key in section if key not in known and key != CONFIG_SECTION)
    if ignored:
        logger.debug("Ignoring unknown config keys: %s", ", ".join(ignored))
    values = {key: value for key, value in section.items() if key in known}
    return WaveScopeConfig(**values).sanitized()


def load_config(path: str | Path | None) -> WaveScopeConfig:
    """Read a YAML config file; ``None`` or a missing file gives the defaults."""
    if path is None:
        return WaveScopeConfig()
    cfg_path = Path(path)
    if not cfg_path.exists():
        logger.info("Config file %s not found, using defaults", cfg_path)
        return WaveScopeConfig()
    try:
        raw = yaml.safe_load(cfg_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"Could not parse {cfg_path}: {exc}") from exc
    if raw is not None and not isinstance(raw, Mapping):
        raise ValueError(f"Expected mapping in {cfg_path}, got {type(raw).__name__}")
    return config_from_mapping(raw)


__all__ = ["WaveScopeConfig", "config_from_mapping", "load_config"]
