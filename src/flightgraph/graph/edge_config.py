from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping

import yaml

from .domain_types import UNWEIGHTED

logger = logging.getLogger(__name__)

_KNOWN_KEYS = {"unweighted_weight", "duplicate_flight_log_level"}


def _parse_level_name(token: object) -> str:
    """
    Normalize a logging level name.

    Args:
        token: Raw value from the configuration.
    Returns:
        Upper-case level name known to :mod:`logging`.
    """
    if not isinstance(token, str) or not token.strip():
        raise ValueError("duplicate_flight_log_level must be a non-empty level name")
    name = token.strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        raise ValueError(f"Unknown logging level name: {token!r}")
    return name


@dataclass(frozen=True)
class EdgeConfig:
    """Settings shared by edges built by one consumer."""

    unweighted_weight: int = UNWEIGHTED
    duplicate_flight_log_level: str = "DEBUG"

    def __post_init__(self) -> None:
        if isinstance(self.unweighted_weight, bool) or not isinstance(self.unweighted_weight, int):
            raise TypeError("unweighted_weight must be an integer")
        object.__setattr__(
            self, "duplicate_flight_log_level", _parse_level_name(self.duplicate_flight_log_level)
        )

    @property
    def log_level(self) -> int:
        return logging.getLevelName(self.duplicate_flight_log_level)

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "EdgeConfig":
        """Build a config from a plain mapping, ignoring unknown keys."""
        if not isinstance(data, Mapping):
            raise TypeError("Edge configuration must be a mapping")
        unknown = sorted(str(key) for key in data if key not in _KNOWN_KEYS)
        if unknown:
            logger.warning("Ignoring unknown edge configuration keys: %s", ", ".join(unknown))
        kwargs: Dict[str, object] = {}
        if data.get("unweighted_weight") is not None:
            kwargs["unweighted_weight"] = data["unweighted_weight"]
        if data.get("duplicate_flight_log_level") is not None:
            kwargs["duplicate_flight_log_level"] = data["duplicate_flight_log_level"]
        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "EdgeConfig":
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Edge config YAML not found at {config_path}")
        with config_path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
        if not isinstance(data, Mapping):
            raise TypeError("Edge config YAML must contain a mapping at the top level")
        config = cls.from_mapping(data)
        logger.info("Loaded edge configuration from %s", config_path)
        return config

    def to_yaml(self, path: str | Path) -> None:
        output = {
            "unweighted_weight": int(self.unweighted_weight),
            "duplicate_flight_log_level": self.duplicate_flight_log_level,
        }
        dest = Path(path)
        dest.parent.mkdir(parents=True, exist_ok=True)
        with dest.open("w", encoding="utf-8") as handle:
            yaml.safe_dump(output, handle, sort_keys=True)


DEFAULT_EDGE_CONFIG = EdgeConfig()

__all__ = ["DEFAULT_EDGE_CONFIG", "EdgeConfig"]
