# config_manager.py - JSON-backed chain configuration

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping, Optional

from atom_chain.core.errors import InvalidConfiguration

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChainConfig:
    """
    Knobs for building a Chain.
    order: how many preceding atoms condition the next one (>= 1)
    seed: when set, sampling uses a seeded numpy generator for reproducible runs
    """
    order: int = 1
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if isinstance(self.order, bool) or not isinstance(self.order, int) or self.order < 1:
            raise InvalidConfiguration(f"order must be a positive integer, got {self.order!r}")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int) or self.seed < 0):
            raise InvalidConfiguration(f"seed must be a non-negative integer or null, got {self.seed!r}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ChainConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(map(str, set(data) - known))
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(path: str = "chain_config.json") -> ChainConfig:
    """
    Read a ChainConfig from a JSON file. Missing file -> defaults.
    Unreadable JSON or bad values raise InvalidConfiguration.
    """
    if not os.path.exists(path):
        logger.debug("No config at %s, using defaults", path)
        return ChainConfig()
    try:
        with open(path, "r", encoding="utf8") as f:
            data = json.load(f)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise InvalidConfiguration(f"{path}: invalid JSON ({e})") from e
    if not isinstance(data, dict):
        raise InvalidConfiguration(f"{path}: expected a JSON object, got {type(data).__name__}")
    cfg = ChainConfig.from_dict(data)
    logger.debug("Loaded config from %s: %s", path, cfg)
    return cfg


def save_config(cfg: ChainConfig, path: str = "chain_config.json") -> None:
    with open(path, "w", encoding="utf8") as f:
        json.dump(cfg.to_dict(), f, indent=2)
