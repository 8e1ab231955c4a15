from __future__ import annotations
from dataclasses import dataclass, field, fields
from typing import Optional, Tuple
import logging
import yaml

DEFAULT_API_BASE_URL = "https://disease.sh/v3/covid-19"
# Arbitrary starting point over the Atlantic, no geographic meaning.
DEFAULT_WORLD_CENTER = (34.80746, -40.4796)
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

@dataclass
class DashboardConfig:
    api_base_url: str = DEFAULT_API_BASE_URL
    timeout: Optional[float] = 30.0
    history_days: int = 120
    world_center: Tuple[float, float] = field(default=DEFAULT_WORLD_CENTER)
    world_zoom: int = 3
    country_zoom: int = 4
    log_level: str = "INFO"
    max_workers: int = 4

    @classmethod
    def from_yaml(cls, path: str) -> "DashboardConfig":
        with open(path, "r") as f:
            raw = yaml.safe_load(f) or {}
        if not isinstance(raw, dict):
            raise ValueError(f"Config {path} must be a mapping, got {type(raw).__name__}.")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            raise ValueError(f"Unknown config keys in {path}: {', '.join(unknown)}")
        if "world_center" in raw:
            center = raw["world_center"]
            if not isinstance(center, (list, tuple)) or len(center) != 2:
                raise ValueError("world_center must be [lat, lng].")
            raw["world_center"] = (float(center[0]), float(center[1]))
        return cls(**raw)

    @classmethod
    def load(cls, path: Optional[str] = None) -> "DashboardConfig":
        return cls.from_yaml(path) if path else cls()

def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
