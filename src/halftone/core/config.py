"""
Simulation configuration.

Defaults reproduce the stock effect: 2 s impulses drifting at (3, 2) units
per tick on a 20-unit grid. A JSON file can override any of them:

    {
        "width": 800,
        "height": 600,
        "seed": 42,
        "mode": "rainbow",
        "impulse": {"lifetime": 2.0, "velocity": [3, 2], "dt": 0.016},
        "field": {"cell_size": 20, "ring_width": 200, "combine": "last"},
        "logging": {"level": "INFO", "format": "%(asctime)s - %(levelname)s - %(message)s"}
    }
"""

from __future__ import annotations
import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional

from halftone.core.field import FieldConfig
from halftone.core.impulse import ImpulseConfig, WaveMode, check_mode


DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Scalar keys accepted at the top level of a config file
TOP_LEVEL_KEYS = ("width", "height", "mode", "seed")


@dataclass
class LoggingConfig:
    """Settings passed to setup_logging()."""

    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    log_file: Optional[str] = None


@dataclass
class SimulationConfig:
    """
    Top-level configuration for a HalftoneSimulation.

    The "field" and "logging" sections of a config file land in grid and log.
    """

    width: int = 800
    height: int = 600
    mode: WaveMode = "default"
    seed: Optional[int] = None  # None = fresh entropy for rainbow palettes
    impulse: ImpulseConfig = field(default_factory=ImpulseConfig)
    grid: FieldConfig = field(default_factory=FieldConfig)
    log: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self):
        check_mode(self.mode)
        self.width = max(0, int(self.width))
        self.height = max(0, int(self.height))

    @classmethod
    def from_dict(cls, data: dict) -> "SimulationConfig":
        """
        Build a config from plain dicts, e.g. parsed JSON.

        Raises:
            ValueError: on unknown keys at any level
        """
        data = dict(data)
        impulse = data.pop("impulse", {})
        grid = data.pop("field", {})
        log = data.pop("logging", {})

        unknown = sorted(set(data) - set(TOP_LEVEL_KEYS))
        if unknown:
            raise ValueError(f"Unknown config key: {unknown[0]}")

        return cls(
            impulse=_build_section("impulse", ImpulseConfig, impulse),
            grid=_build_section("field", FieldConfig, grid),
            log=_build_section("logging", LoggingConfig, log),
            **data,
        )


def _build_section(name: str, config_cls, values: dict):
    """Instantiate one nested config, naming the offending key on failure."""
    known = {f.name for f in fields(config_cls)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ValueError(f"Unknown config key: {name}.{unknown[0]}")
    return config_cls(**values)


def load_config(path: str | Path) -> SimulationConfig:
    """Read a SimulationConfig from a JSON file."""
    with open(path, "r") as f:
        return SimulationConfig.from_dict(json.load(f))
