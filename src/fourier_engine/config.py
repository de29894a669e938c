"""
Engine configuration loaded from YAML.

Example (configs/default.yaml):

    engine:
      length: 1024
      provider: radix2
      log_level: INFO
      log_file: null
"""

import logging
from dataclasses import dataclass, fields, asdict
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from .dsp_core.fft import DEFAULT_PROVIDER, available_providers
from .engine import FourierEngine
from .utils.logging import setup_logging


@dataclass
class EngineConfig:
    """Settings needed to build a FourierEngine."""

    length: int
    provider: str = DEFAULT_PROVIDER
    log_level: str = 'INFO'
    log_file: Optional[str] = None

    def __post_init__(self):
        if isinstance(self.length, bool) or not isinstance(self.length, int) or self.length < 1:
            raise ValueError(f"length must be a positive integer, got {self.length!r}")
        if self.provider not in available_providers():
            raise ValueError(
                f"provider must be one of {available_providers()}, got {self.provider!r}"
            )
        if not isinstance(logging.getLevelName(str(self.log_level).upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> 'EngineConfig':
        if not isinstance(config, Mapping):
            raise ValueError(f"config must be a mapping, got {type(config).__name__}")
        known = {f.name for f in fields(cls)}
        unknown = set(config) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        if 'length' not in config:
            raise ValueError("config is missing required key 'length'")
        return cls(**config)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(config_path: Union[str, Path]) -> EngineConfig:
    """Load configuration from YAML file (uses the 'engine' section if present)."""
    with open(config_path, 'r') as f:
        raw = yaml.safe_load(f) or {}

    if isinstance(raw, dict) and 'engine' in raw:
        raw = raw['engine']
    return EngineConfig.from_dict(raw)


def create_engine(config: Union[EngineConfig, Mapping[str, Any], str, Path]) -> FourierEngine:
    """
    Build a FourierEngine from a config object, a dict or a YAML path.

    Logging is configured from the config before the engine is built.
    """
    if isinstance(config, (str, Path)):
        config = load_config(config)
    elif not isinstance(config, EngineConfig):
        config = EngineConfig.from_dict(config)

    setup_logging(log_file=config.log_file, level=config.log_level)
    return FourierEngine(config.length, provider=config.provider)
