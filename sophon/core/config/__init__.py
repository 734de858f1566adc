"""
Exposes load_all_configs; callers load .env and config.yaml through it.
"""

from .load_all_configs import load_all_configs
from .load_config import Config, ScheduleConfig, SourcesConfig, ThresholdsConfig
from .load_env_config import Env_config

__all__ = [
    "load_all_configs",
    "Config",
    "Env_config",
    "ScheduleConfig",
    "SourcesConfig",
    "ThresholdsConfig",
]
