import os
from pathlib import Path
from typing import Tuple

from ._get_value import Miss_config_file_exception
from .load_config import Config, load_config
from .load_env_config import Env_config, load_env_config

def check_file_exist(dotenv_path: str = ".env", config_path: str = "config.yaml") -> None:
    """
    Check that the config files are present.

    Args:
        dotenv_path: path of the .env file
        config_path: path of config.yaml, overridden by CONFIG_PATH

    Raises:
        Miss_config_file_exception: a file is missing
    """
    # .env may be skipped when the variables come from the process environment
    if not Path(dotenv_path).exists() and not os.getenv("check_env_exist"):
        raise Miss_config_file_exception(dotenv_path)
    resolved_config_path = os.getenv("CONFIG_PATH", config_path)
    if not Path(resolved_config_path).exists():
        raise Miss_config_file_exception(resolved_config_path)

def load_all_configs(
        dotenv_path: str = ".env",
        config_path: str = "config.yaml",
    ) -> Tuple[Env_config, Config]:
    """
    Load the env and yaml config objects.

    Returns:
        env_config: environment config object
        config: yaml config object
    """
    check_file_exist(dotenv_path, config_path)

    env_config: Env_config = load_env_config(dotenv_path)
    config: Config = load_config(os.getenv("CONFIG_PATH", config_path))

    return env_config, config
