import os
from typing import Any, Mapping


class Miss_env_exception(Exception):
    """
    Raised when a required environment variable is missing.
    """
    def __init__(self, key: str, *args: object) -> None:
        self.key = key
        self.message = f"Environment variable '{key}' is missing."
        super().__init__(self.message, *args)

class Miss_key_exception(Exception):
    """
    Raised when a required config key is missing.
    """
    def __init__(self, key: str):
        self.key = key
        self.message = f"Key '{key}' is missing."
        super().__init__(self.message)

class Miss_config_file_exception(Exception):
    """
    Raised when a config file (.env / config.yaml) cannot be found.
    """
    def __init__(self, path: str):
        self.path = path
        self.message = f"Config file '{path}' not exists."
        super().__init__(self.message)

def get_value_from_env(key: str) -> str | bool:
    """
    Read an environment variable, mapping "true"/"false" to booleans.

    Args:
        key: name of the environment variable

    Returns:
        bool if the value is "true"/"false" (case-insensitive), otherwise the raw string

    Raises:
        Miss_env_exception: the variable is not set
    """
    value = os.getenv(key)
    if value is None:
        raise Miss_env_exception(key)

    value_lower = value.strip().lower()
    if value_lower == "true":
        return True
    elif value_lower == "false":
        return False
    else:
        return value

def get_value_from_dict(config: Mapping[str, Any], key: str) -> Any:
    """
    Read a key from a mapping.

    Raises:
        Miss_key_exception: the key is absent
    """
    if key not in config:
        raise Miss_key_exception(key)
    return config[key]

def get_optional_value(config: Mapping[str, Any], key: str, default: Any) -> Any:
    value = config.get(key)
    if value is None or value == "":
        return default
    return value

def parse_bool(
        value: str | bool,
        true_bools: tuple[str, ...] = ("true", "1", "yes", "y", "on"),
        false_bools: tuple[str, ...] = ("false", "0", "no", "n", "off")
    ) -> bool:
    """
    Parse a boolean out of a string.

    Args:
        value: string to parse
        true_bools: strings treated as True
        false_bools: strings treated as False

    Returns:
        True | False

    Raises:
        ValueError: the string is neither a true nor a false value
    """
    if isinstance(value, bool):
        return value

    value = value.strip().lower()

    if value in true_bools:
        return True
    elif value in false_bools:
        return False

    raise ValueError(f"Invalid boolean value: {value}")
