import os
from dataclasses import dataclass
from typing import Mapping

import dotenv

from ._get_value import get_optional_value, get_value_from_dict, parse_bool


@dataclass(frozen=True)
class Env_config:
    TELEGRAM_ENABLED: bool
    TELEGRAM_BOT_TOKEN: str
    TELEGRAM_CHAT_ID: str
    TELEGRAM_MAX_MSG_PER_SEC: float

    LOG_LEVEL: str

def parse_env_config(env: Mapping[str, str]) -> Env_config:
    telegram_enabled = parse_bool(get_value_from_dict(env, "TELEGRAM_ENABLED"))

    # token and chat id are only mandatory when messages actually go out
    if telegram_enabled:
        bot_token = str(get_value_from_dict(env, "TELEGRAM_BOT_TOKEN"))
        chat_id = str(get_value_from_dict(env, "TELEGRAM_CHAT_ID"))
    else:
        bot_token = str(get_optional_value(env, "TELEGRAM_BOT_TOKEN", ""))
        chat_id = str(get_optional_value(env, "TELEGRAM_CHAT_ID", ""))

    return Env_config(
        TELEGRAM_ENABLED=telegram_enabled,
        TELEGRAM_BOT_TOKEN=bot_token,
        TELEGRAM_CHAT_ID=chat_id,
        TELEGRAM_MAX_MSG_PER_SEC=float(get_optional_value(env, "TELEGRAM_MAX_MSG_PER_SEC", 1.0)),
        LOG_LEVEL=str(get_optional_value(env, "LOG_LEVEL", "INFO")).upper(),
    )

def load_env_config(dotenv_path: str = ".env") -> Env_config:
    dotenv.load_dotenv(dotenv_path)
    return parse_env_config(os.environ)
