import pytest

from sophon.core.config._get_value import Miss_key_exception
from sophon.core.config.load_env_config import Env_config, parse_env_config


def test_parse_env_config_enabled():
    env = {
        "TELEGRAM_ENABLED": "True",
        "TELEGRAM_BOT_TOKEN": "123:abc",
        "TELEGRAM_CHAT_ID": "-10042",
        "TELEGRAM_MAX_MSG_PER_SEC": "0.5",
        "LOG_LEVEL": "warning",
    }

    cfg = parse_env_config(env)

    assert isinstance(cfg, Env_config)
    assert cfg.TELEGRAM_ENABLED is True
    assert cfg.TELEGRAM_BOT_TOKEN == "123:abc"
    assert cfg.TELEGRAM_CHAT_ID == "-10042"
    assert cfg.TELEGRAM_MAX_MSG_PER_SEC == 0.5
    assert cfg.LOG_LEVEL == "WARNING"


def test_parse_env_config_disabled_needs_no_credentials():
    cfg = parse_env_config({"TELEGRAM_ENABLED": "false"})

    assert cfg.TELEGRAM_ENABLED is False
    assert cfg.TELEGRAM_BOT_TOKEN == ""
    assert cfg.TELEGRAM_MAX_MSG_PER_SEC == 1.0
    assert cfg.LOG_LEVEL == "INFO"


def test_parse_env_config_enabled_requires_token():
    with pytest.raises(Miss_key_exception):
        parse_env_config({"TELEGRAM_ENABLED": "yes", "TELEGRAM_CHAT_ID": "1"})


def test_parse_env_config_requires_enabled_flag():
    with pytest.raises(Miss_key_exception):
        parse_env_config({})
