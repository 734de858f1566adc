from typing import Dict

import pytest
import yaml

from sophon.core.config import load_all_configs
from sophon.core.config._get_value import Miss_config_file_exception, Miss_key_exception
from sophon.core.config.load_config import Config, load_config, parse_config


def make_row_config() -> Dict:
    return {
        "sources": {
            "graph_url": "https://graph.example/subgraph",
            "rpc_url": "https://rpc.example",
            "contract_address": "0x678ACb78948Be7F354B28DaAb79B1ABD81574c1B",
            "request_timeout_sec": 5,
        },
        "schedule": {
            "event_interval_sec": 60,
            "ledger_interval_sec": 600,
            "delivery_interval_sec": 30,
            "counts_interval_sec": 86400,
        },
        "thresholds": {
            "transfer_id_step": 100000,
            "radius_step": 1000,
            "player_count_step": 10,
            "artifact_tier_step": 2,
            "value_unit_divisor": 1000,
        },
        "state": {"path": "data/state.json"},
        "logging": {"log_dir": "logs", "log_file_prefix": "sophon_test", "backup_count": 7},
    }


# ---------- parse_config ----------

def test_parse_config_success():
    cfg = parse_config(make_row_config())

    assert isinstance(cfg, Config)
    assert cfg.sources.graph_url == "https://graph.example/subgraph"
    assert cfg.sources.request_timeout_sec == 5.0
    assert cfg.schedule.delivery_interval_sec == 30.0
    assert cfg.thresholds.artifact_tier_step == 2
    assert cfg.state.path == "data/state.json"
    assert cfg.logging.log_file_prefix == "sophon_test"
    assert cfg.logging.backup_count == 7


def test_parse_config_threshold_defaults():
    row_config = make_row_config()
    row_config["thresholds"] = {}
    del row_config["logging"]

    cfg = parse_config(row_config)

    assert cfg.thresholds.transfer_id_step == 100000
    assert cfg.thresholds.radius_step == 1000
    assert cfg.thresholds.player_count_step == 10
    assert cfg.thresholds.artifact_tier_step == 1
    assert cfg.thresholds.value_unit_divisor == 1000
    assert cfg.logging.log_dir == "data"
    assert cfg.logging.log_file_prefix == "sophon"


@pytest.mark.parametrize("section", ["sources", "schedule", "thresholds", "state"])
def test_parse_config_missing_section(section):
    row_config = make_row_config()
    del row_config[section]

    with pytest.raises(Miss_key_exception):
        parse_config(row_config)


def test_parse_config_missing_interval():
    row_config = make_row_config()
    del row_config["schedule"]["event_interval_sec"]

    with pytest.raises(Miss_key_exception):
        parse_config(row_config)


@pytest.mark.parametrize("step", [0, -10])
def test_parse_config_rejects_non_positive_step(step):
    row_config = make_row_config()
    row_config["thresholds"]["radius_step"] = step

    with pytest.raises(ValueError):
        parse_config(row_config)


@pytest.mark.parametrize("interval", [0, -30])
def test_parse_config_rejects_non_positive_interval(interval):
    row_config = make_row_config()
    row_config["schedule"]["delivery_interval_sec"] = interval

    with pytest.raises(ValueError, match="delivery_interval_sec"):
        parse_config(row_config)


# ---------- load_config / load_all_configs ----------

def test_load_config_from_file(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.safe_dump(make_row_config()), encoding="utf-8")

    cfg = load_config(str(config_path))

    assert cfg.sources.rpc_url == "https://rpc.example"


def test_load_all_configs(tmp_path, monkeypatch):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.safe_dump(make_row_config()), encoding="utf-8")
    dotenv_path = tmp_path / ".env"
    dotenv_path.write_text("TELEGRAM_ENABLED=false\nLOG_LEVEL=debug\n", encoding="utf-8")
    monkeypatch.delenv("CONFIG_PATH", raising=False)
    # set then delete so monkeypatch removes what load_dotenv writes
    for key in ("TELEGRAM_ENABLED", "LOG_LEVEL"):
        monkeypatch.setenv(key, "placeholder")
        monkeypatch.delenv(key)

    env, cfg = load_all_configs(dotenv_path=str(dotenv_path), config_path=str(config_path))

    assert env.TELEGRAM_ENABLED is False
    assert env.LOG_LEVEL == "DEBUG"
    assert cfg.schedule.counts_interval_sec == 86400.0


def test_load_all_configs_missing_yaml(tmp_path, monkeypatch):
    dotenv_path = tmp_path / ".env"
    dotenv_path.write_text("TELEGRAM_ENABLED=false\n", encoding="utf-8")
    monkeypatch.delenv("CONFIG_PATH", raising=False)

    with pytest.raises(Miss_config_file_exception):
        load_all_configs(dotenv_path=str(dotenv_path), config_path=str(tmp_path / "missing.yaml"))
