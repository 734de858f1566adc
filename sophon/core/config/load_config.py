import os
from dataclasses import dataclass
from typing import Any, Dict

import yaml

from ._get_value import get_optional_value, get_value_from_dict


@dataclass(frozen=True)
class SourcesConfig:
    graph_url: str
    rpc_url: str
    contract_address: str
    request_timeout_sec: float

@dataclass(frozen=True)
class ScheduleConfig:
    event_interval_sec: float
    ledger_interval_sec: float
    delivery_interval_sec: float
    counts_interval_sec: float

@dataclass(frozen=True)
class ThresholdsConfig:
    transfer_id_step: int
    radius_step: int
    player_count_step: int
    artifact_tier_step: int
    value_unit_divisor: int

@dataclass(frozen=True)
class StateConfig:
    path: str

@dataclass(frozen=True)
class LoggingConfig:
    log_dir: str
    log_file_prefix: str
    backup_count: int

@dataclass(frozen=True)
class Config:
    sources: SourcesConfig
    schedule: ScheduleConfig
    thresholds: ThresholdsConfig
    state: StateConfig
    logging: LoggingConfig

def read_row_config(config_path: str) -> Dict[str, Any]:
    with open(config_path, "r", encoding="utf-8") as f:
        row_config = yaml.safe_load(f)
    return row_config or {}

def _positive_int(value: Any, key: str) -> int:
    number = int(value)
    if number <= 0:
        raise ValueError(f"'{key}' must be a positive integer, got {value!r}")
    return number

def _positive_float(value: Any, key: str) -> float:
    number = float(value)
    if number <= 0:
        raise ValueError(f"'{key}' must be a positive number, got {value!r}")
    return number

def parse_config(row_config: Dict[str, Any]) -> Config:
    sources = get_value_from_dict(row_config, "sources")
    schedule = get_value_from_dict(row_config, "schedule")
    thresholds = get_value_from_dict(row_config, "thresholds")
    state = get_value_from_dict(row_config, "state")
    # logging section is optional, defaults match setup_logging
    logging_cfg = row_config.get("logging") or {}

    sources_config = SourcesConfig(
        graph_url=str(get_value_from_dict(sources, "graph_url")),
        rpc_url=str(get_value_from_dict(sources, "rpc_url")),
        contract_address=str(get_value_from_dict(sources, "contract_address")),
        request_timeout_sec=float(get_optional_value(sources, "request_timeout_sec", 30.0)),
    )

    schedule_config = ScheduleConfig(
        event_interval_sec=_positive_float(get_value_from_dict(schedule, "event_interval_sec"), "event_interval_sec"),
        ledger_interval_sec=_positive_float(get_value_from_dict(schedule, "ledger_interval_sec"), "ledger_interval_sec"),
        delivery_interval_sec=_positive_float(get_value_from_dict(schedule, "delivery_interval_sec"), "delivery_interval_sec"),
        counts_interval_sec=_positive_float(get_value_from_dict(schedule, "counts_interval_sec"), "counts_interval_sec"),
    )

    thresholds_config = ThresholdsConfig(
        transfer_id_step=_positive_int(get_optional_value(thresholds, "transfer_id_step", 100_000), "transfer_id_step"),
        radius_step=_positive_int(get_optional_value(thresholds, "radius_step", 1_000), "radius_step"),
        player_count_step=_positive_int(get_optional_value(thresholds, "player_count_step", 10), "player_count_step"),
        artifact_tier_step=_positive_int(get_optional_value(thresholds, "artifact_tier_step", 1), "artifact_tier_step"),
        value_unit_divisor=_positive_int(get_optional_value(thresholds, "value_unit_divisor", 1_000), "value_unit_divisor"),
    )

    state_config = StateConfig(
        path=str(get_value_from_dict(state, "path")),
    )

    logging_config = LoggingConfig(
        log_dir=str(get_optional_value(logging_cfg, "log_dir", "data")),
        log_file_prefix=str(get_optional_value(logging_cfg, "log_file_prefix", "sophon")),
        backup_count=int(get_optional_value(logging_cfg, "backup_count", 30)),
    )

    return Config(
        sources=sources_config,
        schedule=schedule_config,
        thresholds=thresholds_config,
        state=state_config,
        logging=logging_config,
    )

def load_config(config_path: str | None = None) -> Config:
    config_path = config_path or os.getenv("CONFIG_PATH", "config.yaml")
    row_config = read_row_config(config_path)
    return parse_config(row_config)
