"""
Logging Configuration Module - Centralized logging setup with daily rotation.

Features:
- Daily log rotation at midnight UTC
- Configurable retention (30 days by default)
- Formatted output with timestamp, level, module, file, and line number
- Custom namer for rotated files (prefix_YYYY_MM_DD.log format)
- Mirrored to stderr so the service manager captures it too
"""
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(filename)s:%(lineno)d - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    log_file_prefix: str = "sophon",
    log_dir: str | Path = "data",
    backup_count: int = 30,
    log_level: int | str = logging.INFO,
    use_utc: bool = True,
    console: bool = True,
) -> logging.Logger:
    """
    Configure root logger with timed rotating file handler.

    Args:
        log_file_prefix: Prefix for log files (e.g., "sophon" -> "sophon.log")
        log_dir: Directory to store log files
        backup_count: Number of backup files to keep (days)
        log_level: Logging level, int or name (default: INFO)
        use_utc: Whether to use UTC for midnight rotation (default: True)
        console: Also log to stderr

    Returns:
        Logger instance for this module

    Log file naming:
        - Active log: {log_file_prefix}.log (e.g., sophon.log)
        - Rotated logs: {log_file_prefix}_YYYY_MM_DD.log (e.g., sophon_2025_12_28.log)
    """
    log_dir_path = Path(log_dir)
    log_dir_path.mkdir(parents=True, exist_ok=True)

    active_log = log_dir_path / f"{log_file_prefix}.log"

    handler = TimedRotatingFileHandler(
        filename=str(active_log),
        when="midnight",
        interval=1,
        backupCount=backup_count,
        utc=use_utc,
        encoding="utf-8",
    )

    handler.suffix = "%Y_%m_%d"

    def namer(default_name: str) -> str:
        """
        Convert default rotated name to custom format.

        Default: sophon.log.2025_12_28
        Custom:  sophon_2025_12_28.log
        """
        p = Path(default_name)
        date_part = p.name.split(".")[-1]
        return str(p.with_name(f"{log_file_prefix}_{date_part}.log"))

    handler.namer = namer

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    if console:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        root_logger.addHandler(stream_handler)

    return logging.getLogger(__name__)
