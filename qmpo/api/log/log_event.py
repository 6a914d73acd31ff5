"""Write a logfile entry honoring the configured level and size cap."""

from ..config.QmpoConfig import QmpoConfig
from .append_log import append_log
from .LOG_PATTERN import LEVEL_ORDER


def log_event(config: QmpoConfig, domain: str, level: str, message: str) -> bool:
    """Append an entry to the qmpo logfile if its level passes the configured threshold.

    Returns:
        True if the entry was handed to the logfile
    """
    level = level.upper()
    if level not in LEVEL_ORDER:
        raise ValueError(f"Unknown log level: {level!r} (expected one of {list(LEVEL_ORDER)})")
    if LEVEL_ORDER[level] < LEVEL_ORDER[config.log.level]:
        return False
    append_log(QmpoConfig.get_logfile_path(), domain, level, message, max_size_bytes=config.log.max_size_bytes)
    return True
