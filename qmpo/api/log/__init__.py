"""Log module - single logfile under the qmpo home directory."""

from .append_log import append_log
from .log_event import log_event

__all__ = ["append_log", "log_event"]
