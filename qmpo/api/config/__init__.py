"""Config API module."""

from .LogConfig import LogConfig
from .OpenerConfig import OpenerConfig
from .QmpoConfig import QmpoConfig

__all__ = ["LogConfig", "OpenerConfig", "QmpoConfig"]
