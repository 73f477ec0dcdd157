"""zk4lw configuration system."""

from zk4lw.config.loader import find_config_file, load_config
from zk4lw.config.models import Defaults, ServerEntry, Zk4lwConfig

__all__ = [
    "Defaults",
    "ServerEntry",
    "Zk4lwConfig",
    "load_config",
    "find_config_file",
]
