from .cache_config import CacheConfig
from .core_config import CoreConfig, get_config, set_config
from .log_config import LogConfig

__all__ = ["CacheConfig", "CoreConfig", "LogConfig", "get_config", "set_config"]
