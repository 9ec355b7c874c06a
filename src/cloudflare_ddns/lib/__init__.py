"""
Core library for Cloudflare DDNS
"""

from .config import Config, ConfigError
from .scheduler import IntervalScheduler
from .updater import CheckResult, DynamicDNSUpdater

# Import utils module, not individual functions
import cloudflare_ddns.lib.utils as utils

__all__ = [
    "Config",
    "ConfigError",
    "IntervalScheduler",
    "CheckResult",
    "DynamicDNSUpdater",
    "utils"
]
