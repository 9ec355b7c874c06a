"""
Configuration management for Cloudflare DDNS
"""
import os
import re
from dataclasses import dataclass
from typing import Mapping, Optional

# Environment variables (all required)
ENV_API_TOKEN = "CLOUDFLARE_API_TOKEN"
ENV_ZONE_ID = "CLOUDFLARE_ZONE_ID"
ENV_RECORD_NAME = "CLOUDFLARE_RECORD_NAME"
ENV_CHECK_INTERVAL = "CHECK_PUBLIC_IP_INTERVAL"

REQUIRED_VARIABLES = [ENV_API_TOKEN, ENV_ZONE_ID, ENV_RECORD_NAME, ENV_CHECK_INTERVAL]

CLOUDFLARE_API_URL = "https://api.cloudflare.com/client/v4"
PUBLIC_IP_URL = "https://ipv4.icanhazip.com"

# Largest interval a nanosecond duration in a signed 64-bit integer can hold
MAX_INTERVAL_MS = (2**63 - 1) // 1_000_000

@dataclass(frozen=True)
class Config:
    """Configuration data"""
    api_token: str
    zone_id: str
    record_name: str
    check_interval_ms: int

    # Endpoints
    api_url: str = CLOUDFLARE_API_URL
    public_ip_url: str = PUBLIC_IP_URL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Config':
        """
        Load configuration from the environment

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            Config object

        Raises:
            ConfigError: If a variable is missing or the interval is invalid
        """
        if environ is None:
            environ = os.environ

        for key in REQUIRED_VARIABLES:
            if key not in environ:
                raise ConfigError(f"Environment variable not found: {key}")

        return cls(
            api_token=environ[ENV_API_TOKEN],
            zone_id=environ[ENV_ZONE_ID],
            record_name=environ[ENV_RECORD_NAME],
            check_interval_ms=parse_interval(environ[ENV_CHECK_INTERVAL])
        )

    @property
    def check_interval(self) -> float:
        """Check interval in seconds"""
        return self.check_interval_ms / 1000

    @property
    def masked_token(self) -> str:
        """API token safe for display"""
        if len(self.api_token) > 8:
            return f"{self.api_token[:4]}...{self.api_token[-4:]}"
        return "****"

def parse_interval(value: str) -> int:
    """Parse a check interval in milliseconds, a positive integer up to MAX_INTERVAL_MS"""
    text = value.strip()
    if not re.fullmatch(r"[0-9]+", text) or not 0 < int(text) <= MAX_INTERVAL_MS:
        raise ConfigError(f"Invalid check interval: {value}")
    return int(text)

class ConfigError(Exception):
    """Configuration error"""
    pass
