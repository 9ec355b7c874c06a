"""
DNS provider implementations
"""
from .base import (
    DNSProvider,
    DNSRecord,
    DNSError,
    ProviderError,
    ProviderErrorEntry,
    ProviderResponse,
    RecordNotFoundError,
    ResponseDecodeError
)
from .cloudflare_api_handler import CloudflareDNS

__all__ = [
    "DNSProvider",
    "DNSRecord",
    "DNSError",
    "ProviderError",
    "ProviderErrorEntry",
    "ProviderResponse",
    "RecordNotFoundError",
    "ResponseDecodeError",
    "CloudflareDNS"
]
