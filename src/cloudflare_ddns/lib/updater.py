"""
Public IP to DNS record synchronisation
"""
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .config import Config
from .dns.base import DNSProvider, DNSRecord
from .utils import get_public_ip

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class CheckResult:
    """Outcome of a single check cycle"""
    public_ip: str
    record: DNSRecord
    updated: bool

class DynamicDNSUpdater:
    """Keeps a DNS record pointed at the host's public IP"""

    def __init__(self, config: Config, provider: DNSProvider,
                 ip_resolver: Optional[Callable[[str], str]] = None):
        self.config = config
        self.provider = provider
        self.ip_resolver = ip_resolver or get_public_ip

    def check(self) -> CheckResult:
        """Resolve the public IP and update the record if it differs"""
        logger.info("Checking public IP.")
        public_ip = self.ip_resolver(self.config.public_ip_url)
        record = self.provider.get_record(self.config.record_name)

        if record.content == public_ip:
            logger.info("Public IP same as DNS record.")
            return CheckResult(public_ip=public_ip, record=record, updated=False)

        logger.info(f"Public IP has changed from {record.content} to {public_ip}")
        logger.info("Updating DNS record.")
        updated = self.provider.update_record(record.id, public_ip, name=self.config.record_name)
        return CheckResult(public_ip=public_ip, record=updated, updated=True)
