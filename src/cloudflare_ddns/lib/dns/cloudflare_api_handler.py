"""
Cloudflare DNS handler implementation
"""
import logging
from typing import Any, Dict, List, Optional

import requests

from ..config import Config
from .base import (
    DNSProvider,
    DNSRecord,
    DNSError,
    ProviderError,
    ProviderResponse,
    RecordNotFoundError,
    ResponseDecodeError
)

logger = logging.getLogger("cloudflare_ddns.lib.dns.cloudflare_api_handler")

class CloudflareDNS(DNSProvider):
    """Cloudflare DNS provider talking to the v4 REST API."""

    def __init__(self, config: Config):
        """Initialize Cloudflare DNS handler"""
        self.config = config

    @property
    def records_url(self) -> str:
        """DNS records endpoint for the configured zone"""
        return f"{self.config.api_url}/zones/{self.config.zone_id}/dns_records"

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.api_token}",
            "Content-Type": "application/json"
        }

    def _request(self, method: str, url: str, action: str, **kwargs) -> ProviderResponse:
        """
        Perform an API request and decode the response envelope.

        A fresh request is made for every call; the response is always
        released before returning or raising.

        Args:
            method: HTTP method
            url: Endpoint URL
            action: Human readable description used in error messages
            **kwargs: Passed through to requests (params, json)

        Returns:
            Decoded envelope with success=True

        Raises:
            DNSError: On transport failure
            ResponseDecodeError: If the body is not valid JSON
            ProviderError: If the envelope reports failure
        """
        logger.debug(f"{method} {url} {kwargs}")
        try:
            with requests.request(method, url, headers=self._headers(), **kwargs) as response:
                status = f"{response.status_code} {response.reason}"
                body = response.text
                try:
                    envelope = ProviderResponse.from_json(response.json())
                except ValueError as e:
                    logger.debug(f"Undecodable response body: {body}")
                    raise ResponseDecodeError(f"Failed to decode response body: {str(e)}") from e
        except requests.RequestException as e:
            raise DNSError(f"Failed to {action}: {str(e)}") from e

        if not envelope.success:
            first = envelope.first_error
            detail = str(first) if first is not None else "no error details provided"
            logger.debug(f"Provider response: {body}")
            raise ProviderError(
                f"Failed to {action}: {detail} ({status})",
                status=status,
                errors=envelope.errors,
                body=body
            )
        return envelope

    def list_records(self, name: Optional[str] = None) -> List[DNSRecord]:
        """List DNS records in the zone, optionally filtered by name"""
        params = {"name": name} if name is not None else {}
        envelope = self._request("GET", self.records_url, "get current DNS record", params=params)
        result = envelope.result
        if not isinstance(result, list):
            raise ResponseDecodeError(f"Expected a list of DNS records, got: {result!r}")
        return [DNSRecord.from_dict(r) for r in result]

    def get_record(self, name: Optional[str] = None) -> DNSRecord:
        """Get the first DNS record matching name"""
        name = name or self.config.record_name
        records = self.list_records(name=name)
        if not records:
            raise RecordNotFoundError(f"Failed to get current DNS record: no record named {name}")
        if len(records) > 1:
            logger.debug(f"Found {len(records)} records named {name}, using {records[0].id}")
        record = records[0]
        logger.debug(f"Current DNS record: {record}")
        return record

    def update_record(self, record_id: str, content: str, name: Optional[str] = None) -> DNSRecord:
        """Replace the content of an A record (automatic TTL, not proxied)"""
        data: Dict[str, Any] = {
            "type": "A",
            "name": name or self.config.record_name,
            "content": content,
            "ttl": 0,
            "proxied": False
        }
        envelope = self._request(
            "PUT",
            f"{self.records_url}/{record_id}",
            "update DNS record",
            json=data
        )
        logger.info("DNS record updated successfully.")
        if isinstance(envelope.result, dict):
            return DNSRecord.from_dict(envelope.result)
        return DNSRecord(id=record_id, type=data["type"], name=data["name"], content=content)
