"""
Utility functions for Cloudflare DDNS
"""
import logging

import requests

from .config import PUBLIC_IP_URL

logger = logging.getLogger(__name__)

def get_public_ip(url: str = PUBLIC_IP_URL) -> str:
    """
    Get the public IPv4 address of the current machine

    The body is returned with surrounding whitespace stripped and is not
    validated as an address.

    Args:
        url: IP echo service returning the caller's address as plain text

    Returns:
        Public IP as text

    Raises:
        PublicIPError: If the request or reading the body fails
    """
    try:
        with requests.get(url) as response:
            response.raise_for_status()
            ip = response.text.strip()
    except requests.RequestException as e:
        raise PublicIPError(f"Failed to get public IP: {str(e)}") from e
    logger.debug(f"Public IP reported by {url}: {ip}")
    return ip

class PublicIPError(Exception):
    """Public IP could not be determined"""
    pass
