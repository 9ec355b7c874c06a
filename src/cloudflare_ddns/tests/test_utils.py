"""
Tests for public IP resolution
"""
import pytest
import requests
from unittest.mock import patch

from cloudflare_ddns.lib.utils import get_public_ip, PublicIPError

@pytest.fixture
def mock_get():
    """Mock requests.get"""
    with patch('cloudflare_ddns.lib.utils.requests.get') as mock:
        yield mock

def test_get_public_ip_strips_whitespace(mock_get, make_response):
    """Test trailing newline is removed"""
    mock_get.return_value = make_response(text="203.0.113.9\n")

    assert get_public_ip() == "203.0.113.9"
    mock_get.assert_called_once_with("https://ipv4.icanhazip.com")

def test_get_public_ip_custom_url(mock_get, make_response):
    """Test alternative echo service"""
    mock_get.return_value = make_response(text=" 198.51.100.2 ")

    assert get_public_ip("https://example.test/ip") == "198.51.100.2"
    mock_get.assert_called_once_with("https://example.test/ip")

def test_get_public_ip_not_validated(mock_get, make_response):
    """Test the body is passed through without address validation"""
    mock_get.return_value = make_response(text="not an ip\n")

    assert get_public_ip() == "not an ip"

def test_get_public_ip_transport_error(mock_get):
    """Test connection failure"""
    mock_get.side_effect = requests.ConnectionError("Name or service not known")

    with pytest.raises(PublicIPError, match="Failed to get public IP: Name or service not known"):
        get_public_ip()

def test_get_public_ip_http_error(mock_get, make_response):
    """Test error status from the echo service"""
    response = make_response(text="Service Unavailable", status_code=503)
    response.raise_for_status.side_effect = requests.HTTPError("503 Server Error")
    mock_get.return_value = response

    with pytest.raises(PublicIPError, match="503 Server Error"):
        get_public_ip()
    response.__exit__.assert_called_once()
