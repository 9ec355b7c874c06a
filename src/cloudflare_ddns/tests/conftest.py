"""
Shared fixtures for Cloudflare DDNS tests
"""
import pytest
from unittest.mock import MagicMock

from cloudflare_ddns.lib.config import Config

@pytest.fixture
def config():
    """Test configuration"""
    return Config(
        api_token="test-token-1234567890",
        zone_id="test-zone-id",
        record_name="home.example.com",
        check_interval_ms=5000
    )

@pytest.fixture
def make_response():
    """Factory for mock requests responses usable as context managers"""
    def _make(json_data=None, text=None, status_code=200, reason="OK", json_error=None):
        response = MagicMock()
        response.__enter__.return_value = response
        response.__exit__.return_value = False
        response.status_code = status_code
        response.reason = reason
        response.text = text if text is not None else repr(json_data)
        if json_error is not None:
            response.json.side_effect = json_error
        else:
            response.json.return_value = json_data
        return response
    return _make
