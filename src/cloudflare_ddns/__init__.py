"""
Cloudflare DDNS - keeps a Cloudflare A record pointed at this host's public IP
"""

__version__ = "0.1.0"
