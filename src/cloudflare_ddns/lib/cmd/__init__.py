"""
Command implementations for Cloudflare DDNS
"""
from .run import run_command, show_config

__all__ = [
    'run_command',
    'show_config'
]
