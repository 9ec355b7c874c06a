"""
Run command implementation for Cloudflare DDNS
"""
import logging
import time
from typing import Callable, Optional

import typer
from dotenv import load_dotenv

from ..config import Config, ConfigError
from ..dns.base import DNSError, ProviderError
from ..dns.cloudflare_api_handler import CloudflareDNS
from ..scheduler import IntervalScheduler
from ..updater import DynamicDNSUpdater
from ..utils import PublicIPError

logger = logging.getLogger("cloudflare_ddns.lib.cmd.run")

def show_config(config: Config) -> None:
    """Log the loaded configuration without secrets"""
    logger.info("Configuration:")
    logger.info(f"Zone ID: {config.zone_id}")
    logger.info(f"Record: {config.record_name}")
    logger.info(f"Check interval: {config.check_interval_ms} ms")
    logger.info(f"API Token (masked): {config.masked_token}")

def run_command(
    once: bool = False,
    debug: bool = False,
    sleep: Optional[Callable[[float], None]] = None
) -> None:
    """
    Keep the configured DNS record in sync with the public IP

    Every error is fatal: it is logged and the command exits with status 1.
    """
    try:
        load_dotenv()
        config = Config.from_env()
        show_config(config)

        updater = DynamicDNSUpdater(config, CloudflareDNS(config))
        scheduler = IntervalScheduler(config.check_interval, sleep=sleep or time.sleep)
        scheduler.run(updater.check, iterations=1 if once else None)
    except ConfigError as e:
        logger.error(str(e))
        raise typer.Exit(code=1)
    except ProviderError as e:
        logger.error(str(e))
        if e.body:
            logger.error(e.body)
        raise typer.Exit(code=1)
    except (DNSError, PublicIPError) as e:
        logger.error(str(e))
        raise typer.Exit(code=1)
    except KeyboardInterrupt:
        logger.info("Interrupted, stopping.")
        raise typer.Exit(code=0)
    except Exception as e:
        logger.error(f"Unexpected error: {str(e)}", exc_info=debug)
        raise typer.Exit(code=1)
