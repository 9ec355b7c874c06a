"""
Command-line interface for Cloudflare DDNS
"""
import logging
import sys

import typer

from .lib.cmd import run_command

app = typer.Typer(help="Cloudflare DDNS - keep a DNS record pointed at your public IP")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

@app.command()
def run(
    once: bool = typer.Option(False, '--once', help='Run a single check and exit'),
    debug: bool = typer.Option(False, '--debug', '-d', help='Enable debug logging')
):
    """
    Check the public IP and update the Cloudflare record when it changes

    Configuration is read from CLOUDFLARE_API_TOKEN, CLOUDFLARE_ZONE_ID,
    CLOUDFLARE_RECORD_NAME and CHECK_PUBLIC_IP_INTERVAL (milliseconds).
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
        stream=sys.stdout
    )
    return run_command(once=once, debug=debug)

def main():
    """Main entry point"""
    app()

if __name__ == "__main__":
    main()
