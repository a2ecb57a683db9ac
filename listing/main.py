#!/usr/bin/env python3
"""
Listing search UI - GTK4 search box with an infinite-scroll result list.
Minimal entry point - classes are in separate modules.
"""

import logging
import signal
import sys

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("Listing.UI")


def main():
    """Entry point"""
    from listing.application.listing_app import main as app_main

    logger.info("Listing UI starting...")

    def signal_handler(sig, frame):
        logger.info("Shutting down UI...")
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)

    return app_main()


if __name__ == "__main__":
    sys.exit(main())
