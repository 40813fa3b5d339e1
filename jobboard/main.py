"""
jobboard - Main Entry Point

Command-line interface that starts the jobs REST API.

Usage:
    python -m jobboard.main [OPTIONS]

Options:
    --config TEXT         Path to jobboard.yml configuration file
    --host TEXT           Interface to bind (overrides config)
    --port INTEGER        Port to listen on (overrides config)
    --init-schema         Apply db/schema.sql before serving
    --verbose             Enable debug logging
    --help                Show this message and exit

Examples:
    # Serve with settings from config/jobboard.yml and .env:
    python -m jobboard.main

    # Create tables, then serve on port 8000 with verbose logging:
    python -m jobboard.main --init-schema --port 8000 --verbose

Exit Codes:
    0: Success
    2: Fatal error (database connection, config loading, etc.)
    130: Interrupted
"""

import argparse
import logging
import sys
from typing import Optional

from .api import create_app
from .common.db import Database
from .config_loader import load_config

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Send log records to stdout at the given level."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description='Serve the jobboard REST API',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to jobboard.yml configuration file (default: config/jobboard.yml)'
    )

    parser.add_argument(
        '--host',
        type=str,
        default=None,
        help='Interface to bind (default: from config)'
    )

    parser.add_argument(
        '--port',
        type=int,
        default=None,
        help='Port to listen on (default: from config)'
    )

    parser.add_argument(
        '--init-schema',
        action='store_true',
        help='Apply db/schema.sql before serving'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for the jobboard API.

    Returns:
        Exit code (0 = success, 2 = fatal error, 130 = interrupted)
    """
    args = parse_args(argv)

    try:
        config = load_config(args.config)
        if args.host:
            config.api.host = args.host
        if args.port:
            config.api.port = args.port

        configure_logging("DEBUG" if args.verbose else config.log_level)
        if args.verbose:
            logger.debug("Debug logging enabled")

        config.validate()

        logger.info("Connecting to database")
        db = Database(config.database_url)

        if args.init_schema:
            db.apply_schema()

        app = create_app(db)
        logger.info(
            "Starting jobboard API",
            extra={'host': config.api.host, 'port': config.api.port},
        )
        app.run(host=config.api.host, port=config.api.port, debug=config.api.debug)
        return 0

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130  # Standard exit code for Ctrl+C
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        print(f"\nFATAL ERROR: {e}")
        return 2


if __name__ == '__main__':
    sys.exit(main())
