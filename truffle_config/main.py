"""Main entry point for Truffle Config."""

import argparse
import logging
import sys

from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

import structlog

from truffle_config import __version__
from truffle_config.config import dump_json, load, render_truffle_config, write_output
from truffle_config.exceptions import ConfigurationError, ExportError
from truffle_config.utils.constants import (
    APP_DESCRIPTION,
    APP_NAME,
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_MAX_BYTES,
)


# Shared by every renderer; the last processor is chosen in setup_logging
LOG_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
]


def _log_handlers(log_file: Optional[Path]) -> List[logging.Handler]:
    # stdout carries the rendered settings
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(
                filename=log_file,
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_FILE_BACKUP_COUNT,
                encoding="utf-8",
            )
        )
    return handlers


def setup_logging(debug: bool = False, log_file: Optional[Path] = None) -> None:
    """Configure structlog on stderr, optionally mirrored to a rotating file.

    Events render as JSON lines, or for the console in debug mode.
    """
    level = logging.DEBUG if debug else logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = []
    for handler in _log_handlers(log_file):
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(handler)

    renderer = (
        structlog.dev.ConsoleRenderer(colors=False)
        if debug
        else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[*LOG_PROCESSORS, renderer],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="truffle-config",
        description=APP_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version", action="version", version=f"{APP_NAME} {__version__}"
    )

    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    parser.add_argument(
        "--config-file",
        type=Path,
        help="JSON settings document (defaults to the declared settings)",
    )

    parser.add_argument(
        "--format",
        choices=("json", "js"),
        default="json",
        help="Output format: JSON document or truffle-config.js module",
    )

    parser.add_argument(
        "--no-disabled-networks",
        action="store_true",
        help="Omit the commented-out test network from truffle-config.js",
    )

    parser.add_argument("--output", type=Path, help="Write to file instead of stdout")

    parser.add_argument("--log-file", type=Path, help="Also log to this file")

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point.

    Returns:
        Exit code: 0 on success, 1 on a configuration or output error
    """
    args = parse_args(argv)
    setup_logging(debug=args.debug, log_file=args.log_file)

    logger = structlog.get_logger()
    logger.info("Starting Truffle Config", version=__version__)

    try:
        settings = load(args.config_file)

        if args.format == "js":
            content = render_truffle_config(
                settings, include_disabled_networks=not args.no_disabled_networks
            )
        else:
            content = dump_json(settings)

        if args.output:
            write_output(content, args.output)
        else:
            sys.stdout.write(content)

    except ConfigurationError as e:
        logger.error("Configuration error", error=str(e))
        return 1
    except ExportError as e:
        logger.error("Export error", error=str(e))
        return 1

    return 0


def run() -> None:
    """Synchronous entry point for setuptools."""
    sys.exit(main())


if __name__ == "__main__":
    run()
