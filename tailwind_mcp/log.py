"""Logging setup for the CLI and server."""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO", debug: bool = False) -> None:
    """Send log records to stderr; stdout carries the MCP stdio transport."""
    logging.basicConfig(
        level=logging.DEBUG if debug else getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )
    # litellm is chatty at INFO
    logging.getLogger("LiteLLM").setLevel(logging.WARNING)
