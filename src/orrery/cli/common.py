"""
Command-line interface utilities for orrery.

This module handles logging configuration from command line flags and
resolution of the planet catalog the commands work on.
"""

import logging
from typing import Dict, Any, Optional, Tuple

from ..catalog import REFERENCE_CATALOG, load_catalog
from ..logging import get_logger, set_log_level
from ..orbit.planet import Planet

CATALOG_ENV_VAR = "ORRERY_CATALOG"

logger = get_logger(__name__)


def get_log_level(args: Dict[str, Any]) -> int:
    """
    Determine the log level from verbosity flags.

    Args:
        args: Dictionary with optional "quiet", "debug" and "verbose" keys

    Returns:
        A logging level
    """
    quiet = args.get("quiet", False)
    debug = args.get("debug", False)
    verbosity = args.get("verbose", 0)

    if quiet:
        return logging.ERROR
    elif debug:
        return logging.DEBUG
    # 0 -> WARNING, 1 -> INFO, 2+ -> DEBUG
    elif verbosity == 0:
        return logging.WARNING
    elif verbosity == 1:
        return logging.INFO
    else:
        return logging.DEBUG


def configure_logging(args: Dict[str, Any]) -> None:
    """
    Configure logging based on command line arguments.

    Args:
        args: Parsed command line flags
    """
    log_level = get_log_level(args)
    set_log_level(log_level)
    logger.debug(
        f"Logging configured with level {logging.getLevelName(log_level)}"
    )


def resolve_catalog(path: Optional[str]) -> Tuple[Planet, ...]:
    """Load the catalog at path, or fall back to the reference catalog."""
    if path:
        return load_catalog(path)
    return REFERENCE_CATALOG
