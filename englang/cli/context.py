"""CLI configuration and logging setup."""

import argparse
import logging
import os
from pathlib import Path
from typing import Optional

from ..config import ENV_LOG_LEVEL, EngConfig, load_config
from .errors import CLIError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def get_config(args: argparse.Namespace) -> EngConfig:
    """
    Retrieve the EngConfig attached to parsed arguments.

    Raises:
        CLIError: If configuration was not resolved before command execution
    """
    config = getattr(args, "eng_config", None)
    if config is None:
        raise CLIError(
            "CLI configuration was not initialized before command execution",
            code="CLI_CONTEXT_NOT_INITIALIZED",
            hint="This is an internal error - please report it",
        )
    return config


def resolve_config(config_path: Optional[str], workspace: Optional[Path] = None) -> EngConfig:
    explicit = Path(config_path).resolve() if config_path else None
    return load_config(workspace or Path.cwd(), explicit)


def configure_logging(cli_level: Optional[str], config: EngConfig) -> logging.Logger:
    """Configure the ``englang`` logger from the CLI flag, environment, or config file."""
    level_name = (cli_level or os.getenv(ENV_LOG_LEVEL) or config.log_level or "warning").lower()
    numeric_level = _LEVELS.get(level_name, logging.WARNING)

    logger = logging.getLogger("englang")
    logger.setLevel(numeric_level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        # Prevent propagation to root logger to avoid duplicate messages
        logger.propagate = False
    return logger
