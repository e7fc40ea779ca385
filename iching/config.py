"""Runtime configuration: constants with environment overrides."""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)


def env_float(name: str, default: float) -> float:
    """Float from the environment, falling back to ``default`` when unset or malformed."""
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning("Ignoring %s=%r, not a number; using %s", name, value, default)
        return default


# === Randomness ===
# random.org plain-text integer generator, used for "true" randomness.
RANDOM_ORG_URL = os.getenv("ICHING_RANDOM_ORG_URL", "https://www.random.org/integers/")
HTTP_TIMEOUT = env_float("ICHING_HTTP_TIMEOUT", 30.0)
USER_AGENT = "iching-analyzer"

# === Logging ===
LOG_FORMAT = "%(levelname)s: %(message)s"
LOG_LEVEL = os.getenv("ICHING_LOG_LEVEL", "WARNING").upper()

# === Analysis ===
DEFAULT_RANDOM_SEQUENCES = 100


def configure_logging(verbose: bool = False) -> None:
    """Configure the root logger once for command-line use."""
    level = logging.DEBUG if verbose else getattr(logging, LOG_LEVEL, logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)
