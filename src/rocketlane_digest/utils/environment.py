"""
Environment variable access for Rocketlane Digest.

Values are read from the process environment; a local ``.env`` file is
loaded on import. Malformed numbers and flags fall back to their defaults
with a warning so a typo never stops the service from starting.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger("rocketlane_digest.config")

TRUE_VALUES = frozenset({"true", "yes", "y", "1", "on"})
FALSE_VALUES = frozenset({"false", "no", "n", "0", "off"})


def get_env_var(name: str, default: Optional[str] = None) -> Optional[str]:
    """Raw string value of ``name``, or ``default`` when unset."""
    return os.environ.get(name, default)


def get_env_var_int(name: str, default: int) -> int:
    """
    Get integer environment variable.

    Args:
        name: The name of the environment variable
        default: Returned when the variable is unset, blank or not an integer

    Examples:
        >>> get_env_var_int("SMTP_PORT", 465)
    """
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default

    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Environment variable '{name}' is not an integer: {raw!r}. Using {default}.")
        return default


def get_env_var_bool(name: str, default: bool = False) -> bool:
    """Get boolean environment variable (true/false, yes/no, on/off, 1/0)."""
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default

    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False

    logger.warning(f"Environment variable '{name}' is not a boolean: {raw!r}. Using {default}.")
    return default
