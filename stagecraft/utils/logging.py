"""Root logger setup for the desktop shell.

Environment overrides win over stored preferences:
  - STAGECRAFT_LOG_LEVEL: explicit level, by name ("warning") or number ("15")
  - STAGECRAFT_DEBUG: truthy -> DEBUG
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional, Union

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%H:%M:%S"
LEVEL_ENV = "STAGECRAFT_LOG_LEVEL"
DEBUG_ENV = "STAGECRAFT_DEBUG"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def env_truthy(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in _TRUTHY


def _parse_level(value: Union[int, str, None], fallback: int) -> int:
    if isinstance(value, int):
        return value
    text = (value or "").strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper()) if text else None
    return level if isinstance(level, int) else fallback


def _env_level(environ: Optional[Mapping[str, str]]) -> Optional[int]:
    env = os.environ if environ is None else environ
    if env.get(LEVEL_ENV):
        return _parse_level(env[LEVEL_ENV], logging.INFO)
    if env_truthy(env.get(DEBUG_ENV)):
        return logging.DEBUG
    return None


def configure_root(
    default_level: Union[int, str] = logging.INFO,
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    """Install a compact console handler once and set the root level.

    Returns the effective level.
    """
    env_level = _env_level(environ)
    effective = env_level if env_level is not None else _parse_level(default_level, logging.INFO)

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=effective, format=_FORMAT, datefmt=_DATEFMT)
    root.setLevel(effective)
    return effective


def apply_preferences(debug_enabled: bool, environ: Optional[Mapping[str, str]] = None) -> int:
    """Re-level the root logger from stored settings, env overrides first."""
    env_level = _env_level(environ)
    if env_level is None:
        env_level = logging.DEBUG if debug_enabled else logging.INFO
    logging.getLogger().setLevel(env_level)
    return env_level
