"""Runtime settings for the desktop shell.

Values are resolved in three layers: dataclass defaults, preferences stored
through ``SettingsStoragePort`` (``user_prefs.json``), then environment
overrides. Invalid stored or environment values are ignored with a warning.
"""

from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping, Optional

from ..adapters.storage_local import StorageLocal
from ..domain.ports import SettingsStoragePort
from ..utils.logging import env_truthy

logger = logging.getLogger(__name__)

SETTINGS_DIR_ENV = "STAGECRAFT_SETTINGS_DIR"

# env var -> settings field
_ENV_OVERRIDES: Dict[str, str] = {
    "STAGECRAFT_VIEWS_ROOT": "views_root",
    "STAGECRAFT_HEADLESS": "headless",
    "STAGECRAFT_REQUEST_TIMEOUT_S": "request_timeout_s",
    "STAGECRAFT_RETRIES": "retries",
}

# integer fields that need more than the default ">= 0"
_MINIMUMS: Dict[str, int] = {"request_timeout_s": 1}


@dataclass
class SettingsConfig:
    """Typed runtime settings that persist via StorageLocal."""

    views_root: str = ""
    request_timeout_s: int = 10
    retries: int = 2
    headless: bool = False
    debug_logging: bool = False
    apply_theme: bool = True

    def to_prefs(self) -> Dict[str, Any]:
        return asdict(self)


def _coerce(name: str, value: Any, current: Any) -> Any:
    if isinstance(current, bool):
        if isinstance(value, bool):
            return value
        return env_truthy(str(value))
    if isinstance(current, int):
        number = int(str(value).strip())
        minimum = _MINIMUMS.get(name, 0)
        if number < minimum:
            raise ValueError(f"{name} must be >= {minimum}")
        return number
    return str(value)


def _apply(config: SettingsConfig, values: Mapping[str, Any], origin: str) -> None:
    known = {f.name for f in fields(SettingsConfig)}
    for name, value in values.items():
        if name not in known or value is None:
            continue
        try:
            setattr(config, name, _coerce(name, value, getattr(config, name)))
        except (TypeError, ValueError) as exc:
            logger.warning("Ignoring %s setting %s=%r: %s", origin, name, value, exc)


def default_storage(environ: Optional[Mapping[str, str]] = None) -> StorageLocal:
    env = os.environ if environ is None else environ
    return StorageLocal(root_dir=env.get(SETTINGS_DIR_ENV) or ".")


def load_settings(
    storage: Optional[SettingsStoragePort] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> SettingsConfig:
    """Build the effective settings.

    Args:
        storage: Preference store; defaults to ``StorageLocal`` rooted at
            ``STAGECRAFT_SETTINGS_DIR`` (or the working directory).
        environ: Environment mapping; defaults to ``os.environ``.
    """
    env = os.environ if environ is None else environ
    store = storage if storage is not None else default_storage(env)
    config = SettingsConfig()
    try:
        prefs = store.load_user_prefs()
    except (OSError, ValueError) as exc:
        logger.warning("Could not read stored preferences: %s", exc)
        prefs = {}
    _apply(config, prefs, "stored")

    overrides = {
        field_name: env[var] for var, field_name in _ENV_OVERRIDES.items() if env.get(var)
    }
    _apply(config, overrides, "environment")
    return config


def save_settings(config: SettingsConfig, storage: Optional[SettingsStoragePort] = None) -> None:
    store = storage if storage is not None else default_storage()
    store.save_user_prefs(config.to_prefs())


__all__ = ["SettingsConfig", "load_settings", "save_settings"]
