"""Window-host wiring for the desktop app runtime.

Builds the concrete host the view manager talks to from
:class:`stagecraft.app.settings.SettingsConfig`: a Tk host on a withdrawn
root for normal runs, or the in-memory host when ``headless`` is set.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..adapters.definition_source import DefinitionSource
from ..adapters.http_client import HttpConfig
from ..adapters.window_host_mock import InMemoryWindowHost
from ..adapters.xml_view_loader import XmlViewLoader
from ..domain.ports import WindowHostPort
from .settings import SettingsConfig, load_settings

logger = logging.getLogger(__name__)


def build_loader(config: SettingsConfig) -> XmlViewLoader:
    source = DefinitionSource(
        config.views_root or None,
        http_config=HttpConfig(
            request_timeout_s=config.request_timeout_s,
            retries=config.retries,
        ),
    )
    return XmlViewLoader(source)


def build_window_host(config: Optional[SettingsConfig] = None, root: Any = None) -> WindowHostPort:
    """Create the window host for the current settings.

    Args:
        config: Effective settings; loaded from storage/env when omitted.
        root: Existing Tk root to reuse. A new withdrawn root is created
            when omitted and the host is not headless.
    """
    cfg = config or load_settings()
    loader = build_loader(cfg)
    if cfg.headless:
        logger.info("Running headless: windows are recorded in memory only")
        return InMemoryWindowHost(load_fn=loader.load)

    # Tk is only imported for real windows.
    import tkinter as tk

    from ..adapters.tk_host import TkWindowHost
    from .views.theme import apply_modern_theme

    if root is None:
        root = tk.Tk()
        root.withdraw()
    if cfg.apply_theme:
        apply_modern_theme(root)
    return TkWindowHost(root, loader)


__all__ = ["build_loader", "build_window_host"]
