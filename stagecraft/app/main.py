# stagecraft/app/main.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from ..domain.errors import ControllerConstructionFailure
from ..domain.views import ViewId
from ..utils import logging as logging_utils
from .composition import build_window_host
from .settings import load_settings
from .view_manager import ViewManager

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="stagecraft", description="Open a view in a desktop window.")
    parser.add_argument(
        "--view",
        default=ViewId.HELLO.name,
        help=f"view to open first ({', '.join(v.name.lower() for v in ViewId)})",
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="record windows in memory instead of opening Tk windows",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point: open the initial view and run the UI loop.

    Returns a process exit code: ``0`` on normal exit, ``1`` if the initial
    view could not be opened, ``2`` for an unknown view name.
    """
    logging_utils.configure_root()
    args = _parse_args(argv)

    settings = load_settings()
    if args.headless:
        settings.headless = True
    logging_utils.apply_preferences(settings.debug_logging)

    try:
        view_id = ViewId.from_name(args.view)
    except KeyError as exc:
        logger.error("%s", exc.args[0])
        return 2

    manager = ViewManager.get_instance(host_factory=lambda: build_window_host(settings))
    try:
        handle = manager.open_view(view_id)
    except ControllerConstructionFailure:
        logger.exception("Initial view %s could not be constructed", view_id.name)
        return 1
    if handle is None:
        logger.error("Initial view %s could not be opened", view_id.name)
        return 1

    host = manager.host
    if callable(getattr(host, "run", None)):
        manager.on_all_windows_closed = host.quit
        host.run()
    else:
        logger.info("Headless run finished with %d open window(s)", len(manager.open_windows))
    return 0


if __name__ == "__main__":
    sys.exit(main())
