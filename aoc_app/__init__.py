"""
aoc_app: Terminal front end for the puzzle catalog.

Modules:
- controller.py: App (key dispatch, cursor, solve requests)
- opener.py: URL opener capability
- ui.py: Row projection and the textual CatalogView
- logging_config.py: setup_logging
- cli.py: argparse entry point
"""

from .controller import App
from .opener import SystemOpener, UrlOpenError, UrlOpener

__all__ = ["App", "SystemOpener", "UrlOpenError", "UrlOpener"]
