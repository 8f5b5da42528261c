"""
Opening a puzzle URL with the platform's opener.

UrlOpener is the capability the controller depends on; SystemOpener is the
real implementation. A launch that cannot start at all raises UrlOpenError,
which the controller does not catch.
"""

import logging
import subprocess
import sys
from typing import List, Protocol

logger = logging.getLogger(__name__)


class UrlOpenError(RuntimeError):
    """The platform opener could not be started."""


class UrlOpener(Protocol):
    def open(self, url: str) -> None:
        ...


def opener_command(url: str, platform: str = sys.platform) -> List[str]:
    """
    Command line that opens `url` on `platform`.

    Examples:
        >>> opener_command("https://example.com", "darwin")
        ['open', 'https://example.com']
    """
    if platform == "darwin":
        return ["open", url]
    if platform.startswith("win"):
        return ["cmd", "/c", "start", "", url]
    return ["xdg-open", url]


class SystemOpener:
    """Runs the platform opener and waits for it to exit."""

    def __init__(self, platform: str = sys.platform) -> None:
        self.platform = platform

    def open(self, url: str) -> None:
        cmd = opener_command(url, self.platform)
        try:
            result = subprocess.run(cmd, capture_output=True, check=False)
        except OSError as exc:
            raise UrlOpenError(f"FAILED TO OPEN {url} with {cmd[0]}: {exc}") from exc

        if result.returncode != 0:
            logger.warning(
                f"{cmd[0]} exited with {result.returncode} for {url}: "
                f"{result.stderr.decode(errors='replace').strip()}"
            )
