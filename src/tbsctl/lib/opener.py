"""Open a local file with the desktop's default handler."""

import sys

from .core.config import get_open_command
from .executor import Invocation


def open_invocation(path: str) -> Invocation:
    """Return the invocation that opens *path* with the default handler.

    Resolution order:
      1. ``open.command`` from the global config (path appended)
      2. ``open`` on macOS
      3. ``cmd /c start`` on Windows
      4. ``xdg-open`` everywhere else
    """
    configured = get_open_command()
    if configured:
        return Invocation(configured[0], (*configured[1:], path))
    if sys.platform == "darwin":
        return Invocation("open", (path,))
    if sys.platform.startswith("win"):
        return Invocation("cmd", ("/c", "start", "", path))
    return Invocation("xdg-open", (path,))
