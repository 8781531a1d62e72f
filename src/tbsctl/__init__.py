"""tbsctl package.

Modules:
- tbsctl.cli: CLI entry point package (tbs)
- tbsctl.lib.commands: command values and planning
- tbsctl.lib.bridge: adb invocation builders
- tbsctl.lib.executor: sequential step execution
- tbsctl.lib.opener: open files with the desktop default handler
- tbsctl.lib.core: configuration, paths, version
- tbsctl.lib._util: terminal colors and debug logging
"""

__all__ = ["cli", "lib"]

# Version information - single source of truth using importlib.metadata
try:
    from importlib.metadata import version

    __version__ = version("tbsctl")
except Exception:
    __version__ = "unknown"
