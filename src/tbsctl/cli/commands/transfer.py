"""File transfer commands: pull, push, clear."""

from __future__ import annotations

import argparse

from ...lib.commands import ClearLog, Command, PullConfig, PullLog, PushConfig


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register pull, push and clear subcommands."""
    p_pull = subparsers.add_parser("pull", help="Get files from the device")
    pull_sub = p_pull.add_subparsers(dest="pull_cmd", required=True)
    pull_sub.add_parser("config", help="Get config.json from the device and open it")
    pull_sub.add_parser("log", help="Replace ./Log with all logs from the device")

    p_push = subparsers.add_parser("push", help="Push files to the device")
    push_sub = p_push.add_subparsers(dest="push_cmd", required=True)
    push_sub.add_parser(
        "config", help="Push config.json from the current directory and notify the app"
    )

    p_clear = subparsers.add_parser("clear", help="Remove files from the device")
    clear_sub = p_clear.add_subparsers(dest="clear_cmd", required=True)
    clear_sub.add_parser("log", help="Remove all logs from the device")


def build_command(args: argparse.Namespace) -> Command | None:
    """Return the transfer command for *args*, or None if not a transfer command."""
    if args.cmd == "pull":
        if args.pull_cmd == "config":
            return PullConfig()
        if args.pull_cmd == "log":
            return PullLog()
    elif args.cmd == "push":
        if args.push_cmd == "config":
            return PushConfig()
    elif args.cmd == "clear":
        if args.clear_cmd == "log":
            return ClearLog()
    return None
