#!/usr/bin/env python3
# PYTHON_ARGCOMPLETE_OK

import argparse

import argcomplete

from ..lib.commands import plan
from ..lib.core.version import format_version_string, get_version_info
from ..lib.executor import run_plan
from .commands import am, info, transfer

_COMMAND_MODULES = (transfer, am)


def build_parser() -> argparse.ArgumentParser:
    version, revision = get_version_info()
    version_string = format_version_string(version, revision)

    parser = argparse.ArgumentParser(
        prog="tbs",
        description="tbs – shortcuts for adb commands used with the TBS app",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  tbs pull config                 fetch config.json and open it\n"
            "  tbs push config                 upload config.json and notify the app\n"
            "  tbs am register <phone> <token>\n"
            "  tbs am rx -d 32 -s 7\n"
            "  tbs am call zoom --link <url>\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"tbs {version_string}")
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Print the commands that would run without running them",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print each command before running it",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    transfer.register(sub)
    am.register(sub)
    info.register(sub)
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    args = parser.parse_args(argv)

    if info.dispatch(args):
        return

    for module in _COMMAND_MODULES:
        command = module.build_command(args)
        if command is not None:
            break
    else:
        parser.error("Unknown command")

    # Planning validates everything before the first process is spawned.
    steps = plan(command)
    if not run_plan(steps, dry_run=args.dry_run, echo=args.verbose):
        raise SystemExit(1)


if __name__ == "__main__":
    main()
