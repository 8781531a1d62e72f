"""Activity manager commands: register, rx (sensor simulation), call."""

from __future__ import annotations

import argparse

from ...lib.commands import Command, Register, SimulateSensor, VidyoCall, ZoomCall
from ...lib.core.config import DEFAULT_SENSOR


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register the ``am`` subcommand tree."""
    p_am = subparsers.add_parser("am", help="Run am (activity manager) commands")
    am_sub = p_am.add_subparsers(dest="am_cmd", required=True)

    p_reg = am_sub.add_parser("register", help="Register device")
    p_reg.add_argument("phone", help="Phone number")
    p_reg.add_argument("token", help="One time token")

    p_rx = am_sub.add_parser(
        "rx",
        aliases=["simulate-sensor"],
        help="Fake a received 433 packet",
    )
    p_rx.add_argument(
        "-d",
        "--dui",
        type=int,
        default=None,
        help=f"DUI, device unique identifier (default: {DEFAULT_SENSOR['dui']} or sensor.dui)",
    )
    p_rx.add_argument(
        "-a",
        "--address",
        type=int,
        default=None,
        help=f"Pendant address (default: {DEFAULT_SENSOR['address']} or sensor.address)",
    )
    p_rx.add_argument(
        "-s",
        "--signal",
        type=int,
        default=None,
        help=f"Signal (default: {DEFAULT_SENSOR['signal']} or sensor.signal)",
    )

    p_call = am_sub.add_parser("call", help="Launch a video call")
    call_sub = p_call.add_subparsers(dest="call_cmd", required=True)

    p_vidyo = call_sub.add_parser("vidyo", help="Join a Vidyo room")
    p_vidyo.add_argument("room", help="Room key")
    p_vidyo.add_argument("--pin", help="Room PIN")
    p_vidyo.add_argument("--name", dest="display_name", help="Display name shown to others")
    p_vidyo.add_argument("--host", help="Vidyo portal host")

    p_zoom = call_sub.add_parser(
        "zoom",
        help="Join a Zoom meeting (--link, or --number together with --password)",
    )
    p_zoom.add_argument("--link", help="Meeting link; when given, number and password are ignored")
    p_zoom.add_argument("--number", help="Meeting number")
    p_zoom.add_argument("--password", help="Meeting password")


def build_command(args: argparse.Namespace) -> Command | None:
    """Return the activity manager command for *args*, or None."""
    if args.cmd != "am":
        return None
    if args.am_cmd == "register":
        return Register(phone=args.phone, token=args.token)
    if args.am_cmd in ("rx", "simulate-sensor"):
        return SimulateSensor(dui=args.dui, address=args.address, signal=args.signal)
    if args.am_cmd == "call":
        if args.call_cmd == "vidyo":
            return VidyoCall(
                room=args.room,
                pin=args.pin,
                display_name=args.display_name,
                host=args.host,
            )
        if args.call_cmd == "zoom":
            return ZoomCall(link=args.link, number=args.number, password=args.password)
    return None
