"""
moonframe.cli — Command Line Interface
=======================================

::

    moonframe phase [--date ISO | --phase F] [--json]
    moonframe index PHASE
    moonframe frame [--date ISO | --phase F] [--format FMT] [--image-root DIR]
    moonframe rotation [--format FMT] [--image-root DIR]
"""

import argparse
import json
import logging
import sys
from datetime import datetime

from .images import (
    IMAGE_FORMATS, DEFAULT_FORMAT,
    get_image_index, frame_path, moon_frame, rotation_sequence,
)
from .moon import get_moon_phase, phase_from_fraction
from .utils import SYNODIC_PERIOD

logger = logging.getLogger(__name__)


def _parse_datetime(s: str) -> datetime:
    try:
        return datetime.fromisoformat(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an ISO-8601 date/time: {s!r}") from None


def _add_when(p: argparse.ArgumentParser) -> None:
    g = p.add_mutually_exclusive_group()
    g.add_argument("--date", type=_parse_datetime,
                   help="ISO-8601 date/time, naive = UTC (default: now)")
    g.add_argument("--phase", type=float, help="phase fraction override (0 = new, 0.5 = full)")


def _add_format(p: argparse.ArgumentParser) -> None:
    p.add_argument("--format", dest="fmt", choices=sorted(IMAGE_FORMATS),
                   default=DEFAULT_FORMAT, help="image format (default: jpeg)")
    p.add_argument("--image-root", default=".", help="directory holding the frame folders")


def cmd_phase(args: argparse.Namespace) -> int:
    if args.phase is not None:
        f = phase_from_fraction(args.phase)
    else:
        f = get_moon_phase(args.date)
    index = get_image_index(f.phase)
    data = {
        "phase": f.phase,
        "name": f.name.value,
        "illumination": f.illumination,
        "age_days": f.phase * SYNODIC_PERIOD,
        "image_index": index,
    }
    if args.json:
        print(json.dumps(data))
        return 0
    print(f"Phase        = {f.phase:.6f}")
    print(f"Name         = {f.name}")
    print(f"Illumination = {f.illumination * 100:.1f}%")
    print(f"Age          = {data['age_days']:.2f} days")
    print(f"Image index  = {index}")
    return 0


def cmd_index(args: argparse.Namespace) -> int:
    print(get_image_index(args.value))
    return 0


def cmd_frame(args: argparse.Namespace) -> int:
    f = moon_frame(date=args.date, phase=args.phase,
                   loader=lambda i: frame_path(i, args.fmt, args.image_root))
    logger.info("%s (%.1f%% lit) -> frame %d", f.name, f.illumination * 100, f.image_index)
    print(f.image)
    return 0


def cmd_rotation(args: argparse.Namespace) -> int:
    for index, mirrored in rotation_sequence():
        flag = "  mirrored" if mirrored else ""
        print(f"{index:2d}  {frame_path(index, args.fmt, args.image_root)}{flag}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="moonframe",
                                description="Mean lunar phase and reference frame selection")
    p.add_argument("-v", "--verbose", action="store_true", help="log at DEBUG level")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_phase = sub.add_parser("phase", help="phase fraction, name and illumination")
    _add_when(p_phase)
    p_phase.add_argument("--json", action="store_true", help="print a JSON object")
    p_phase.set_defaults(func=cmd_phase)

    p_index = sub.add_parser("index", help="frame index (2..28) for a phase fraction")
    p_index.add_argument("value", type=float, help="phase fraction")
    p_index.set_defaults(func=cmd_index)

    p_frame = sub.add_parser("frame", help="path of the frame to display")
    _add_when(p_frame)
    _add_format(p_frame)
    p_frame.set_defaults(func=cmd_frame)

    p_rot = sub.add_parser("rotation", help="frame sequence for a rotation loop")
    _add_format(p_rot)
    p_rot.set_defaults(func=cmd_rotation)
    return p


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    try:
        return int(args.func(args) or 0)
    except ValueError as ex:
        p.error(str(ex))


if __name__ == "__main__":
    sys.exit(main())
