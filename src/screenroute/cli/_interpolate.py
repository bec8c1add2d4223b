"""``screenroute interpolate``: build a sibling destination path."""

import argparse
import sys

from screenroute.errors import MissingSegmentError
from screenroute.routing import interpolate


def run_interpolate(args: argparse.Namespace) -> None:
    try:
        path = interpolate(args.template, args.location)
    except MissingSegmentError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    print(path)
