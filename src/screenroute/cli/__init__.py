"""Screenroute CLI: inspect how a location resolves against sibling routes.

Entry point registered as ``screenroute`` in ``pyproject.toml``::

    [project.scripts]
    screenroute = "screenroute.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``screenroute`` command."""
    parser = argparse.ArgumentParser(
        prog="screenroute",
        description="screenroute: resolve active sibling routes for a location.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- screenroute match ------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Show which route is active")
    match_parser.add_argument("location", help="Location, e.g. /users/42?tab=posts")
    match_parser.add_argument("routes", nargs="+", help="Sibling routes in declaration order")
    match_parser.add_argument("--basepath", default="/", help="Basepath for the routes")
    match_parser.add_argument(
        "--default-index",
        type=int,
        default=-1,
        help="Index used when no route matches",
    )

    # -- screenroute interpolate ------------------------------------------
    interp_parser = subparsers.add_parser(
        "interpolate", help="Fill a template from the current location"
    )
    interp_parser.add_argument("template", help="Target template, e.g. /posts/:id")
    interp_parser.add_argument("location", help="Current location")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "match":
        from screenroute.cli._match import run_match

        run_match(args)
    elif args.command == "interpolate":
        from screenroute.cli._interpolate import run_interpolate

        run_interpolate(args)
