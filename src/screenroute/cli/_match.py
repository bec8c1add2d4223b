"""``screenroute match``: print the resolution table for a location."""

import argparse

from screenroute.routing import (
    compile_route,
    extract_params,
    matches,
    resolve_active,
    split_query,
)


def _format_params(params: dict[str, str | None] | None) -> str:
    if params is None:
        return "-"
    return ", ".join(f"{name}={value}" for name, value in params.items())


def run_match(args: argparse.Namespace) -> None:
    """Print INDEX, TEMPLATE, MATCH and PARAMS for each route.

    The active row is marked with ``*``.
    """
    templates = [compile_route(route, args.basepath) for route in args.routes]
    active = resolve_active(templates, args.location, args.default_index)

    rows: list[tuple[str, str, str, str]] = []
    for i, template in enumerate(templates):
        marker = "*" if i == active else " "
        is_match = matches(template, args.location)
        params = extract_params(template, args.location) if is_match else None
        rows.append(
            (f"{marker}{i}", template.path, "yes" if is_match else "no", _format_params(params))
        )

    max_index = max(max(len(r[0]) for r in rows), 5)  # "INDEX" header
    max_path = max(max(len(r[1]) for r in rows), 8)  # "TEMPLATE" header

    fmt = f"{{:<{max_index}}}  {{:<{max_path}}}  {{:<5}}  {{}}"
    print(fmt.format("INDEX", "TEMPLATE", "MATCH", "PARAMS"))
    print("-" * min(max_index + max_path + 20, 80))
    for row in rows:
        print(fmt.format(*row))
    print()
    print(f"active: {active}")
    print(f"query: {split_query(args.location)}")
