"""Command line access to a seeded publishing store."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from publishing_store import config
from publishing_store.client import StoreClient, create_client
from publishing_store.fixtures import FIXTURES
from publishing_store.result import Result


def _split_assignment(raw: str, option: str) -> tuple[str, str]:
    field, sep, value = raw.partition("=")
    if not sep or not field:
        raise argparse.ArgumentTypeError(f"{option} expects FIELD=VALUE, got '{raw}'")
    return field, value


def _eq_filter(raw: str) -> tuple[str, Any]:
    """Split an ``--eq`` value; ``FIELD:=JSON`` decodes the value, ``FIELD=VALUE`` keeps a string."""
    field, value = _split_assignment(raw, "--eq")
    if not field.endswith(":"):
        return field, value
    field = field[:-1]
    if not field:
        raise argparse.ArgumentTypeError(f"--eq expects FIELD:=JSON, got '{raw}'")
    try:
        return field, json.loads(value)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"--eq {field}:= needs a JSON value, got '{value}': {e.msg}") from e


def _print_json(value: Any, pretty: bool) -> None:
    print(json.dumps(value, indent=2 if pretty else None, ensure_ascii=False))


def run_query(client: StoreClient, args: argparse.Namespace) -> Result:
    """Build and terminate one chain from parsed ``query`` arguments."""
    query = client.table(args.table).select(args.select)
    for raw in args.eq:
        field, value = _eq_filter(raw)
        query = query.eq(field, value)

    if args.single:
        if not args.eq:
            raise argparse.ArgumentTypeError("--single requires at least one --eq filter")
        return query.single()
    if args.in_:
        field, values = _split_assignment(args.in_, "--in")
        return query.in_(field, values.split(","))
    if args.order:
        return query.order(args.order, ascending=not args.desc)
    return query.execute()


def _cmd_tables(client: StoreClient, args: argparse.Namespace) -> int:
    for name in client.store.tables():
        print(f"{name:<20} {client.store.count(name)}")
    return 0


def _cmd_dump(client: StoreClient, args: argparse.Namespace) -> int:
    names = args.tables or client.store.tables()
    _print_json({name: client.store.get_all(name) for name in names}, args.pretty)
    return 0


def _cmd_query(client: StoreClient, args: argparse.Namespace) -> int:
    try:
        result = run_query(client, args)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    _print_json(result.to_dict(), args.pretty)
    return 0 if result.ok else 1


def build_parser() -> argparse.ArgumentParser:
    # --pretty also works after the subcommand; SUPPRESS leaves a top-level
    # --pretty in place when the subcommand omits it.
    output = argparse.ArgumentParser(add_help=False)
    output.add_argument(
        "--pretty",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Indent JSON output",
    )

    arg_parser = argparse.ArgumentParser(
        prog="pubstore",
        description="Inspect and query the seeded publishing store",
    )
    arg_parser.add_argument(
        "--no-seed",
        action="store_true",
        help="Start from an empty store instead of the fixture data",
    )
    arg_parser.add_argument(
        "--pretty",
        action="store_true",
        help="Indent JSON output",
    )
    commands = arg_parser.add_subparsers(dest="command", required=True)

    tables = commands.add_parser("tables", help="List tables and record counts")
    tables.set_defaults(handler=_cmd_tables)

    dump = commands.add_parser("dump", parents=[output], help="Print tables as JSON")
    dump.add_argument("tables", nargs="*", help=f"Tables to dump (default: all, e.g. {', '.join(FIXTURES)})")
    dump.set_defaults(handler=_cmd_dump)

    query = commands.add_parser("query", parents=[output], help="Run a single query chain")
    query.add_argument("table", help="Table to query")
    query.add_argument("-s", "--select", default="*", help="Select specification, e.g. '*, authors(*)'")
    query.add_argument(
        "-e",
        "--eq",
        action="append",
        default=[],
        metavar="FIELD=VALUE",
        help="Equality filter (repeatable). VALUE is matched as a string; use FIELD:=JSON for numbers, booleans or null",
    )
    query.add_argument("-i", "--in", dest="in_", metavar="FIELD=V1,V2", help="Match any of the listed values")
    query.add_argument("-o", "--order", metavar="FIELD", help="Sort by field")
    query.add_argument("--desc", action="store_true", help="Sort descending")
    query.add_argument("--single", action="store_true", help="Return exactly one record")
    query.set_defaults(handler=_cmd_query)

    return arg_parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    seed = False if args.no_seed else config.seed_on_start()
    client = create_client(seed=seed)
    return args.handler(client, args)


if __name__ == "__main__":
    sys.exit(main())
