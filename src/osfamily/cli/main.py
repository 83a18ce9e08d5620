"""
Main CLI entrypoint for osfamily.

Usage:
    osfamily --version
    osfamily info [--json]
    osfamily families
    osfamily check --family unix [--arch x86_64]
    osfamily check --when "'windows' is os_family and os.arch == 'amd64'"
"""

import argparse
import json
import logging
import platform
import sys
from typing import List, Optional

from osfamily import __version__
from osfamily.classifier import classify
from osfamily.config import load_snapshot_file
from osfamily.errors import ExitCode, OsFamilyError
from osfamily.evaluator import Query, matches
from osfamily.families import FAMILY_PRIORITY
from osfamily.resolver import resolve_current_family
from osfamily.snapshot import Snapshot, current_snapshot
from osfamily.templating import evaluate_condition

logger = logging.getLogger(__name__)


def get_version_string() -> str:
    """Generate a detailed version string."""
    python_version = platform.python_version()
    os_info = f"{platform.system()} {platform.release()}"
    return (
        f"osfamily {__version__}\n"
        f"  python: {python_version}\n"
        f"  platform: {os_info}"
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for osfamily."""
    parser = argparse.ArgumentParser(
        prog="osfamily",
        description="Classify the host OS and check build platform conditions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  osfamily info --json
  osfamily check --family unix && make
  osfamily --facts win98.yml check --family win9x
  osfamily check --when "'mac' is os_family or 'linux' is os_name"
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=get_version_string(),
    )

    parser.add_argument(
        "--facts",
        dest="facts",
        default=None,
        help="YAML file with snapshot facts to use instead of the host",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v, -vv)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    info_parser = subparsers.add_parser(
        "info",
        help="Show the snapshot and resolved family",
    )
    info_parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )

    subparsers.add_parser(
        "families",
        help="List known families, marking the ones that match",
    )

    check_parser = subparsers.add_parser(
        "check",
        help="Exit 0 if the criteria match, 1 otherwise",
    )
    check_parser.add_argument("--family", default=None, help="OS family")
    check_parser.add_argument("--name", default=None, help="Exact OS name")
    check_parser.add_argument("--arch", default=None, help="Exact OS architecture")
    check_parser.add_argument(
        "--os-version",
        dest="os_version",
        default=None,
        help="Exact OS version",
    )
    check_parser.add_argument(
        "--when",
        default=None,
        help="Jinja2 condition expression",
    )

    return parser


def setup_logging(verbosity: int) -> None:
    """Configure stderr logging from the -v count."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def cmd_info(snapshot: Snapshot, as_json: bool) -> int:
    """Print the snapshot and its resolved family."""
    facts = dict(snapshot.as_dict(), family=resolve_current_family(snapshot))
    if as_json:
        print(json.dumps(facts, indent=2))
    else:
        for key, value in facts.items():
            print(f"{key}: {value}")
    return ExitCode.SUCCESS


def cmd_families(snapshot: Snapshot) -> int:
    """Print all families in resolution order."""
    for family in FAMILY_PRIORITY:
        marker = "*" if classify(family, snapshot) else " "
        print(f"{marker} {family}")
    return ExitCode.SUCCESS


def cmd_check(snapshot: Snapshot, args: argparse.Namespace) -> int:
    """Evaluate criteria and/or a condition expression."""
    query = Query(
        family=args.family,
        name=args.name,
        arch=args.arch,
        version=args.os_version,
    )

    if query.is_empty and not args.when:
        print("[osfamily] check needs at least one criterion", file=sys.stderr)
        return ExitCode.INVALID_ARGUMENT

    result = True
    if not query.is_empty:
        result = matches(query, snapshot)
    if result and args.when:
        result = evaluate_condition(args.when, snapshot)

    logger.info("check %s when=%r -> %s", query, args.when, result)
    return ExitCode.SUCCESS if result else ExitCode.NO_MATCH


def main(args: Optional[List[str]] = None) -> int:
    """Main entrypoint for osfamily CLI."""
    parser = create_parser()
    parsed = parser.parse_args(args)
    setup_logging(parsed.verbose)

    if parsed.command is None:
        parser.print_help()
        return ExitCode.SUCCESS

    try:
        if parsed.facts:
            snapshot = load_snapshot_file(parsed.facts)
        else:
            snapshot = current_snapshot()

        if parsed.command == "info":
            return cmd_info(snapshot, parsed.json)
        if parsed.command == "families":
            return cmd_families(snapshot)
        return cmd_check(snapshot, parsed)
    except OsFamilyError as e:
        print(f"[osfamily] ERROR: {e}", file=sys.stderr)
        return e.exit_code
    except KeyboardInterrupt:
        return ExitCode.KEYBOARD_INTERRUPT


if __name__ == "__main__":
    sys.exit(main())
