"""Main entry point for the ListBetter Property command line tool."""

import argparse
import importlib
import json
import sys
from pathlib import Path
from typing import Any, NoReturn

from .domain.errors import InvalidInputError
from .domain.services import count_properties, display_properties, group_by_type, list_properties
from .infrastructure.config import Config
from .infrastructure.logging import LoggerSetup, get_logger, log_timing

MODES = ("display", "list", "group", "count")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="listbetter-property",
        description="List and describe the members of a Python object",
        epilog="""
Examples:
  # Display the public members of a module
  listbetter-property json

  # Display a class with inherited and hidden members
  listbetter-property collections:OrderedDict --inherited --non-enumerable

  # Show values next to each member
  listbetter-property string --values

  # Group members by type, or count them (JSON output)
  listbetter-property string --mode group
  listbetter-property string --mode count

  # Using .env file for listing defaults
  echo 'LISTBETTER_INCLUDE_INHERITED=true' > .env
  listbetter-property pathlib:PurePath
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "target",
        help="Object to inspect as 'package.module' or 'package.module:attr.path'",
    )
    parser.add_argument(
        "-m",
        "--mode",
        choices=MODES,
        default="display",
        help="Output mode (default: display)",
    )
    parser.add_argument(
        "--inherited",
        action="store_true",
        default=None,
        help="Include members inherited from ancestor levels",
    )
    parser.add_argument(
        "--non-enumerable",
        action="store_true",
        default=None,
        help="Include hidden (underscore-prefixed) members",
    )
    parser.add_argument(
        "--no-types",
        dest="show_types",
        action="store_false",
        default=None,
        help="Do not report member types",
    )
    values = parser.add_mutually_exclusive_group()
    values.add_argument(
        "--values",
        dest="show_values",
        action="store_true",
        default=None,
        help="Report member values",
    )
    values.add_argument(
        "--no-values",
        dest="show_values",
        action="store_false",
        default=None,
        help="Do not report member values",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        help="Directory for a debug log file (default: no log file)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="Enable verbose output with debug logs",
    )
    return parser.parse_args(argv)


def resolve_target(target: str) -> Any:
    """
    Import the object named by a 'module:attr.path' target.

    Raises:
        ValueError: If the module or attribute cannot be found
    """
    module_name, _, attr_path = target.partition(":")
    if not module_name:
        raise ValueError(f"Invalid target: {target!r}")

    try:
        obj = importlib.import_module(module_name)
    except ImportError as e:
        raise ValueError(f"Cannot import module {module_name!r}: {e}") from e

    for attr in filter(None, attr_path.split(".")):
        try:
            obj = getattr(obj, attr)
        except AttributeError as e:
            raise ValueError(f"{target!r} has no attribute {attr!r}") from e
    return obj


def _json_record(data: dict[str, Any]) -> dict[str, Any]:
    """Replace a value JSON cannot encode with its repr."""
    if "value" in data:
        try:
            json.dumps(data["value"], default=repr)
        except (TypeError, ValueError):
            data["value"] = repr(data["value"])
    return data


def render(obj: Any, mode: str, config: Config) -> str:
    """Produce the output text for one mode."""
    options = config.list_options()

    if mode == "display":
        return display_properties(obj, options)
    if mode == "list":
        records = list_properties(obj, options)
        return json.dumps([_json_record(r.to_dict()) for r in records], indent=2, default=repr)
    if mode == "group":
        return json.dumps(group_by_type(obj), indent=2)
    return json.dumps(count_properties(obj).to_dict(), indent=2)


@log_timing
def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point for listing object properties."""
    args = parse_args(argv)

    try:
        config = Config.from_args(
            verbose=args.verbose,
            log_dir=args.log_dir,
            include_inherited=args.inherited,
            include_non_enumerable=args.non_enumerable,
            show_types=args.show_types,
            show_values=args.show_values,
        )
        config.validate()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    LoggerSetup.initialize(config.log_dir, verbose=config.verbose)
    logger = get_logger(__name__)
    logger.debug(f"Target: {args.target}, mode: {args.mode}")

    try:
        obj = resolve_target(args.target)
        output = render(obj, args.mode, config)
    except (ValueError, InvalidInputError) as e:
        logger.error(str(e))
        sys.exit(1)

    print(output)
    sys.exit(0)


if __name__ == "__main__":
    main()
