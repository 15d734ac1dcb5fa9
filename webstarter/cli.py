"""Command line entry point.

Usage::

    webstarter new my-site
    webstarter new my-site --output ~/projects --timeout 60
    python -m webstarter new my-site
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from pydantic import ValidationError

from webstarter.config import Config
from webstarter.errors import ScaffoldError
from webstarter.pipeline import Pipeline
from webstarter.prompts import RichPrompter
from webstarter.utils import print_error


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="webstarter",
        description="webstarter -- interactive web project scaffolding",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  webstarter new my-site\n"
            "  webstarter new my-site --output ./sites\n"
        ),
    )
    parser.add_argument("command", nargs="?", help="Command to run (only 'new' is supported)")
    parser.add_argument("name", nargs="?", help="Name of the project to create")
    parser.add_argument(
        "--output", "-o",
        default=".",
        help="Directory the project folder is created in (default: current directory)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=30.0,
        help="Timeout in seconds for downloading remote files (default: 30)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)

    if args.command is None:
        print_error("No arguments given")
        return 1
    if args.command != "new":
        print_error(f"Unknown command: {args.command}")
        return 1
    if not args.name:
        print_error("No name given")
        return 1

    try:
        config = Config(output_dir=Path(args.output), fetch_timeout=args.timeout)
    except ValidationError as exc:
        print_error(f"Invalid options: {exc.errors()[0]['msg']}")
        return 1

    pipeline = Pipeline(config, RichPrompter())
    try:
        asyncio.run(pipeline.run(args.name))
    except ScaffoldError as exc:
        print_error(str(exc))
        return 1
    return 0


def run() -> None:
    """Console-script wrapper around :func:`main`."""
    sys.exit(main())


if __name__ == "__main__":
    run()
