"""Command line entry point.

Usage::

    zenith-create my-app
    zenith-create            # prompts for the name
    python -m zenith_create.cli my-app

The materialization strategy and installer commands come from
``ZENITH_*`` environment variables (see :meth:`Config.from_env`).
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Sequence

from pydantic import ValidationError

from zenith_create.config import Config
from zenith_create.create import create
from zenith_create.scaffolder import ScaffoldError
from zenith_create.utils import print_error


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zenith-create",
        description="Scaffold a new Zenith application",
    )
    parser.add_argument(
        "name",
        nargs="?",
        default=None,
        help="Project name (prompted for when omitted)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for ``zenith-create``."""
    args = build_parser().parse_args(argv)

    try:
        config = Config.from_env()
    except (ValidationError, ValueError) as exc:
        print_error(f"Invalid configuration: {exc}")
        sys.exit(1)

    try:
        asyncio.run(create(args.name, config))
    except ScaffoldError as exc:
        print_error(str(exc))
        sys.exit(1)


if __name__ == "__main__":
    main()
