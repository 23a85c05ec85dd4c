"""Main CLI entry point for winrt-pack."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from winrt_pack import __version__
from winrt_pack.errors import UnrecognizedPlatform
from winrt_pack.pipeline import run
from winrt_pack.platforms import Platform, parse_platform
from winrt_pack.plan import Intent

LOG_LEVEL_ENV = "WINRT_PACK_LOG_LEVEL"


def _platform_arg(token: str) -> Platform:
    try:
        return parse_platform(token)
    except UnrecognizedPlatform as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="winrt-pack",
        description="A tool that assists in packaging Rust/WinRT components for NuGet.",
    )
    ap.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    ap.add_argument("-d", "--dir", help="Sets the current directory when running the tool")
    ap.add_argument(
        "-a",
        "--all",
        action="store_true",
        help="Builds all platforms, and packs [overrides everything]",
    )
    ap.add_argument(
        "-b",
        "--build",
        action="append",
        type=_platform_arg,
        default=None,
        metavar="PLATFORM",
        help="Builds the project for Release (x64 or ARM64; repeatable)",
    )
    ap.add_argument(
        "-p",
        "--pack",
        action="store_true",
        help="Packs the resulting files. Uses the nuget directory",
    )
    return ap


def parse_intent(argv: list[str] | None = None) -> Intent:
    """Parse argv into an Intent. Bad flags or platform tokens exit with status 2."""
    args = build_parser().parse_args(argv)
    return Intent(dir=args.dir, all=args.all, build=tuple(args.build or ()), pack=args.pack)


def _configure_logging() -> None:
    level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    _configure_logging()
    intent = parse_intent(argv)
    sys.exit(run(intent))


if __name__ == "__main__":
    main()
