"""Entry point for the Hot Tabs CLI."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import __version__
from .core.log import configure_logging, logger

LOG_PATH = Path.home() / ".hot-tabs" / "hot-tabs.log"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hot-tabs",
        description="Terminal document viewer with pinned/unpinned hot tabs",
    )
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"hot-tabs {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help=f"Write debug log to {LOG_PATH}",
    )
    parser.add_argument(
        "--prefs",
        type=Path,
        default=None,
        help="Preferences file (default: ~/.hot-tabs/preferences.yaml)",
    )
    parser.add_argument(
        "files",
        nargs="*",
        type=Path,
        help="Documents to open as tabs",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Run Hot Tabs."""
    args = build_parser().parse_args(argv)

    if args.debug:
        configure_logging(LOG_PATH)

    missing = [p for p in args.files if not p.is_file()]
    for path in missing:
        print(f"hot-tabs: not a file: {path}", file=sys.stderr)
    files = [p for p in args.files if p.is_file()]

    try:
        from .app import run_app

        run_app(paths=files, prefs_path=args.prefs)
    except (KeyboardInterrupt, SystemExit):
        pass
    except Exception:
        logger.debug("Fatal error in hot-tabs", exc_info=True)
        import traceback

        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
