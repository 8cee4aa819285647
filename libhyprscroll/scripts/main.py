import argparse
import logging
import sys
from pathlib import Path

from libhyprscroll.hyprctl import Hyprctl
from libhyprscroll.log_utils import init_log, logger
from libhyprscroll.scripts import focus, moveto, show, workspaces
from libhyprscroll.utils import VERSION, HyprscrollError


def common_options(suppress=False):
    # Subcommands repeat the global options; SUPPRESS keeps a subparser from
    # resetting a value already given before the subcommand name.
    def default(value):
        return argparse.SUPPRESS if suppress else value

    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument(
        "--dry",
        action="store_true",
        default=default(False),
        help="Print intended hyprctl dispatches, one per line, instead of sending them.",
    )
    parser.add_argument(
        "-l",
        "--log-level",
        default=default("WARNING"),
        dest="log_level",
        type=str.upper,
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        help="Set log level",
    )
    parser.add_argument(
        "-p",
        "--log-path",
        default=default(None),
        dest="log_path",
        type=Path,
        help="Log to this file instead of stderr",
    )
    return parser


def main(argv=None):
    main_parser = argparse.ArgumentParser(
        prog="hyprscrolling-orchestrator",
        description="Absolute column navigation for hyprscrolling "
        "(focus cycles rows; moveto uses swapcol only).",
        parents=[common_options()],
    )
    main_parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=VERSION,
    )

    parents = [common_options(suppress=True)]
    subparsers = main_parser.add_subparsers()
    show.add_subcommand(subparsers, parents)
    focus.add_subcommand(subparsers, parents)
    moveto.add_subcommand(subparsers, parents)
    workspaces.add_subcommand(subparsers, parents)
    main_parser.set_defaults(func=show.show)

    options = main_parser.parse_args(argv)
    init_log(getattr(logging, options.log_level), log_path=options.log_path)

    hyprctl = Hyprctl(dry=options.dry)
    try:
        options.func(options, hyprctl)
    except HyprscrollError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
