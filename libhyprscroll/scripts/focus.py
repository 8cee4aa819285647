import argparse
import textwrap

from libhyprscroll.navigator import Navigator
from libhyprscroll.reference import parse_abs_row, parse_col_row


def focus(options, hyprctl) -> None:
    navigator = Navigator(hyprctl)
    target = parse_abs_row(options.target)
    if target.row is None:
        navigator.focus_abs_cycle(target.col)
    else:
        navigator.focus_abs_row(target.col, target.row)


def focus_col(options, hyprctl) -> None:
    col, row = parse_col_row(options.target)
    Navigator(hyprctl).focus_col_row(col, row)


def add_subcommand(subparsers, parents):
    epilog = textwrap.dedent(
        """\
    Examples:
     hyprscrolling-orchestrator focus 2      # column 2; again to cycle its rows
     hyprscrolling-orchestrator focus 2.1    # second row of column 2
     hyprscrolling-orchestrator focus 99     # last column
     """
    )
    parser = subparsers.add_parser(
        "focus",
        parents=parents,
        help="Focus by absolute column; accepts `N` or `N.R`.",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("target", help="1-based column, optionally with a 0-based row")
    parser.set_defaults(func=focus)

    parser = subparsers.add_parser(
        "focus-col",
        parents=parents,
        help="(Debug) Focus by column/row: `C` or `C.R` (0-based).",
    )
    parser.add_argument("target", help="0-based column, optionally with a 0-based row")
    parser.set_defaults(func=focus_col)
