from libhyprscroll.navigator import Navigator
from libhyprscroll.reference import parse_abs_row


def moveto(options, hyprctl) -> None:
    target = parse_abs_row(options.target)
    Navigator(hyprctl).moveto_abs(target.col, target.row)


def add_subcommand(subparsers, parents):
    parser = subparsers.add_parser(
        "moveto",
        parents=parents,
        help="Move the active window's column to an absolute column; "
        "accepts `N` or `N.R` (the row is ignored).",
    )
    parser.add_argument("target", help="1-based column")
    parser.set_defaults(func=moveto)
