from libhyprscroll.navigator import Navigator

HEADER = "{:>4} {:>4} {:>7} {:>7}  {:18}  {:<16}  title"
ROW = "{:>4} {:>4} {:>7} {:>7}  {:18} {:<17} {}"


def show(options, hyprctl) -> None:
    "Print the columns and rows of the active workspace."
    workspace_id = hyprctl.active_workspace_id()
    print(f"Active workspace id: {workspace_id}")

    columns = Navigator(hyprctl).columns(workspace_id)
    print(HEADER.format("col", "row", "x", "y", "address", "class"))
    for column in columns:
        for r in column:
            c = r.client
            print(ROW.format(column.col, r.row, column.x, r.y, c.address, c.wm_class, c.title))

    print()
    print("Env knobs:")
    print("  HYPR_COL_EPS=<px>    # column-grouping tolerance (default 40)")
    print("Use --dry to print dispatches, one per line.")


def add_subcommand(subparsers, parents):
    parser = subparsers.add_parser(
        "print", parents=parents, help="Print current columns/rows (the default)."
    )
    parser.set_defaults(func=show)
