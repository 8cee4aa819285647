def workspaces(options, hyprctl) -> None:
    "List workspaces known to the compositor."
    print("{:>4}  {:<16} {:<12} {:>7}".format("id", "name", "monitor", "windows"))
    for ws in hyprctl.list_workspaces():
        print(f"{ws.id:>4}  {ws.name:<16} {ws.monitor:<12} {ws.windows:>7}")


def add_subcommand(subparsers, parents):
    parser = subparsers.add_parser(
        "workspaces", parents=parents, help="List workspaces (JSON with text fallback)."
    )
    parser.set_defaults(func=workspaces)
