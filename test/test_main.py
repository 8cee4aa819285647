import logging

import pytest

from libhyprscroll.log_utils import logger
from libhyprscroll.scripts import main


@pytest.fixture
def run(monkeypatch, three_columns):
    def factory(dry=False):
        three_columns.dry = dry
        return three_columns

    monkeypatch.setattr(main, "Hyprctl", factory)

    def run_main(*argv):
        main.main(list(argv))
        return three_columns

    yield run_main

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def test_print_is_the_default(run, capsys):
    run()
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert lines[0] == "Active workspace id: 1"
    assert lines[1].split() == ["col", "row", "x", "y", "address", "class", "title"]
    assert lines[2].split() == ["0", "0", "0", "0", "0xa", "kitty", "0xa"]
    assert lines[4].split() == ["1", "1", "958", "400", "0xb1", "kitty", "0xb1"]
    assert "HYPR_COL_EPS=<px>" in out


def test_print_subcommand(run, capsys):
    run("print")
    assert "0xc" in capsys.readouterr().out


def test_focus(run):
    hyprctl = run("focus", "2")
    assert hyprctl.dispatched == ["dispatch focuswindow address:0xb0"]


def test_focus_row(run):
    hyprctl = run("focus", "2.2")
    assert hyprctl.dispatched == ["dispatch focuswindow address:0xb2"]


def test_focus_col(run):
    hyprctl = run("focus-col", "1.1")
    assert hyprctl.dispatched == ["dispatch focuswindow address:0xb1"]


def test_moveto_accepts_row(run):
    hyprctl = run("moveto", "3.1")
    assert hyprctl.batches == [["dispatch layoutmsg swapcol r"] * 2]


@pytest.mark.parametrize(
    "argv",
    [
        ("--dry", "moveto", "3"),
        ("moveto", "--dry", "3"),
        ("moveto", "3", "--dry"),
    ],
)
def test_dry_flag_anywhere(run, capsys, argv):
    hyprctl = run(*argv)
    assert hyprctl.batches == []
    assert capsys.readouterr().out.splitlines() == ["hyprctl dispatch layoutmsg swapcol r"] * 2


def test_bad_target(run, capsys):
    with pytest.raises(SystemExit) as e:
        run("focus", "two")
    assert e.value.code == 1
    assert "error: invalid column 'two'" in capsys.readouterr().err


def test_missing_row(run, capsys):
    with pytest.raises(SystemExit) as e:
        run("focus", "1.4")
    assert e.value.code == 1
    assert "error: no such row 4 in col 0" in capsys.readouterr().err


def test_no_columns(run, capsys, three_columns):
    three_columns.workspace_id = 9
    with pytest.raises(SystemExit) as e:
        run("focus", "1")
    assert e.value.code == 1
    assert "error: no columns" in capsys.readouterr().err


def test_workspaces(run, capsys, three_columns):
    three_columns.replies["workspaces -j"] = (
        '[{"id": 1, "name": "1", "monitor": "DP-1", "windows": 5}]'
    )
    run("workspaces")
    lines = capsys.readouterr().out.splitlines()
    assert lines[1].split() == ["1", "1", "DP-1", "5"]


def test_log_to_file(run, tmp_path):
    log_path = tmp_path / "logs" / "hyprscroll.log"
    run("-l", "debug", "-p", str(log_path), "focus", "1")
    assert "Focusing col 0 row 0" in log_path.read_text()


def test_version(run, capsys):
    with pytest.raises(SystemExit) as e:
        run("--version")
    assert e.value.code == 0
    assert capsys.readouterr().out.strip()
