# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
from __future__ import annotations

from typing import TYPE_CHECKING

from libhyprscroll.columns import (
    DEFAULT_EPSILON,
    clients_on_workspace,
    columnize,
    find_col_row_by_addr,
)
from libhyprscroll.configurable import Configurable
from libhyprscroll.log_utils import logger
from libhyprscroll.reference import clamp_abs_to_col_index
from libhyprscroll.utils import HyprscrollError, lget

if TYPE_CHECKING:
    from libhyprscroll.columns import Column
    from libhyprscroll.hyprctl import Hyprctl


class NoColumnsError(HyprscrollError):
    pass


class ColumnNotFoundError(HyprscrollError):
    pass


class RowNotFoundError(HyprscrollError):
    pass


class Navigator(Configurable):
    """Absolute column navigation for the hyprscrolling layout.

    Every operation rebuilds the column grid of the active workspace from a
    fresh window snapshot; nothing is remembered between calls. Columns are
    addressed 1-based and clamped onto the existing ones. Rows are 0-based
    and are not clamped.

    Moving a window is done purely with ``layoutmsg swapcol``, one swap per
    column crossed, sent as a single batch.
    """

    defaults = [
        (
            "column_epsilon",
            DEFAULT_EPSILON,
            "Horizontal distance in pixels within which windows share a column.",
        ),
    ]
    env_defaults = {"column_epsilon": "HYPR_COL_EPS"}

    def __init__(self, hyprctl: Hyprctl, **config):
        Configurable.__init__(self, **config)
        self.add_defaults(Navigator.defaults)
        self.hyprctl = hyprctl

    def columns(self, workspace_id: int | None = None) -> list[Column]:
        if workspace_id is None:
            workspace_id = self.hyprctl.active_workspace_id()
        clients = clients_on_workspace(self.hyprctl.list_clients(), workspace_id)
        return columnize(clients, self.column_epsilon)

    def _require_columns(self) -> list[Column]:
        columns = self.columns()
        if not columns:
            raise NoColumnsError("no columns on current workspace")
        return columns

    def _focus(self, columns: list[Column], col: int, row: int) -> None:
        column = lget(columns, col)
        if column is None:
            raise ColumnNotFoundError(f"no such column {col}")
        r = lget(column.rows, row)
        if r is None:
            raise RowNotFoundError(f"no such row {row} in col {col}")
        logger.debug("Focusing col %d row %d (%s)", col, row, r.client.address)
        self.hyprctl.focus_address(r.client.address)

    def focus_col_row(self, col: int, row: int) -> None:
        """Focus a window by 0-based column and row"""
        self._focus(self._require_columns(), col, row)

    def focus_abs_cycle(self, abs_col: int) -> None:
        """Focus a 1-based column, cycling its rows when already inside it"""
        columns = self._require_columns()
        target = clamp_abs_to_col_index(abs_col, len(columns))
        dest = columns[target]

        active = self.hyprctl.active_window()
        current_col, current_row = find_col_row_by_addr(columns, active.address) or (0, 0)

        row = 0
        if current_col == target and dest.rows:
            row = (current_row + 1) % len(dest)
        self._focus(columns, target, row)

    def focus_abs_row(self, abs_col: int, row: int) -> None:
        """Focus an explicit row of a 1-based column, without cycling"""
        columns = self._require_columns()
        self._focus(columns, clamp_abs_to_col_index(abs_col, len(columns)), row)

    def moveto_abs(self, abs_col: int, row: int | None = None) -> int:
        """Move the focused window's column to a 1-based column position

        ``row`` is accepted for symmetry with focus targets and ignored:
        swapcol moves whole columns. Returns the signed number of swaps.
        """
        columns = self._require_columns()
        active = self.hyprctl.active_window()
        current_col, _ = find_col_row_by_addr(columns, active.address) or (0, 0)
        target = clamp_abs_to_col_index(abs_col, len(columns))

        delta = target - current_col
        logger.debug("Moving col %d to col %d (row %r ignored)", current_col, target, row)
        self.hyprctl.swapcol_delta(delta)
        return delta
