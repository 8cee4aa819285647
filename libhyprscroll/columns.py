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

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from libhyprscroll.model import Client

DEFAULT_EPSILON = 40


@dataclass
class ColumnRow:
    row: int
    y: int
    client: Client


@dataclass
class Column:
    """A group of windows sharing (roughly) the same x position.

    ``x`` is taken from the first window placed in the column and never
    moves afterwards, so later members cannot drag the column sideways.
    """

    col: int
    x: int
    rows: list[ColumnRow] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[ColumnRow]:
        return iter(self.rows)

    def add_client(self, client: Client) -> None:
        self.rows.append(ColumnRow(row=0, y=client.y, client=client))

    def reindex(self) -> None:
        self.rows.sort(key=lambda r: r.y)
        for i, r in enumerate(self.rows):
            r.row = i


def clients_on_workspace(clients: Iterable[Client], workspace_id: int) -> list[Client]:
    """Windows that are mapped, visible and on the given workspace"""
    return [
        c for c in clients if c.mapped and not c.hidden and c.workspace.id == workspace_id
    ]


def columnize(clients: Iterable[Client], eps: int = DEFAULT_EPSILON) -> list[Column]:
    """Cluster windows into left-to-right columns of top-to-bottom rows

    Windows are scanned in ``(x, y)`` order; a window joins the column opened
    last when its x is within ``eps`` pixels of that column's x, otherwise it
    opens a new column.
    """
    columns: list[Column] = []

    for client in sorted(clients, key=lambda c: (c.x, c.y)):
        if columns and abs(client.x - columns[-1].x) <= eps:
            columns[-1].add_client(client)
            continue
        column = Column(col=len(columns), x=client.x)
        column.add_client(client)
        columns.append(column)

    for column in columns:
        column.reindex()
    return columns


def find_col_row_by_addr(columns: Iterable[Column], address: str) -> tuple[int, int] | None:
    for column in columns:
        for r in column:
            if r.client.address == address:
                return (column.col, r.row)
    return None
