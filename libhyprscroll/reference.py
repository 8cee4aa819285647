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
"""
Targets typed by the user.

Absolute targets are ``N`` or ``N.R``: ``N`` is a 1-based column and ``R``
a 0-based row. The debug form ``C`` or ``C.R`` is 0-based in both halves.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from libhyprscroll.utils import HyprscrollError

_INDEX_RE = re.compile(r"\+?[0-9]+")


class TargetError(HyprscrollError):
    pass


class Target(NamedTuple):
    col: int
    row: int | None


def _parse_index(token: str, what: str, text: str) -> int:
    token = token.strip()
    if not _INDEX_RE.fullmatch(token):
        raise TargetError(f"invalid {what} {token!r} in target {text!r}")
    return int(token)


def _split(text: str, what: str) -> Target:
    head, sep, tail = text.partition(".")
    col = _parse_index(head, what, text)
    if not sep:
        return Target(col, None)
    return Target(col, _parse_index(tail, "row", text))


def parse_abs_row(text: str) -> Target:
    """Parse ``N`` or ``N.R``; ``row`` is None when no row was given"""
    return _split(text, "column")


def parse_col_row(text: str) -> Target:
    """Parse the 0-based ``C`` or ``C.R`` form, the row defaulting to 0"""
    col, row = _split(text, "column index")
    return Target(col, 0 if row is None else row)


def clamp_abs_to_col_index(abs_col: int, ncols: int) -> int:
    """Map a 1-based column onto an existing 0-based column index

    Anything left of the first column resolves to it and anything right of
    the last resolves to the last, so no absolute column ever misses.
    """
    if ncols <= 0:
        return 0
    return min(max(abs_col - 1, 0), ncols - 1)
