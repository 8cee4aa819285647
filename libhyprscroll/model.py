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
Snapshots of the records hyprctl reports. They are read-only and rebuilt on
every query; nothing here talks to the compositor.

The fields navigation depends on (ids, addresses, positions, visibility)
raise ValueError, KeyError or TypeError when missing or malformed. The
workspace listing keeps zero/empty defaults instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from libhyprscroll.utils import as_flag, as_int

if TYPE_CHECKING:
    from typing import Any

Cords = tuple[int, int]


def _int(value: Any) -> int:
    # int() would also take floats and bools
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"expected an integer, got {value!r}")
    return int(value)


def _flag(value: Any) -> bool:
    if not isinstance(value, (bool, int)):
        raise ValueError(f"expected a boolean, got {value!r}")
    return bool(value)


def _cords(value: Any) -> Cords:
    if not isinstance(value, list) or len(value) != 2:
        raise ValueError(f"expected an [x, y] pair, got {value!r}")
    return (_int(value[0]), _int(value[1]))


@dataclass(frozen=True)
class WorkspaceRef:
    id: int
    name: str

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> WorkspaceRef:
        return cls(id=_int(data["id"]), name=str(data.get("name", "")))


@dataclass(frozen=True)
class Client:
    """A window as reported by ``hyprctl clients -j``"""

    address: str
    mapped: bool
    hidden: bool
    at: Cords
    size: Cords
    workspace: WorkspaceRef
    floating: bool = False
    monitor: int = 0
    wm_class: str = ""
    title: str = ""
    fullscreen: int | None = None

    @property
    def x(self) -> int:
        return self.at[0]

    @property
    def y(self) -> int:
        return self.at[1]

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Client:
        fullscreen = data.get("fullscreen")
        return cls(
            address=str(data["address"]),
            mapped=_flag(data["mapped"]),
            hidden=_flag(data["hidden"]),
            at=_cords(data["at"]),
            size=_cords(data["size"]),
            workspace=WorkspaceRef.from_json(data["workspace"]),
            floating=as_flag(data.get("floating", False)),
            monitor=as_int(data.get("monitor")),
            wm_class=str(data.get("class", "")),
            title=str(data.get("title", "")),
            fullscreen=None if fullscreen is None else as_int(fullscreen),
        )


@dataclass(frozen=True)
class ActiveWorkspace:
    id: int
    name: str

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> ActiveWorkspace:
        return cls(id=_int(data["id"]), name=str(data.get("name", "")))


@dataclass
class Workspace:
    id: int
    name: str
    monitor: str
    monitor_id: int = 0
    windows: int = 0
    has_fullscreen: bool = False
    last_window: str | None = None
    last_window_title: str | None = None
    is_persistent: bool = False

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Workspace:
        last_window = data.get("lastwindow")
        last_window_title = data.get("lastwindowtitle")
        return cls(
            id=as_int(data.get("id")),
            name=str(data.get("name", "")),
            monitor=str(data.get("monitor", "")),
            monitor_id=as_int(data.get("monitorID")),
            windows=as_int(data.get("windows")),
            has_fullscreen=as_flag(data.get("hasfullscreen", 0)),
            last_window=last_window if isinstance(last_window, str) else None,
            last_window_title=last_window_title if isinstance(last_window_title, str) else None,
            is_persistent=as_flag(data.get("ispersistent", 0)),
        )
