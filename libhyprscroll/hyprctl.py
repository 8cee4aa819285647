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
    A thin wrapper around the ``hyprctl`` utility. Queries always go to the
    compositor; dispatches are either batched into a single ``hyprctl
    --batch`` call or, in dry mode, printed one per line and never sent.
"""

from __future__ import annotations

import json
import re
import subprocess
import sys
from typing import TYPE_CHECKING

from libhyprscroll.log_utils import logger
from libhyprscroll.model import ActiveWorkspace, Client, Workspace
from libhyprscroll.utils import HyprscrollError, as_flag, as_int, scrub_to_utf8

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import Any, TextIO

HEADER_RE = re.compile(
    r"^workspace ID (?P<id>\d+)\s+\((?P<name>[^)]+)\)\s+on monitor (?P<mon>[^:]+):"
)
KEY_VALUE_RE = re.compile(r"^\s*(?P<k>\w+):\s*(?P<v>.+)$")


class HyprctlError(HyprscrollError):
    pass


def parse_workspaces_json(data: str) -> list[Workspace]:
    """Parse the output of ``hyprctl workspaces -j``

    Raises ``ValueError`` when the data is not a JSON array of objects, which
    is what callers treat as a structural failure.
    """
    records = json.loads(data)
    if not isinstance(records, list):
        raise ValueError(f"expected a JSON array, got {type(records).__name__}")
    workspaces = []
    for record in records:
        if not isinstance(record, dict):
            raise ValueError(f"expected a JSON object, got {type(record).__name__}")
        workspaces.append(Workspace.from_json(record))
    return workspaces


def parse_workspaces_text(data: str) -> list[Workspace]:
    """Parse the plain tabular output of ``hyprctl workspaces``

    Each workspace starts with a header line followed by indented
    ``key: value`` lines. Unknown keys are ignored and unparsable values
    keep their defaults.
    """
    workspaces: list[Workspace] = []
    current: Workspace | None = None

    for line in data.splitlines():
        match = HEADER_RE.match(line)
        if match:
            if current is not None:
                workspaces.append(current)
            current = Workspace(
                id=as_int(match["id"]),
                name=match["name"],
                monitor=match["mon"],
            )
            continue

        match = KEY_VALUE_RE.match(line)
        if match is None or current is None:
            continue

        key, value = match["k"], match["v"].strip()
        if key == "monitorID":
            current.monitor_id = as_int(value)
        elif key == "windows":
            current.windows = as_int(value)
        elif key == "hasfullscreen":
            current.has_fullscreen = as_flag(value)
        elif key == "lastwindow":
            if value and value != "0x0":
                current.last_window = value
        elif key == "lastwindowtitle":
            if value:
                current.last_window_title = value
        elif key == "ispersistent":
            current.is_persistent = as_flag(value)

    if current is not None:
        workspaces.append(current)
    return workspaces


class Hyprctl:
    def __init__(self, binary: str = "hyprctl", dry: bool = False, output: TextIO | None = None):
        """Create a new gateway

        Parameters
        ----------
        binary: str
            Name or path of the hyprctl executable.
        dry: bool
            Print dispatches instead of sending them. Fixed for the lifetime
            of the object; queries are unaffected.
        output: TextIO | None
            Where dry-run dispatches are written, stdout by default.
        """
        self.binary = binary
        self.dry = dry
        self.output = output

    def _run(self, args: Sequence[str]) -> str:
        cmd = [self.binary, *args]
        logger.debug("Running %s", cmd)
        try:
            proc = subprocess.run(cmd, capture_output=True)
        except OSError as e:
            raise HyprctlError(f"failed to run {self.binary} {list(args)!r}: {e}") from e

        if proc.returncode != 0:
            raise HyprctlError(
                f"{self.binary} {list(args)!r} exited with {proc.returncode}: "
                f"{scrub_to_utf8(proc.stderr).strip()}"
            )
        return scrub_to_utf8(proc.stdout)

    def _run_json(self, args: Sequence[str]) -> Any:
        out = self._run([*args, "-j"])
        try:
            return json.loads(out)
        except ValueError as e:
            raise HyprctlError(f"invalid JSON from {self.binary} {list(args)!r}: {e}") from e

    # Queries

    def active_workspace_id(self) -> int:
        data = self._run_json(["activeworkspace"])
        try:
            return ActiveWorkspace.from_json(data).id
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise HyprctlError(f"malformed activeworkspace reply: {data!r}") from e

    def list_clients(self) -> list[Client]:
        data = self._run_json(["clients"])
        try:
            return [Client.from_json(c) for c in data]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise HyprctlError(f"malformed clients reply: {e!r}") from e

    def active_window(self) -> Client:
        data = self._run_json(["activewindow"])
        if not data:
            raise HyprctlError("no focused window")
        try:
            return Client.from_json(data)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise HyprctlError(f"malformed activewindow reply: {e!r}") from e

    def list_workspaces(self) -> list[Workspace]:
        try:
            return parse_workspaces_json(self._run(["workspaces", "-j"]))
        except (HyprctlError, ValueError) as e:
            logger.warning("Falling back to text workspace listing: %s", e)
        return parse_workspaces_text(self._run(["workspaces"]))

    # Dispatches

    def dispatch_batch(self, commands: Sequence[str]) -> None:
        if not commands:
            logger.debug("Nothing to dispatch")
            return

        if self.dry:
            out = self.output or sys.stdout
            for command in commands:
                print(f"{self.binary} {command}", file=out)
            return

        self._run(["--batch", "; ".join(commands)])

    def focus_address(self, address: str) -> None:
        self.dispatch_batch([f"dispatch focuswindow address:{address}"])

    def swapcol_delta(self, delta: int) -> None:
        """Swap the focused column ``|delta|`` times, right if positive"""
        if delta == 0:
            return
        direction = "r" if delta > 0 else "l"
        self.dispatch_batch([f"dispatch layoutmsg swapcol {direction}"] * abs(delta))
