import json

import pytest

from libhyprscroll.hyprctl import Hyprctl, HyprctlError
from libhyprscroll.model import Client


def client_json(
    address, x, y, workspace=1, mapped=True, hidden=False, wm_class="kitty", title=None
):
    return {
        "address": address,
        "mapped": mapped,
        "hidden": hidden,
        "at": [x, y],
        "size": [800, 600],
        "workspace": {"id": workspace, "name": str(workspace)},
        "floating": False,
        "pseudo": False,
        "monitor": 0,
        "class": wm_class,
        "title": title if title is not None else address,
        "fullscreen": 0,
        "xwayland": False,
    }


class FakeHyprctl(Hyprctl):
    """A gateway answering queries from an in-memory layout

    Batched dispatches are recorded in ``batches``, one list of commands per
    ``hyprctl --batch`` call.
    """

    def __init__(self, **kwargs):
        Hyprctl.__init__(self, **kwargs)
        self.workspace_id = 1
        self.clients = []
        self.active = None
        self.batches = []
        self.replies = {}

    def add(self, address, x, y, **kwargs):
        self.clients.append(client_json(address, x, y, **kwargs))
        return address

    @property
    def dispatched(self):
        return [cmd for batch in self.batches for cmd in batch]

    def _run(self, args):
        args = list(args)
        if args[0] == "--batch":
            self.batches.append(args[1].split("; "))
            return ""

        key = " ".join(args)
        if key in self.replies:
            reply = self.replies[key]
            if isinstance(reply, Exception):
                raise reply
            return reply
        if key == "activeworkspace -j":
            return json.dumps({"id": self.workspace_id, "name": str(self.workspace_id)})
        if key == "clients -j":
            return json.dumps(self.clients)
        if key == "activewindow -j":
            for c in self.clients:
                if c["address"] == self.active:
                    return json.dumps(c)
            return "{}"
        raise HyprctlError(f"unexpected hyprctl call {args!r}")


@pytest.fixture
def hyprctl():
    return FakeHyprctl()


@pytest.fixture
def dry_hyprctl():
    return FakeHyprctl(dry=True)


@pytest.fixture
def three_columns(hyprctl):
    """Three columns; the middle one holds three stacked windows"""
    hyprctl.add("0xa", 0, 0)
    hyprctl.add("0xb0", 960, 0)
    hyprctl.add("0xb1", 962, 400)
    hyprctl.add("0xb2", 958, 800)
    hyprctl.add("0xc", 1920, 0)
    hyprctl.active = "0xa"
    return hyprctl


@pytest.fixture(autouse=True)
def no_eps_env(monkeypatch):
    monkeypatch.delenv("HYPR_COL_EPS", raising=False)


@pytest.fixture
def make_client():
    def make(address, x, y, **kwargs):
        return Client.from_json(client_json(address, x, y, **kwargs))

    return make
