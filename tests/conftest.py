"""Pytest configuration to make the project root importable.

Also provides a Core wired to in-memory streams, and a fake OS layer for
tests that must not touch the real working directory or fork.
"""

import io
import os
import sys

import pytest

# Project root = parent directory of this tests/ folder
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from pshp.config import ShellConfig  # noqa: E402
from pshp.core import init_core  # noqa: E402
from pshp.lib.oslayer import ChildStatus  # noqa: E402


class FakeOS:
    """Records chdir/spawn calls instead of performing them."""

    def __init__(self, cwd="/home/op", fail_chdir=None, fail_spawn=None):
        self.cwd = cwd
        self.fail_chdir = fail_chdir
        self.fail_spawn = fail_spawn
        self.spawned = []

    def chdir(self, path):
        if self.fail_chdir is not None:
            raise self.fail_chdir
        self.cwd = path

    def spawn(self, argv):
        if self.fail_spawn is not None:
            raise self.fail_spawn
        self.spawned.append(list(argv))
        return ChildStatus(pid=4242, exit_code=0)


@pytest.fixture
def fake_os():
    return FakeOS()


@pytest.fixture
def make_core():
    """make_core(text="", **cfg) -> Core reading text from a StringIO."""

    def _make(text="", os_layer=None, **cfg):
        return init_core(
            ShellConfig(**cfg),
            stdin=io.StringIO(text),
            stdout=io.StringIO(),
            stderr=io.StringIO(),
            os_layer=os_layer if os_layer is not None else FakeOS(),
        )

    return _make
