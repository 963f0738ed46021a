# pshp/lib/oslayer.py
#
# The one collaborator that touches process-wide OS state:
#   - working directory (cd mutates it, children inherit it)
#   - fork / exec / wait for external commands
#
# Core holds a single OSLayer as core.os; tests swap in a fake.

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from typing import List, Optional

from pshp.model.schema import EXIT_FAILURE, SHELL_NAME

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChildStatus:
    pid: int
    exit_code: Optional[int] = None   # set when the child exited
    signal: Optional[int] = None      # set when the child was killed


class OSLayer:
    def __init__(self, name: str = SHELL_NAME):
        self.name = name

    # ---- working directory ----

    def chdir(self, path: str) -> None:
        # OSError propagates; the cd builtin reports it
        os.chdir(path)

    # ---- processes ----

    def spawn(self, argv: List[str]) -> ChildStatus:
        """Fork, execvp argv in the child, block until it is gone.

        Raises OSError only when fork itself fails. An exec failure is
        reported by the child on fd 2 and shows up here as exit_code 1.
        """
        # anything still sitting in Python buffers would be written twice
        sys.stdout.flush()
        sys.stderr.flush()

        pid = os.fork()
        if pid == 0:
            self._exec_child(argv)

        log.debug("spawned pid=%d argv=%r", pid, argv)
        return self._wait(pid)

    def _exec_child(self, argv: List[str]) -> None:
        # never returns: either execvp replaces us or we _exit
        try:
            os.execvp(argv[0], argv)
        except (OSError, ValueError) as e:
            # ValueError: a NUL byte inside one of the tokens
            msg = f"{self.name}: {getattr(e, 'strerror', None) or e}\n"
            try:
                os.write(2, msg.encode("utf-8", "replace"))
            except OSError:
                pass
        finally:
            os._exit(EXIT_FAILURE)

    def _wait(self, pid: int) -> ChildStatus:
        # WUNTRACED: a stopped child is reported, but we keep waiting
        while True:
            _, status = os.waitpid(pid, os.WUNTRACED)
            if os.WIFEXITED(status):
                child = ChildStatus(pid, exit_code=os.WEXITSTATUS(status))
                break
            if os.WIFSIGNALED(status):
                child = ChildStatus(pid, signal=os.WTERMSIG(status))
                break
            log.debug("pid=%d stopped, still waiting", pid)

        log.debug("reaped %r", child)
        return child
