"""pshp/core.py

Core runtime + init_core() wiring.

Core owns the builtin table, the I/O streams, the OS collaborator and the
loop state. Builtins and the launcher are wired in by init_core(), late, so
that pshp.topics can import freely without pulling Core in at import time.
"""

from __future__ import annotations

import logging
import sys
from collections import deque
from typing import Callable, List, Optional, TextIO

from pshp.config import ShellConfig, load_config
from pshp.errors import ShellError
from pshp.lib.oslayer import OSLayer
from pshp.lib.reader import read_line, read_raw
from pshp.lib.tokens import split_line
from pshp.model.schema import EXIT_SUCCESS, RUNNING, TERMINATED, Signal

log = logging.getLogger(__name__)

Handler = Callable[["Core", List[str]], Signal]


class Core:
    def __init__(
        self,
        cfg: Optional[ShellConfig] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        os_layer: Optional[OSLayer] = None,
    ):
        self.cfg = cfg if cfg is not None else ShellConfig()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.os = os_layer if os_layer is not None else OSLayer(self.cfg.name)

        self.commands = {}      # name -> {handler, usage}, table order
        self.fallback = None    # handler for non-builtins (launcher)
        self.log = deque(maxlen=2 * self.cfg.log_limit)  # newest {"in"}/{"out"} records
        self.state = RUNNING
        self.last_child = None  # ChildStatus of the most recent launch

    # ---- builtin registry ----

    def register(self, name: str, handler: Handler, usage=""):
        if name in self.commands:
            raise ValueError(f"Builtin already registered: {name}")
        self.commands[name] = {"handler": handler, "usage": usage}

    def lookup(self, name: str) -> Optional[Handler]:
        entry = self.commands.get(name)
        return entry["handler"] if entry else None

    # ---- streams ----

    def write(self, text: str):
        self.stdout.write(text)

    def report(self, msg: str):
        """Operator-facing diagnostic: '<name>: <msg>' on stderr."""
        self.stderr.write(f"{self.cfg.name}: {msg}\n")
        self.stderr.flush()

    def flush(self):
        self.stdout.flush()
        self.stderr.flush()

    # ---- dispatcher ----

    def dispatch(self, tokens: List[str]) -> Signal:
        if not tokens:
            return Signal.CONTINUE

        head = tokens[0]
        handler = self.lookup(head)
        if handler is None:
            if self.fallback is None:
                self.report(f"Unknown command: {head}")
                return Signal.CONTINUE
            log.debug("external: %r", tokens)
            return self.fallback(self, tokens)

        log.debug("builtin: %r", tokens)
        try:
            return handler(self, tokens)
        except ShellError:
            raise
        except Exception as e:
            self.report(f"{head}: {e}")
            usage = self.commands[head]["usage"]
            if usage:
                self.report(f"usage: {usage}")
            return Signal.CONTINUE

    def execute(self, raw: str) -> Signal:
        self.log.append({"in": raw})
        signal = self.dispatch(split_line(raw))
        self.log.append({"out": signal.value})
        return signal

    # ---- loop driver ----

    def loop(self) -> int:
        """Prompt / read / dispatch until a command says TERMINATE.

        AllocationError is the only thing that escapes.
        """
        self.state = RUNNING
        while self.state == RUNNING:
            self.write(self.cfg.prompt)
            self.flush()

            if self.cfg.exit_on_eof:
                line, at_eof = read_raw(self.stdin)
                if at_eof and not line:
                    # Ctrl-D on an empty line behaves like exit
                    self.write("\n")
                    self.flush()
                    self.state = TERMINATED
                    break
            else:
                # EOF is just another empty line
                line = read_line(self.stdin)

            if self.execute(line) is Signal.TERMINATE:
                self.state = TERMINATED

        return EXIT_SUCCESS


def init_core(
    cfg: Optional[ShellConfig] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
    os_layer: Optional[OSLayer] = None,
) -> Core:
    # Late imports to avoid circular-import issues.
    from pshp.topics import ALL_COMMANDS
    from pshp.topics.launcher import launch

    if cfg is None:
        cfg = load_config()

    core = Core(cfg, stdin=stdin, stdout=stdout, stderr=stderr, os_layer=os_layer)

    for name, (handler, usage) in ALL_COMMANDS.items():
        core.register(name, handler, usage)

    core.fallback = launch
    return core
