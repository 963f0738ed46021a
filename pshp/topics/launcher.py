# pshp/topics/launcher.py
#
# External commands: anything that is not a builtin.
#   <program> [args...]   execvp in a child, block until it exits or dies
#
# The child's exit code never reaches control flow: always CONTINUE.

from __future__ import annotations

import logging
from typing import List

from pshp.model.schema import Signal

log = logging.getLogger(__name__)


def launch(core, tokens: List[str]) -> Signal:
    argv = list(tokens)
    core.flush()
    try:
        child = core.os.spawn(argv)
    except OSError as e:
        # fork failed; no child exists
        core.report(e.strerror or str(e))
        return Signal.CONTINUE

    core.last_child = child
    log.debug("%s finished: %r", argv[0], child)
    return Signal.CONTINUE
