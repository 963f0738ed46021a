# pshp/model/schema.py
#
# Fixed vocabulary of the shell:
# - prompt / diagnostic prefix defaults
# - token delimiter set
# - continuation signal returned by every dispatched command
# - loop states

from enum import Enum

SHELL_NAME = "pshp"
DEFAULT_PROMPT = "$> "

# space, tab, CR, LF, bell
TOKEN_DELIMITERS = " \t\r\n\a"

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class Signal(Enum):
    CONTINUE = "continue"
    TERMINATE = "terminate"


# -----------------------------
# Loop driver states
# -----------------------------

RUNNING = "running"
TERMINATED = "terminated"


# -----------------------------
# help banner
# -----------------------------
# Builtin names are spliced in between HELP_HEADER and HELP_FOOTER,
# one per line, in table order.

HELP_HEADER = (
    "Phil Shell Pro",
    "Type program names and arguments, and hit enter.",
    "The following are built in:",
)

HELP_FOOTER = (
    "Use the man command for information on other programs.",
)
