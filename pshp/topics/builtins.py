# pshp/topics/builtins.py
#
# In-process commands. Each handler gets the core and the full token
# list (tokens[0] is the command name) and returns a Signal.
#
#   cd <path>    change working directory (no argument -> usage error)
#   help         banner + builtin names in table order
#   exit         terminate the loop (extra args ignored)
#
# None of these ever fork.

from pshp.model.schema import HELP_FOOTER, HELP_HEADER, Signal


def cd(core, tokens):
    if len(tokens) < 2:
        core.report('expected argument to "cd"')
        return Signal.CONTINUE

    try:
        core.os.chdir(tokens[1])
    except OSError as e:
        core.report(e.strerror or str(e))
    return Signal.CONTINUE


def help_cmd(core, tokens):
    lines = list(HELP_HEADER)
    for name in core.commands:
        lines.append("  " + name)
    lines.extend(HELP_FOOTER)
    core.write("\n".join(lines) + "\n")
    return Signal.CONTINUE


def exit_cmd(core, tokens):
    return Signal.TERMINATE


COMMANDS = {
    "cd":   (cd,       "cd <path>"),
    "help": (help_cmd, "help"),
    "exit": (exit_cmd, "exit"),
}
