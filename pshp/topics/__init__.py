# pshp/topics/__init__.py
#
# Builtin table, in the order help lists it.

from pshp.topics import builtins

ALL_COMMANDS = {}
ALL_COMMANDS.update(builtins.COMMANDS)
