# pshp/lib/tokens.py
# Tokenizer (no Core dependency).
#
# Whitespace splitting only: no quotes, no escapes, no expansion.
# Runs of delimiters collapse, so no token is ever "".

from __future__ import annotations

import re
from typing import List

from pshp.errors import AllocationError
from pshp.model.schema import TOKEN_DELIMITERS

_DELIM_RUN = re.compile("[" + re.escape(TOKEN_DELIMITERS) + "]+")


def split_line(line: str) -> List[str]:
    """'  ls   -la  ' -> ['ls', '-la'];  '' / ' \\t ' -> []"""
    try:
        return [tok for tok in _DELIM_RUN.split(line) if tok]
    except MemoryError as e:
        raise AllocationError() from e
