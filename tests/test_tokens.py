from __future__ import annotations

import pytest

from pshp.errors import AllocationError
from pshp.lib import tokens
from pshp.lib.tokens import split_line
from pshp.model.schema import TOKEN_DELIMITERS


def test_split_collapses_runs_of_spaces() -> None:
    assert split_line("  ls   -la  ") == ["ls", "-la"]


@pytest.mark.parametrize("line", ["", " ", "\t\t", " \t\r\n\a ", "\a"])
def test_empty_or_all_delimiter_line_has_no_tokens(line: str) -> None:
    assert split_line(line) == []


def test_every_delimiter_splits() -> None:
    assert split_line("a b\tc\rd\ne\af") == ["a", "b", "c", "d", "e", "f"]


def test_other_whitespace_is_not_a_delimiter() -> None:
    # vertical tab and form feed stay inside tokens
    assert split_line("a\vb c\fd") == ["a\vb", "c\fd"]


def test_no_quoting_or_expansion() -> None:
    assert split_line('echo "a b" $HOME') == ["echo", '"a', 'b"', "$HOME"]


@pytest.mark.parametrize(
    "line",
    ["cd /tmp", "  \t exit 1 \r\n", "a\a\ab", "x" * 300 + " " + "y", "one"],
)
def test_tokens_are_never_empty_and_never_hold_delimiters(line: str) -> None:
    toks = split_line(line)
    assert all(toks)
    assert not any(ch in tok for tok in toks for ch in TOKEN_DELIMITERS)


def test_memory_error_becomes_allocation_error(monkeypatch) -> None:
    class Exhausted:
        def split(self, line):
            raise MemoryError

    monkeypatch.setattr(tokens, "_DELIM_RUN", Exhausted())

    with pytest.raises(AllocationError):
        split_line("ls")
