from __future__ import annotations

import io
import pathlib
import sys

import pytest

_REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from stoogesort.cli import PROMPT, main, read_ints


class _Tty(io.StringIO):
    def isatty(self) -> bool:
        return True


def _run(text: str, *argv: str) -> str:
    out = io.StringIO()
    assert main(list(argv), stdin=io.StringIO(text), stdout=out) == 0
    return out.getvalue()


def test_sorts_piped_ints() -> None:
    assert _run("3\n2\n1\n-5\n") == "-5\n1\n2\n3\n"


def test_reverse_flag() -> None:
    assert _run("3\n2\n1\n-5\n", "--reverse") == "3\n2\n1\n-5\n"


def test_blank_lines_and_whitespace_ignored() -> None:
    assert _run("\n 10 \n\n-2\n") == "-2\n10\n"


def test_empty_input_prints_nothing() -> None:
    assert _run("") == ""


def test_terminal_stdin_prints_prompt() -> None:
    out = io.StringIO()
    assert main([], stdin=_Tty("5\n"), stdout=out) == 0
    assert out.getvalue() == PROMPT + "\n"


def test_bad_line_exits_with_usage_error(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        main([], stdin=io.StringIO("1\nabc\n"), stdout=io.StringIO())
    assert exc.value.code == 2
    assert "line 2: not an integer: 'abc'" in capsys.readouterr().err


def test_read_ints() -> None:
    assert read_ints(io.StringIO("7\n-1\n")) == [7, -1]
    with pytest.raises(ValueError, match="line 1"):
        read_ints(io.StringIO("1.5\n"))
