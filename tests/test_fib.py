import io

import pytest

from nexusprover.fib import fib, main, read_inputs


def test_zero_steps_returns_second_initial():
    assert fib(0, 7, 11) == 11


def test_anonymous_input():
    assert fib(9, 1, 1) == 89


@pytest.mark.parametrize("n", range(2, 30))
def test_recurrence_holds(n):
    assert fib(n, 3, 4) == (fib(n - 1, 3, 4) + fib(n - 2, 3, 4)) % 2**32


def test_wraps_at_32_bits():
    assert fib(1, 2**32 - 1, 1) == 0
    assert all(0 <= fib(n, 1, 1) < 2**32 for n in range(0, 200, 7))


def test_read_all_three_inputs():
    assert read_inputs(io.StringIO("10\n2\n3\n")) == (10, 2, 3)


def test_missing_optional_inputs_default_to_one():
    assert read_inputs(io.StringIO("10\n")) == (10, 1, 1)


def test_unparseable_optional_inputs_default_to_one():
    assert read_inputs(io.StringIO(" 10 \nabc\n-5\n")) == (10, 1, 1)


def test_empty_input_rejected():
    with pytest.raises(ValueError, match="No first input provided"):
        read_inputs(io.StringIO(""))


@pytest.mark.parametrize("text", ["x\n", "4294967296\n", "-1\n", "1_0\n"])
def test_bad_first_input_rejected(text):
    with pytest.raises(ValueError, match="Failed to parse first input as u32"):
        read_inputs(io.StringIO(text))


def test_main_prints_result(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("9\n1\n1\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "89\n"


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("nope\n"))
    assert main([]) == 1
    assert "Failed to parse first input" in capsys.readouterr().err