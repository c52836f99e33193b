import io

import pytest

from wordscope.utils import BAR_WIDTH, DEFAULT_MESSAGE, format_progress_bar, show_progress_bar


def _bar(line):
    start = line.index("[") + 1
    end = line.index("]")
    return line[start:end]


def test_bar_width_is_constant():
    for current in range(0, 5):
        assert len(_bar(format_progress_bar(current, 4, "m"))) == BAR_WIDTH


def test_complete_bar_is_full():
    line = format_progress_bar(3, 3, "done")
    assert _bar(line) == "=" * BAR_WIDTH
    assert line.endswith("100.00%")


def test_empty_bar_starts_with_arrow():
    line = format_progress_bar(0, 10, "go")
    assert _bar(line) == ">" + " " * (BAR_WIDTH - 1)
    assert line.endswith("0.00%")


def test_half_bar():
    line = format_progress_bar(1, 2, "x")
    assert _bar(line) == "=" * 25 + ">" + " " * 24
    assert line == "x [" + _bar(line) + "] 50.00%"


def test_default_message():
    assert format_progress_bar(1, 1).startswith(DEFAULT_MESSAGE + " [")


def test_zero_total_rejected():
    with pytest.raises(ValueError):
        format_progress_bar(0, 0)


def test_show_writes_carriage_return():
    stream = io.StringIO()
    show_progress_bar(2, 4, "msg", stream)
    assert stream.getvalue() == "\r" + format_progress_bar(2, 4, "msg")