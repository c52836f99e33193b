import pytest

from wordscope.reports import (
    Comparison,
    compare_results,
    format_comparison,
    format_results,
    format_table,
    parse_results,
)
from wordscope.results import AnalysisResult


def _result(identifier, words, sentences=0):
    result = AnalysisResult(source_identifier=identifier, sentence_count=sentences)
    for word in words:
        result.add_word(word)
    return result


def test_format_results_empty():
    assert format_results([]) == (
        "=== Результаты анализа ===\nНет данных для сохранения.\n"
    )


def test_format_results_contains_sections():
    text = format_results([_result("книга", ["кот", "кот", "собака"], sentences=4)])
    lines = text.splitlines()
    assert lines[0] == "=== Результаты анализа ==="
    assert "=== Результаты для источника: книга ===" in lines
    assert "  кот: 2 раз" in lines
    assert "  собака (длина: 6)" in lines
    assert "Количество предложений: 4" in lines


def test_format_results_limits_top_words():
    words = [f"w{i:02d}" for i in range(15)]
    text = format_results([_result("src", words)])
    freq_lines = [line for line in text.splitlines() if line.endswith(" раз")]
    length_lines = [line for line in text.splitlines() if "(длина:" in line]
    assert len(freq_lines) == 10
    assert len(length_lines) == 5


def test_parse_round_trip_identifiers():
    results = [_result("alpha", ["кот"]), _result("beta", ["пёс", "пёс"])]
    parsed = parse_results(format_results(results).splitlines(keepends=True))
    assert [r.source_identifier for r in parsed] == ["alpha", "beta"]
    assert parsed[1].word_frequency["  пёс"] == 2


def test_parse_keeps_raw_keys_and_sentence_line():
    parsed = parse_results(format_results([_result("x", ["кот"], sentences=3)]).splitlines())
    freq = parsed[0].word_frequency
    assert freq["  кот"] == 1
    assert freq["Количество предложений"] == 3
    assert parsed[0].sentence_count == 0
    assert parsed[0].words_by_length == {}


def test_parse_empty_report_has_no_results():
    assert parse_results(format_results([]).splitlines()) == []


def test_parse_top_header_sets_identifier():
    parsed = parse_results(["Топ 10 самых часто встречающихся слов для книга:", "  кот: 2 раз"])
    assert parsed[0].source_identifier == "книга"
    assert parsed[0].word_frequency == {"  кот": 2}


def test_parse_rejects_non_numeric_count():
    with pytest.raises(ValueError):
        parse_results(["=== Результаты для источника: a ===", "  кот: много"])


def test_compare_results_common_words_sorted():
    first = _result("a", ["кот"] * 5 + ["дом"] + ["лес"] * 2, sentences=7)
    second = _result("b", ["кот", "дом", "лес", "река"], sentences=2)
    comparison = compare_results(first, second)
    assert comparison.sentence_difference == abs(7 - 2)
    assert [w for w, _ in comparison.word_differences] == ["кот", "лес", "дом"]
    diffs = [d for _, d in comparison.word_differences]
    assert diffs == sorted(diffs, reverse=True)
    assert comparison.second_longest == ["река"]


def test_compare_results_limits_to_five():
    words = [f"w{i}" for i in range(8)]
    comparison = compare_results(_result("a", words), _result("b", words))
    assert len(comparison.word_differences) == 5


def test_format_comparison_without_common_words():
    text = format_comparison(compare_results(_result("a", ["кот"]), _result("b", ["пёс"])))
    assert "Нет общих слов для сравнения." in text
    assert "a: кот \n" in text
    assert "b: пёс \n" in text


def test_format_comparison_lists_differences():
    comparison = Comparison("a", "b", 3, 1, [("кот", 4)], ["собака"], ["лес"])
    text = format_comparison(comparison)
    assert "Разница: 2 предложений" in text
    assert "  кот: разница 4\n" in text
    assert "Слова с наибольшей разницей в частоте:" in text


def test_format_table_rows():
    table = format_table([_result("a", ["кот", "кот"]), _result("b", ["дом"])])
    lines = table.splitlines()
    assert lines[1] == "│     Слово     │    Частота    │     Длина     │"
    assert len(lines) == 6
    assert lines[3] == f"│ {'кот':<13} │ {2:<13} │ {3:<13} │"
    assert lines[-1].startswith("└")


def test_format_table_empty_has_frame_only():
    assert len(format_table([]).splitlines()) == 4