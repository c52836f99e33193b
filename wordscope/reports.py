"""Text reports of analysis results: saved summaries, comparisons and tables."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from wordscope.results import AnalysisResult

SAVE_HEADER = "=== Результаты анализа ==="
NO_DATA = "Нет данных для сохранения."
SOURCE_MARKER = "=== Результаты для источника: "
TOP_WORDS_IN_FILE = 10
LONGEST_WORDS_IN_FILE = 5
COMPARED_WORDS = 5

_TOP_HEADER = re.compile(r"Топ (\d+) самых часто встречающихся слов для ([-а-яА-ЯёЁa-zA-Z]+):")
_SENTENCES = re.compile(r"Количество предложений для ([-а-яА-ЯёЁa-zA-Z]+): (\d+)")
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")

_TABLE_TOP = "┌───────────────┬───────────────┬───────────────┐"
_TABLE_HEAD = "│     Слово     │    Частота    │     Длина     │"
_TABLE_SEP = "├───────────────┼───────────────┼───────────────┤"
_TABLE_BOTTOM = "└───────────────┴───────────────┴───────────────┘"


def _first_with_identifier(
    results: Sequence[AnalysisResult], identifier: str
) -> AnalysisResult:
    return next(r for r in results if r.source_identifier == identifier)


def format_results(results: Sequence[AnalysisResult]) -> str:
    """Render *results* in the format written by a save."""
    parts = [SAVE_HEADER + "\n"]
    if not results:
        parts.append(NO_DATA + "\n")
        return "".join(parts)

    for result in results:
        target = _first_with_identifier(results, result.source_identifier)
        parts.append(f"\n{SOURCE_MARKER}{result.source_identifier} ===\n")
        parts.append(f"Топ {TOP_WORDS_IN_FILE} самых часто встречающихся слов:\n")
        parts.extend(
            f"  {word}: {frequency} раз\n"
            for word, frequency in target.top_words(TOP_WORDS_IN_FILE)
        )
        parts.append(f"\nТоп {LONGEST_WORDS_IN_FILE} самых длинных слов:\n")
        parts.extend(
            f"  {word} (длина: {length})\n"
            for word, length in target.longest_words(LONGEST_WORDS_IN_FILE)
        )
        parts.append(f"\nКоличество предложений: {target.sentence_count}\n")
    return "".join(parts)


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"no number at the start of {text!r}")
    return int(match.group(1))


def parse_results(lines: Iterable[str]) -> list[AnalysisResult]:
    """Read results back from the lines of a saved report.

    Raises ValueError when a "name: value" line carries no leading number.
    """
    parsed: list[AnalysisResult] = []
    current = AnalysisResult()
    current_source = ""

    for raw in lines:
        line = raw[:-1] if raw.endswith("\n") else raw
        if SOURCE_MARKER in line:
            if current_source:
                parsed.append(current)
                current = AnalysisResult()
            start = line.find(": ") + 2
            end = line.find(" ===")
            current_source = line[start:end] if end >= start else line[start:]
            current.source_identifier = current_source
        elif "Топ" in line:
            match = _TOP_HEADER.search(line)
            if match:
                current_source = match.group(2)
                current.source_identifier = current_source
        elif ": " in line:
            colon = line.find(": ")
            current.word_frequency[line[:colon]] = _leading_int(line[colon + 2:])
        elif "Количество предложений для" in line:
            match = _SENTENCES.search(line)
            if match:
                current.sentence_count = int(match.group(2))

    if current_source:
        parsed.append(current)
    return parsed


@dataclass
class Comparison:
    """Side-by-side figures of two analysed sources."""

    first_identifier: str
    second_identifier: str
    first_sentences: int
    second_sentences: int
    word_differences: list[tuple[str, int]] = field(default_factory=list)
    first_longest: list[str] = field(default_factory=list)
    second_longest: list[str] = field(default_factory=list)

    @property
    def sentence_difference(self) -> int:
        return abs(self.first_sentences - self.second_sentences)


def _longest_or_empty(result: AnalysisResult) -> list[str]:
    return result.longest_group() if result.words_by_length else []


def compare_results(first: AnalysisResult, second: AnalysisResult) -> Comparison:
    """Compare sentence counts, shared word frequencies and longest words."""
    differences = [
        (word, abs(count - second.word_frequency[word]))
        for word, count in sorted(first.word_frequency.items())
        if word in second.word_frequency
    ]
    differences.sort(key=lambda item: item[1], reverse=True)
    return Comparison(
        first_identifier=first.source_identifier,
        second_identifier=second.source_identifier,
        first_sentences=first.sentence_count,
        second_sentences=second.sentence_count,
        word_differences=differences[:COMPARED_WORDS],
        first_longest=_longest_or_empty(first),
        second_longest=_longest_or_empty(second),
    )


def format_comparison(comparison: Comparison) -> str:
    """Render a comparison as console text."""
    c = comparison
    parts = [
        "\n=== Сравнение количества предложений ===\n",
        f"{c.first_identifier}: {c.first_sentences} предложений\n",
        f"{c.second_identifier}: {c.second_sentences} предложений\n",
        f"Разница: {c.sentence_difference} предложений\n",
        "\n=== Сравнение частот слов ===\n",
    ]
    if c.word_differences:
        parts.append("Слова с наибольшей разницей в частоте:\n")
        parts.extend(f"  {word}: разница {diff}\n" for word, diff in c.word_differences)
    else:
        parts.append("Нет общих слов для сравнения.\n")
    parts.append("\n=== Сравнение самых длинных слов ===\n")
    parts.append(f"{c.first_identifier}: " + "".join(f"{w} " for w in c.first_longest) + "\n")
    parts.append(f"{c.second_identifier}: " + "".join(f"{w} " for w in c.second_longest) + "\n")
    return "".join(parts)


def format_table(results: Iterable[AnalysisResult]) -> str:
    """Render every word of every result as a word/frequency/length table."""
    rows = [_TABLE_TOP, _TABLE_HEAD, _TABLE_SEP]
    for result in results:
        rows.extend(
            f"│ {word:<13} │ {frequency:<13} │ {len(word):<13} │"
            for word, frequency in sorted(result.word_frequency.items())
        )
    rows.append(_TABLE_BOTTOM)
    return "\n".join(rows) + "\n"