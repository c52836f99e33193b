"""Word, sentence and word-length analysis of text files."""

from __future__ import annotations

import logging
import os
import string
import sys
import time
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from wordscope.reports import (
    Comparison,
    compare_results,
    format_comparison,
    format_results,
    format_table,
    parse_results,
)
from wordscope.results import AnalysisResult, merge_results
from wordscope.settings import (
    CASE_INSENSITIVE,
    IGNORE_NUMBERS,
    IGNORE_SPECIAL_CHARS,
    IGNORE_STOP_WORDS,
    AnalysisSettings,
    UnknownRuleError,
)
from wordscope.utils import show_progress_bar

logger = logging.getLogger(__name__)

SENTENCE_ENDINGS = ".!?"
DEFAULT_TOP_WORDS = 10
DEFAULT_LONGEST_WORDS = 5
DIRECTORY_DELAY = 0.4

_ON = "Включено"
_OFF = "Выключено"


class ResultNotFoundError(LookupError):
    """Raised when no result carries the requested source identifier."""


def _split_keep_empty(text: str, delimiter: str) -> list[str]:
    """Split like a stream read up to *delimiter*: no trailing empty piece."""
    if not text:
        return []
    pieces = text.split(delimiter)
    if text.endswith(delimiter):
        pieces.pop()
    return pieces


def _on_off(value: bool) -> str:
    return _ON if value else _OFF


class TextAnalyzer:
    """Collects word statistics per source and reports on them."""

    def __init__(
        self,
        settings: AnalysisSettings | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.settings = settings.copy() if settings is not None else AnalysisSettings()
        self.results: list[AnalysisResult] = []
        self._stream = out

    @property
    def out(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    @property
    def current_directory(self) -> str:
        return self.settings.working_directory

    @current_directory.setter
    def current_directory(self, directory: str) -> None:
        self.settings.working_directory = directory

    # -- text handling -------------------------------------------------

    def read_file(self, filename: str | os.PathLike[str]) -> list[str]:
        """Return the UTF-8 lines of *filename* without their newlines."""
        text = Path(filename).read_bytes().decode("utf-8")
        return _split_keep_empty(text, "\n")

    def split(self, text: str, delimiter: str = " ") -> list[str]:
        """Split *text* on *delimiter*, keeping empty pieces between delimiters."""
        return _split_keep_empty(text, delimiter)

    def process_word(self, word: str) -> str:
        """Apply case folding and drop digits or special characters per the rules."""
        fold = self.settings.get_rule(CASE_INSENSITIVE)
        keep_digits = not self.settings.get_rule(IGNORE_NUMBERS)
        keep_special = not self.settings.get_rule(IGNORE_SPECIAL_CHARS)
        kept: list[str] = []
        for char in word:
            if char.isalpha():
                kept.append(char.lower() if fold else char)
            elif (keep_digits and char in string.digits) or (
                keep_special and not char.isspace()
            ):
                kept.append(char)
        return "".join(kept)

    def is_valid_word(self, word: str) -> bool:
        """Tell whether *word* counts as a word under the current settings."""
        alphabet = self.settings.allowed_alphabet
        has_alpha = False
        for char in word:
            if char.isalpha():
                has_alpha = True
                if alphabet and char not in alphabet:
                    return False
            elif char in string.digits:
                has_alpha = not self.settings.get_rule(
                    IGNORE_NUMBERS
                ) and not self.settings.get_rule(IGNORE_SPECIAL_CHARS)
            else:
                return False
        return has_alpha

    def is_stop_word(self, word: str) -> bool:
        """Tell whether *word* is a stop word that is to be skipped."""
        return self.settings.get_rule(IGNORE_STOP_WORDS) and word in self.settings.stop_words

    # -- analysis ------------------------------------------------------

    def analyze_files(
        self, file_paths: Iterable[str | os.PathLike[str]], source_identifier: str
    ) -> AnalysisResult:
        """Analyse *file_paths* together as one source and store the result."""
        logger.debug("Начало анализа для %s", source_identifier)
        logger.debug(
            "Настройки: %s",
            {name: value for name, value in self.settings.rules.items()},
        )
        result = AnalysisResult(source_identifier=source_identifier)
        for file_path in file_paths:
            for line in self.read_file(file_path):
                for word in self.split(line, " "):
                    if word and word[-1] in SENTENCE_ENDINGS:
                        result.sentence_count += 1
                    processed = self.process_word(word)
                    if (
                        processed
                        and self.is_valid_word(processed)
                        and not self.is_stop_word(processed)
                    ):
                        result.add_word(processed)
        self.results.append(result)
        return result

    def analyze_directory(
        self, directory: str | os.PathLike[str], delay: float = DIRECTORY_DELAY
    ) -> list[AnalysisResult]:
        """Analyse every regular file in *directory*, each as its own source."""
        self.settings.working_directory = os.fspath(directory)
        files = sorted(
            entry.path for entry in os.scandir(directory) if entry.is_file()
        )
        analysed: list[AnalysisResult] = []
        for done, file_path in enumerate(files, start=1):
            analysed.append(self.analyze_files([file_path], os.path.basename(file_path)))
            show_progress_bar(done, len(files), stream=self.out)
            if delay > 0:
                time.sleep(delay)

        self.out.write("\nАнализ завершен.\n")
        self.out.write(f"\n=== Итоги анализа для директории: {os.fspath(directory)} ===\n")
        self.print_top_words(DEFAULT_TOP_WORDS, "")
        self.print_longest_words(DEFAULT_LONGEST_WORDS, "")
        self.print_sentence_count("")
        return analysed

    def process_file(self, file_path: str, source_identifier: str) -> AnalysisResult:
        """Analyse a .txt file and print its summary.

        Raises ValueError for any other file format.
        """
        extension = file_path[file_path.rfind(".") + 1:]
        if extension != "txt":
            raise ValueError(f"Неподдерживаемый формат файла: {file_path}")
        result = self.analyze_files([file_path], source_identifier)
        self.print_top_words(DEFAULT_TOP_WORDS, source_identifier)
        self.print_longest_words(DEFAULT_LONGEST_WORDS, source_identifier)
        self.print_sentence_count(source_identifier)
        return result

    # -- queries -------------------------------------------------------

    def find_result(self, source_identifier: str) -> AnalysisResult:
        """Return the first result stored for *source_identifier*."""
        for result in self.results:
            if result.source_identifier == source_identifier:
                return result
        raise ResultNotFoundError(f"Результаты не найдены для {source_identifier}")

    def _select(self, source_identifier: str) -> AnalysisResult:
        if not source_identifier:
            return merge_results(self.results)
        return self.find_result(source_identifier)

    def top_words(self, count: int, source_identifier: str = "") -> list[tuple[str, int]]:
        """Most frequent words of one source, or of all sources when none is given."""
        return self._select(source_identifier).top_words(count)

    def longest_words(self, count: int, source_identifier: str = "") -> list[tuple[str, int]]:
        """Longest words of one source, or of all sources when none is given."""
        return self._select(source_identifier).longest_words(count)

    def sentence_count(self, source_identifier: str = "") -> int:
        """Sentence count of one source, or the total when none is given."""
        return self._select(source_identifier).sentence_count

    # -- console output ------------------------------------------------

    @staticmethod
    def _suffix(source_identifier: str) -> str:
        return f" для {source_identifier}" if source_identifier else ""

    def _report_missing(self, error: ResultNotFoundError) -> None:
        self.out.write(f"DEBUG: {error.args[0]}\n")

    def print_top_words(self, count: int, source_identifier: str = "") -> None:
        try:
            words = self.top_words(count, source_identifier)
        except ResultNotFoundError as error:
            self._report_missing(error)
            return
        self.out.write(
            f"Топ {count} самых часто встречающихся слов{self._suffix(source_identifier)}:\n"
        )
        for word, frequency in words:
            self.out.write(f"  {word}: {frequency} раз\n")

    def print_longest_words(self, count: int, source_identifier: str = "") -> None:
        try:
            words = self.longest_words(count, source_identifier)
        except ResultNotFoundError as error:
            self._report_missing(error)
            return
        self.out.write(f"Топ {count} самых длинных слов{self._suffix(source_identifier)}:\n")
        for word, length in words:
            self.out.write(f"  {word} (длина: {length})\n")

    def print_sentence_count(self, source_identifier: str = "") -> None:
        try:
            total = self.sentence_count(source_identifier)
        except ResultNotFoundError as error:
            self._report_missing(error)
            return
        self.out.write(f"Количество предложений{self._suffix(source_identifier)}: {total}\n")

    def print_current_results(self) -> None:
        self.out.write(format_table(self.results))

    def _rule_or_false(self, name: str) -> bool:
        try:
            return self.settings.get_rule(name)
        except UnknownRuleError:
            logger.warning("Правила не существует: %s", name)
            return False

    def print_settings(self) -> None:
        rule = self._rule_or_false
        out = self.out
        out.write("Текущие настройки:\n")
        out.write(f"Регистронезависимость: {_on_off(rule(CASE_INSENSITIVE))}\n")
        out.write(f"1. Игнорирование цифр: {_on_off(rule(IGNORE_NUMBERS))}\n")
        out.write(f"2. Игнорирование спецсимволов: {_on_off(rule(IGNORE_SPECIAL_CHARS))}\n")
        out.write(f"3. Разрешенный алфавит: {self.settings.allowed_alphabet}\n")
        out.write(f"4. Игнорирование пунктуации: {_on_off(rule('ignorePunctuation'))}\n")
        out.write("5. Стоп-слова: \n")
        out.write("".join(f"{word} " for word in sorted(self.settings.stop_words)))
        out.write("\n")

    # -- stored results ------------------------------------------------

    def clear_results(self) -> None:
        self.results.clear()

    def save_results(self, filename: str | os.PathLike[str]) -> None:
        """Write the stored results to *filename* as a UTF-8 report."""
        Path(filename).write_text(format_results(self.results), encoding="utf-8")
        if not self.results:
            self.out.write("Результаты отсутствуют. Файл сохранен без данных.\n")
        else:
            self.out.write(f"Результаты успешно сохранены в файл: {os.fspath(filename)}\n")

    def load_results(self, filename: str | os.PathLike[str]) -> list[AnalysisResult]:
        """Replace the stored results with those read from a saved report."""
        text = Path(filename).read_text(encoding="utf-8")
        self.results.clear()
        lines = _split_keep_empty(text, "\n")
        for line in lines:
            self.out.write(f"Прочитанная строка: [{line}]\n")
        self.results.extend(parse_results(lines))
        self.out.write(f"Результаты успешно загружены из файла: {os.fspath(filename)}\n")
        return self.results

    def compare_results(
        self, source_identifier1: str, source_identifier2: str
    ) -> Comparison:
        """Print and return a comparison of two stored sources."""
        first = self.find_result(source_identifier1)
        second = self.find_result(source_identifier2)
        comparison = compare_results(first, second)
        self.out.write(format_comparison(comparison))
        return comparison