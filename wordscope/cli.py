"""Interactive console menu for analysing text files."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TextIO

from wordscope.analyzer import ResultNotFoundError, TextAnalyzer
from wordscope.settings import (
    CASE_INSENSITIVE,
    IGNORE_NUMBERS,
    IGNORE_SPECIAL_CHARS,
    IGNORE_STOP_WORDS,
    AnalysisSettings,
)

Ask = Callable[[str], str]

DEFAULT_ALPHABET = (
    "абвгдеёжзийклмнопрстуфхцчшщъыьэюяАБВГДЕЁЖЗИКЛМНОПРСТУФХЦЧШЩЪЫЬЮЯ"
)
DEFAULT_STOP_WORDS = frozenset({"и", "в", "не", "на", "с"})
DEFAULT_DIRECTORY = "../data/"

_CLEAR = "\033[2J\033[H"
_BACKGROUND = "\033[48;5;21m\033[2J\033[H"
_RESET = "\033[0m"
_BOX_INNER = 28
_MENU_TITLE = "★ Главное меню ★"
_MENU_ITEMS = (
    "║ 1. Анализировать файлы     ║",
    "║ 2. Изменить настройки      ║",
    "║ 3. Показать настройки      ║",
    "║ 4. Повторный анализ файлов ║",
    "║ 5. Сохранить результаты    ║",
    "║ 6. Загрузить результаты    ║",
    "║ 7. Сравнительный анализ    ║",
    "║ 8. Работа с директорией    ║",
    "║ 9. Показать результат      ║",
    "║ 0. Выйти                   ║",
)
_BAD_NUMBER = "Неверный ввод. Пожалуйста, введите число.\n"
_BAD_CHOICE = "Неверный выбор. Попробуйте снова.\n"
_TOGGLE_PROMPT = "Введите 1 для включения или 0 для выключения: "
_PAUSE_PROMPT = "Нажмите Enter для продолжения...\n"
_STATE_LABELS = {True: "Включено", False: "Выключено"}


def default_settings() -> AnalysisSettings:
    """Return the settings the program starts with."""
    settings = AnalysisSettings(
        allowed_alphabet=DEFAULT_ALPHABET,
        stop_words=set(DEFAULT_STOP_WORDS),
        working_directory=DEFAULT_DIRECTORY,
    )
    for name in (CASE_INSENSITIVE, IGNORE_NUMBERS, IGNORE_SPECIAL_CHARS, IGNORE_STOP_WORDS):
        settings.change_rule(name, False)
    return settings


def _draw_box(title: str) -> str:
    padding = " " * max(_BOX_INNER - len(title), 0)
    return (
        "╔══════════════════════════════╗\n"
        f"║ {title}{padding} ║\n"
        "╠══════════════════════════════╣\n"
    )


def render_menu() -> str:
    """Return the text of the main menu box."""
    return (
        _draw_box(_MENU_TITLE)
        + "".join(item + "\n" for item in _MENU_ITEMS)
        + "╚══════════════════════════════╝\n"
    )


def _parse_int(text: str) -> int:
    tokens = text.split()
    if not tokens:
        raise ValueError("empty input")
    return int(tokens[0])


def _settings_menu(settings: AnalysisSettings) -> str:
    """Return the text of the settings editing menu."""
    rule_lines = (
        ("1. Регистронезависимость", CASE_INSENSITIVE),
        ("2. Игнорирование цифр", IGNORE_NUMBERS),
        ("3. Игнорирование спецсимволов", IGNORE_SPECIAL_CHARS),
    )
    lines = ["Изменение настроек:"]
    lines.extend(f"{label}: {_STATE_LABELS[settings.get_rule(name)]}" for label, name in rule_lines)
    lines.append(f"4. Разрешенный алфавит: {settings.allowed_alphabet}")
    lines.append(
        f"5. Игнорирование стоп-слов: {_STATE_LABELS[settings.get_rule(IGNORE_STOP_WORDS)]}"
    )
    lines.append("6. Добавить стоп-слово")
    return "".join(line + "\n" for line in lines)


def _ask_toggle(ask: Ask) -> bool:
    try:
        return _parse_int(ask(_TOGGLE_PROMPT)) == 1
    except ValueError:
        return False


def change_settings(analyzer: TextAnalyzer, ask: Ask, out: TextIO) -> None:
    """Let the user edit the analyzer's settings until they choose 0."""
    settings = analyzer.settings
    toggles = {1: CASE_INSENSITIVE, 2: IGNORE_NUMBERS, 3: IGNORE_SPECIAL_CHARS, 5: IGNORE_STOP_WORDS}
    while True:
        out.write(_settings_menu(settings))
        try:
            choice = _parse_int(ask("Выберите опцию (или введите 0 для выхода): "))
        except ValueError:
            continue

        if choice in toggles:
            settings.change_rule(toggles[choice], _ask_toggle(ask))
        elif choice == 4:
            settings.allowed_alphabet = ask("Введите новый разрешенный алфавит: ")
        elif choice == 6:
            stop_word = ask("Введите новое стоп-слово: ")
            if not stop_word:
                out.write("Пусто (введите корректное стоп-слово).\n")
                continue
            settings.stop_words.add(stop_word)
            out.write(f"Стоп-слово добавлено: {stop_word}\n")
        elif choice == 0:
            return
        else:
            out.write(_BAD_CHOICE)


def choose_directory(analyzer: TextAnalyzer, ask: Ask, out: TextIO) -> str:
    """Ask for the directory to analyse.

    Raises ValueError for an invalid choice and FileNotFoundError for a
    directory that does not exist.
    """
    out.write("Выберите действие:\n")
    out.write("1. Использовать текущую директорию\n")
    out.write("2. Указать новую директорию\n")
    try:
        choice = _parse_int(ask("Ваш выбор: "))
    except ValueError:
        raise ValueError("Неверный выбор.") from None

    if choice == 1:
        directory = analyzer.current_directory
        out.write(f"Используется текущая директория: {directory}\n")
        return directory
    if choice == 2:
        directory = ask("Введите путь к директории: ")
        if not Path(directory).exists():
            raise FileNotFoundError(f"Директория не существует: {directory}")
        return directory
    raise ValueError("Неверный выбор.")


def _first_token(text: str) -> str | None:
    tokens = text.split()
    return tokens[0] if tokens else None


def _analyse_file(analyzer: TextAnalyzer, ask: Ask, out: TextIO, err: TextIO) -> bool:
    file_path = _first_token(ask("Введите путь к файлу: "))
    if file_path is None:
        out.write(_BAD_NUMBER)
        return False
    if not Path(file_path).exists():
        err.write(f"ОШИБКА: Файл не существует: {file_path}\n")
        return True
    try:
        analyzer.process_file(file_path, Path(file_path).stem)
    except (OSError, ValueError) as error:
        err.write(f"ОШИБКА: {error}\n")
    return True


def _work_with_directory(analyzer: TextAnalyzer, ask: Ask, out: TextIO, err: TextIO) -> bool:
    try:
        directory = choose_directory(analyzer, ask, out)
        analyzer.analyze_directory(directory)
    except (OSError, ValueError) as error:
        err.write(f"ОШИБКА: {error}\n")
        return True
    filename = _first_token(ask("Введите имя файла для сохранения результатов: "))
    if filename is None:
        out.write(_BAD_NUMBER)
        return False
    try:
        analyzer.save_results(filename)
    except OSError as error:
        err.write(f"ОШИБКА: Не удалось открыть файл для записи: {filename} ({error})\n")
    return True


def _handle(choice: int, analyzer: TextAnalyzer, ask: Ask, out: TextIO, err: TextIO) -> bool:
    """Run one menu option; return False when the pause is to be skipped."""
    if choice == 1:
        return _analyse_file(analyzer, ask, out, err)
    if choice == 2:
        change_settings(analyzer, ask, out)
    elif choice == 3:
        analyzer.print_settings()
    elif choice == 4:
        analyzer.clear_results()
    elif choice == 5:
        filename = ask("Введите имя файла для сохранения результатов: ")
        try:
            analyzer.save_results(filename)
        except OSError as error:
            err.write(f"ОШИБКА: Не удалось открыть файл для записи: {filename} ({error})\n")
    elif choice == 6:
        filename = ask("Введите имя файла для загрузки результатов: ")
        try:
            analyzer.load_results(filename)
        except OSError as error:
            err.write(f"ОШИБКА: Не удалось открыть файл для чтения: {filename} ({error})\n")
        except ValueError as error:
            err.write(f"ОШИБКА: {error}\n")
    elif choice == 7:
        first = ask("Введите первый идентификатор источника: ")
        second = ask("Введите второй идентификатор источника: ")
        try:
            analyzer.compare_results(first, second)
        except ResultNotFoundError:
            err.write("ОШИБКА: Не удалось найти результаты для одного из источников.\n")
    elif choice == 8:
        return _work_with_directory(analyzer, ask, out, err)
    elif choice == 9:
        analyzer.print_current_results()
    else:
        out.write(_BAD_CHOICE)
    return True


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive menu until the user exits or input ends."""
    parser = argparse.ArgumentParser(
        prog="wordscope", description="Interactive word and sentence statistics of text files."
    )
    parser.parse_args(argv)

    ask: Ask = input
    out = sys.stdout
    err = sys.stderr
    analyzer = TextAnalyzer(default_settings())

    out.write(_CLEAR)
    try:
        while True:
            out.write(_CLEAR + _BACKGROUND + render_menu() + _RESET)
            try:
                choice = _parse_int(ask("Выберите опцию: "))
            except ValueError:
                out.write(_BAD_NUMBER)
                continue
            if choice == 0:
                out.write("Выход из программы.\n")
                return 0
            if _handle(choice, analyzer, ask, out, err):
                ask(_PAUSE_PROMPT)
    except (EOFError, KeyboardInterrupt):
        out.write("\n")
        return 0


if __name__ == "__main__":
    sys.exit(main())