# wordscope

An interactive console tool for analysing plain-text UTF-8 files. It counts
word frequencies, finds the longest words and counts sentences. It can also
save, reload and compare the results for several sources.

## Installation

```
pip install .
```

## Running

```
wordscope
```

The command takes no options besides `--help`. It opens this menu:

1. Analyse a file ending in `.txt`. The file name without its extension becomes the source identifier.
2. Change settings: case folding, ignoring digits, ignoring special characters, the allowed alphabet, stop-word filtering, and adding a stop word.
3. Show the current settings.
4. Clear the collected results.
5. Save the results to a file.
6. Load results from a file.
7. Compare two sources.
8. Analyse every regular file in a directory, then save the results.
9. Print a word / frequency / length table of all collected words.
0. Quit.

The program starts with these settings, returned by
`wordscope.cli.default_settings()`:

- all rules off
- a Cyrillic allowed alphabet
- the stop words `и`, `в`, `не`, `на`, `с`
- the working directory `../data/`

## Using it from Python

```python
from wordscope.analyzer import TextAnalyzer
from wordscope.cli import default_settings

analyzer = TextAnalyzer(default_settings())
analyzer.analyze_files(["novel.txt"], "novel")
print(analyzer.top_words(10, "novel"))      # [(word, count), ...]
print(analyzer.longest_words(5, "novel"))   # [(word, length), ...]
print(analyzer.sentence_count("novel"))
analyzer.save_results("report.txt")
```

If you pass an empty source identifier to `top_words`, `longest_words` or
`sentence_count`, they combine all stored results. Other behaviour to know:

- `find_result` raises `wordscope.analyzer.ResultNotFoundError` for an unknown identifier.
- `compare_results` raises the same error when either source is unknown.
- `process_file` raises `ValueError` for a file that does not end in `.txt`.
- `analyze_directory(directory, delay=0.4)` pauses `delay` seconds after each file while it draws a progress bar.

Console output goes to the stream passed as `out` to `TextAnalyzer`, or to
standard output when none is given.

### Settings

Settings live in `wordscope.settings.AnalysisSettings`:

- Switch a rule with `change_rule(name, value)`.
- Read a rule with `get_rule(name)`. An unknown name raises `UnknownRuleError`.
- The rule names are `caseInsensitive`, `ignoreNumbers`, `ignoreSpecialChars` and `ignoreStopWords`.

### Counting rules

Each line is split on single spaces into tokens.

A token that ends in `.`, `!` or `?` counts as one sentence.

Each token is then processed:

- Letters are kept. They are lower-cased when `caseInsensitive` is on.
- Digits are dropped when both `ignoreNumbers` and `ignoreSpecialChars` are on.
- Other non-space characters are dropped when `ignoreSpecialChars` is on.

The processed word is counted only if all of these hold:

- It contains only letters and digits.
- Every letter is in the allowed alphabet, when one is set.
- It has a letter, or it ends with digits while neither digit rule is on.
- It is not a stop word while `ignoreStopWords` is on.

### Other modules

- `wordscope.reports` renders saved reports, comparisons and tables, and parses saved reports back.
- `wordscope.results.AnalysisResult` holds one source's statistics.
- `wordscope.utils` draws the progress bar.
- `wordscope.filemanager.create_test_file` writes a UTF-8 sample file.

## Limitations

- Files are read as UTF-8 only.
- Loading a saved report does not rebuild a full analysis. It keeps the source identifiers and stores every `name: number` line as a word count. Word-length groups and sentence counts are not restored.
- There is no non-interactive command-line mode. Batch use goes through the Python API.

## Tests

```
pip install .[test]
pytest
```