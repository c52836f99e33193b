"""Per-source word statistics."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class AnalysisResult:
    """Word frequencies, words grouped by length and sentence count of one source."""

    source_identifier: str = ""
    word_frequency: dict[str, int] = field(default_factory=dict)
    words_by_length: dict[int, set[str]] = field(default_factory=dict)
    sentence_count: int = 0

    def add_word(self, word: str) -> None:
        """Count one occurrence of *word*."""
        self.word_frequency[word] = self.word_frequency.get(word, 0) + 1
        self.words_by_length.setdefault(len(word), set()).add(word)

    def top_words(self, count: int) -> list[tuple[str, int]]:
        """Return up to *count* most frequent words; ties go in word order."""
        ordered = sorted(self.word_frequency.items())
        ordered.sort(key=lambda item: item[1], reverse=True)
        return ordered[:count]

    def longest_words(self, count: int) -> list[tuple[str, int]]:
        """Return up to *count* (word, length) pairs, longest first, words in order."""
        picked: list[tuple[str, int]] = []
        for length in sorted(self.words_by_length, reverse=True):
            for word in sorted(self.words_by_length[length]):
                if len(picked) >= count:
                    return picked
                picked.append((word, length))
        return picked

    def longest_group(self) -> list[str]:
        """Return all words of the greatest length, in order."""
        if not self.words_by_length:
            raise ValueError(f"no words recorded for {self.source_identifier!r}")
        return sorted(self.words_by_length[max(self.words_by_length)])


def merge_results(results: Iterable[AnalysisResult]) -> AnalysisResult:
    """Combine several results into one with an empty source identifier."""
    merged = AnalysisResult()
    for result in results:
        for word, frequency in result.word_frequency.items():
            merged.word_frequency[word] = merged.word_frequency.get(word, 0) + frequency
        for length, words in result.words_by_length.items():
            merged.words_by_length.setdefault(length, set()).update(words)
        merged.sentence_count += result.sentence_count
    return merged