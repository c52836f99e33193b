"""Settings that control how words are counted and filtered."""

from __future__ import annotations

from dataclasses import dataclass, field

CASE_INSENSITIVE = "caseInsensitive"
IGNORE_NUMBERS = "ignoreNumbers"
IGNORE_SPECIAL_CHARS = "ignoreSpecialChars"
IGNORE_STOP_WORDS = "ignoreStopWords"

RULE_NAMES = (CASE_INSENSITIVE, IGNORE_NUMBERS, IGNORE_SPECIAL_CHARS, IGNORE_STOP_WORDS)


class UnknownRuleError(KeyError):
    """Raised when a rule that was never defined is looked up."""


def _default_rules() -> dict[str, bool]:
    return dict.fromkeys(RULE_NAMES, False)


@dataclass
class AnalysisSettings:
    """Rules, alphabet, stop words and working directory of an analysis."""

    allowed_alphabet: str = ""
    stop_words: set[str] = field(default_factory=set)
    working_directory: str = "./"
    rules: dict[str, bool] = field(default_factory=_default_rules)

    def change_rule(self, name: str, value: bool) -> None:
        """Set rule *name* to *value*, creating it if needed."""
        self.rules[name] = bool(value)

    def get_rule(self, name: str) -> bool:
        """Return the value of rule *name*."""
        try:
            return self.rules[name]
        except KeyError:
            raise UnknownRuleError(f"Правила не существует: {name}") from None

    def copy(self) -> AnalysisSettings:
        """Return an independent copy carrying the standard rules."""
        return AnalysisSettings(
            allowed_alphabet=self.allowed_alphabet,
            stop_words=set(self.stop_words),
            working_directory=self.working_directory,
            rules={name: self.rules.get(name, False) for name in RULE_NAMES},
        )