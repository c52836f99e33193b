"""Word-frequency, longest-word and sentence-count analysis of text files, with an interactive menu."""

__version__ = "0.1.0"