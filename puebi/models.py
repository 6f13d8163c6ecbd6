"""Data models for the PUEBI sanitizer.

WHY: The decapitalization engine works on code-point offsets, not on
copied substrings. Naming the spans it passes around (sentences, words)
and the word classes it derives keeps the rewrite logic readable and
lets tests assert on segmentation and tokenization directly.

HOW: Two small dataclasses describe half-open spans over a string and an
enum names the case-shape classes a word token can fall into.

RULES:
- All offsets are Python str indexes (Unicode code points, not bytes).
- Spans are half-open: [start, end).
- SentenceSpan offsets are absolute in the document; WordSpan offsets
  are relative to the sentence they were tokenized from.
- Spans are transient: computed per call and discarded.
"""

import enum
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SentenceSpan:
    """One sentence of a document.

    Attributes:
        start: Offset of the first character of the sentence.
        end: Offset just past the last character (terminal excluded).
        terminal: The ".", "!" or "?" that closed the sentence, or None
            when the sentence runs to the end of the document.
        next_start: Offset where the next sentence begins, i.e. after the
            terminal and any whitespace that follows it.
    """
    start: int
    end: int
    terminal: Optional[str] = None
    next_start: int = 0


@dataclass(frozen=True)
class WordSpan:
    """A maximal run of letters inside a sentence."""
    start: int
    end: int


class WordClass(enum.Enum):
    """Case-shape class of a word token, in protection priority order."""
    ALL_CAPS = "all_caps"
    EXCEPTION = "exception"
    PROTECTED_SUCCESSOR = "protected_successor"
    TITLE_CASE = "title_case"
    OTHER = "other"
