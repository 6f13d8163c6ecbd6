"""Regex-based rewriting steps that surround the capitalization engine.

WHY: Most PUEBI fixes are local and context-free: spacing around
punctuation, glued prepositions, a fixed phrase, the Rupiah prefix.
Each is a single regex pass, so they live together here, apart from the
stateful sentence/word logic in capitalization.py.

HOW: All patterns are compiled once at import. Every function takes a
string and returns a new string; none of them raises.

RULES:
- Order matters inside fix_punctuation_spacing(): ellipses are
  normalized before the generic ", ; : ! ?" spacing so "..." is never
  split apart.
- Dots between digits are never touched (decimals and thousands
  separators such as "12.000").
- Preposition splitting is case-sensitive and whole-word only.
"""

from __future__ import annotations

import re
from typing import List, Tuple

from .presets import DI_ONLY_WORDS, LOCATIVE_WORDS, PLACE_WORDS

# =============================================================================
# Spacing and punctuation
# =============================================================================

MULTI_WS_RE = re.compile(r"\s+")
SPACE_BEFORE_PUNCT_RE = re.compile(r"\s+([,.;:!?])")
PUNCT_NO_SPACE_RE = re.compile(r"([,;:!?])([^\s)])")
DOT_NO_SPACE_RE = re.compile(r"(^|[^\d])\.([^\d\s).])")
OPEN_PAREN_SPACES_RE = re.compile(r"\(\s+")
CLOSE_PAREN_SPACES_RE = re.compile(r"\s+\)")

MULTI_DOTS_RE = re.compile(r"[.]{3,}|…")
ELLIPSIS_NO_LEFT_SPACE_RE = re.compile(r"([^ \t\n\r(\[\"'])\.{3}")
ELLIPSIS_NO_RIGHT_SPACE_RE = re.compile(r"\.{3}([^ \t\n\r)\]\"'».,;:!?])")

SPACE_BEFORE_QUOTE_RE = re.compile(r"\s+(['\"])")
SPACE_AFTER_QUOTE_RE = re.compile(r"(['\"])\s+")

EM_DASH_RE = re.compile(r"\s*—\s*")

# =============================================================================
# Phrases and currency
# =============================================================================

REAL_TIME_RE = re.compile(r"\bReal[ -]?Time\b", re.IGNORECASE)
TRANSFER_REAL_TIME_RE = re.compile(r"\bTransfer\s+real time\b", re.IGNORECASE)

RP_SPACED_RE = re.compile(r"\brp\.?\s+([0-9])", re.IGNORECASE)
RP_GLUED_RE = re.compile(r"\brp([0-9])", re.IGNORECASE)


def _compile_prepositions() -> List[Tuple[re.Pattern, str]]:
    rules: List[Tuple[re.Pattern, str]] = []
    for word in LOCATIVE_WORDS + PLACE_WORDS:
        for prefix in ("di", "ke"):
            rules.append((
                re.compile(r"\b{}{}\b".format(prefix, word)),
                "{} {}".format(prefix, word),
            ))
    rules.append((re.compile(r"\b[Kk]e pada\b"), "kepada"))
    rules.append((re.compile(r"\b[Dd]ari pada\b"), "daripada"))
    for word in DI_ONLY_WORDS:
        rules.append((re.compile(r"\bdi{}\b".format(word)), "di " + word))
    return rules


PREPOSITION_RULES = _compile_prepositions()


def normalize_spaces(text: str) -> str:
    """Collapse whitespace runs to one space and drop spaces before , . ; : ! ?"""
    text = MULTI_WS_RE.sub(" ", text)
    return SPACE_BEFORE_PUNCT_RE.sub(r"\1", text)


def fix_punctuation_spacing(text: str) -> str:
    """Tidy spacing around punctuation marks.

    Steps, in order:
      1. No space before , . ; : ! ?
      2. Any run of 3+ dots (or the "…" character) becomes "...", with a
         space on each side unless it touches an opening/closing mark.
      3. One space after , ; : ! ? unless followed by space or ")".
      4. One space after a sentence dot, except between digits.
      5. No space just inside parentheses.
      6. No space just inside quotes.
      7. Em-dashes are written closed up: "a—b".
      8. Whitespace runs collapse to one space.
    """
    text = SPACE_BEFORE_PUNCT_RE.sub(r"\1", text)

    text = MULTI_DOTS_RE.sub("...", text)
    text = ELLIPSIS_NO_LEFT_SPACE_RE.sub(r"\1 ...", text)
    text = ELLIPSIS_NO_RIGHT_SPACE_RE.sub(r"... \1", text)

    text = PUNCT_NO_SPACE_RE.sub(r"\1 \2", text)
    text = DOT_NO_SPACE_RE.sub(r"\1. \2", text)

    text = OPEN_PAREN_SPACES_RE.sub("(", text)
    text = CLOSE_PAREN_SPACES_RE.sub(")", text)

    text = SPACE_BEFORE_QUOTE_RE.sub(r"\1", text)
    text = SPACE_AFTER_QUOTE_RE.sub(r"\1", text)

    text = EM_DASH_RE.sub("—", text)

    return MULTI_WS_RE.sub(" ", text)


def fix_common_prepositions(text: str) -> str:
    """Split glued "di"/"ke" prepositions and join "ke pada"/"dari pada".

    "dirumah" -> "di rumah", "disini" -> "di sini", "ke pada" -> "kepada".
    Note "keluar" and "didalam" are always split: the word lists cannot
    tell the verb "keluar" from the preposition phrase "ke luar".
    """
    for pattern, replacement in PREPOSITION_RULES:
        text = pattern.sub(replacement, text)
    return text


def normalize_real_time(text: str) -> str:
    """Write "real time" in lowercase without a hyphen.

    "Transfer real time" is lowered as a whole; a sentence-initial
    "transfer" gets its capital back from capitalize_sentences().
    """
    text = REAL_TIME_RE.sub("real time", text)
    return TRANSFER_REAL_TIME_RE.sub("transfer real time", text)


def fix_idr_currency(text: str) -> str:
    """Normalize the Rupiah prefix: "rp 12.000", "Rp. 12.000", "RP12.000" -> "Rp12.000"."""
    text = RP_SPACED_RE.sub(r"Rp\1", text)
    return RP_GLUED_RE.sub(r"Rp\1", text)
