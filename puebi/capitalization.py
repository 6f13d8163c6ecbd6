"""Sentence capitalization and mid-sentence decapitalization.

WHY: Messages typed in a hurry carry stray capitals ("Anda telah melakukan
Transfer ...") that PUEBI writes in lowercase, while acronyms, curated
names and proper nouns introduced by a head word ("Jalan Sudirman",
"Bank Indonesia") must keep theirs. This module holds that engine plus the
two smaller capitalization rules that run before it: sentence starts and
the name after a greeting.

HOW: The engine is three small pieces:
  1. iter_sentences() - splits the document at ". ! ?" into SentenceSpans.
  2. tokenize_words() - finds maximal runs of Unicode letters in a sentence.
  3. classify_word() - maps a token and its predecessor to a WordClass.
decapitalize_mid_sentence() walks every sentence once, left to right, and
lowers only TITLE_CASE tokens that no protecting class claims.

RULES:
- Word index 0 of a sentence is never rewritten here; sentence-initial
  capitals belong to capitalize_sentences().
- Protection order: ALL_CAPS, EXCEPTION, PROTECTED_SUCCESSOR. Any match
  protects; TITLE_CASE is only considered after all three fail.
- A head protects only the token right after it, never the one after that.
- Classification reads the sentence as it was before the pass, so lowering
  a head ("Jalan" -> "jalan") does not unprotect its successor.
- Case mapping is per character and length-preserving: a character whose
  upper/lower form is longer than one code point ("ß", "İ") is left as is.
  Offsets computed before a rewrite therefore stay valid after it.
- Hyphens and apostrophes are not letters: "Jean-Paul" is two tokens.
- Nothing here raises on any str input.
"""

from __future__ import annotations

import logging
import re
from typing import AbstractSet, Iterable, Iterator, List, Optional, Tuple

from .models import SentenceSpan, WordClass, WordSpan
from .presets import GREETING_MAX_TOKENS, GREETING_WORD

logger = logging.getLogger(__name__)

SENTENCE_TERMINALS = frozenset(".!?")

# Characters that end a greeting name run.
GREETING_NAME_RE = r"\b{}\b\s+([^\n\r,.!?;:()]+)"
NAME_TOKEN_RE = re.compile(r"\S+")
NAME_INNER_PUNCT = frozenset("'-")

Span = Tuple[int, int]


# =============================================================================
# Character helpers
# =============================================================================

def _to_upper(ch: str) -> str:
    upper = ch.upper()
    return upper if len(upper) == 1 else ch


def _to_lower(ch: str) -> str:
    lower = ch.lower()
    return lower if len(lower) == 1 else ch


def first_letter_index(text: str, start: int = 0) -> int:
    """Return the index of the first letter at or after start, or -1."""
    for i in range(start, len(text)):
        if text[i].isalpha():
            return i
    return -1


def title_word(word: str) -> str:
    """Uppercase the first character of word and lowercase the rest."""
    if not word:
        return word
    return _to_upper(word[0]) + "".join(_to_lower(ch) for ch in word[1:])


def title_case(text: str) -> str:
    """Title-case every whitespace-separated word and join with single spaces.

    The first character of each word is uppercased even when it is not a
    letter (so "(budi" stays "(budi"); the rest of the word is lowered.
    """
    return " ".join(title_word(w) for w in text.split())


# =============================================================================
# Sentence capitalization
# =============================================================================

def capitalize_sentences(text: str) -> str:
    """Uppercase the first letter of the text and the first letter after . ! ?

    Digits and symbols between the terminal and the letter are skipped,
    so "1.5 juta" becomes "1.5 Juta": a dot is a terminal wherever it is.
    """
    chars = list(text)
    pending = True
    for i, ch in enumerate(chars):
        if pending and ch.isalpha():
            chars[i] = _to_upper(ch)
            pending = False
        if ch in SENTENCE_TERMINALS:
            pending = True
    return "".join(chars)


def is_sentence_capitalized(text: str) -> bool:
    """True if the first letter of text is uppercase.

    Empty, whitespace-only and letterless input counts as capitalized.
    """
    text = text.strip()
    if not text:
        return True
    i = first_letter_index(text)
    if i < 0:
        return True
    return text[i].isupper()


# =============================================================================
# Greeting names
# =============================================================================

def _is_name_token(token: str) -> bool:
    return all(ch.isalpha() or ch in NAME_INNER_PUNCT for ch in token)


def capitalize_greeting_names(
    text: str,
    greeting_word: str = GREETING_WORD,
    max_tokens: int = GREETING_MAX_TOKENS,
) -> Tuple[str, List[Span]]:
    """Title-case the name run that follows a greeting word.

    WHY: A personal name right after "Hai" must be capitalized even when it
    was typed in lowercase ("Hai luqmanul hakim," -> "Hai Luqmanul Hakim,").

    HOW: Matches the greeting word, whitespace, and everything up to the
    first of "\\n \\r , . ! ? ; : ( )". The first max_tokens whitespace
    tokens of that run are considered; those made only of letters, "'" and
    "-" are title-cased in place. Spacing between tokens is kept as is.

    RULES:
    - The greeting word match is exact and case-sensitive ("Hai", not "hai").
    - Tokens with digits or other symbols count toward max_tokens but are
      left untouched.
    - Spans are reported only for a run closed by a comma ("Hai budi
      santoso, ..."): that comma marks the run as a vocative name. A run
      that flows into the sentence ("Hai budi transfer anda berhasil.")
      is still title-cased here, but reports no spans, so the engine lowers
      everything after the first name token.
    - Returned spans are absolute [start, end) offsets of the rewritten
      tokens; they stay valid in the returned text (length-preserving).

    Args:
        text: Document text.
        greeting_word: The greeting head word.
        max_tokens: Upper bound on the number of tokens in the name run.

    Returns:
        Tuple of (rewritten text, list of name token spans to preserve).
    """
    pattern = re.compile(GREETING_NAME_RE.format(re.escape(greeting_word)))
    spans: List[Span] = []

    def _rewrite(match: re.Match) -> str:
        run = match.group(1)
        offset = match.start(1)
        closed_by_comma = match.string[match.end(1):match.end(1) + 1] == ","
        parts: List[str] = []
        pos = 0
        for count, token in enumerate(NAME_TOKEN_RE.finditer(run)):
            if count >= max_tokens:
                break
            if not _is_name_token(token.group(0)):
                continue
            parts.append(run[pos:token.start()])
            parts.append(title_word(token.group(0)))
            pos = token.end()
            if closed_by_comma:
                spans.append((offset + token.start(), offset + token.end()))
        parts.append(run[pos:])
        head = match.group(0)[:offset - match.start()]
        return head + "".join(parts)

    return pattern.sub(_rewrite, text), spans


def fix_greeting_name_case(
    text: str,
    greeting_word: str = GREETING_WORD,
    max_tokens: int = GREETING_MAX_TOKENS,
) -> str:
    """Capitalize the name after a greeting; see capitalize_greeting_names()."""
    return capitalize_greeting_names(text, greeting_word, max_tokens)[0]


# =============================================================================
# Segmentation and tokenization
# =============================================================================

def iter_sentences(text: str) -> Iterator[SentenceSpan]:
    """Yield the sentences of text, left to right.

    A sentence ends at the first ".", "!" or "?"; the terminal is reported
    on the span but not included in it. Whitespace after the terminal is
    a separator: it belongs to no sentence. Text without a final terminal
    forms the last sentence. Empty text yields nothing.

    Each call returns a fresh generator, so iterating again restarts.
    """
    n = len(text)
    i = 0
    while i < n:
        j = i
        while j < n and text[j] not in SENTENCE_TERMINALS:
            j += 1
        terminal: Optional[str] = None
        k = j
        if j < n:
            terminal = text[j]
            k += 1
        while k < n and text[k].isspace():
            k += 1
        yield SentenceSpan(start=i, end=j, terminal=terminal, next_start=k)
        i = k


def tokenize_words(sentence: str) -> List[WordSpan]:
    """Return the maximal runs of Unicode letters in sentence, in order."""
    words: List[WordSpan] = []
    n = len(sentence)
    k = 0
    while k < n:
        while k < n and not sentence[k].isalpha():
            k += 1
        start = k
        while k < n and sentence[k].isalpha():
            k += 1
        if k > start:
            words.append(WordSpan(start=start, end=k))
    return words


# =============================================================================
# Classification
# =============================================================================

def is_all_caps(word: str) -> bool:
    """True if word has at least one letter and all its letters are uppercase."""
    has_letter = False
    for ch in word:
        if ch.isalpha():
            has_letter = True
            if not ch.isupper():
                return False
    return has_letter


def is_title_case(word: str) -> bool:
    """True if word starts uppercase and every later letter is lowercase."""
    if not word or not word[0].isupper():
        return False
    for ch in word[1:]:
        if ch.isalpha() and not ch.islower():
            return False
    return True


def classify_word(
    word: str,
    previous: Optional[str],
    exceptions: AbstractSet[str],
    heads: AbstractSet[str],
) -> WordClass:
    """Classify a word token for the decapitalization rule.

    The first protecting class wins, in the order ALL_CAPS, EXCEPTION,
    PROTECTED_SUCCESSOR; a token none of them claims is TITLE_CASE or
    OTHER. A single uppercase letter ("A") is ALL_CAPS, so it is kept.

    Args:
        word: The token text.
        previous: Text of the token right before it in the same sentence,
            or None for the first token.
        exceptions: Words that keep their capital anywhere.
        heads: Words whose immediate successor keeps its capital.
    """
    if is_all_caps(word):
        return WordClass.ALL_CAPS
    if word in exceptions:
        return WordClass.EXCEPTION
    if previous is not None and previous in heads:
        return WordClass.PROTECTED_SUCCESSOR
    if is_title_case(word):
        return WordClass.TITLE_CASE
    return WordClass.OTHER


# =============================================================================
# Decapitalization
# =============================================================================

def _inside(start: int, end: int, spans: Iterable[Span]) -> bool:
    return any(s <= start and end <= e for s, e in spans)


def decapitalize_mid_sentence(
    text: str,
    exceptions: AbstractSet[str],
    heads: AbstractSet[str],
    preserved: Iterable[Span] = (),
) -> str:
    """Lower stray title-case words that are not at the start of a sentence.

    WHY: Capitals in the middle of a sentence are almost always typing
    noise in short notification messages, except for acronyms, a curated
    list of names and the proper noun that follows a head word.

    HOW: For each sentence from iter_sentences(), tokenize it, then for
    every token after the first, classify it against its predecessor and
    lower it when the class is TITLE_CASE. Separators and terminals are
    never touched, so they come through verbatim.

    RULES:
    - Single forward pass, no backtracking.
    - Predecessor text is read from the input, not from the rewrite.
    - Tokens lying inside a preserved span are left alone (used for the
      greeting name run).

    Args:
        text: Document text, already sentence-capitalized.
        exceptions: Words kept capitalized anywhere.
        heads: Protected heads.
        preserved: Absolute [start, end) spans that must not be lowered.

    Returns:
        The rewritten text, same length as the input.
    """
    preserved = list(preserved)
    chars = list(text)

    for sentence in iter_sentences(text):
        body = text[sentence.start:sentence.end]
        spans = tokenize_words(body)
        words = [body[w.start:w.end] for w in spans]

        for wi in range(1, len(spans)):
            word = words[wi]
            word_class = classify_word(word, words[wi - 1], exceptions, heads)
            if word_class is not WordClass.TITLE_CASE:
                continue

            start = sentence.start + spans[wi].start
            end = sentence.start + spans[wi].end
            if preserved and _inside(start, end, preserved):
                continue

            for t in range(start, end):
                chars[t] = _to_lower(chars[t])
            logger.debug("Lowered %r at offset %d", word, start)

    return "".join(chars)
