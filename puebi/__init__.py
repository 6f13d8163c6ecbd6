"""PUEBI sanitizer: normalize Indonesian text toward standard spelling.

WHY: Customer-facing messages (transfer notifications, reminders) are
often typed quickly: missing spaces after commas, "dirumah" instead of
"di rumah", "Transfer Real Time" capitalized mid-sentence, "Rp 12.000"
instead of "Rp12.000". This package cleans such text toward PUEBI
(Pedoman Umum Ejaan Bahasa Indonesia) conventions.

HOW: sanitize(text, config) runs one fixed pipeline:
  normalize_spaces -> fix_punctuation_spacing -> fix_common_prepositions
  -> normalize_real_time -> capitalize_sentences -> greeting names
  -> decapitalize_mid_sentence -> fix_idr_currency -> strip.
The config dict (see presets.DEFAULT_RULES and rules.build_config) supplies
the exception words, protected heads and greeting options.

RULES:
- sanitize(), is_sentence_capitalized() and title_case() are the public API.
- Empty or whitespace-only text is returned unchanged.
- No text input raises; only a bad config raises ValueError.
- Thread-safe: no module state is written, each call resolves its own config.
"""

from typing import Any, Dict, Optional

from .capitalization import (
    capitalize_greeting_names,
    capitalize_sentences,
    decapitalize_mid_sentence,
    is_sentence_capitalized,
    title_case,
)
from .normalize import (
    fix_common_prepositions,
    fix_idr_currency,
    fix_punctuation_spacing,
    normalize_real_time,
    normalize_spaces,
)
from .presets import DEFAULT_RULES, EXCEPTIONS, PROTECTED_HEADS
from .rules import build_config, load_rules, load_terms, resolve_config

__version__ = "0.1.0"

__all__ = [
    "sanitize",
    "sanitize_to_puebi",
    "is_sentence_capitalized",
    "title_case",
    "build_config",
    "load_rules",
    "load_terms",
    "DEFAULT_RULES",
    "EXCEPTIONS",
    "PROTECTED_HEADS",
]


def sanitize(text: str, config: Optional[Dict[str, Any]] = None) -> str:
    """Normalize text toward PUEBI spelling and punctuation.

    Args:
        text: Any string.
        config: Optional rule options overriding DEFAULT_RULES (keys:
            exceptions, protected_heads, greeting_word, greeting_max_tokens).

    Returns:
        The sanitized, stripped text; text itself if it is blank.

    Raises:
        ValueError: If config contains an unknown option.
    """
    cfg = resolve_config(config)

    if not text.strip():
        return text

    text = normalize_spaces(text)
    text = fix_punctuation_spacing(text)
    text = fix_common_prepositions(text)

    # Before capitalization, so a sentence-initial "transfer" gets its capital back.
    text = normalize_real_time(text)

    text = capitalize_sentences(text)

    text, name_spans = capitalize_greeting_names(
        text, cfg["greeting_word"], cfg["greeting_max_tokens"]
    )
    text = decapitalize_mid_sentence(
        text, cfg["exceptions"], cfg["protected_heads"], preserved=name_spans
    )

    text = fix_idr_currency(text)

    return text.strip()


sanitize_to_puebi = sanitize
