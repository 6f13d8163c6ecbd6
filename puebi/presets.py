"""Rule presets and Indonesian word lists for PUEBI sanitizing.

WHY: The heuristics that decide which capitals survive mid-sentence, and
which glued prepositions get split, are driven by short curated word
lists. Keeping them as importable constants (not buried in the regexes
and loops that use them) makes them easy to review and extend, and lets
callers pass an extended rule set without touching module state.

HOW: DEFAULT_RULES is a plain dict holding the exception set, the
protected-head set and the greeting options. The preposition word lists
are used once, at import time, to precompile the splitting patterns in
normalize.py.

RULES:
- Presets are frozen constants: never mutate them at runtime. Word sets
  are frozensets; callers build a new config dict to extend them
  (see rules.build_config).
- Membership tests against these sets are exact and case-sensitive.
- Generic head nouns like "Bank" belong in PROTECTED_HEADS, not in
  EXCEPTIONS: a head protects its successor, an exception protects itself.
"""

from typing import Dict, FrozenSet, Tuple

# Words kept capitalized anywhere in a sentence.
EXCEPTIONS: FrozenSet[str] = frozenset({
    "Indonesia", "Jakarta", "Sahabat", "Sampoerna",
    "Call", "Center",
    "ATM", "KTP", "BI", "BNI", "BCA",
})

# Proper-noun heads: the word right after one of these keeps its capital
# ("Jalan Sudirman", "Bank Indonesia", "Rumah Sakit").
PROTECTED_HEADS: FrozenSet[str] = frozenset({
    "Jalan", "Gunung", "Sungai", "Danau", "Kota", "Provinsi",
    "Universitas", "Institut", "Sekolah",
    "Rumah",  # Rumah Sakit
    "Bank", "PT", "CV",
    "RS",  # Rumah Sakit
    "Hai",
})

GREETING_WORD = "Hai"
GREETING_MAX_TOKENS = 4

DEFAULT_RULES: Dict = {
    "exceptions": EXCEPTIONS,
    "protected_heads": PROTECTED_HEADS,
    "greeting_word": GREETING_WORD,
    "greeting_max_tokens": GREETING_MAX_TOKENS,
}

# Words written glued to "di"/"ke" that must be split ("diluar" -> "di luar").
LOCATIVE_WORDS: Tuple[str, ...] = (
    "luar", "dalam", "atas", "bawah", "depan", "belakang", "samping", "antara",
)

PLACE_WORDS: Tuple[str, ...] = (
    "rumah", "kantor", "sekolah", "pasar", "bank", "jalan", "masjid", "gereja",
    "kampus",
)

# Only split after "di" ("disini" -> "di sini"); "ke" + these is left alone.
DI_ONLY_WORDS: Tuple[str, ...] = ("tiap", "setiap", "mana", "sini", "situ", "sana")
