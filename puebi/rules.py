"""Loading and merging sanitizer rule sets.

WHY: The built-in exception and protected-head lists cover the generic
banking vocabulary only. Each deployment has its own brand and product
names that must keep their capitals, so the lists need to be extendable
from plain files without editing presets.py.

HOW: Two file formats are supported:
  - terms files (load_terms): one word per line, like the word lists a
    copywriter maintains by hand;
  - JSON rules files (load_rules): an object validated with jsonschema
    against the bundled rules_schema.json.
build_config() merges either into a copy of DEFAULT_RULES and
resolve_config() turns a caller-supplied dict into a complete config.

RULES:
- DEFAULT_RULES is never mutated; every function returns a new dict.
- Word lists from files EXTEND the defaults; scalar options (greeting
  word, max tokens) REPLACE them.
- Invalid JSON, schema violations and unknown options raise ValueError.
- Terms files: UTF-8, whitespace stripped, blank lines and lines
  starting with '#' ignored.
"""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

import jsonschema

from .presets import DEFAULT_RULES

logger = logging.getLogger(__name__)

_SCHEMA_PATH = Path(__file__).resolve().parent / "rules_schema.json"

_CACHED_SCHEMA: Optional[dict] = None

WORD_SET_KEYS = ("exceptions", "protected_heads")


def _load_schema() -> dict:
    """Load the rules JSON schema, caching it after the first read."""
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(_SCHEMA_PATH, "r", encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


def load_terms(path: Union[str, Path]) -> List[str]:
    """Load one word per line from a terms file.

    Args:
        path: Path to the UTF-8 terms file.

    Returns:
        Words in file order, comments and blank lines removed.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    terms: List[str] = []
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        terms.append(stripped)
    logger.info("Loaded %d terms from %s", len(terms), path)
    return terms


def validate_rules(data: Any, source: str = "rules") -> None:
    """Validate a decoded rules object against the bundled schema.

    Raises:
        ValueError: If the object does not conform.
    """
    try:
        jsonschema.validate(instance=data, schema=_load_schema())
    except jsonschema.ValidationError as e:
        location = "/".join(str(p) for p in e.absolute_path) or "(root)"
        raise ValueError(
            "Invalid {} at {}: {}".format(source, location, e.message)
        ) from e


def load_rules(path: Union[str, Path]) -> Dict[str, Any]:
    """Load and validate a JSON rules file.

    Example file:
        {"exceptions": ["Mandiri", "QRIS"], "protected_heads": ["Desa"]}

    Args:
        path: Path to the UTF-8 JSON file.

    Returns:
        The decoded rules object (lists, not sets).

    Raises:
        ValueError: If the file is not valid JSON or violates the schema.
        FileNotFoundError: If the file does not exist.
    """
    raw = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError("Rules file {} is not valid JSON: {}".format(path, e)) from e

    validate_rules(data, source="rules file {}".format(path))
    logger.info(
        "Loaded rules from %s (%d exceptions, %d protected heads)",
        path,
        len(data.get("exceptions", [])),
        len(data.get("protected_heads", [])),
    )
    return data


def resolve_config(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return a complete config: DEFAULT_RULES overlaid with config.

    Keys present in config replace the defaults outright. Word collections
    (list, tuple, set or frozenset) are converted to frozensets.

    Raises:
        ValueError: If config has keys that are not rule options, or values
            that do not conform to the rules schema.
    """
    cfg = copy.deepcopy(DEFAULT_RULES)
    if not config:
        return cfg

    unknown = sorted(set(config) - set(DEFAULT_RULES))
    if unknown:
        raise ValueError(
            "Unknown rule option(s): {}. Available: {}".format(
                ", ".join(unknown), ", ".join(DEFAULT_RULES.keys())
            )
        )

    overlay: Dict[str, Any] = {}
    for key, value in config.items():
        if key in WORD_SET_KEYS and isinstance(value, (list, tuple, set, frozenset)):
            value = sorted(value, key=str) if isinstance(value, (set, frozenset)) else list(value)
        overlay[key] = value
    validate_rules(overlay, source="config")

    for key, value in config.items():
        if key in WORD_SET_KEYS:
            value = frozenset(value)
        cfg[key] = value
    return cfg


def build_config(
    rules: Optional[Dict[str, Any]] = None,
    extra_exceptions: Optional[Iterable[str]] = None,
    extra_heads: Optional[Iterable[str]] = None,
) -> Dict[str, Any]:
    """Build a config that extends the defaults.

    Args:
        rules: Decoded rules object (e.g. from load_rules()). Its word
            lists are added to the defaults, its scalar options replace
            the defaults.
        extra_exceptions: More words to keep capitalized anywhere.
        extra_heads: More protected heads.

    Returns:
        A new config dict suitable for sanitize(text, config=...).

    Raises:
        ValueError: If rules does not conform to the rules schema.
    """
    cfg = copy.deepcopy(DEFAULT_RULES)

    if rules:
        validate_rules(rules)
        for key, value in rules.items():
            if key in WORD_SET_KEYS:
                cfg[key] = cfg[key] | frozenset(value)
            else:
                cfg[key] = value

    if extra_exceptions:
        cfg["exceptions"] = cfg["exceptions"] | frozenset(extra_exceptions)
    if extra_heads:
        cfg["protected_heads"] = cfg["protected_heads"] | frozenset(extra_heads)

    return cfg
