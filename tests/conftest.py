"""Shared test fixtures for the puebi test suite.

WHY: Several modules exercise the same sample notification (the message the
sanitizer was first written for) and need small rules files on disk.

HOW: Plain constants for the sample and its expected output, plus a fixture
that writes JSON rules files into pytest's tmp_path.

RULES:
- File I/O goes through tmp_path only.
- DEMO_EXPECTED is the full sanitized form of DEMO_MESSAGE; any pipeline
  change that alters it must be deliberate.
"""

import json

import pytest

from puebi.config import DEMO_MESSAGE

DEMO_EXPECTED = (
    "Hai Luqman, anda telah melakukan transfer real time dari rekening "
    "1023613267 sejumlah Rp12.000. Pastikan transaksi ini benar dilakukan "
    "atau hubungi Call Center 1500 035."
)


@pytest.fixture
def demo_message():
    """The sample transfer notification used by `python -m puebi --demo`."""
    return DEMO_MESSAGE


@pytest.fixture
def write_rules(tmp_path):
    """Write a rules object (or raw string) to a file and return its path."""
    def _write(content, name="rules.json"):
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def demo_expected():
    """The sanitized form of the sample notification."""
    return DEMO_EXPECTED
