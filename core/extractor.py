"""
WordFlip – Word-list file reader
=================================
Reads a user-supplied word list from disk and returns the *raw* entries
for :func:`core.word_sets.normalize_entries`.

Supported files:

1. **JSON** (``.json``) – an array of ``"term,translation"`` strings or
   ``{"term": …, "translation": …}`` objects.
2. **Plain text** (``.txt``, ``.text``, ``.csv``) – one
   ``term,translation`` pair per line; ``#`` starts a comment line.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List

from core.word_sets import WordSetError

log = logging.getLogger(__name__)

_LINE_EXTENSIONS = (".txt", ".text", ".csv")


# ──────────────────────────────────────────────────────────────────────
# Raw text reader
# ──────────────────────────────────────────────────────────────────────

def read_text_file(filepath: str | Path) -> str:
    """Read a plain-text file with automatic encoding detection."""
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"Word list not found: {filepath}")

    for encoding in ("utf-8", "utf-8-sig", "latin-1", "cp1252"):
        try:
            text = filepath.read_text(encoding=encoding)
            log.info("Read %d chars from %s (encoding=%s)", len(text), filepath.name, encoding)
            return text
        except (UnicodeDecodeError, ValueError):
            continue

    raise UnicodeDecodeError(
        "all", b"", 0, 1, f"Could not decode {filepath.name} with any supported encoding"
    )


# ──────────────────────────────────────────────────────────────────────
# Parsers
# ──────────────────────────────────────────────────────────────────────

def parse_json_word_list(text: str) -> List[Any]:
    """Decode a JSON word list; the top level must be an array."""
    # A BOM survives when the file decodes as plain utf-8
    text = text.lstrip("\ufeff")
    try:
        data = json.loads(text)
    except ValueError as exc:
        raise WordSetError(f"Not valid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise WordSetError("Word list must be a JSON array")
    log.info("Parsed %d JSON entries", len(data))
    return data


def parse_line_word_list(text: str) -> List[str]:
    """Split a text file into ``term,translation`` lines.

    Empty lines and lines starting with ``#`` are skipped; splitting and
    validation of each line happen in ``normalize_entries``.
    """
    lines = []
    for raw_line in text.splitlines():
        line = raw_line.strip().lstrip("\ufeff")
        if not line or line.startswith("#"):
            continue
        lines.append(line)
    log.info("Parsed %d lines", len(lines))
    return lines


def load_word_file(filepath: str | Path) -> List[Any]:
    """Dispatch to the right parser based on file extension."""
    filepath = Path(filepath)
    ext = filepath.suffix.lower()
    if ext == ".json":
        return parse_json_word_list(read_text_file(filepath))
    if ext in _LINE_EXTENSIONS:
        return parse_line_word_list(read_text_file(filepath))
    raise ValueError(f"Unsupported file type: {ext}")
