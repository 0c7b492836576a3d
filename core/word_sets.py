"""
WordFlip – Cards, word sets & the active-set resolver
======================================================
A *word set* is an ordered, non-empty tuple of :class:`Card` objects.  Two
sources exist: the bundled default list and a user-imported custom list.
Exactly one of them is active at a time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Tuple

from core.default_words import DEFAULT_WORDS

log = logging.getLogger(__name__)


class WordSetError(ValueError):
    """Raised when an imported word list is malformed or ends up empty."""


# ---------------------------------------------------------------------------
# Card – a single term / translation pair
# ---------------------------------------------------------------------------
@dataclass(frozen=True, eq=False)
class Card:
    """An immutable flashcard.

    Equality is identity: two cards with the same text are still two
    separate entries in a queue.
    """

    term: str
    translation: str

    def __repr__(self) -> str:
        return f"<Card term={self.term!r} translation={self.translation!r}>"


WordSet = Tuple[Card, ...]


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------

def resolve_word_set(custom_set: Optional[WordSet], default_set: WordSet) -> WordSet:
    """Return *custom_set* if present and non-empty, else *default_set*."""
    if custom_set:
        return custom_set
    return default_set


def default_word_set() -> WordSet:
    """Build the bundled word set."""
    return tuple(Card(term, translation) for term, translation in DEFAULT_WORDS)


# ---------------------------------------------------------------------------
# Import normalisation
# ---------------------------------------------------------------------------

# Key pairs accepted on mapping entries, in priority order.  ``en``/``he``
# is the layout of lists exported by the first version of the app.
_FIELD_ALIASES = (("term", "translation"), ("en", "he"))


def _split_line(entry: str) -> Tuple[str, str]:
    parts = [p.strip() for p in entry.split(",")]
    term = parts[0] if parts else ""
    translation = parts[1] if len(parts) > 1 else ""
    return term, translation


def _from_mapping(entry: dict) -> Tuple[str, str]:
    for term_key, translation_key in _FIELD_ALIASES:
        if term_key in entry or translation_key in entry:
            term = entry.get(term_key)
            translation = entry.get(translation_key)
            return (
                term.strip() if isinstance(term, str) else "",
                translation.strip() if isinstance(translation, str) else "",
            )
    return "", ""


def normalize_entries(entries: Any) -> WordSet:
    """Turn raw import data into a word set.

    Each entry is either a ``"term,translation"`` string (split on commas,
    both sides trimmed) or a mapping with ``term`` and ``translation``
    keys.  Entries missing either side are dropped.

    Raises
    ------
    WordSetError
        If *entries* is not a list/tuple or nothing usable remains.
    """
    if not isinstance(entries, (list, tuple)):
        raise WordSetError("Word list must be an array of entries")

    cards: List[Card] = []
    dropped = 0
    for entry in entries:
        if isinstance(entry, str):
            term, translation = _split_line(entry)
        elif isinstance(entry, dict):
            term, translation = _from_mapping(entry)
        else:
            term, translation = "", ""

        if term and translation:
            cards.append(Card(term, translation))
        else:
            dropped += 1

    if dropped:
        log.info("Dropped %d incomplete entries during import", dropped)
    if not cards:
        raise WordSetError("Word list is empty")
    return tuple(cards)


def load_custom_set(raw: Any) -> Optional[WordSet]:
    """Rebuild a persisted custom set; anything unusable counts as absent."""
    if raw is None:
        return None
    try:
        return normalize_entries(raw)
    except WordSetError:
        log.warning("Stored custom word set is unusable – falling back to default")
        return None


def dump_word_set(word_set: Iterable[Card]) -> List[dict]:
    """Serialisable form of a word set, used by the progress store."""
    return [{"term": c.term, "translation": c.translation} for c in word_set]
