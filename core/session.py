"""
WordFlip – Study session shell
===============================
Glues the progress store, the word-set resolver and the scheduler
together.  The UI talks to this object; it never touches the store
directly.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from core.extractor import load_word_file
from core.progress import CUSTOM_SET_KEY, DISPLAY_KEY, ProgressStore
from core.scheduler import QueueScheduler
from core.word_sets import (
    WordSet,
    default_word_set,
    dump_word_set,
    load_custom_set,
    normalize_entries,
    resolve_word_set,
)

log = logging.getLogger(__name__)


class StudySession:
    """Application-level state: active word set, scheduler, theme flag."""

    def __init__(
        self,
        store: ProgressStore,
        default_set: Optional[WordSet] = None,
        rng=None,
    ) -> None:
        self._store = store
        self._default_set = default_set if default_set else default_word_set()
        self._custom_set = load_custom_set(store.get(CUSTOM_SET_KEY))
        self._dark = bool(store.get(DISPLAY_KEY, False))

        self.scheduler = QueueScheduler(self.active_set, store=store, rng=rng)
        log.info(
            "Session started with %s set (%d cards, known=%d unknown=%d)",
            "custom" if self.has_custom_set else "default",
            len(self.active_set), self.scheduler.known, self.scheduler.unknown,
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def active_set(self) -> WordSet:
        return resolve_word_set(self._custom_set, self._default_set)

    @property
    def has_custom_set(self) -> bool:
        return self._custom_set is not None

    @property
    def dark_mode(self) -> bool:
        return self._dark

    # ------------------------------------------------------------------
    # Word-set changes
    # ------------------------------------------------------------------

    def import_entries(self, entries: Any) -> WordSet:
        """Make *entries* the active custom set.

        Raises ``WordSetError`` if nothing usable is left; the previous
        set stays active in that case.
        """
        word_set = normalize_entries(entries)
        self._custom_set = word_set
        self._store.set(CUSTOM_SET_KEY, dump_word_set(word_set))
        self.scheduler.initialize(word_set)
        log.info("Imported custom set with %d cards", len(word_set))
        return word_set

    def import_file(self, filepath: str | Path) -> WordSet:
        """Read a word-list file and import it."""
        return self.import_entries(load_word_file(filepath))

    def clear_custom_set(self) -> None:
        """Drop the custom set and go back to the bundled words."""
        self._custom_set = None
        self._store.set(CUSTOM_SET_KEY, None)
        self.scheduler.initialize(self._default_set)
        log.info("Custom set cleared – using default set")

    # ------------------------------------------------------------------
    # Progress & display
    # ------------------------------------------------------------------

    def reset(self) -> None:
        self.scheduler.reset(self.active_set)

    def toggle_dark_mode(self) -> bool:
        self._dark = not self._dark
        self._store.set(DISPLAY_KEY, self._dark)
        return self._dark
