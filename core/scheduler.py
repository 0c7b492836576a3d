"""
WordFlip – Card-queue scheduler
================================
Owns the working queue of cards still due this session, the reveal flag
and the known / unknown counters.

Scheduling policy
-----------------
* **Known** – the head card leaves the queue for the rest of the session.
* **Unknown** – the head card is reinserted after at most
  :data:`REQUEUE_DEPTH` other cards, so a missed word comes back soon.
* **Skip** – the head card moves to the tail.

Every transition runs to completion and then notifies subscribers with the
names of the state that changed (``"queue"``, ``"revealed"``, ``"known"``,
``"unknown"``).  Counter changes are written to the progress store first.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, FrozenSet, List, MutableSequence, Optional, Sequence

from core.progress import KNOWN_KEY, UNKNOWN_KEY, ProgressStore
from core.word_sets import Card

log = logging.getLogger(__name__)

# A missed card resurfaces after at most this many other cards.
REQUEUE_DEPTH = 4

Listener = Callable[[FrozenSet[str]], None]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def fisher_yates(items: Sequence[Card], rng) -> List[Card]:
    """Return a uniformly shuffled copy of *items*.

    *rng* only needs a ``randint(a, b)`` method (inclusive bounds).
    """
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def success_rate(known: int, unknown: int) -> int:
    """Percentage of known answers, rounded half-up; 0 when nothing answered."""
    total = known + unknown
    if not total:
        return 0
    return (200 * known + total) // (2 * total)


def requeue(queue: MutableSequence[Card], depth: int = REQUEUE_DEPTH) -> None:
    """Move the head of *queue* to index ``min(depth, len(rest))``."""
    card = queue.pop(0)
    queue.insert(min(depth, len(queue)), card)


# ---------------------------------------------------------------------------
# Scheduler
# ---------------------------------------------------------------------------
class QueueScheduler:
    """Position-based repetition queue for one study session."""

    def __init__(
        self,
        word_set: Sequence[Card],
        store: Optional[ProgressStore] = None,
        rng=None,
    ) -> None:
        self._store = store
        self._rng = rng if rng is not None else random.SystemRandom()
        self._listeners: List[Listener] = []

        self._queue: List[Card] = []
        self._revealed = False
        self._known = self._restore_counter(KNOWN_KEY)
        self._unknown = self._restore_counter(UNKNOWN_KEY)

        self.initialize(word_set)

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def queue(self) -> tuple:
        return tuple(self._queue)

    @property
    def remaining(self) -> int:
        return len(self._queue)

    @property
    def revealed(self) -> bool:
        return self._revealed

    @property
    def known(self) -> int:
        return self._known

    @property
    def unknown(self) -> int:
        return self._unknown

    @property
    def success_rate(self) -> int:
        return success_rate(self._known, self._unknown)

    @property
    def is_complete(self) -> bool:
        return not self._queue

    def current(self) -> Optional[Card]:
        """The card on display, or ``None`` once the session is complete."""
        return self._queue[0] if self._queue else None

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def initialize(self, word_set: Sequence[Card]) -> None:
        """Replace the queue with a fresh shuffle of *word_set*."""
        self._queue = fisher_yates(word_set, self._rng)
        self._revealed = False
        log.debug("Queue initialised with %d cards", len(self._queue))
        self._emit({"queue", "revealed"})

    def toggle_reveal(self) -> None:
        if self.current() is None:
            return
        self._revealed = not self._revealed
        self._emit({"revealed"})

    def skip(self) -> None:
        """Send the head card to the back of the queue."""
        changed = set()
        if self._revealed:
            self._revealed = False
            changed.add("revealed")
        if len(self._queue) > 1:
            self._queue.append(self._queue.pop(0))
            changed.add("queue")
        self._emit(changed)

    def answer(self, knew_it: bool) -> None:
        """Record a self-assessment for the head card and advance."""
        card = self.current()
        if card is None:
            return

        if knew_it:
            self._known += 1
            self._queue.pop(0)
            changed = {"queue", "known", "revealed"}
        else:
            self._unknown += 1
            requeue(self._queue)
            changed = {"queue", "unknown", "revealed"}
        self._revealed = False

        log.debug(
            "Answered %r knew=%s → %d left (known=%d unknown=%d)",
            card.term, knew_it, len(self._queue), self._known, self._unknown,
        )
        if not self._queue:
            log.info("Session complete: known=%d unknown=%d", self._known, self._unknown)
        self._emit(changed)

    def reset(self, word_set: Sequence[Card]) -> None:
        """Zero the counters and start over with a fresh shuffle."""
        self._known = 0
        self._unknown = 0
        self._queue = fisher_yates(word_set, self._rng)
        self._revealed = False
        log.info("Progress reset – %d cards queued", len(self._queue))
        self._emit({"queue", "revealed", "known", "unknown"})

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _restore_counter(self, key: str) -> int:
        if self._store is None:
            return 0
        value = self._store.get(key, 0)
        return value if value >= 0 else 0

    def _emit(self, changed: set) -> None:
        if not changed:
            return
        if self._store is not None:
            if "known" in changed:
                self._store.set(KNOWN_KEY, self._known)
            if "unknown" in changed:
                self._store.set(UNKNOWN_KEY, self._unknown)

        names = frozenset(changed)
        for listener in list(self._listeners):
            listener(names)
