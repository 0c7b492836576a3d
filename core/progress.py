"""
WordFlip – Progress store (persistence port)
=============================================
A tiny key/value interface the rest of the app persists through:

    store.get(key, default)  →  stored value, or *default*
    store.set(key, value)

Two implementations:

* :class:`MemoryProgressStore` – dict-backed; used in tests and as the
  fallback when the database cannot be opened.
* :class:`SqlProgressStore` – JSON values in the ``settings`` table.

Neither implementation raises on storage trouble.  Failures are logged
and ``get`` falls back to the caller's default.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from db.models import Setting

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Keys
# ---------------------------------------------------------------------------
CUSTOM_SET_KEY = "custom-word-set"
KNOWN_KEY = "known-count"
UNKNOWN_KEY = "unknown-count"
DISPLAY_KEY = "display-preference"


def _matches_default(value: Any, default: Any) -> bool:
    """A stored value is usable if it has the same type as the default."""
    if default is None:
        return True
    if value is None:
        return False
    if isinstance(default, bool) or isinstance(value, bool):
        return isinstance(value, bool) and isinstance(default, bool)
    return isinstance(value, type(default))


class ProgressStore:
    """Base class / interface for progress stores."""

    def get(self, key: str, default: Any = None) -> Any:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError


# ---------------------------------------------------------------------------
# In-memory store
# ---------------------------------------------------------------------------
class MemoryProgressStore(ProgressStore):
    """Dict-backed store; values are JSON round-tripped like the SQL store."""

    def __init__(self, initial: Dict[str, Any] | None = None) -> None:
        self._data: Dict[str, str] = {}
        for key, value in (initial or {}).items():
            self.set(key, value)

    def get(self, key: str, default: Any = None) -> Any:
        raw = self._data.get(key)
        if raw is None:
            return default
        value = json.loads(raw)
        if not _matches_default(value, default):
            log.warning("Ignoring stored %r – expected %s", key, type(default).__name__)
            return default
        return value

    def set(self, key: str, value: Any) -> None:
        try:
            self._data[key] = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            log.warning("Cannot serialise value for %r: %s", key, exc)


# ---------------------------------------------------------------------------
# SQLite store
# ---------------------------------------------------------------------------
class SqlProgressStore(ProgressStore):
    """Persist progress values as JSON rows in the ``settings`` table."""

    def __init__(self, session_factory: Callable[[], Session] | None = None) -> None:
        if session_factory is None:
            from db.database import get_session
            session_factory = get_session
        self._session_factory = session_factory

    def get(self, key: str, default: Any = None) -> Any:
        try:
            s = self._session_factory()
        except SQLAlchemyError as exc:
            log.warning("Could not open a session to read %r: %s", key, exc)
            return default
        try:
            row = s.get(Setting, key)
            if row is None or row.value is None:
                return default
            value = json.loads(row.value)
        except SQLAlchemyError as exc:
            log.warning("Could not read %r: %s", key, exc)
            return default
        except ValueError as exc:
            log.warning("Stored value for %r is corrupt: %s", key, exc)
            return default
        finally:
            s.close()

        if not _matches_default(value, default):
            log.warning("Ignoring stored %r – expected %s", key, type(default).__name__)
            return default
        return value

    def set(self, key: str, value: Any) -> None:
        try:
            payload = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            log.warning("Cannot serialise value for %r: %s", key, exc)
            return

        try:
            s = self._session_factory()
        except SQLAlchemyError as exc:
            log.warning("Could not open a session to write %r: %s", key, exc)
            return
        try:
            row = s.get(Setting, key)
            if row is None:
                s.add(Setting(key=key, value=payload))
            else:
                row.value = payload
            s.commit()
            log.debug("Saved %r = %s", key, payload if len(payload) < 80 else payload[:77] + "...")
        except SQLAlchemyError as exc:
            s.rollback()
            log.warning("Could not save %r: %s", key, exc)
        finally:
            s.close()
