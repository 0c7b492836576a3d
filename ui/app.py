"""
WordFlip – Main application window
===================================
Opens the progress store, builds the study session and hosts the
flashcard view in a single CustomTkinter window.
"""

from __future__ import annotations

import logging

import customtkinter as ctk
from sqlalchemy.exc import SQLAlchemyError

from core.progress import MemoryProgressStore, ProgressStore, SqlProgressStore
from core.session import StudySession
from ui.flashcard_view import FlashcardView
from ui.widgets import Theme, apply_appearance

log = logging.getLogger(__name__)


def open_store() -> ProgressStore:
    """SQLite store if the database is usable, otherwise an in-memory one."""
    try:
        from db.database import init_db
        init_db()
    except (SQLAlchemyError, OSError) as exc:
        log.warning("Progress database unavailable (%s) – progress will not be saved", exc)
        return MemoryProgressStore()
    return SqlProgressStore()


class WordFlipApp(ctk.CTk):
    """Root application window."""

    APP_TITLE = "WordFlip — Flashcards"
    WIDTH = 760
    HEIGHT = 620

    def __init__(self, store: ProgressStore | None = None) -> None:
        super().__init__()

        self._session = StudySession(store if store is not None else open_store())

        # ── Window setup ──
        self.title(self.APP_TITLE)
        self.geometry(f"{self.WIDTH}x{self.HEIGHT}")
        self.minsize(560, 480)
        self.configure(fg_color=Theme.BG)

        apply_appearance(self._session.dark_mode)
        ctk.set_default_color_theme("blue")

        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(0, weight=1)

        self._view = FlashcardView(self, session=self._session)
        self._view.grid(row=0, column=0, sticky="nsew")

        self.bind("<space>", lambda _: self._view.reveal())
        self.bind("<Right>", lambda _: self._view.mark_known())
        self.bind("<Left>", lambda _: self._view.mark_unknown())
        self.bind("n", lambda _: self._view.skip())
