"""
WordFlip – Flashcard study screen
==================================
Stats row, the card itself (click to reveal), the two answer buttons and
a toolbar.  The view redraws whenever the scheduler reports a change.
"""

from __future__ import annotations

import logging
from tkinter import filedialog, messagebox
from typing import FrozenSet

import customtkinter as ctk

from core.session import StudySession
from core.word_sets import WordSetError
from ui.widgets import (
    Theme, AccentButton, DangerButton, GhostButton, StatCard, SuccessButton,
    apply_appearance,
)

log = logging.getLogger(__name__)


class FlashcardView(ctk.CTkFrame):
    """Interactive study screen bound to a :class:`StudySession`."""

    def __init__(self, master, session: StudySession, **kw):
        kw.setdefault("fg_color", Theme.BG)
        kw.setdefault("corner_radius", 0)
        super().__init__(master, **kw)

        self._session = session
        self._scheduler = session.scheduler

        self._build_ui()
        self._scheduler.subscribe(self._on_change)
        self._render()

    def destroy(self) -> None:
        self._scheduler.unsubscribe(self._on_change)
        super().destroy()

    # ------------------------------------------------------------------
    # Keyboard hooks (bound by the app window)
    # ------------------------------------------------------------------

    def reveal(self) -> None:
        self._scheduler.toggle_reveal()

    def mark_known(self) -> None:
        if self._scheduler.revealed:
            self._scheduler.answer(True)

    def mark_unknown(self) -> None:
        if self._scheduler.revealed:
            self._scheduler.answer(False)

    def skip(self) -> None:
        self._scheduler.skip()

    # ------------------------------------------------------------------
    # UI construction
    # ------------------------------------------------------------------

    def _build_ui(self) -> None:
        # ── Stats ──
        stats = ctk.CTkFrame(self, fg_color="transparent")
        stats.pack(fill="x", padx=40, pady=(24, 0))
        self._stat_known = StatCard(stats, label="✅ Knew it", color=Theme.SUCCESS)
        self._stat_known.pack(side="left", expand=True, fill="x", padx=6)
        self._stat_unknown = StatCard(stats, label="❌ Didn't know", color=Theme.DANGER)
        self._stat_unknown.pack(side="left", expand=True, fill="x", padx=6)
        self._stat_rate = StatCard(stats, label="📊 Success", color=Theme.ACCENT)
        self._stat_rate.pack(side="left", expand=True, fill="x", padx=6)

        # ── Card ──
        self._card_frame = ctk.CTkFrame(
            self, fg_color=Theme.BG_CARD, corner_radius=20,
            border_width=1, border_color=Theme.BORDER,
        )
        self._card_frame.pack(padx=46, pady=(24, 16), fill="both", expand=True)

        self._word_label = ctk.CTkLabel(
            self._card_frame, text="",
            font=ctk.CTkFont(family=Theme.FONT_FAMILY, size=36, weight="bold"),
            text_color=Theme.TEXT_PRIMARY,
            wraplength=520,
        )
        self._word_label.pack(expand=True, pady=(40, 0))

        self._hint_label = ctk.CTkLabel(
            self._card_frame, text="",
            font=ctk.CTkFont(family=Theme.FONT_FAMILY, size=13),
            text_color=Theme.TEXT_MUTED,
        )
        self._hint_label.pack(pady=(0, 30))

        for w in (self._card_frame, self._word_label, self._hint_label):
            w.bind("<Button-1>", lambda _: self.reveal())

        # ── Answer buttons (only while revealed) ──
        self._answer_frame = ctk.CTkFrame(self, fg_color="transparent")
        SuccessButton(
            self._answer_frame, text="✓  Knew it", height=44,
            command=self.mark_known,
        ).pack(side="left", padx=6, expand=True, fill="x")
        DangerButton(
            self._answer_frame, text="✗  Didn't know", height=44,
            command=self.mark_unknown,
        ).pack(side="left", padx=6, expand=True, fill="x")

        # ── Toolbar ──
        self._toolbar = ctk.CTkFrame(self, fg_color="transparent")
        self._toolbar.pack(side="bottom", fill="x", padx=40, pady=(0, 24))
        GhostButton(self._toolbar, text="Skip ⏭", command=self.skip).pack(side="left", padx=4)
        GhostButton(self._toolbar, text="Reset stats ♻", command=self._reset).pack(side="left", padx=4)
        AccentButton(self._toolbar, text="📥 Import list…", command=self._import).pack(side="left", padx=4)
        self._default_btn = GhostButton(
            self._toolbar, text="Use default list", command=self._clear_custom,
        )
        self._theme_btn = GhostButton(self._toolbar, text="", command=self._toggle_theme)
        self._theme_btn.pack(side="right", padx=4)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _on_change(self, changed: FrozenSet[str]) -> None:
        log.debug("Scheduler changed: %s", ", ".join(sorted(changed)))
        self._render()

    def _render(self) -> None:
        sch = self._scheduler
        self._stat_known.set_value(str(sch.known))
        self._stat_unknown.set_value(str(sch.unknown))
        self._stat_rate.set_value(f"{sch.success_rate}%")

        card = sch.current()
        if card is None:
            self._word_label.configure(text="🎉  All cards done!")
            self._hint_label.configure(text="Press “Reset stats” to start a new session")
        elif sch.revealed:
            self._word_label.configure(text=card.translation)
            self._hint_label.configure(text=f"{card.term}  ·  click to hide")
        else:
            self._word_label.configure(text=card.term)
            self._hint_label.configure(
                text=f"Click or [Space] to reveal  ·  {sch.remaining} left",
            )

        if card is not None and sch.revealed:
            self._answer_frame.pack(fill="x", padx=40, pady=(0, 16), before=self._toolbar)
        else:
            self._answer_frame.pack_forget()

        if self._session.has_custom_set:
            self._default_btn.pack(side="left", padx=4)
        else:
            self._default_btn.pack_forget()

        self._theme_btn.configure(
            text="☀ Light mode" if self._session.dark_mode else "🌙 Dark mode",
        )

    # ------------------------------------------------------------------
    # Toolbar actions
    # ------------------------------------------------------------------

    def _reset(self) -> None:
        self._session.reset()

    def _import(self) -> None:
        path = filedialog.askopenfilename(
            parent=self,
            title="Select a word list",
            filetypes=[
                ("Word lists", "*.json *.txt *.text *.csv"),
                ("JSON", "*.json"),
                ("Text", "*.txt *.csv"),
            ],
        )
        if not path:
            return
        try:
            word_set = self._session.import_file(path)
        except (WordSetError, ValueError, OSError) as exc:
            log.warning("Import of %s failed: %s", path, exc)
            messagebox.showerror(
                "Import failed",
                "Invalid file. Use a JSON array of {term, translation} objects "
                "or \"term,translation\" strings, one pair per line.\n\n"
                f"Details: {exc}",
                parent=self,
            )
            return
        messagebox.showinfo(
            "Import complete", f"Loaded {len(word_set)} cards.", parent=self,
        )

    def _clear_custom(self) -> None:
        self._session.clear_custom_set()

    def _toggle_theme(self) -> None:
        apply_appearance(self._session.toggle_dark_mode())
        self._render()
