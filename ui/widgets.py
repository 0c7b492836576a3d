"""
WordFlip – Reusable CustomTkinter widgets
==========================================
Shared UI primitives.  Colours are ``(light, dark)`` pairs so CustomTkinter
switches them automatically with the appearance mode.
"""

from __future__ import annotations

import customtkinter as ctk


# ---------------------------------------------------------------------------
# Colours / design tokens
# ---------------------------------------------------------------------------
class Theme:
    """Centralised colour palette – (light, dark)."""
    BG            = ("#f4f5fa", "#0f1117")
    BG_CARD       = ("#ffffff", "#1e2030")
    BG_CARD_HOVER = ("#e9eaf3", "#272a3d")
    ACCENT        = ("#6a5cf0", "#7c6ff5")
    ACCENT_HOVER  = ("#5747d6", "#6958d9")
    SUCCESS       = ("#1f9e72", "#43d9a2")
    SUCCESS_HOVER = ("#17805b", "#33b887")
    DANGER        = ("#d9394a", "#f55a6a")
    DANGER_HOVER  = ("#b82e3d", "#d44454")
    TEXT_PRIMARY   = ("#1b1d2a", "#e2e4f0")
    TEXT_SECONDARY = ("#5b5f78", "#8b8fa8")
    TEXT_MUTED     = ("#8b8fa8", "#5b5f78")
    BORDER         = ("#d8dae6", "#2a2d40")
    FONT_FAMILY    = "Segoe UI"


def apply_appearance(dark: bool) -> None:
    """Switch every widget between the light and dark palette."""
    ctk.set_appearance_mode("dark" if dark else "light")


# ---------------------------------------------------------------------------
# Styled buttons
# ---------------------------------------------------------------------------
class AccentButton(ctk.CTkButton):
    """A consistently-styled accent button."""

    def __init__(self, master, text: str = "", command=None, **kw):
        kw.setdefault("fg_color", Theme.ACCENT)
        kw.setdefault("hover_color", Theme.ACCENT_HOVER)
        kw.setdefault("text_color", "#ffffff")
        kw.setdefault("corner_radius", 8)
        kw.setdefault("font", ctk.CTkFont(family=Theme.FONT_FAMILY, size=14, weight="bold"))
        kw.setdefault("height", 36)
        super().__init__(master, text=text, command=command, **kw)


class SuccessButton(AccentButton):
    """Green button for the "knew it" answer."""

    def __init__(self, master, text: str = "", command=None, **kw):
        kw.setdefault("fg_color", Theme.SUCCESS)
        kw.setdefault("hover_color", Theme.SUCCESS_HOVER)
        super().__init__(master, text=text, command=command, **kw)


class DangerButton(AccentButton):
    """Red-toned button for the "did not know" answer."""

    def __init__(self, master, text: str = "", command=None, **kw):
        kw.setdefault("fg_color", Theme.DANGER)
        kw.setdefault("hover_color", Theme.DANGER_HOVER)
        super().__init__(master, text=text, command=command, **kw)


class GhostButton(ctk.CTkButton):
    """Transparent toolbar button."""

    def __init__(self, master, text: str = "", command=None, **kw):
        kw.setdefault("fg_color", "transparent")
        kw.setdefault("hover_color", Theme.BG_CARD_HOVER)
        kw.setdefault("text_color", Theme.TEXT_PRIMARY)
        kw.setdefault("border_width", 1)
        kw.setdefault("border_color", Theme.BORDER)
        kw.setdefault("corner_radius", 6)
        kw.setdefault("font", ctk.CTkFont(family=Theme.FONT_FAMILY, size=13))
        kw.setdefault("height", 32)
        super().__init__(master, text=text, command=command, **kw)


# ---------------------------------------------------------------------------
# Stat card (mini dashboard widget)
# ---------------------------------------------------------------------------
class StatCard(ctk.CTkFrame):
    """Small rounded card that shows a label + large number."""

    def __init__(self, master, label: str = "", value: str = "0", color=Theme.ACCENT, **kw):
        kw.setdefault("fg_color", Theme.BG_CARD)
        kw.setdefault("corner_radius", 12)
        super().__init__(master, **kw)

        self._label = ctk.CTkLabel(
            self, text=label.upper(),
            font=ctk.CTkFont(family=Theme.FONT_FAMILY, size=11, weight="bold"),
            text_color=Theme.TEXT_MUTED,
        )
        self._label.pack(padx=16, pady=(12, 0), anchor="w")

        self._value = ctk.CTkLabel(
            self, text=value,
            font=ctk.CTkFont(family=Theme.FONT_FAMILY, size=26, weight="bold"),
            text_color=color,
        )
        self._value.pack(padx=16, pady=(2, 12), anchor="w")

    def set_value(self, v: str) -> None:
        self._value.configure(text=v)
