from __future__ import annotations

import os
import tkinter as tk
from tkinter import ttk


_DARK_BG = "#2b2b2b"
_DARK_FG = "#e0e0e0"


def theme_prefers_dark() -> bool:
    """``SPINWHEEL_THEME=dark`` opts into the dark palette; light otherwise."""

    return os.environ.get("SPINWHEEL_THEME", "").strip().lower() == "dark"


def tk_scaling_override() -> float | None:
    raw = os.environ.get("SPINWHEEL_TK_SCALING")
    if not raw:
        return None
    try:
        scaling = float(raw)
    except ValueError:
        return None
    return scaling if scaling > 0 else None


def apply_clam_theme(root: tk.Misc) -> tuple[str, str]:
    """Apply the clam ttk theme in light or dark flavour.

    Returns (bg_color, fg_color).
    """

    style = ttk.Style()
    style.theme_use("clam")

    scaling = tk_scaling_override()
    if scaling is not None:
        root.tk.call("tk", "scaling", scaling)

    if theme_prefers_dark():
        bg_color, fg_color = _DARK_BG, _DARK_FG
        field_bg = "#3a3a3a"
        style.configure("TButton", background="#404040", foreground=fg_color)
        style.map("TButton", background=[("active", "#505050")])
    else:
        bg_color = style.lookup("TFrame", "background") or "#f0f0f0"
        fg_color = style.lookup("TLabel", "foreground") or "#000000"
        field_bg = style.lookup("TEntry", "fieldbackground") or "#ffffff"

    root.configure(bg=bg_color)  # type: ignore[call-arg]

    style.configure("TFrame", background=bg_color)
    style.configure("TLabel", background=bg_color, foreground=fg_color)
    style.configure("TLabelframe", background=bg_color, foreground=fg_color)
    style.configure("TLabelframe.Label", background=bg_color, foreground=fg_color)
    style.configure("TScale", background=bg_color, troughcolor=field_bg)

    return bg_color, fg_color
