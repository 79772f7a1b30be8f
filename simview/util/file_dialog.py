"""Scenario file picker using tkinter."""
from __future__ import annotations

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

SCENARIO_FILETYPES = [("Scenario Files", "*.json"), ("All Files", "*.*")]


def open_file_dialog(
    title: str = "Open Scenario",
    filetypes: list[tuple[str, str]] | None = None,
    initial_dir: str | None = None,
) -> Optional[str]:
    """Show a file open dialog. Returns path or None if cancelled or unavailable."""
    try:
        import tkinter as tk
        from tkinter import filedialog
    except ImportError:
        logger.warning("tkinter is not available; cannot show a file dialog")
        return None
    try:
        root = tk.Tk()
        root.withdraw()
        root.attributes("-topmost", True)
        path = filedialog.askopenfilename(
            title=title,
            filetypes=filetypes or SCENARIO_FILETYPES,
            initialdir=initial_dir or os.getcwd(),
        )
        root.destroy()
    except tk.TclError as e:
        logger.warning("File dialog failed: %s", e)
        return None
    return path if path else None
