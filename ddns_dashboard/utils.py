"""
Design (utils.py)
- Purpose: Reusable helpers: icon path detection (PyInstaller), DDNS link normalization and
           opening, equipment display helpers, and hit-testing for the link icon area.
- Inputs: Various helper parameters (links, equipment, click coords, etc.).
- Outputs: Helper results (bools, strings, paths).
- Side effects: open_external_link launches the web browser.
- Thread-safety: Stateless; safe to call from any thread.
"""

import logging
import os
import re
import sys
import webbrowser
from typing import Callable, Optional

from .config import DEFAULT_SCHEME, EQUIPMENT_COLORS, EQUIPMENT_LABELS
from .models import Equipment

logger = logging.getLogger(__name__)

_HAS_SCHEME = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")


def get_icon_path(filename: str) -> Optional[str]:
    """
    Purpose: Resolve icon path for both dev (script) and PyInstaller (frozen) runs.
    Inputs: filename (e.g., "logo.ico")
    Outputs: Path usable with Tk.iconbitmap, or None when the icon is not shipped.
    """
    if getattr(sys, "frozen", False) and hasattr(sys, "_MEIPASS"):
        path = os.path.join(sys._MEIPASS, filename)  # type: ignore[attr-defined]
    else:
        here = os.path.dirname(os.path.abspath(__file__))
        path = os.path.join(here, "icons", filename)
    return path if os.path.exists(path) else None


def normalize_link(ddns_link: str) -> str:
    """
    Purpose: Turn a stored DDNS link into a browsable URL.
    Outputs: The trimmed link, prefixed with https:// when it carries no scheme.
    """
    link = (ddns_link or "").strip()
    if _HAS_SCHEME.match(link):
        return link
    return f"{DEFAULT_SCHEME}{link}"


def open_external_link(ddns_link: str, opener: Callable[[str], bool] = webbrowser.open_new_tab) -> bool:
    """
    Purpose: Open the DDNS address in a new browser tab.
    Inputs: ddns_link (raw stored value), opener (injectable for tests).
    Outputs: True if the browser accepted the URL; False on any failure (already logged).
    Side Effects: Launches the browser.
    """
    try:
        url = normalize_link(ddns_link)
        if not opener(url):
            logger.warning("No browser could open %s", url)
            return False
    except (webbrowser.Error, OSError, ValueError) as exc:
        logger.warning("Failed to open link %r: %s", ddns_link, exc)
        return False
    logger.info("Opened %s", url)
    return True


def equipment_label(equipment: Equipment) -> str:
    return EQUIPMENT_LABELS.get(equipment.value, equipment.value.capitalize())


def equipment_color(equipment: Equipment) -> str:
    return EQUIPMENT_COLORS.get(equipment.value, "#f0f0f0")


def equipment_from_label(label: str) -> Optional[Equipment]:
    """Map a combobox label (e.g. 'pfSense') back to its Equipment; None for blank/unknown."""
    for value, text in EQUIPMENT_LABELS.items():
        if text == label:
            return Equipment(value)
    return Equipment.parse(label)


def link_icon_hit(cell_bbox: tuple[int, int, int, int] | None, click_x: int) -> bool:
    """
    Purpose: Detect if a click is within the left-most ~20px of a Treeview cell (where we draw '↗').
    Inputs: cell_bbox = (x, y, width, height) from tree.bbox(...), click_x = event.x
    Outputs: True if inside the icon area; else False.
    """
    if not cell_bbox:
        return False
    x1, _, _, _ = cell_bbox
    return 0 <= (click_x - x1) <= 20
