"""`pix31 browse`: open the icon catalogue in the default browser."""

from __future__ import annotations

import logging
import webbrowser

from pix31 import console
from pix31.config import settings

logger = logging.getLogger(__name__)


def browse(url: str | None = None) -> bool:
    url = url or settings.browse_url
    try:
        opened = webbrowser.open(url)
    except webbrowser.Error as e:
        logger.error("Error opening browser: %s", e)
        console.error(f"Error opening browser: {e}")
        return False

    if not opened:
        console.warn(f"Could not open a browser. Visit {url}")
    return opened
