"""Declaration file output."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def write_declarations(path: str | Path, text: str) -> Path:
    """Write ``text`` to ``path`` in one shot, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    logger.info("Wrote %d bytes to %s", len(text.encode("utf-8")), path)
    return path
