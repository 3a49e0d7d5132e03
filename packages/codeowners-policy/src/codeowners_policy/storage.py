from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def normalize_text(value: str) -> str:
    return value.replace("\r\n", "\n").replace("\r", "\n")


def read_codeowners_lines(path: str | Path) -> list[str]:
    """Read a CODEOWNERS file as raw lines; a missing file reads as empty."""
    p = Path(path)
    if not p.is_file():
        logger.debug("CODEOWNERS not found at %s", p)
        return []
    return normalize_text(p.read_text(encoding="utf-8-sig")).split("\n")
