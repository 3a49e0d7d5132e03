from __future__ import annotations

from typing import Iterable


def normalize_lines(lines: Iterable[str]) -> list[str]:
    """Case-fold lines and convert path separators to backslashes.

    Empty lines are dropped; comment lines are kept.
    """
    out: list[str] = []
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line == "":
            continue
        out.append(line.lower().replace("/", "\\"))
    return out
