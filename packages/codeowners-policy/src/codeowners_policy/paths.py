from __future__ import annotations

from .runtime_defaults import DEFAULT_CODEOWNERS_FILENAME, DEFAULT_CODEOWNERS_MARKER


def codeowners_path_for(
    local_item: str,
    *,
    marker: str = DEFAULT_CODEOWNERS_MARKER,
    filename: str = DEFAULT_CODEOWNERS_FILENAME,
) -> str:
    """Locate the CODEOWNERS file governing ``local_item``.

    The file sits directly under the last ``<marker>`` directory of the item
    path (case-insensitive, either separator). Returns ``""`` when the path
    has no such directory.
    """
    needle = f"{marker}\\".lower()
    idx = local_item.lower().replace("/", "\\").rfind(needle)
    if idx == -1:
        return ""
    return local_item[: idx + len(needle)] + filename
