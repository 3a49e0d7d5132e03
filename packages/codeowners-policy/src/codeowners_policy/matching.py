from __future__ import annotations

from typing import Literal, Sequence

from .runtime_defaults import DEFAULT_OWNER_DOMAIN

PathMatchMode = Literal["substring", "segment"]


def user_alias(identity: str) -> str:
    """``SCDOM\\ANDO`` -> ``ando``."""
    return identity.lower().rsplit("\\", 1)[-1]


def _normalize_path(path: str) -> str:
    return path.lower().replace("/", "\\")


def _contains(path: str, subtree: str, mode: PathMatchMode) -> bool:
    if not subtree:
        return True
    if mode == "segment":
        bounded = "\\" + path.strip("\\") + "\\"
        return "\\" + subtree + "\\" in bounded
    return subtree in path


def most_specific_subtree(
    subtrees: Sequence[str],
    path: str,
    *,
    mode: PathMatchMode = "substring",
) -> str | None:
    """Return the last declared subtree contained in ``path``.

    Broad rules come first in a CODEOWNERS file and narrower overrides later,
    so the last hit wins. Matching is plain substring containment unless
    ``mode="segment"`` asks for whole path segments. An empty subtree is
    contained in every path; when it is the last hit the result is ``None``.
    """
    candidate = _normalize_path(path)
    matched: str | None = None
    for subtree in subtrees:
        if _contains(candidate, subtree, mode):
            matched = subtree
    if matched is None or not matched.strip():
        return None
    return matched


def is_code_owner(
    owners_line: str,
    alias: str,
    *,
    domain: str = DEFAULT_OWNER_DOMAIN,
) -> bool:
    if not alias:
        return False
    return f"{alias}@{domain}" in owners_line
