from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

from ..parsing.codeowners import split_owner_tokens
from ..runtime_defaults import DEFAULT_MAX_GROUP_PASSES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GroupResolution:
    groups: dict[str, str]
    passes: int
    converged: bool
    unresolved: tuple[str, ...] = ()


def _expand_once(groups: Mapping[str, str]) -> tuple[dict[str, str], bool]:
    out: dict[str, str] = {}
    changed = False
    for alias, value in groups.items():
        tokens = split_owner_tokens(value)
        if not any(t in groups for t in tokens):
            out[alias] = value
            continue
        changed = True
        out[alias] = " ".join(groups[t] if t in groups else t for t in tokens)
    return out, changed


def _aliases_with_group_tokens(groups: Mapping[str, str]) -> tuple[str, ...]:
    return tuple(
        alias
        for alias, value in groups.items()
        if any(t in groups for t in split_owner_tokens(value))
    )


def resolve_group_definitions(
    groups: Mapping[str, str],
    *,
    max_passes: int = DEFAULT_MAX_GROUP_PASSES,
) -> GroupResolution:
    """Expand group references inside group values.

    Each pass substitutes whole alias tokens with the previous pass's values.
    Iteration stops once a pass changes nothing or ``max_passes`` is reached,
    so cyclic definitions come back partially expanded instead of failing.
    """
    if max_passes < 1:
        raise ValueError(f"max_passes must be >= 1, got {max_passes}")

    current = dict(groups)
    passes = 0
    changed = True
    while changed and passes < max_passes:
        current, changed = _expand_once(current)
        passes += 1

    unresolved = _aliases_with_group_tokens(current)
    if unresolved:
        logger.warning(
            "group expansion did not converge after %d passes: %s",
            passes,
            ", ".join(unresolved),
        )
    else:
        logger.debug("group expansion converged after %d passes", passes)
    return GroupResolution(
        groups=current,
        passes=passes,
        converged=not unresolved,
        unresolved=unresolved,
    )


def find_group_cycles(groups: Mapping[str, str]) -> list[tuple[str, ...]]:
    """Return alias cycles found by a depth-first walk of alias references."""
    edges = {
        alias: list(
            dict.fromkeys(t for t in split_owner_tokens(value) if t in groups)
        )
        for alias, value in groups.items()
    }
    state: dict[str, int] = {}  # 1 = on path, 2 = done
    cycles: list[tuple[str, ...]] = []

    for root in edges:
        if root in state:
            continue
        state[root] = 1
        path = [root]
        pending = [iter(edges[root])]
        while pending:
            ref = next(pending[-1], None)
            if ref is None:
                state[path.pop()] = 2
                pending.pop()
            elif state.get(ref) == 1:
                cycles.append(tuple(path[path.index(ref) :]))
            elif ref not in state:
                state[ref] = 1
                path.append(ref)
                pending.append(iter(edges[ref]))
    return cycles


def flatten_mails(
    groups: Mapping[str, str],
    owner_lines: Mapping[str, list[str]],
) -> dict[str, list[str]]:
    """Replace group tokens in each subtree's owner list with their members."""
    out: dict[str, list[str]] = {}
    for subtree, tokens in owner_lines.items():
        owners: list[str] = []
        for token in tokens:
            if token in groups:
                owners.extend(split_owner_tokens(groups[token]))
            else:
                owners.append(token)
        out[subtree] = owners
    return out
