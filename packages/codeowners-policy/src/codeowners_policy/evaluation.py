from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Sequence

from .config import PolicyConfig
from .matching import is_code_owner, most_specific_subtree, user_alias
from .models import EvaluationResult, OwnershipVerdict, ResolvedOwnership
from .parsing import (
    normalize_lines,
    parse_group_definitions,
    parse_owner_lines,
    parse_subtrees,
)
from .paths import codeowners_path_for
from .resolve import find_group_cycles, flatten_mails, resolve_group_definitions
from .storage import read_codeowners_lines

logger = logging.getLogger(__name__)


def _resolve(
    lines: Iterable[str], cfg: PolicyConfig
) -> tuple[ResolvedOwnership | None, str | None]:
    content = normalize_lines(lines)
    if not content:
        return None, "CODEOWNERS content is empty"

    subtrees = parse_subtrees(content)
    if not subtrees:
        return None, "CODEOWNERS has no subtrees"

    owner_lines = parse_owner_lines(content)
    if not owner_lines:
        return None, "CODEOWNERS has no owner lines"

    groups = parse_group_definitions(content)
    if not groups and cfg.require_group_definitions:
        return None, "CODEOWNERS has no group definitions"

    if cfg.fail_on_group_cycles:
        cycles = find_group_cycles(groups)
        if cycles:
            rendered = "; ".join(" -> ".join(c + c[:1]) for c in cycles)
            return None, f"group definitions contain cycles: {rendered}"

    resolution = resolve_group_definitions(groups, max_passes=cfg.max_group_passes)
    return (
        ResolvedOwnership(
            subtrees=subtrees,
            owners=flatten_mails(resolution.groups, owner_lines),
            groups=resolution.groups,
            converged=resolution.converged,
            unresolved_groups=list(resolution.unresolved),
        ),
        None,
    )


def resolve_codeowners(
    lines: Iterable[str], config: PolicyConfig | None = None
) -> ResolvedOwnership | None:
    """Parse and flatten CODEOWNERS lines; ``None`` when nothing is usable."""
    resolved, note = _resolve(lines, config or PolicyConfig())
    if note is not None:
        logger.debug("skipping CODEOWNERS resolution: %s", note)
    return resolved


def format_warning(subtree: str, owners: Sequence[str]) -> str:
    return (
        f'Items in the subtree "{subtree.upper()}" have CODEOWNERS. '
        "Please include anyone from the list below to a code review: "
        f"{' '.join(owners)}"
    )


def check_path(
    resolved: ResolvedOwnership,
    path: str,
    *,
    alias: str,
    config: PolicyConfig | None = None,
) -> OwnershipVerdict:
    cfg = config or PolicyConfig()
    subtree = most_specific_subtree(resolved.subtrees, path, mode=cfg.path_match)
    if subtree is None or subtree not in resolved.owners:
        return OwnershipVerdict(path=path, subtree=subtree)

    owners = resolved.owners[subtree]
    owner = is_code_owner(" ".join(owners), alias, domain=cfg.owner_domain)
    return OwnershipVerdict(
        path=path,
        subtree=subtree,
        owners=list(owners),
        is_owner=owner,
        message=None if owner else format_warning(subtree, owners),
    )


def evaluate_paths(
    lines: Iterable[str],
    user: str,
    paths: Sequence[str],
    config: PolicyConfig | None = None,
) -> EvaluationResult:
    """Check every path against CODEOWNERS for the acting ``user``.

    ``user`` is the ``DOMAIN\\alias`` identity of whoever owns the changes.
    Any missing input short-circuits to a result without verdicts and a note
    explaining why.
    """
    cfg = config or PolicyConfig()
    if not paths:
        return EvaluationResult(notes=["no paths to check"])

    alias = user_alias(user)
    if not alias:
        return EvaluationResult(notes=["user alias is empty"])

    resolved, note = _resolve(lines, cfg)
    if resolved is None:
        logger.debug("no CODEOWNERS obligations: %s", note)
        return EvaluationResult(user_alias=alias, notes=[note or "unresolved"])

    notes: list[str] = []
    if not resolved.converged:
        notes.append(
            "unresolved groups after expansion: "
            + ", ".join(resolved.unresolved_groups)
        )
    verdicts = [check_path(resolved, p, alias=alias, config=cfg) for p in paths]
    return EvaluationResult(user_alias=alias, verdicts=verdicts, notes=notes)


def evaluate_local_changes(
    user: str,
    local_items: Sequence[str],
    config: PolicyConfig | None = None,
) -> EvaluationResult:
    """Evaluate local files against the CODEOWNERS found above the first one."""
    cfg = config or PolicyConfig()
    if not local_items:
        return EvaluationResult(notes=["no paths to check"])

    codeowners_path = codeowners_path_for(
        local_items[0],
        marker=cfg.codeowners_marker,
        filename=cfg.codeowners_filename,
    )
    if not codeowners_path:
        return EvaluationResult(
            user_alias=user_alias(user),
            notes=[f"no {cfg.codeowners_marker} directory in {local_items[0]}"],
        )

    if not Path(codeowners_path).is_file():
        return EvaluationResult(
            user_alias=user_alias(user),
            notes=[f"CODEOWNERS not found at {codeowners_path}"],
        )

    lines = read_codeowners_lines(codeowners_path)
    return evaluate_paths(lines, user, local_items, cfg)
