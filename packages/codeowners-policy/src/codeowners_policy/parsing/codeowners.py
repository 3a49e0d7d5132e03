from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

# Leading run of path characters; everything after it is the owner list.
_SUBTREE_RE = re.compile(r"^[/\w\-\\.]+")
_TOKEN_SPLIT_RE = re.compile(r"[ ;\t,]+")
_SEPARATORS = "/\\"
_GROUP_TRIM = "# \t"


@dataclass(frozen=True)
class OwnershipRule:
    subtree: str
    raw_owners: tuple[str, ...]
    line: int


def _content_lines(lines: Iterable[str]) -> list[str]:
    return [line for line in lines if not line.startswith("#")]


def split_owner_tokens(value: str) -> list[str]:
    return [t for t in _TOKEN_SPLIT_RE.split(value) if t]


def parse_subtrees(lines: Iterable[str]) -> list[str]:
    """Return rule subtrees in file order; later entries take precedence."""
    out: list[str] = []
    for line in _content_lines(lines):
        first = re.split(r"[ \t]", line, maxsplit=1)[0]
        out.append(first.rstrip(_SEPARATORS))
    return out


def parse_ownership_rules(lines: Iterable[str]) -> list[OwnershipRule]:
    out: list[OwnershipRule] = []
    for idx, line in enumerate(lines, start=1):
        if line.startswith("#"):
            continue
        m = _SUBTREE_RE.match(line)
        prefix = m.group(0) if m else ""
        subtree = prefix.rstrip(_SEPARATORS).strip()
        rest = line[len(prefix) :].strip()
        out.append(
            OwnershipRule(
                subtree=subtree,
                raw_owners=tuple(split_owner_tokens(rest)),
                line=idx,
            )
        )
    return out


def parse_owner_lines(lines: Iterable[str]) -> dict[str, list[str]]:
    """Map each subtree to its raw owner tokens (emails or group aliases).

    A subtree declared twice keeps the tokens of its last declaration.
    """
    owners: dict[str, list[str]] = {}
    for rule in parse_ownership_rules(lines):
        owners[rule.subtree] = list(rule.raw_owners)
    return owners


def parse_group_definitions(lines: Iterable[str]) -> dict[str, str]:
    """Collect ``alias = members`` lines, commented out or not.

    Only lines carrying both ``=`` and ``@`` count as definitions.
    """
    groups: dict[str, str] = {}
    for line in lines:
        if "=" not in line or "@" not in line:
            continue
        key, _, value = line.partition("=")
        groups[key.strip(_GROUP_TRIM)] = value.strip(_GROUP_TRIM)
    return groups
