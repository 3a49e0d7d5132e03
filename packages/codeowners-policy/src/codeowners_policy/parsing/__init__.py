from .codeowners import (
    OwnershipRule,
    parse_group_definitions,
    parse_owner_lines,
    parse_ownership_rules,
    parse_subtrees,
    split_owner_tokens,
)
from .normalize import normalize_lines

__all__ = [
    "OwnershipRule",
    "normalize_lines",
    "parse_group_definitions",
    "parse_owner_lines",
    "parse_ownership_rules",
    "parse_subtrees",
    "split_owner_tokens",
]
