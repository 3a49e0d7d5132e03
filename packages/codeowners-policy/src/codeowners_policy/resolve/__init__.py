from .groups import (
    GroupResolution,
    find_group_cycles,
    flatten_mails,
    resolve_group_definitions,
)

__all__ = [
    "GroupResolution",
    "find_group_cycles",
    "flatten_mails",
    "resolve_group_definitions",
]
