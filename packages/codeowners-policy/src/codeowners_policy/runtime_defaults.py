from __future__ import annotations

DEFAULT_OWNER_DOMAIN = "simcorp.com"
DEFAULT_MAX_GROUP_PASSES = 10
DEFAULT_CODEOWNERS_MARKER = "IMS"
DEFAULT_CODEOWNERS_FILENAME = "CODEOWNERS"

__all__ = [
    "DEFAULT_CODEOWNERS_FILENAME",
    "DEFAULT_CODEOWNERS_MARKER",
    "DEFAULT_MAX_GROUP_PASSES",
    "DEFAULT_OWNER_DOMAIN",
]
