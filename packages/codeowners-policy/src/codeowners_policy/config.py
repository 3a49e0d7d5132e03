from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from .runtime_defaults import (
    DEFAULT_CODEOWNERS_FILENAME,
    DEFAULT_CODEOWNERS_MARKER,
    DEFAULT_MAX_GROUP_PASSES,
    DEFAULT_OWNER_DOMAIN,
)


class PolicyConfig(BaseModel):
    """Knobs for one CODEOWNERS evaluation.

    Defaults reproduce the historical policy behavior: substring path matching,
    a ten pass bound on group expansion, tolerance of cyclic groups and no
    obligations for files without group definitions. Set
    ``require_group_definitions=False`` to evaluate alias-free files.
    """

    owner_domain: str = Field(DEFAULT_OWNER_DOMAIN, min_length=1)
    max_group_passes: int = Field(DEFAULT_MAX_GROUP_PASSES, ge=1)
    path_match: Literal["substring", "segment"] = "substring"

    codeowners_marker: str = Field(DEFAULT_CODEOWNERS_MARKER, min_length=1)
    codeowners_filename: str = Field(DEFAULT_CODEOWNERS_FILENAME, min_length=1)

    require_group_definitions: bool = True
    fail_on_group_cycles: bool = False
