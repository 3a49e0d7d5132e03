from __future__ import annotations

from pydantic import BaseModel, Field


class ResolvedOwnership(BaseModel):
    subtrees: list[str] = Field(default_factory=list)
    owners: dict[str, list[str]] = Field(default_factory=dict)
    groups: dict[str, str] = Field(default_factory=dict)

    converged: bool = True
    unresolved_groups: list[str] = Field(default_factory=list)


class OwnershipVerdict(BaseModel):
    path: str
    subtree: str | None = None
    owners: list[str] = Field(default_factory=list)
    is_owner: bool = False
    message: str | None = None

    @property
    def warning_needed(self) -> bool:
        return self.message is not None


class EvaluationResult(BaseModel):
    user_alias: str = ""
    verdicts: list[OwnershipVerdict] = Field(default_factory=list)
    notes: list[str] = Field(default_factory=list)

    @property
    def advisories(self) -> list[str]:
        return [v.message for v in self.verdicts if v.message is not None]
