"""codeowners-policy: CODEOWNERS subtree matching and group-aware ownership checks."""

from .config import PolicyConfig
from .evaluation import (
    check_path,
    evaluate_local_changes,
    evaluate_paths,
    format_warning,
    resolve_codeowners,
)
from .matching import is_code_owner, most_specific_subtree, user_alias
from .models import EvaluationResult, OwnershipVerdict, ResolvedOwnership

__all__ = [
    "EvaluationResult",
    "OwnershipVerdict",
    "PolicyConfig",
    "ResolvedOwnership",
    "check_path",
    "evaluate_local_changes",
    "evaluate_paths",
    "format_warning",
    "is_code_owner",
    "most_specific_subtree",
    "resolve_codeowners",
    "user_alias",
]
