from import_rewriter.exceptions import SpliceInvariantError
from import_rewriter.models.domain_models import RewritePlan


def check_plan(plan: RewritePlan, source_length: int) -> None:
    cursor = 0
    for edit in plan:
        if edit.start < cursor:
            raise SpliceInvariantError(
                f"edit [{edit.start}, {edit.end}) overlaps or precedes offset {cursor}"
            )
        if edit.end <= edit.start or edit.end > source_length:
            raise SpliceInvariantError(
                f"edit [{edit.start}, {edit.end}) outside buffer of {source_length} bytes"
            )
        cursor = edit.end


def splice(src: bytes, plan: RewritePlan) -> bytes:
    """Apply a sorted, disjoint plan to ``src``; bytes outside the edits are copied verbatim."""
    if not plan:
        return src

    check_plan(plan, len(src))

    parts = []
    index = 0
    for edit in plan:
        parts.append(src[index:edit.start])
        parts.append(edit.replacement)
        index = edit.end
    parts.append(src[index:])
    return b"".join(parts)
