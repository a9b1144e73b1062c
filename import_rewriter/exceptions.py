"""Error kinds raised while rewriting imports."""

from dataclasses import dataclass
from typing import List


class RewriteError(Exception):
    """Base class for errors the driver reports and then moves past."""


@dataclass(frozen=True)
class SyntaxIssue:
    line: int
    column: int
    message: str


class GoParseError(RewriteError):

    def __init__(self, filename: str, issues: List[SyntaxIssue]):
        self.filename = filename
        self.issues = list(issues)
        super().__init__(str(self))

    def __str__(self) -> str:
        return "\n".join(
            f"{self.filename}:{issue.line}:{issue.column}: {issue.message}" for issue in self.issues
        )


class DiffError(RewriteError):
    pass


class UsageError(RewriteError):
    pass


class SpliceInvariantError(AssertionError):
    """Raised when a rewrite plan is unsorted or has overlapping edits."""
