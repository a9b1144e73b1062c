from dataclasses import dataclass
from typing import Optional

from import_rewriter.config.go_constants import GoLiteralConstants
from import_rewriter.exceptions import UsageError


def validate_replacement(replace: str, find: str = "") -> None:
    """Reject replacements that cannot be written as a valid double-quoted import path."""
    if find and not replace:
        raise UsageError(f"an empty replacement for {find!r} would produce an invalid import path")
    bad = sorted(ch for ch in set(replace) if ch in GoLiteralConstants.FORBIDDEN_IN_REPLACEMENT)
    if bad:
        raise UsageError(f"replacement import path {replace!r} contains characters that need quoting: {bad!r}")


@dataclass(frozen=True)
class PathMatcher:
    """
    Maps an import path to its replacement.

    A path matches when it equals ``find`` or lies below it (``find + "/"``
    prefix); a sibling such as ``find + "X"`` never matches. An empty ``find``
    matches nothing.
    """
    find: str = ""
    replace: str = ""

    def __call__(self, path: str) -> Optional[str]:
        return self.match(path)

    def match(self, path: str) -> Optional[str]:
        if not self.find:
            return None
        if path == self.find:
            return self.replace
        if path.startswith(self.find + "/"):
            return self.replace + path[len(self.find):]
        return None
