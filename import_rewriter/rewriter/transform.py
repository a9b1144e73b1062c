from typing import Callable, Optional

from import_rewriter.analyzers.base_analyzer import BaseImportAnalyzer
from import_rewriter.rewriter.locator import locate
from import_rewriter.rewriter.splicer import splice


def rewrite_source(filename: str, src: bytes, match: Callable[[str], Optional[str]],
                   analyzer: BaseImportAnalyzer) -> bytes:
    """
    Rewrite the import paths of one source buffer.

    Raises:
        GoParseError: the buffer does not parse; nothing is produced
    """
    parsed = analyzer.parse(filename, src)
    plan = locate(parsed, match)
    return splice(src, plan)
