from typing import Callable, Optional

from loguru import logger

from import_rewriter.models.domain_models import Edit, ParsedFile, RewritePlan

Matcher = Callable[[str], Optional[str]]


def quote_path(path: str) -> bytes:
    return f'"{path}"'.encode("utf-8")


def locate(parsed_file: ParsedFile, match: Matcher) -> RewritePlan:
    """Build the edits that replace every matching import literal, in parse order."""
    plan = RewritePlan()
    for literal in parsed_file.imports:
        new_path = match(literal.path)
        if new_path is None:
            continue
        if literal.is_raw_string:
            logger.debug(f"{parsed_file.filename}: raw import literal {literal.raw!r} rewritten as double-quoted")
        plan.add(Edit(literal.start, literal.end, quote_path(new_path)))
        logger.debug(f"{parsed_file.filename}: {literal.path} -> {new_path} at [{literal.start}, {literal.end})")
    return plan
