from import_rewriter.rewriter.file_driver import ErrorReporter, FileDriver
from import_rewriter.rewriter.locator import locate
from import_rewriter.rewriter.matcher import PathMatcher, validate_replacement
from import_rewriter.rewriter.splicer import splice
from import_rewriter.rewriter.transform import rewrite_source

__all__ = [
    "ErrorReporter",
    "FileDriver",
    "PathMatcher",
    "locate",
    "rewrite_source",
    "splice",
    "validate_replacement",
]
