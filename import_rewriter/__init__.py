"""
Import Rewriter - byte-preserving rewriting of Go import paths.

This package locates import path literals with tree-sitter and splices
replacement paths into the original bytes, so comments and formatting are
left exactly as they were.
"""

__version__ = "0.1.0"
__license__ = "MIT"

# Public API
from import_rewriter.analyzers.analyzer_factory import AnalyzerFactory
from import_rewriter.models.domain_models import Edit, ImportLiteral, OutputMode, RewritePlan
from import_rewriter.rewriter import FileDriver, PathMatcher, locate, rewrite_source, splice

__all__ = [
    "AnalyzerFactory",
    "Edit",
    "FileDriver",
    "ImportLiteral",
    "OutputMode",
    "PathMatcher",
    "RewritePlan",
    "locate",
    "rewrite_source",
    "splice",
]
