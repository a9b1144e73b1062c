from abc import ABC, abstractmethod
from typing import List, Optional

from tree_sitter import Language, Node, Parser, Query, QueryCursor
from loguru import logger

from import_rewriter.exceptions import GoParseError, SyntaxIssue
from import_rewriter.models.domain_models import ImportLiteral, ParsedFile


class BaseImportAnalyzer(ABC):
    """
    Parses a source buffer far enough to locate its import path literals.

    Subclasses supply the grammar-specific pieces; offsets always refer to the
    original byte buffer.
    """

    def __init__(self, language: Language, parser: Parser):
        self.language = language
        self.parser = parser
        self._query_cache = {}

    def parse(self, filename: str, source: bytes) -> ParsedFile:
        tree = self.parser.parse(source)
        root = tree.root_node

        issues = self._collect_syntax_issues(root, source)
        if issues:
            logger.debug(f"Rejecting {filename}: {len(issues)} syntax issue(s)")
            raise GoParseError(filename, issues)

        imports = tuple(self._extract_imports(root, source))
        package = self._extract_package(root, source)
        logger.debug(f"Parsed {filename} (package {package}): {len(imports)} import(s)")
        return ParsedFile(
            filename=filename,
            source=source,
            package=package,
            imports=imports,
        )

    def _get_or_create_query(self, query_string: str) -> Query:
        if query_string not in self._query_cache:
            self._query_cache[query_string] = Query(self.language, query_string)
        return self._query_cache[query_string]

    def _query_captures(self, query_string: str, node: Node) -> dict:
        """Execute tree-sitter query and return captures."""
        query = self._get_or_create_query(query_string)
        return QueryCursor(query).captures(node)

    def _find_child_by_type(self, node: Node, child_type: str) -> Optional[Node]:
        """Find first child node with specified type."""
        for child in node.children:
            if child.type == child_type:
                return child
        return None

    @abstractmethod
    def _collect_syntax_issues(self, root_node: Node, source: bytes) -> List[SyntaxIssue]:
        pass

    @abstractmethod
    def _extract_imports(self, root_node: Node, source: bytes) -> List[ImportLiteral]:
        pass

    @abstractmethod
    def _extract_package(self, root_node: Node, source: bytes) -> str:
        pass
