import unicodedata
from typing import List, Optional

from loguru import logger
from tree_sitter import Language, Node, Parser
from tree_sitter_language_pack import get_language

from import_rewriter.analyzers.base_analyzer import BaseImportAnalyzer
from import_rewriter.config.go_constants import GoParsingConstants
from import_rewriter.exceptions import SyntaxIssue
from import_rewriter.models.domain_models import ImportLiteral
from import_rewriter.utils.go_literals import unquote
from import_rewriter.utils.tree_sitter_helper import (
    describe_token,
    extract_content,
    iter_error_nodes,
    node_position,
)

ILLEGAL_IMPORT_CHARS = set('!"#$%&\'()*,:;<=>?[\\]^{|}`\uFFFD')


def is_valid_import(path: str) -> bool:
    """Go's import path rule: non-empty, graphic, no spaces or reserved punctuation."""
    if not path:
        return False
    for ch in path:
        if ch in ILLEGAL_IMPORT_CHARS or unicodedata.category(ch)[0] not in "LMNPS":
            return False
    return True


class GoImportAnalyzer(BaseImportAnalyzer):
    def __init__(self):
        language: Language = get_language(GoParsingConstants.LANGUAGE)
        parser = Parser(language)
        super().__init__(language, parser)

    def _collect_syntax_issues(self, root_node: Node, source: bytes) -> List[SyntaxIssue]:
        declarations = [child for child in root_node.named_children if child.type != GoParsingConstants.COMMENT]

        if not declarations or declarations[0].type != GoParsingConstants.PACKAGE_CLAUSE:
            # Go gives up on the first error when the package clause is absent
            first = declarations[0] if declarations else None
            return [self._expected_package_issue(first, source)]

        issues: List[SyntaxIssue] = []
        for error_node in iter_error_nodes(root_node):
            line, col = node_position(error_node)
            if error_node.is_missing:
                message = f"syntax error: missing {describe_token(error_node, source)}"
            else:
                message = f"syntax error: unexpected {describe_token(self._first_leaf(error_node), source)}"
            issues.append(SyntaxIssue(line, col, message))

        seen_other_declaration = False
        for decl in declarations[1:]:
            if decl.is_error:
                continue
            if decl.type not in GoParsingConstants.TOP_LEVEL_DECLARATIONS:
                line, col = node_position(decl)
                found = describe_token(self._first_leaf(decl), source)
                issues.append(SyntaxIssue(line, col, f"expected declaration, found {found}"))
            elif decl.type == GoParsingConstants.PACKAGE_CLAUSE:
                line, col = node_position(decl)
                issues.append(SyntaxIssue(line, col, "expected declaration, found 'package'"))
            elif decl.type == GoParsingConstants.IMPORT_DECLARATION:
                if seen_other_declaration:
                    line, col = node_position(decl)
                    issues.append(SyntaxIssue(line, col, "imports must appear before other declarations"))
            else:
                seen_other_declaration = True

        for path_node in self._import_path_nodes(root_node):
            if path_node.type not in GoParsingConstants.STRING_LITERAL_TYPES:
                continue
            raw = extract_content(path_node, source).decode("utf-8", errors="replace")
            try:
                valid = is_valid_import(unquote(raw))
            except ValueError as e:
                logger.debug(f"Undecodable import literal {raw}: {e}")
                valid = False
            if not valid:
                line, col = node_position(path_node)
                issues.append(SyntaxIssue(line, col, f"invalid import path: {raw}"))

        issues.sort(key=lambda issue: (issue.line, issue.column))
        return issues[:GoParsingConstants.MAX_REPORTED_ERRORS]

    def _extract_imports(self, root_node: Node, source: bytes) -> List[ImportLiteral]:
        imports = []
        for path_node in self._import_path_nodes(root_node):
            raw = extract_content(path_node, source)
            imports.append(ImportLiteral(
                path=unquote(raw.decode("utf-8", errors="surrogateescape")),
                start=path_node.start_byte,
                end=path_node.end_byte,
                raw=raw,
            ))
        return imports

    def _extract_package(self, root_node: Node, source: bytes) -> str:
        package_clause = self._find_child_by_type(root_node, GoParsingConstants.PACKAGE_CLAUSE)
        if package_clause is None:
            return ""
        name = self._find_child_by_type(package_clause, "package_identifier")
        return extract_content(name, source).decode("utf-8") if name else ""

    def _import_path_nodes(self, root_node: Node) -> List[Node]:
        captures = self._query_captures(GoParsingConstants.IMPORT_PATH_QUERY, root_node)
        return sorted(captures.get("path", []), key=lambda node: node.start_byte)

    def _expected_package_issue(self, first: Optional[Node], source: bytes) -> SyntaxIssue:
        if first is None:
            line, col = self._eof_position(source)
            return SyntaxIssue(line, col, "expected 'package', found 'EOF'")
        line, col = node_position(first)
        return SyntaxIssue(line, col, f"expected 'package', found {describe_token(self._first_leaf(first), source)}")

    @staticmethod
    def _eof_position(source: bytes):
        line = source.count(b"\n") + 1
        col = len(source) - (source.rfind(b"\n") + 1) + 1
        return line, col

    @staticmethod
    def _first_leaf(node: Node) -> Node:
        while node.child_count:
            node = node.children[0]
        return node
