import pytest

from import_rewriter.exceptions import GoParseError
from import_rewriter.rewriter.matcher import PathMatcher
from import_rewriter.rewriter.transform import rewrite_source

from conftest import ALIASED_IMPORT, GROUPED_IMPORTS, NO_MATCH, SINGLE_IMPORT, UNPARSEABLE

SOURCES = [SINGLE_IMPORT, GROUPED_IMPORTS, ALIASED_IMPORT, NO_MATCH]

MIXED = b"""// Copyright header

//go:build linux

package main

import (
\tstdfmt "fmt"
\t"old/pkg"      // aligned comment
\t_ "old/pkg/sub" /* block */
\t"old/pkgX"
)

func main() {
\tstdfmt.Println("old/pkg is not an import here")
}
"""


class TestRewriteSource:

    def test_single_import(self, analyzer, matcher):
        assert rewrite_source("x.go", SINGLE_IMPORT, matcher, analyzer) == \
            b'package main\n\nimport "new/pkg"\n\nfunc main() {}\n'

    def test_grouped_imports(self, analyzer):
        out = rewrite_source("x.go", GROUPED_IMPORTS, PathMatcher("old/a", "new/a"), analyzer)
        assert out == GROUPED_IMPORTS.replace(b'"old/a"', b'"new/a"').replace(b'"old/a/sub"', b'"new/a/sub"')
        assert b"\t// unrelated\n" in out
        assert b'"other" // keep me' in out

    def test_alias_and_comment_untouched(self, analyzer, matcher):
        out = rewrite_source("x.go", ALIASED_IMPORT, matcher, analyzer)
        assert b'import foo "new/pkg" // comment\n' in out

    def test_only_import_literals_change(self, analyzer, matcher):
        out = rewrite_source("x.go", MIXED, matcher, analyzer)
        assert out == MIXED.replace(b'\t"old/pkg"  ', b'\t"new/pkg"  ').replace(b'"old/pkg/sub"', b'"new/pkg/sub"')
        assert b'"old/pkgX"' in out
        assert b'Println("old/pkg is not an import here")' in out
        assert out.startswith(b"// Copyright header\n\n//go:build linux\n")

    def test_crlf_line_endings_preserved(self, analyzer, matcher):
        src = SINGLE_IMPORT.replace(b"\n", b"\r\n")
        assert rewrite_source("x.go", src, matcher, analyzer) == src.replace(b"old/pkg", b"new/pkg")

    def test_missing_trailing_newline_preserved(self, analyzer, matcher):
        src = b'package main\nimport "old/pkg"'
        assert rewrite_source("x.go", src, matcher, analyzer) == b'package main\nimport "new/pkg"'

    def test_parse_failure_produces_nothing(self, analyzer, matcher):
        with pytest.raises(GoParseError):
            rewrite_source("bad.go", UNPARSEABLE, matcher, analyzer)


class TestRewriteProperties:

    @pytest.mark.parametrize("src", SOURCES + [MIXED])
    def test_preservation_with_empty_find(self, analyzer, src):
        assert rewrite_source("x.go", src, PathMatcher("", "anything"), analyzer) == src

    @pytest.mark.parametrize("src", SOURCES + [MIXED])
    def test_preservation_without_match(self, analyzer, src):
        assert rewrite_source("x.go", src, PathMatcher("no/such/path", "x"), analyzer) == src

    @pytest.mark.parametrize("src", SOURCES + [MIXED])
    def test_idempotent(self, analyzer, src):
        matcher = PathMatcher("old/pkg", "brand/new")
        once = rewrite_source("x.go", src, matcher, analyzer)
        assert rewrite_source("x.go", once, matcher, analyzer) == once

    @pytest.mark.parametrize("src", [SINGLE_IMPORT, ALIASED_IMPORT, MIXED])
    def test_round_trip(self, analyzer, src):
        there = rewrite_source("x.go", src, PathMatcher("old/pkg", "fresh/pkg"), analyzer)
        back = rewrite_source("x.go", there, PathMatcher("fresh/pkg", "old/pkg"), analyzer)
        assert back == src

    def test_locality(self, analyzer):
        out = rewrite_source("x.go", MIXED, PathMatcher("old/pkg", "n"), analyzer)
        parsed = analyzer.parse("x.go", MIXED)
        growth = 0
        cursor = 0
        for literal in parsed.imports:
            if literal.path not in ("old/pkg", "old/pkg/sub"):
                continue
            assert out[cursor + growth:literal.start + growth] == MIXED[cursor:literal.start]
            replacement = b'"n' + literal.path[len("old/pkg"):].encode() + b'"'
            assert out[literal.start + growth:literal.start + growth + len(replacement)] == replacement
            growth += len(replacement) - (literal.end - literal.start)
            cursor = literal.end
        assert out[cursor + growth:] == MIXED[cursor:]
