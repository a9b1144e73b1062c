"""Shared pytest fixtures for import rewriter tests."""
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from loguru import logger

from import_rewriter.analyzers.analyzer_factory import AnalyzerFactory
from import_rewriter.rewriter.matcher import PathMatcher


SINGLE_IMPORT = b'package main\n\nimport "old/pkg"\n\nfunc main() {}\n'

GROUPED_IMPORTS = b"""package main

import (
\t"old/a"

\t// unrelated
\t"other" // keep me
\t"old/a/sub"
)

func main() {}
"""

ALIASED_IMPORT = b'package main\n\nimport foo "old/pkg" // comment\n\nvar _ = foo.X\n'

NO_MATCH = b'package main\n\nimport (\n\t"fmt"\n\t"strings"\n)\n\nfunc main() { fmt.Println(strings.ToUpper("x")) }\n'

UNPARSEABLE = b"package main\n\nfunc main( {\n"


@pytest.fixture(scope="session")
def analyzer():
    return AnalyzerFactory.create_analyzer("go")


@pytest.fixture
def matcher():
    return PathMatcher(find="old/pkg", replace="new/pkg")


@pytest.fixture
def write_go(tmp_path):
    def _write(relative: str, content: bytes) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return path
    return _write


@pytest.fixture(autouse=True)
def _reset_loguru():
    yield
    logger.remove()
