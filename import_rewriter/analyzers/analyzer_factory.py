from loguru import logger

from import_rewriter.analyzers.base_analyzer import BaseImportAnalyzer
from import_rewriter.analyzers.go_analyzer import GoImportAnalyzer


class AnalyzerFactory:

    @staticmethod
    def create_analyzer(language: str = "go") -> BaseImportAnalyzer:
        logger.debug(f"Creating import analyzer for language: {language}")
        if language.lower() == "go":
            return GoImportAnalyzer()
        raise ValueError(f"Unsupported language: {language}")
