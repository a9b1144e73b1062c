import os

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

from import_rewriter.config.go_constants import GoParsingConstants

load_dotenv()


class Configs(BaseSettings):

    # source files
    SOURCE_EXTENSION: str = os.getenv("IMPORT_REWRITER_SOURCE_EXTENSION", GoParsingConstants.GO_EXTENSION)
    STDIN_NAME: str = "<standard input>"

    # diff
    DIFF_COMMAND: str = os.getenv("IMPORT_REWRITER_DIFF_COMMAND", "diff")
    DIFF_TEMP_PREFIX: str = os.getenv("IMPORT_REWRITER_DIFF_TEMP_PREFIX", "gofmt")
    DIFF_HEADER_PREFIX: str = os.getenv("IMPORT_REWRITER_DIFF_HEADER_PREFIX", "gofmt")

    # logging
    LOG_LEVEL: str = os.getenv("IMPORT_REWRITER_LOG_LEVEL", "WARNING")

    def validate_diff_config(self) -> None:
        """Validate that the diff helper can be configured."""
        if not self.DIFF_COMMAND:
            raise ValueError("IMPORT_REWRITER_DIFF_COMMAND must not be empty.")

    class Config:
        case_sensitive = True


configs = Configs()
