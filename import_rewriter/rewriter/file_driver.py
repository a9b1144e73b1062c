import stat
import sys
from pathlib import Path
from typing import BinaryIO, Callable, Optional, TextIO

from loguru import logger

from import_rewriter.analyzers.base_analyzer import BaseImportAnalyzer
from import_rewriter.config.config import configs
from import_rewriter.exceptions import RewriteError
from import_rewriter.models.domain_models import OutputMode
from import_rewriter.rewriter.transform import rewrite_source
from import_rewriter.utils.common import iter_source_files, read_source
from import_rewriter.utils.diff_utils import diff


class ErrorReporter:
    """Prints errors to stderr and latches the process exit code."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
        self.exit_code = 0
        self.error_count = 0

    def report(self, error: BaseException) -> None:
        print(str(error), file=self.stream or sys.stderr)
        self.error_count += 1
        self.exit_code = 2


class FileDriver:
    """Reads inputs, rewrites their imports and emits the selected outputs."""

    def __init__(self, match: Callable[[str], Optional[str]], analyzer: BaseImportAnalyzer,
                 mode: OutputMode = OutputMode(), out: Optional[BinaryIO] = None,
                 reporter: Optional[ErrorReporter] = None):
        self.match = match
        self.analyzer = analyzer
        self.mode = mode
        self.out = out
        self.reporter = reporter or ErrorReporter()
        self.files_processed = 0
        self.files_changed = 0

    @property
    def output(self) -> BinaryIO:
        return self.out if self.out is not None else sys.stdout.buffer

    def process_file(self, filename: str, in_stream: Optional[BinaryIO] = None,
                     out_stream: Optional[BinaryIO] = None, is_stdin: bool = False) -> None:
        out_stream = out_stream if out_stream is not None else self.output
        src = read_source(filename, in_stream)
        dst = rewrite_source(filename, src, self.match, self.analyzer)
        self.files_processed += 1
        changed = dst != src
        if changed:
            self.files_changed += 1

        if is_stdin:
            out_stream.write(dst)
            return

        if changed:
            if self.mode.list:
                out_stream.write(f"{filename}\n".encode("utf-8"))
            if self.mode.write:
                Path(filename).write_bytes(dst)
                logger.info(f"Rewrote {filename}")
            if self.mode.diff:
                data = diff(src, dst)
                header = configs.DIFF_HEADER_PREFIX
                out_stream.write(f"diff {filename} {header}/{filename}\n".encode("utf-8"))
                out_stream.write(data)

        if self.mode.passthrough:
            out_stream.write(dst)

    def process_stdin(self, in_stream: Optional[BinaryIO] = None) -> None:
        if not self.mode.passthrough:
            logger.warning("-l, -w and -d need a file name; writing the rewritten source to stdout instead")
        try:
            self.process_file(configs.STDIN_NAME, in_stream if in_stream is not None else sys.stdin.buffer,
                              is_stdin=True)
        except (RewriteError, OSError) as e:
            self.reporter.report(e)

    def process_path(self, path: str) -> None:
        """Process a file, or every source file below a directory."""
        target = Path(path)
        try:
            info = target.stat()
        except OSError as e:
            self.reporter.report(e)
            return

        if not stat.S_ISDIR(info.st_mode):
            self._process_reported(path)
            return

        for file_path in iter_source_files(target, on_error=self.reporter.report):
            self._process_reported(str(file_path))

    def _process_reported(self, filename: str) -> None:
        try:
            self.process_file(filename)
        except (RewriteError, OSError) as e:
            logger.debug(f"Failed to process {filename}: {e}")
            self.reporter.report(e)
