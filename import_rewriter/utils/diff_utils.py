import os
import subprocess
import tempfile

from loguru import logger

from import_rewriter.config.config import configs
from import_rewriter.exceptions import DiffError


def _write_temp(data: bytes, prefix: str) -> str:
    fd, name = tempfile.mkstemp(prefix=prefix)
    try:
        with os.fdopen(fd, 'wb') as f:
            f.write(data)
    except OSError:
        os.remove(name)
        raise
    return name


def diff(b1: bytes, b2: bytes, command: str = None, prefix: str = None) -> bytes:
    """
    Unified diff of two buffers via the external diff program.

    Args:
        b1: Original bytes
        b2: Rewritten bytes
        command: Diff executable (defaults to configs.DIFF_COMMAND)
        prefix: Temporary file name prefix

    Returns:
        Combined stdout/stderr of the diff program
    """
    command = command or configs.DIFF_COMMAND
    prefix = prefix or configs.DIFF_TEMP_PREFIX
    temp_files = []
    try:
        temp_files.append(_write_temp(b1, prefix))
        temp_files.append(_write_temp(b2, prefix))

        try:
            result = subprocess.run(
                [command, "-u", *temp_files],
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
            )
        except OSError as e:
            raise DiffError(f"computing diff: {e}") from e

        # diff exits 1 when the inputs differ; output means it ran fine
        if result.stdout:
            return result.stdout
        if result.returncode != 0:
            raise DiffError(f"computing diff: {command} exited with status {result.returncode}")
        return result.stdout
    except OSError as e:
        raise DiffError(f"computing diff: {e}") from e
    finally:
        for name in temp_files:
            try:
                os.remove(name)
            except OSError as e:
                logger.debug(f"Could not remove temporary file {name}: {e}")
