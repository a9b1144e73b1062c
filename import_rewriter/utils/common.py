import os
from pathlib import Path
from typing import BinaryIO, Callable, Iterator, Optional, Union

from loguru import logger

from import_rewriter.config.config import configs


def is_source_file(path: Path, extension: str = None) -> bool:
    extension = extension or configs.SOURCE_EXTENSION
    name = path.name
    return not path.is_dir() and not name.startswith('.') and name.endswith(extension)


def iter_source_files(root: Union[str, Path], extension: str = None,
                      on_error: Optional[Callable[[OSError], None]] = None) -> Iterator[Path]:
    """Yield source files under ``root`` in lexical walk order."""
    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
        dirnames.sort()
        for filename in sorted(filenames):
            path = Path(dirpath) / filename
            if is_source_file(path, extension):
                yield path
            else:
                logger.debug(f"Skipping non-source file {path}")


def read_source(file_path: Union[str, Path], stream: Optional[BinaryIO] = None) -> bytes:
    """Read a whole source buffer, from ``stream`` when given, else from the file."""
    if stream is not None:
        return stream.read()
    with open(file_path, 'rb') as f:
        return f.read()
