from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class ImportLiteral:
    """A quoted import path located in a source buffer.

    ``start`` and ``end`` delimit the literal including its quote characters.
    """
    path: str
    start: int
    end: int
    raw: bytes = b""

    @property
    def is_raw_string(self) -> bool:
        return self.raw[:1] == b"`"


@dataclass(frozen=True)
class Edit:
    start: int
    end: int
    replacement: bytes


@dataclass
class RewritePlan:
    edits: List[Edit] = field(default_factory=list)

    def add(self, edit: Edit) -> None:
        self.edits.append(edit)

    def __iter__(self):
        return iter(self.edits)

    def __len__(self) -> int:
        return len(self.edits)

    def __bool__(self) -> bool:
        return bool(self.edits)


@dataclass
class ParsedFile:
    filename: str
    source: bytes
    package: str = ""
    imports: Tuple[ImportLiteral, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class OutputMode:
    list: bool = False
    write: bool = False
    diff: bool = False

    @property
    def passthrough(self) -> bool:
        return not (self.list or self.write or self.diff)
