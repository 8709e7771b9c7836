from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

DEFAULT_CATEGORY = "Misc"


class EntryKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class DirectoryEntry:
    name: str
    kind: EntryKind

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass(frozen=True)
class Classification:
    label: str
    resolved: bool
    searched: bool = False


@dataclass(frozen=True)
class FolderSignature:
    game_score: int = 0
    software_score: int = 0


@dataclass(frozen=True)
class Move:
    source_name: str
    destination: str


@dataclass
class BatchPlan:
    moves: list[Move] = field(default_factory=list)
    need_websearch: list[str] = field(default_factory=list)


class RunResultKind(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class RunResult:
    kind: RunResultKind
    message: str
    moved: int = 0
    searched: int = 0
    skipped: int = 0

    @property
    def ok(self) -> bool:
        return self.kind is RunResultKind.SUCCESS

    @classmethod
    def success(cls, message: str, **counts: int) -> RunResult:
        return cls(kind=RunResultKind.SUCCESS, message=message, **counts)

    @classmethod
    def failure(cls, message: str, **counts: int) -> RunResult:
        return cls(kind=RunResultKind.FAILURE, message=message, **counts)
