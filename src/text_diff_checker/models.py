from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum


class EditKind(IntEnum):
    """Edit operation kinds, numbered like diff-match-patch's opcodes."""

    DELETE = -1
    EQUAL = 0
    INSERT = 1


class Category(str, Enum):
    """Display category of a rendered segment."""

    UNCHANGED = "unchanged"
    DELETED = "deleted"
    INSERTED = "inserted"
    OMITTED = "omitted"


@dataclass(frozen=True, slots=True)
class Token:
    """Represents a token and its inclusive-exclusive character offsets."""

    text: str
    start_char: int
    end_char: int


@dataclass(frozen=True, slots=True)
class ProcessedText:
    """Comparison text plus the raw offset of each of its characters."""

    text: str
    index_map: tuple[int, ...]


@dataclass(frozen=True, slots=True)
class EditOp:
    """One run of an edit script."""

    kind: EditKind
    length: int


@dataclass(frozen=True, slots=True)
class Segment:
    """A contiguous run of raw text tagged with a display category."""

    text: str
    category: Category

    @property
    def highlighted(self) -> bool:
        """Whitespace-only edits are drawn plain."""
        if self.category not in (Category.DELETED, Category.INSERTED):
            return False
        return bool(self.text.strip())


@dataclass(frozen=True, slots=True)
class Score:
    """Match statistics over non-whitespace characters."""

    correct: int = 0
    total: int = 0
    percent: float = 0.0


@dataclass(frozen=True, slots=True)
class Window:
    """Inclusive word-index range shown in memoriser mode."""

    start_word_idx: int
    end_word_idx: int


@dataclass(frozen=True, slots=True)
class DiffResult:
    """Renderable output of a comparison."""

    segments: list[Segment]
    score: Score
    windows: list[Window] = field(default_factory=list)
    windowed: bool = False
