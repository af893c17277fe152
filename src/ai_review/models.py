from dataclasses import dataclass, field
from typing import Literal

ChangeKind = Literal["add", "remove", "context"]


@dataclass(frozen=True)
class PRContext:
    owner: str
    repo: str
    pull_number: int
    title: str = ""
    description: str = ""


@dataclass(frozen=True)
class ChangedLine:
    content: str
    kind: ChangeKind
    new_line: int | None = None
    old_line: int | None = None

    @property
    def line_number(self) -> int | None:
        """Номер в новой версии файла, для удалённых строк - в старой."""
        return self.new_line if self.new_line else self.old_line


@dataclass(frozen=True)
class Hunk:
    header: str
    changes: tuple[ChangedLine, ...] = ()


@dataclass(frozen=True)
class FileDiff:
    path: str | None
    hunks: tuple[Hunk, ...] = ()
    is_deleted: bool = False


@dataclass(frozen=True)
class ReviewUnit:
    content: str
    changes: tuple[ChangedLine, ...] = field(default_factory=tuple)

    @classmethod
    def from_hunks(cls, *hunks: Hunk) -> "ReviewUnit":
        return cls(
            content="\n".join(h.header for h in hunks),
            changes=tuple(c for h in hunks for c in h.changes),
        )


@dataclass(frozen=True)
class InlineComment:
    path: str
    line: int
    body: str

    def as_payload(self) -> dict:
        return {"path": self.path, "line": self.line, "body": self.body}
