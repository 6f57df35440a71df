"""Task domain models.

Pure domain models for the task forest. Uses Pydantic so the same
objects round-trip through the persisted snapshot unchanged.
"""

from pydantic import BaseModel, Field

MAX_TITLE_LENGTH = 200


class Task(BaseModel):
    """A node in the task forest.

    Each task exclusively owns its subtasks; there are no back
    references. Subtask order is display order.
    """

    id: int
    title: str
    completed: bool = False
    subtasks: list["Task"] = Field(default_factory=list)


class FlatEntry(BaseModel):
    """A task together with its position in the pre-order flattening."""

    index: int
    path: tuple[int, ...]
    task: Task

    @property
    def depth(self) -> int:
        return len(self.path)


def normalize_title(title: str) -> str | None:
    """Trim and length-limit a title.

    Returns None when nothing is left after trimming. Truncation counts
    code points, so multi-byte characters are never split.
    """
    trimmed = title.strip()
    if not trimmed:
        return None
    return trimmed[:MAX_TITLE_LENGTH]
