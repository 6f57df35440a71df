"""The persisted snapshot and its field-by-field repair.

A damaged field never sinks the whole load: each one is validated on
its own and replaced by a documented default when it is unusable.
"""

import logging
from collections.abc import Callable
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from pomotree.domain.task import Task, max_id, normalize_title
from pomotree.domain.timer import Phase, RunStatus
from pomotree.theme import ThemeName, parse_theme_name

logger = logging.getLogger(__name__)

T = TypeVar("T")

_TASKS = TypeAdapter(list[Task])
_INT = TypeAdapter(int)

UNTITLED = "Untitled task"


class Snapshot(BaseModel):
    """Everything needed to restore a session.

    Serialized with the aliases as JSON keys.
    """

    tasks: list[Task] = Field(default_factory=list)
    cycles: int = Field(default=0, alias="pomodoro_cycles")
    phase: Phase = Field(default=Phase.WORK, alias="pomodoro_state")
    status: RunStatus = Field(default=RunStatus.STOPPED, alias="pomodoro_timer_state")
    # None means "reset the timer" on restore.
    remaining_seconds: Optional[int] = Field(default=None, alias="pomodoro_remaining_seconds")
    next_task_id: int = 1
    theme: ThemeName = ThemeName.DEFAULT

    model_config = {"populate_by_name": True}

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


def _field(raw: dict[str, Any], key: str, parse: Callable[[Any], T], default: T) -> T:
    if key not in raw:
        return default
    try:
        return parse(raw[key])
    except (ValidationError, ValueError, TypeError) as e:
        logger.warning(f"Invalid snapshot field '{key}', using default: {e}")
        return default


def _enum(kind: type[T], default: T, label: str) -> Callable[[Any], T]:
    def parse(value: Any) -> T:
        try:
            return kind(value)  # type: ignore[call-arg]
        except ValueError:
            logger.warning(f"Invalid {label} '{value}', defaulting to {default.value}")  # type: ignore[attr-defined]
            return default

    return parse


def _repair_tasks(tasks: list[Task]) -> list[Task]:
    """Normalize titles and give duplicate ids fresh values, in place.

    A blank title becomes a placeholder so the subtasks are kept.
    """
    seen: set[int] = set()
    spare = max_id(tasks) + 1

    def repair(task: Task) -> None:
        nonlocal spare
        title = normalize_title(task.title)
        if title is None:
            logger.warning(f"Task {task.id} has a blank title, renaming it")
            title = UNTITLED
        task.title = title
        if task.id in seen:
            logger.warning(f"Duplicate task id {task.id}, reassigned to {spare}")
            task.id = spare
            spare += 1
        seen.add(task.id)
        for child in task.subtasks:
            repair(child)

    for task in tasks:
        repair(task)
    return tasks


def parse_snapshot(raw: dict[str, Any]) -> Snapshot:
    """Build a Snapshot from decoded JSON, repairing field by field."""
    tasks = _repair_tasks(_field(raw, "tasks", _TASKS.validate_python, []))
    cycles = _field(raw, "pomodoro_cycles", _INT.validate_python, 0)
    if cycles < 0:
        logger.warning(f"Invalid cycle count {cycles}, defaulting to 0")
        cycles = 0
    phase = _field(raw, "pomodoro_state", _enum(Phase, Phase.WORK, "Pomodoro state"), Phase.WORK)
    status = _field(
        raw,
        "pomodoro_timer_state",
        _enum(RunStatus, RunStatus.STOPPED, "timer state"),
        RunStatus.STOPPED,
    )
    remaining = _field(raw, "pomodoro_remaining_seconds", _INT.validate_python, None)
    theme = _field(raw, "theme", parse_theme_name, ThemeName.DEFAULT)

    floor = max_id(tasks) + 1
    next_id = _field(raw, "next_task_id", _INT.validate_python, floor)
    if next_id < floor:
        logger.warning(f"Invalid next_task_id '{next_id}', using {floor}")
        next_id = floor

    return Snapshot(
        tasks=tasks,
        cycles=cycles,
        phase=phase,
        status=status,
        remaining_seconds=remaining,
        next_task_id=next_id,
        theme=theme,
    )
