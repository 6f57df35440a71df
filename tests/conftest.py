# tests/conftest.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from pomotree.domain.task import Task, TaskTree
from pomotree.infrastructure.storage import StateRepository
from pomotree.session import Session

from .fakes import FakeClock, FakeMonotonic


def make_task(task_id: int, title: str, *children: Task, completed: bool = False) -> Task:
    return Task(id=task_id, title=title, completed=completed, subtasks=list(children))


def sample_forest() -> list[Task]:
    """
    Two roots, flattened as:

        0  A          (0, ())
        1    B        (0, (0,))
        2      D      (0, (0, 0))
        3    C        (0, (1,))
        4  E          (1, ())
    """
    return [
        make_task(1, "A", make_task(2, "B", make_task(4, "D")), make_task(3, "C")),
        make_task(5, "E"),
    ]


@pytest.fixture()
def forest() -> list[Task]:
    return sample_forest()


@pytest.fixture()
def tree() -> TaskTree:
    return TaskTree(sample_forest())


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def monotonic() -> FakeMonotonic:
    return FakeMonotonic()


@pytest.fixture()
def config_dir(tmp_path: Path) -> Path:
    path = tmp_path / "pomotree"
    path.mkdir()
    return path


@pytest.fixture()
def repository(config_dir: Path) -> StateRepository:
    return StateRepository(config_dir)


@pytest.fixture()
def session(repository: StateRepository, clock: FakeClock, monotonic: FakeMonotonic) -> Session:
    """Session with real file persistence under tmp and fake clocks."""
    return Session(repository, clock=clock, monotonic=monotonic)


@pytest.fixture(autouse=True)
def _drop_app_log_handlers() -> Iterator[None]:
    """
    CLI commands install handlers on the root logger; remove them so later
    tests never write to a closed stream or a deleted tmp directory.
    """
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.FileHandler, logging.NullHandler):
            root.removeHandler(handler)
            handler.close()
    logging.captureWarnings(False)
