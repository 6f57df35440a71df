# tests/test_traversal.py

from __future__ import annotations

from pomotree.domain.task import (
    Task,
    count_completed,
    count_forest,
    count_nodes,
    flat_index,
    fold_forest,
    locate,
    max_id,
    resolve,
    set_completed,
    valid_prefix,
    walk,
)

from .conftest import make_task

PREORDER = [
    (0, ()),
    (0, (0,)),
    (0, (0, 0)),
    (0, (1,)),
    (1, ()),
]


def test_walk_is_preorder(forest: list[Task]) -> None:
    entries = list(walk(forest))
    assert [e.task.title for e in entries] == ["A", "B", "D", "C", "E"]
    assert [(e.index, e.path) for e in entries] == PREORDER
    assert [e.depth for e in entries] == [0, 1, 2, 1, 0]


def test_fold_forest_visits_in_walk_order(forest: list[Task]) -> None:
    ids = fold_forest(forest, [], lambda acc, task, index, path: acc + [task.id])
    assert ids == [1, 2, 4, 3, 5]


def test_counts(forest: list[Task]) -> None:
    assert count_nodes(forest[0]) == 4
    assert count_forest(forest) == 5
    assert count_forest([]) == 0
    assert max_id(forest) == 5
    assert max_id([]) == 0


def test_count_completed(forest: list[Task]) -> None:
    forest[0].subtasks[1].completed = True
    forest[1].completed = True
    assert count_completed(forest) == 2


def test_resolve(forest: list[Task]) -> None:
    assert resolve(forest, 0, ()).title == "A"
    assert resolve(forest, 0, (0, 0)).title == "D"
    assert resolve(forest, 1, ()).title == "E"


def test_resolve_out_of_range_is_none(forest: list[Task]) -> None:
    assert resolve(forest, 2, ()) is None
    assert resolve(forest, 0, (2,)) is None
    assert resolve(forest, 0, (0, 0, 0)) is None
    assert resolve(forest, 1, (0,)) is None
    assert resolve([], 0, ()) is None


def test_valid_prefix_keeps_longest_resolving_part(forest: list[Task]) -> None:
    assert valid_prefix(forest, 0, (0, 0)) == (0, 0)
    assert valid_prefix(forest, 0, (0, 5)) == (0,)
    assert valid_prefix(forest, 0, (7, 0)) == ()
    assert valid_prefix(forest, 9, (0,)) == ()


def test_flat_index_matches_walk(forest: list[Task]) -> None:
    for expected, (index, path) in enumerate(PREORDER):
        assert flat_index(forest, index, path) == expected


def test_locate_inverts_flat_index(forest: list[Task]) -> None:
    for flat, position in enumerate(PREORDER):
        assert locate(forest, flat) == position
    assert locate(forest, 5) is None
    assert locate(forest, -1) is None


def test_set_completed_overwrites_whole_subtree() -> None:
    task = make_task(1, "root", make_task(2, "a", completed=True), make_task(3, "b", make_task(4, "c")))
    set_completed(task, True)
    assert all(e.task.completed for e in walk([task]))
    set_completed(task, False)
    assert not any(e.task.completed for e in walk([task]))
