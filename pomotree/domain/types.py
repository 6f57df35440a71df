"""Domain value objects for pomotree.

Immutable value objects describing where the user is in the task forest.
"""

from dataclasses import dataclass

# Root task plus four nested levels.
MAX_DEPTH = 4


@dataclass(frozen=True)
class Selection:
    """The highlighted task: a root index plus a child-index path.

    An empty path selects the root task itself. The empty tree is
    represented by ``Selection(0, ())``.

    A selection is only meaningful against the tree it was computed
    from; any structural change may invalidate it, so it is resolved
    again every time it is used.

    Example:
        sel = Selection(index=1, path=(0, 2))
        sel.parent()      # Selection(index=1, path=(0,))
        sel.child(3)      # Selection(index=1, path=(0, 2, 3))
    """

    index: int = 0
    path: tuple[int, ...] = ()

    @property
    def depth(self) -> int:
        """Number of levels below the root task."""
        return len(self.path)

    @property
    def is_root(self) -> bool:
        """True when the root task itself is selected."""
        return not self.path

    def parent(self) -> "Selection":
        """Return the selection of the parent task.

        The parent of a root selection is the root selection itself.
        """
        if not self.path:
            return self
        return Selection(index=self.index, path=self.path[:-1])

    def child(self, position: int) -> "Selection":
        """Return the selection of the child at ``position``."""
        return Selection(index=self.index, path=self.path + (position,))

    def sibling(self, position: int) -> "Selection":
        """Return the selection of the sibling at ``position``.

        For a root selection this moves the root index.
        """
        if not self.path:
            return Selection(index=position, path=())
        return Selection(index=self.index, path=self.path[:-1] + (position,))

    def __str__(self) -> str:
        return ".".join(str(i) for i in (self.index, *self.path))
