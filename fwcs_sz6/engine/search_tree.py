"""
fwcs_sz6/engine/search_tree.py

Tree of search nodes built by the breadth-first solver.

Each node owns its children; the parent link is a plain back-reference
used only for walking upwards (ancestor checks, solution paths).  Equal
states reached along different branches stay distinct nodes: the only
duplicate check is against a node's own ancestors.
"""

from collections import deque
from typing import Any, Iterator, List, Optional


class SearchNode:
    """One state in the search tree."""

    def __init__(
        self,
        state: Any,
        parent: Optional["SearchNode"] = None,
        move_label: str = "",
    ):
        self.state      = state
        self.parent     = parent
        self.children:  List["SearchNode"] = []
        self.depth      = parent.depth + 1 if parent is not None else 0
        self.move_label = move_label

    def __repr__(self):
        return f"SearchNode(depth={self.depth}, state={self.state})"

    def add_child(self, child: "SearchNode") -> None:
        self.children.append(child)

    def ancestors(self) -> Iterator["SearchNode"]:
        """Yield the parent, grandparent, ... up to the root."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def is_ancestor_duplicate(self) -> bool:
        """True if some ancestor holds a state equal to this node's state."""
        return any(node.state == self.state for node in self.ancestors())

    def path_from_root(self) -> List["SearchNode"]:
        """Nodes from the root down to (and including) this node."""
        path = [self]
        path.extend(self.ancestors())
        path.reverse()
        return path

    def iter_breadth_first(self) -> Iterator["SearchNode"]:
        """Yield this node and its descendants in level order."""
        queue = deque([self])
        while queue:
            node = queue.popleft()
            yield node
            queue.extend(node.children)
