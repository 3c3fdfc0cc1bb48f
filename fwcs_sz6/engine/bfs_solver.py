"""
fwcs_sz6/engine/bfs_solver.py

Breadth-first search over a SOLUZION6 formulation.

The solver expands every node by trying each operator of the
formulation in order.  A move is kept only if it produces a state,
that state is allowed, and no ancestor of the new node already holds
the same state.  Goal nodes are collected as solutions and never
expanded.

Usage:

    from fwcs_sz6.Farmer_Wolf_Cabbage_Sheep_SZ6 import FWCS_Formulation

    solver = BFSSolver(FWCS_Formulation())
    result = solver.run_search()
    for path in solver.solution_paths():
        ...

Nothing is printed here.  The search records what it did as a list of
SearchEvent so that a front end (see Textual_FWCS_Solver.py) can show
the trace after the fact.
"""

import logging
from collections import deque
from typing import List, NamedTuple, Optional

from .search_tree import SearchNode

logger = logging.getLogger(__name__)

PROCESSING = 'processing'
ADDING     = 'adding'
SOLUTION   = 'solution'


class SearchError(Exception):
    """Raised when a formulation cannot be searched, or results are
    requested before the search has run."""


class SearchEvent(NamedTuple):
    kind: str            # PROCESSING, ADDING or SOLUTION
    node: SearchNode


class SearchResult(NamedTuple):
    root:      SearchNode
    solutions: List[SearchNode]
    events:    List[SearchEvent]

    @property
    def node_count(self) -> int:
        return sum(1 for _ in self.root.iter_breadth_first())


class BFSSolver:
    """Builds the full search tree for one formulation."""

    def __init__(self, formulation):
        self.formulation = formulation
        self.root: Optional[SearchNode] = None
        self.solutions: List[SearchNode] = []
        self.events: List[SearchEvent] = []
        self.result: Optional[SearchResult] = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run_search(self) -> SearchResult:
        """Search until the queue is empty and return the result.

        Raises:
            SearchError: if the initial state breaks the puzzle's rules.
        """
        initial_state = self.formulation.initialize_problem()
        if not initial_state.is_allowed():
            raise SearchError(
                f"Initial state {initial_state.describe()} is not allowed.")

        operators      = self.formulation.operators.operators
        self.root      = SearchNode(initial_state)
        self.solutions = []
        self.events    = []
        queue          = deque([self.root])

        while queue:
            node = queue.popleft()
            self.events.append(SearchEvent(PROCESSING, node))
            logger.debug("Processing level %d %s", node.depth, node.state.describe())

            for op in operators:
                candidate = op.apply(node.state)
                if candidate is None or not candidate.is_allowed():
                    continue

                child = SearchNode(
                    candidate,
                    parent=node,
                    move_label=self.formulation.describe_move(op, candidate),
                )
                if child.is_ancestor_duplicate():
                    continue

                node.add_child(child)
                if candidate.is_goal():
                    self.solutions.append(child)
                    self.events.append(SearchEvent(SOLUTION, child))
                    logger.debug("Found solution %s", candidate.describe())
                else:
                    queue.append(child)
                    self.events.append(SearchEvent(ADDING, child))
                    logger.debug("Adding state %s", candidate.describe())

        self.result = SearchResult(self.root, self.solutions, self.events)
        logger.info(
            "Search of '%s' finished: %d nodes, %d solution(s)",
            self.formulation.metadata.name,
            self.result.node_count,
            len(self.solutions),
        )
        return self.result

    def iter_graph(self):
        """Yield every node of the built tree in breadth-first order."""
        self._require_result()
        return self.root.iter_breadth_first()

    def solution_paths(self) -> List[List[SearchNode]]:
        """Root-to-solution node lists, one per solution, in discovery order."""
        self._require_result()
        return [node.path_from_root() for node in self.solutions]

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _require_result(self) -> None:
        if self.result is None:
            raise SearchError("run_search() has not been called yet.")
