#!/usr/bin/env python3
'''Textual_FWCS_Solver.py

Textual front end for the breadth-first solver.

Builds the full search tree for the Farmer, Wolf, Cabbage and Sheep
formulation and prints, in order:
  - the search trace (each node processed and each child accepted),
  - the whole tree in breadth-first order,
  - every solution as a chain of states joined by the moves.

Usage:
  fwcs-solve
  python3 -m fwcs_sz6.Textual_FWCS_Solver

Settings (environment or .env, see settings.py):
  FWCS_SHOW_SEARCH_TRACE, FWCS_SVG_DIR, FWCS_LOG_LEVEL
'''

import logging
import logging.config
import sys

from . import settings
from .Farmer_Wolf_Cabbage_Sheep_SZ6 import FWCS_Formulation
from .Farmer_Wolf_Cabbage_Sheep_WSZ6_VIS import write_solution_svgs
from .engine.bfs_solver import BFSSolver, PROCESSING, SOLUTION

TITLE = "Solving Wolf, Sheep, Cabbage, Farmer, River Crossing Puzzle"

logger = logging.getLogger(__name__)


# =======================================================================
# SECTION 1:  REPORT SECTIONS
# =======================================================================

def search_trace_lines(result):
    '''One line per event recorded during the search.'''
    lines = []
    for kind, node in result.events:
        if kind == PROCESSING:
            lines.append(f"Processing Level {node.depth} {node.state}")
        elif kind == SOLUTION:
            lines.append(f"Found solution {node.state}")
        else:
            lines.append(f"Adding state {node.state}")
    return lines


def graph_lines(result):
    '''The tree, level by level.'''
    return [f"Level {node.depth} {node.state}"
            for node in result.root.iter_breadth_first()]


def format_path(path):
    '''Render a root-first node list as state--move->>state--move->>...'''
    parts = [str(path[0].state)]
    for node in path[1:]:
        parts.append(f"--{node.move_label}->>")
        parts.append(str(node.state))
    return "".join(parts)


def solution_lines(result):
    lines = [f"No. of solutions:  {len(result.solutions)}"]
    for i, node in enumerate(result.solutions, start=1):
        path = node.path_from_root()
        lines.append(f"Solution {i}")
        lines.append(f"No. of moves: {len(path) - 1}")
        lines.append(format_path(path))
    return lines


def report_lines(result, show_trace=True):
    '''The complete console report, one string per line.'''
    lines = [TITLE, "", "Creating State Graph using Breadth First Search"]
    if show_trace:
        lines.extend(search_trace_lines(result))
    lines.extend(["", "", "State Graph in Breadth first order"])
    lines.extend(graph_lines(result))
    lines.extend(["", "", ""])
    lines.append("Solutions to the River Crossing Puzzle")
    lines.extend(solution_lines(result))
    return lines


# =======================================================================
# SECTION 2:  ENTRY POINT
# =======================================================================

def main(out=None):
    out = out if out is not None else sys.stdout
    logging.config.dictConfig(settings.LOGGING)

    formulation = FWCS_Formulation()
    logger.info("Loaded formulation: %s (version %s)",
                formulation.metadata.name, formulation.metadata.problem_version)

    solver = BFSSolver(formulation)
    result = solver.run_search()

    for line in report_lines(result, show_trace=settings.SHOW_SEARCH_TRACE):
        print(line, file=out)

    if settings.SVG_DIR:
        written = write_solution_svgs(result, settings.SVG_DIR)
        logger.info("Wrote %d solution picture(s) to %s",
                    len(written), settings.SVG_DIR)

    return 0


if __name__ == '__main__':
    sys.exit(main())
