"""
Farmer_Wolf_Cabbage_Sheep_WSZ6_VIS.py

Visualization module for the Farmer, Wolf, Cabbage and Sheep puzzle.
Companion to Farmer_Wolf_Cabbage_Sheep_SZ6.py.

Public API:
    render_state(state) -> str
        SVG picture of one state: both banks, the river and the boat.
    render_solution(path) -> str
        SVG strip of every state along a solution path (a list of
        search nodes, root first), with the move between each pair.
    write_solution_svgs(result, out_dir) -> list[Path]
        One solution_<n>.svg file per solution of a search result.

The state object is duck-typed.  Expected attributes:
    state.left, state.right  -- sequences of occupant tokens
    state.active_bank        -- 'left' or 'right'
"""

import logging
from pathlib import Path

import svgwrite

logger = logging.getLogger(__name__)

# ── Occupant names (mirrors Farmer_Wolf_Cabbage_Sheep_SZ6.py) ────────────────
_NAMES = {
    'F': 'Farmer',
    'W': 'Wolf',
    'S': 'Sheep',
    'C': 'Cabbage',
}

# ── SVG layout constants ──────────────────────────────────────────────────────
_BANK_W  = 110    # width of each bank
_RIVER_W = 80     # width of the river between them
_W       = 2 * _BANK_W + _RIVER_W
_H       = 200
_ROW_H   = 34     # vertical spacing of occupant labels
_TOP     = 40     # y of the first occupant label
_BOAT_W  = 44
_BOAT_H  = 16
_GAP     = 90     # horizontal room for the move label between panels

# ── Colours ───────────────────────────────────────────────────────────────────
_C_BANK   = '#c5e1a5'
_C_RIVER  = '#64b5f6'
_C_BOAT   = '#6d4c41'
_C_TEXT   = '#212121'
_C_FARMER = '#c62828'
_C_MOVE   = '#444444'
_C_EDGE   = '#9e9e9e'

_FONT = 'sans-serif'


# ─────────────────────────────────────────────────────────────────────────────
# Public entry points
# ─────────────────────────────────────────────────────────────────────────────

def render_state(state) -> str:
    """Return an SVG string visualising *state*."""
    dwg = svgwrite.Drawing(size=(f"{_W}px", f"{_H}px"))
    dwg.add(_state_panel(dwg, state, 0))
    dwg.set_desc(title=_alt_text(state))
    return dwg.tostring()


def render_solution(path) -> str:
    """Return an SVG strip of the states along *path*, root first."""
    if not path:
        raise ValueError("A solution path needs at least one node.")

    step  = _W + _GAP
    width = len(path) * _W + (len(path) - 1) * _GAP
    dwg   = svgwrite.Drawing(size=(f"{width}px", f"{_H + 30}px"))

    for i, node in enumerate(path):
        x = i * step
        dwg.add(_state_panel(dwg, node.state, x))
        dwg.add(dwg.text(f"Level {node.depth}",
                         insert=(x + _W / 2, _H + 20),
                         text_anchor="middle",
                         font_family=_FONT,
                         font_size="14",
                         fill=_C_MOVE))
        if i > 0:
            # The label belongs to the node the move produced.
            mid = x - _GAP / 2
            dwg.add(dwg.line((x - _GAP + 8, _H / 2), (x - 8, _H / 2),
                             stroke=_C_MOVE, stroke_width=2))
            dwg.add(dwg.text(node.move_label,
                             insert=(mid, _H / 2 - 8),
                             text_anchor="middle",
                             font_family=_FONT,
                             font_size="12",
                             fill=_C_MOVE))

    moves = len(path) - 1
    dwg.set_desc(title=f"Solution in {moves} moves",
                 desc=" -> ".join(str(node.state) for node in path))
    return dwg.tostring()


def write_solution_svgs(result, out_dir):
    """Write one SVG per solution of *result* into *out_dir*.

    Returns the list of paths written, in solution order.
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for i, node in enumerate(result.solutions, start=1):
        target = out_dir / f"solution_{i}.svg"
        target.write_text(render_solution(node.path_from_root()), encoding="utf-8")
        logger.info("Wrote %s", target)
        written.append(target)
    return written


# ─────────────────────────────────────────────────────────────────────────────
# Private helpers
# ─────────────────────────────────────────────────────────────────────────────

def _state_panel(dwg, state, x):
    """Group holding the picture of one state, with its left edge at x."""
    g = dwg.g()
    g.add(dwg.rect(insert=(x, 0), size=(_BANK_W, _H), fill=_C_BANK))
    g.add(dwg.rect(insert=(x + _BANK_W, 0), size=(_RIVER_W, _H), fill=_C_RIVER))
    g.add(dwg.rect(insert=(x + _BANK_W + _RIVER_W, 0), size=(_BANK_W, _H),
                   fill=_C_BANK))
    g.add(dwg.rect(insert=(x, 0), size=(_W, _H), fill="none",
                   stroke=_C_EDGE, stroke_width=1))

    # Boat: moored against the bank the farmer is on.
    if state.active_bank == 'left':
        bx = x + _BANK_W + 4
    else:
        bx = x + _BANK_W + _RIVER_W - _BOAT_W - 4
    g.add(dwg.rect(insert=(bx, _H / 2 - _BOAT_H / 2), size=(_BOAT_W, _BOAT_H),
                   rx=6, ry=6, fill=_C_BOAT))

    for bank_x, occupants in ((x, state.left),
                              (x + _BANK_W + _RIVER_W, state.right)):
        for row, token in enumerate(occupants):
            g.add(dwg.text(_NAMES.get(token, token),
                           insert=(bank_x + _BANK_W / 2, _TOP + row * _ROW_H),
                           text_anchor="middle",
                           font_family=_FONT,
                           font_size="16",
                           fill=_C_FARMER if token == 'F' else _C_TEXT))
    return g


def _alt_text(state):
    def names(occupants):
        return ", ".join(_NAMES.get(t, t) for t in occupants) or "nobody"
    return (f"Left bank: {names(state.left)}. "
            f"Right bank: {names(state.right)}. "
            f"The boat is on the {state.active_bank} bank.")
