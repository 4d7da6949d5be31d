from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

GRID_ROWS = 5
GRID_COLS = 5
NODE_SPACING = 100
TRAP_ATTACH_POINT = "2,4"
COLLINEAR_TOLERANCE = 1e-5

# Union Jack stars: each centre is joined diagonally to its four corners.
DIAGONAL_CENTRES: Tuple[Tuple[int, int], ...] = ((1, 1), (1, 3), (3, 1), (3, 3))

# Maoce cluster to the right of (2,4): id -> (x, y)
TRAP_LAYOUT: Tuple[Tuple[str, int, int], ...] = (
    ("m_top", 500, 100),
    ("m_right", 600, 200),
    ("m_bottom", 500, 300),
    ("m_center", 500, 200),
)
TRAP_EDGES: Tuple[Tuple[str, str], ...] = (
    (TRAP_ATTACH_POINT, "m_top"),
    (TRAP_ATTACH_POINT, "m_bottom"),
    (TRAP_ATTACH_POINT, "m_center"),
    ("m_center", "m_top"),
    ("m_center", "m_right"),
    ("m_center", "m_bottom"),
    ("m_top", "m_right"),
    ("m_right", "m_bottom"),
)


@dataclass(frozen=True)
class Node:
    id: str
    x: int
    y: int
    neighbors: Tuple[str, ...]
    is_trap: bool = False


def grid_id(row: int, col: int) -> str:
    return f"{row},{col}"


def _build_nodes() -> Dict[str, Node]:
    coords: Dict[str, Tuple[int, int, bool]] = {}
    for row in range(GRID_ROWS):
        for col in range(GRID_COLS):
            coords[grid_id(row, col)] = (col * NODE_SPACING, row * NODE_SPACING, False)
    for node_id, x, y in TRAP_LAYOUT:
        coords[node_id] = (x, y, True)

    adjacency: Dict[str, List[str]] = {node_id: [] for node_id in coords}

    def add_edge(a: str, b: str) -> None:
        if b not in adjacency[a]:
            adjacency[a].append(b)
        if a not in adjacency[b]:
            adjacency[b].append(a)

    for row in range(GRID_ROWS):
        for col in range(GRID_COLS):
            if col + 1 < GRID_COLS:
                add_edge(grid_id(row, col), grid_id(row, col + 1))
            if row + 1 < GRID_ROWS:
                add_edge(grid_id(row, col), grid_id(row + 1, col))

    for row, col in DIAGONAL_CENTRES:
        centre = grid_id(row, col)
        for dr, dc in ((-1, -1), (-1, 1), (1, -1), (1, 1)):
            add_edge(centre, grid_id(row + dr, col + dc))

    for a, b in TRAP_EDGES:
        add_edge(a, b)

    return {
        node_id: Node(node_id, x, y, tuple(adjacency[node_id]), is_trap)
        for node_id, (x, y, is_trap) in coords.items()
    }


BOARD_NODES: Dict[str, Node] = _build_nodes()
NODE_IDS: Tuple[str, ...] = tuple(BOARD_NODES)
NODE_INDEX: Dict[str, int] = {node_id: index for index, node_id in enumerate(NODE_IDS)}
NUM_NODES = len(NODE_IDS)
TRAP_NODES: Tuple[str, ...] = tuple(node_id for node_id in NODE_IDS if BOARD_NODES[node_id].is_trap)
TRAP_MASK: NDArray[np.bool_] = np.array([BOARD_NODES[node_id].is_trap for node_id in NODE_IDS], dtype=bool)


def get_node(node_id: str) -> Node:
    try:
        return BOARD_NODES[node_id]
    except KeyError:
        raise KeyError(f"Unknown node identifier: {node_id!r}") from None


def node_index(node_id: str) -> int:
    try:
        return NODE_INDEX[node_id]
    except KeyError:
        raise KeyError(f"Unknown node identifier: {node_id!r}") from None


def neighbors(node_id: str) -> Tuple[str, ...]:
    return get_node(node_id).neighbors


def is_trap(node_id: str) -> bool:
    return get_node(node_id).is_trap


def collinear(a: str, b: str, c: str) -> bool:
    """True when the three nodes lie on one straight line (cross product of a->b and b->c)."""
    p1, p2, p3 = get_node(a), get_node(b), get_node(c)
    cross = (p2.y - p1.y) * (p3.x - p2.x) - (p2.x - p1.x) * (p3.y - p2.y)
    return abs(cross) < COLLINEAR_TOLERANCE


def continuation(previous: str, current: str) -> Optional[str]:
    """Next node after ``current`` when travelling straight from ``previous``."""
    for candidate in neighbors(current):
        if candidate == previous:
            continue
        if collinear(previous, current, candidate):
            return candidate
    return None
