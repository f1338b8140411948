"""Procedural world generation.

Deterministic, integer-only. A river meanders from the top row to the
bottom row; its course is a handful of control points refined by recursive
midpoint displacement, then rasterized segment by segment. Trees are
scattered on land afterwards.

Every draw from the RandomStream is part of the contract: the order of
draws (endpoints, then midpoints depth-first left before right, then tree
coordinates) must never change or existing seeds produce different worlds.
"""

from __future__ import annotations

import logging

from riverwood.config import (
    MAP_SIZE,
    RIVER_CONTROL_POINTS,
    RIVER_ENDPOINT_MAX,
    RIVER_ENDPOINT_SPREAD,
    RIVER_NOISE_OFFSET,
    RIVER_NOISE_SPREAD,
    TREE_COUNT,
    TREE_ROW_LIMIT,
)
from riverwood.simulation.rng import RandomStream
from riverwood.simulation.tilemap import TerrainGrid, Tree, in_bounds

logger = logging.getLogger(__name__)


def generate_map(seed: int) -> TerrainGrid:
    """Generate the world for `seed`.

    Args:
        seed: 64-bit world seed.

    Returns:
        A TerrainGrid with the river carved as water and TREE_COUNT
        active trees placed on land.
    """
    rng = RandomStream(seed)
    grid = TerrainGrid()

    points = river_control_points(rng)
    grid.river_points = points
    carve_river(grid, points)
    grid.trees = place_trees(grid, rng)
    return grid


# ---------------------------------------------------------------------------
# River course
# ---------------------------------------------------------------------------

def river_control_points(rng: RandomStream) -> list[int]:
    """Pick the river's column at each of RIVER_CONTROL_POINTS rows.

    Both endpoints are drawn first (top, then bottom), the interior is then
    filled by midpoint displacement.
    """
    points = [0] * RIVER_CONTROL_POINTS
    points[0] = _river_endpoint(rng)
    points[-1] = _river_endpoint(rng)
    displace_midpoint(points, 0, len(points) - 1, rng)
    return points


def _river_endpoint(rng: RandomStream) -> int:
    return RIVER_ENDPOINT_MAX - rng.next_u8() % RIVER_ENDPOINT_SPREAD


def displace_midpoint(
    points: list[int], start: int, end: int, rng: RandomStream,
) -> None:
    """Fill points[start+1:end] from the fixed values at start and end.

    The midpoint gets the average of its endpoints plus noise in
    [-3, +4], clamped to the grid. Left half is refined before the right
    half; each call consumes one draw.
    """
    if end - start <= 1:
        return
    mid = (start + end) // 2
    average = (points[start] + points[end]) // 2
    noise = RIVER_NOISE_OFFSET - rng.next_u8() % RIVER_NOISE_SPREAD
    points[mid] = max(0, min(average + noise, MAP_SIZE - 1))
    displace_midpoint(points, start, mid, rng)
    displace_midpoint(points, mid, end, rng)


def carve_river(grid: TerrainGrid, points: list[int]) -> None:
    """Mark a 3-column water swath along the polyline through `points`.

    Control point i sits at row MAP_SIZE * i // (len(points) - 1), so the
    last one lies one row past the grid; its row is never emitted because
    lines exclude their end point.
    """
    segments = len(points) - 1
    for i in range(segments):
        x1, y1 = points[i], MAP_SIZE * i // segments
        x2, y2 = points[i + 1], MAP_SIZE * (i + 1) // segments
        for x, y in bresenham_line(x1, y1, x2, y2):
            for nx in (x - 1, x, x + 1):
                # Swath edges at column -1 / MAP_SIZE fall off the map
                if in_bounds(nx, y):
                    grid.set_terrain(nx, y, True)


# ---------------------------------------------------------------------------
# Line rasterization
# ---------------------------------------------------------------------------

def bresenham_line(x1: int, y1: int, x2: int, y2: int) -> list[tuple[int, int]]:
    """Integer line from (x1, y1) towards (x2, y2), end point excluded.

    The line is mapped into the first octant, stepped there, and every
    point is mapped back. Chained segments therefore never draw their
    shared point twice.
    """
    octant = _octant(x2 - x1, y2 - y1)
    x, y = _to_octant0(octant, x1, y1)
    end_x, end_y = _to_octant0(octant, x2, y2)
    dx = end_x - x
    dy = end_y - y
    diff = dy - dx

    cells: list[tuple[int, int]] = []
    while x < end_x:
        cells.append(_from_octant0(octant, x, y))
        if diff >= 0:
            y += 1
            diff -= dx
        diff += dy
        x += 1
    return cells


def _octant(dx: int, dy: int) -> int:
    octant = 0
    if dy < 0:
        dx, dy = -dx, -dy
        octant += 4
    if dx < 0:
        dx, dy = dy, -dx
        octant += 2
    if dx < dy:
        octant += 1
    return octant


def _to_octant0(octant: int, x: int, y: int) -> tuple[int, int]:
    if octant == 0:
        return x, y
    if octant == 1:
        return y, x
    if octant == 2:
        return y, -x
    if octant == 3:
        return -x, y
    if octant == 4:
        return -x, -y
    if octant == 5:
        return -y, -x
    if octant == 6:
        return -y, x
    return x, -y


def _from_octant0(octant: int, x: int, y: int) -> tuple[int, int]:
    if octant == 0:
        return x, y
    if octant == 1:
        return y, x
    if octant == 2:
        return -y, x
    if octant == 3:
        return -x, y
    if octant == 4:
        return -x, -y
    if octant == 5:
        return -y, -x
    if octant == 6:
        return y, -x
    return x, -y


# ---------------------------------------------------------------------------
# Trees
# ---------------------------------------------------------------------------

def place_trees(grid: TerrainGrid, rng: RandomStream) -> list[Tree]:
    """Rejection-sample TREE_COUNT tree positions on land.

    Trees only ever land in rows y < TREE_ROW_LIMIT; the bottom rows stay
    clear. Two trees never share a cell.
    """
    trees: list[Tree] = []
    for i in range(TREE_COUNT):
        while True:
            x = rng.next_u16() % MAP_SIZE
            y = rng.next_u16() % TREE_ROW_LIMIT
            occupied = any(t.x == x and t.y == y for t in trees)
            if not grid.get_terrain(x, y) and not occupied:
                break
        trees.append(Tree(x, y, activity=1))
        logger.debug("Tree %d placed at (%d, %d)", i, x, y)
    return trees
