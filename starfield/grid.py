"""Uniform 2D spatial grid rebuilt from the tracked bounds every tick."""

import math
import numpy as np
from numba import njit, prange


# ============================================================================
# NUMBA JIT-COMPILED GRID FUNCTIONS
# ============================================================================

@njit(cache=True)
def cell_hash(cx: int, cy: int, grid_dim: int) -> int:
    """Convert 2D cell coordinates to a 1D cell index."""
    return cx + cy * grid_dim


@njit(cache=True)
def cell_unhash(cell: int, grid_dim: int) -> tuple:
    """Inverse of cell_hash."""
    return cell % grid_dim, cell // grid_dim


@njit(cache=True)
def get_cell_index(x: float, y: float, origin_x: float, origin_y: float,
                   cell_w: float, cell_h: float, grid_dim: int) -> int:
    """
    Convert a world position to a 1D cell index.

    Positions on (or past) the outer boundary clamp into the last cell.
    A zero cell size on an axis (all bodies share that coordinate) maps
    everything to coordinate 0 on that axis.
    """
    cx = 0
    cy = 0
    if cell_w > 0.0:
        cx = int(math.floor((x - origin_x) / cell_w))
    if cell_h > 0.0:
        cy = int(math.floor((y - origin_y) / cell_h))

    cx = max(0, min(cx, grid_dim - 1))
    cy = max(0, min(cy, grid_dim - 1))

    return cx + cy * grid_dim


@njit(parallel=True, cache=True)
def assign_cells(
    positions: np.ndarray,
    alive: np.ndarray,
    body_cells: np.ndarray,
    origin_x: float,
    origin_y: float,
    cell_w: float,
    cell_h: float,
    grid_dim: int,
    num_bodies: int
):
    """Assign each live body to a cell; dead bodies get -1."""
    for i in prange(num_bodies):
        if alive[i]:
            body_cells[i] = get_cell_index(
                positions[i, 0], positions[i, 1],
                origin_x, origin_y, cell_w, cell_h, grid_dim
            )
        else:
            body_cells[i] = -1


@njit(cache=True)
def build_cell_lists(
    body_cells: np.ndarray,
    sorted_ids: np.ndarray,
    cell_starts: np.ndarray,
    cell_counts: np.ndarray,
    num_bodies: int,
    num_cells: int
):
    """Build cell start indices and counts after sorting. Skips unassigned bodies."""
    for i in range(num_cells):
        cell_starts[i] = -1
        cell_counts[i] = 0

    for i in range(num_bodies):
        cell = body_cells[sorted_ids[i]]
        if cell < 0:
            continue
        if cell_starts[cell] == -1:
            cell_starts[cell] = i
        cell_counts[cell] += 1


# ============================================================================
# SPACE GRID CLASS
# ============================================================================

class SpaceGrid:
    """
    N x N grid covering the current bounds.

    Bodies are bucketed through a body -> cell array that is stably sorted
    once, so each cell is a contiguous run of ascending ids in
    ``sorted_ids``. The store is injected; positions are always read from
    it at insert time.
    """

    def __init__(self, store):
        self.store = store
        self.grid_dim = 0
        self.num_cells = 0
        self.origin = (0.0, 0.0)
        self.cell_size = (0.0, 0.0)

        self._body_cells = np.zeros(0, dtype=np.int64)
        self._sorted_ids = np.zeros(0, dtype=np.int64)
        self._cell_starts = np.zeros(0, dtype=np.int64)
        self._cell_counts = np.zeros(0, dtype=np.int64)
        self._indexed = False

    def build(self, bounds, subdivisions: int, body_count: int):
        """Allocate cell storage for ``body_count`` ids over ``bounds``."""
        if subdivisions <= 0:
            raise ValueError(f"Grid subdivisions must be positive, got {subdivisions}")

        self.grid_dim = int(subdivisions)
        self.num_cells = self.grid_dim * self.grid_dim
        self.origin = bounds.origin
        width, height = bounds.size
        self.cell_size = (width / self.grid_dim, height / self.grid_dim)

        self._body_cells = np.full(body_count, -1, dtype=np.int64)
        self._sorted_ids = np.arange(body_count, dtype=np.int64)
        self._cell_starts = np.full(self.num_cells, -1, dtype=np.int64)
        self._cell_counts = np.zeros(self.num_cells, dtype=np.int64)
        self._indexed = False

    def hash(self, cx: int, cy: int) -> int:
        return cx + cy * self.grid_dim

    def unhash(self, cell: int) -> tuple:
        return cell % self.grid_dim, cell // self.grid_dim

    def cell_index(self, x: float, y: float) -> int:
        """Cell hash for a world position."""
        return int(get_cell_index(
            float(x), float(y),
            float(self.origin[0]), float(self.origin[1]),
            float(self.cell_size[0]), float(self.cell_size[1]),
            self.grid_dim
        ))

    def insert(self, body_id: int):
        """Put one body into the cell under its current position."""
        x, y = self.store.position(body_id)
        self._body_cells[body_id] = self.cell_index(x, y)
        self._indexed = False

    def insert_live(self):
        """Put every live body into its cell in one pass."""
        num_bodies = len(self._body_cells)
        assign_cells(
            self.store.positions[:num_bodies],
            self.store.alive[:num_bodies],
            self._body_cells,
            float(self.origin[0]), float(self.origin[1]),
            float(self.cell_size[0]), float(self.cell_size[1]),
            self.grid_dim,
            num_bodies
        )
        self._indexed = False

    def _index(self):
        if self._indexed:
            return
        # Stable sort keeps ids ascending inside each cell
        self._sorted_ids[:] = np.argsort(self._body_cells, kind="stable")
        build_cell_lists(
            self._body_cells, self._sorted_ids,
            self._cell_starts, self._cell_counts,
            len(self._body_cells), self.num_cells
        )
        self._indexed = True

    def cell_of(self, body_id: int) -> int:
        """Cell hash of an inserted body, -1 if it was never inserted."""
        return int(self._body_cells[body_id])

    def neighbor_cells(self, body_id: int) -> list:
        """
        Own cell plus its Moore neighbours, row by row.

        Cells on the grid edge have fewer than 9 neighbours; there is no
        wraparound. Returns an empty list for a body that is not in the grid.
        """
        cell = self.cell_of(body_id)
        if cell < 0:
            return []

        cx, cy = self.unhash(cell)
        neighbors = []
        for dcy in (-1, 0, 1):
            ncy = cy + dcy
            if ncy < 0 or ncy >= self.grid_dim:
                continue
            for dcx in (-1, 0, 1):
                ncx = cx + dcx
                if ncx < 0 or ncx >= self.grid_dim:
                    continue
                neighbors.append(self.hash(ncx, ncy))
        return neighbors

    def cell_bodies(self, cell: int) -> list:
        """Ids inside a cell, ascending. Empty list for an empty cell."""
        self._index()
        start = self._cell_starts[cell]
        if start == -1:
            return []
        count = self._cell_counts[cell]
        return [int(i) for i in self._sorted_ids[start:start + count]]

    def arrays(self) -> tuple:
        """(body_cells, sorted_ids, cell_starts, cell_counts) for the force kernel."""
        self._index()
        return self._body_cells, self._sorted_ids, self._cell_starts, self._cell_counts
