import logging
import math
import random
from typing import Any, List, Optional, Tuple

from graph_config import GraphConfig

logger = logging.getLogger(__name__)

Matrix = List[List[bool]]
Point = Tuple[float, float]

# ---------------------- Generation ----------------------

def generate_matrix(n: int, density: float, rng: random.Random) -> Matrix:
    """Fill an n x n adjacency matrix from ``rng``.

    Pairs are visited row-major and each one consumes a single draw
    ``r`` in [0, 2); the edge exists iff ``r * density >= 1.0``.
    """
    if n < 0:
        raise ValueError(f"Node count must be non-negative, got {n}.")
    return [[rng.random() * 2.0 * density >= 1.0 for _ in range(n)] for _ in range(n)]


def symmetrize(matrix: Matrix) -> Matrix:
    n = len(matrix)
    return [[matrix[i][j] or matrix[j][i] for j in range(n)] for i in range(n)]


# ---------------------- Layout ----------------------

def compute_positions(n: int, radius: float) -> List[Point]:
    """Place n - 1 nodes evenly on a circle and the last one at the origin."""
    if n <= 0:
        return []
    points: List[Point] = []
    for t in range(n - 1):
        angle = 2 * math.pi * t / (n - 1)
        points.append((radius * math.cos(angle), radius * math.sin(angle)))
    points.append((0.0, 0.0))
    return points


# ---------------------- Data Model ----------------------

class GraphModel:
    def __init__(self, matrix: Matrix, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self._matrix: Matrix = []
        self._undirected: Optional[Matrix] = None
        self.matrix = matrix

    @classmethod
    def from_config(cls, config: GraphConfig) -> "GraphModel":
        rng = random.Random(config.seed)
        logger.info("Seeded graph RNG with %d", config.seed)
        matrix = generate_matrix(config.node_count, config.initial_density, rng)
        return cls(matrix, rng)

    @property
    def n(self) -> int:
        return len(self._matrix)

    @property
    def matrix(self) -> Matrix:
        return self._matrix

    @matrix.setter
    def matrix(self, value: Matrix) -> None:
        n = len(value)
        if any(len(row) != n for row in value):
            raise ValueError("Adjacency matrix must be square.")
        self._matrix = [list(row) for row in value]
        self._undirected = None

    @property
    def undirected(self) -> Matrix:
        if self._undirected is None:
            self._undirected = symmetrize(self._matrix)
        return self._undirected

    def active_matrix(self, directed: bool) -> Matrix:
        return self._matrix if directed else self.undirected

    def half_degrees(self, i: int, directed: bool) -> Tuple[int, int]:
        """(row sum, column sum) of node i; reported as entry and exit."""
        m = self.active_matrix(directed)
        return sum(m[i]), sum(row[i] for row in m)

    def degree(self, i: int, directed: bool) -> int:
        row, col = self.half_degrees(i, directed)
        return row + col

    def degrees(self, directed: bool) -> List[int]:
        return [self.degree(i, directed) for i in range(self.n)]

    def is_homogeneous(self, directed: bool) -> bool:
        return len(set(self.degrees(directed))) <= 1

    def terminal_nodes(self, directed: bool) -> List[int]:
        return [i for i, d in enumerate(self.degrees(directed)) if d == 1]

    def isolated_nodes(self, directed: bool) -> List[int]:
        return [i for i, d in enumerate(self.degrees(directed)) if d == 0]

    def regenerate(self, density: float) -> None:
        self.matrix = generate_matrix(self.n, density, self.rng)
        logger.info("Regenerated %dx%d matrix with density %.3f", self.n, self.n, density)


# ---------------------- Display Mode ----------------------

class ToggleController:
    def __init__(self, toggle_key: Any = " ", directed: bool = True):
        self.toggle_key = toggle_key
        self.directed = directed

    def handle_key(self, key: Any) -> bool:
        if key != self.toggle_key:
            return False
        self.directed = not self.directed
        logger.debug("Display mode: %s", "directed" if self.directed else "undirected")
        return True
