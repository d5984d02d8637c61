import math
from typing import List, Optional, Protocol, Sequence, Tuple

from graph_config import Color, GraphConfig
from graph_model import GraphModel, Point

# ---------------------- Surface ----------------------

class Surface(Protocol):
    """Drawing service; coordinates are relative to the canvas centre."""

    def draw_line(self, p1: Point, p2: Point, color: Color, thickness: float) -> None: ...

    def draw_circle(self, center: Point, radius: float, color: Color,
                    fill: Optional[Color], thickness: float) -> None: ...

    def draw_text(self, center: Point, text: str, size: int, color: Color) -> None: ...


# ---------------------- Geometry ----------------------

def edge_segment(p1: Point, p2: Point, node_radius: float, offset: float = 0.0) -> Tuple[Point, Point]:
    """Segment between the rims of two nodes, shifted ``offset`` along the left normal."""
    dx, dy = p2[0] - p1[0], p2[1] - p1[1]
    L = math.hypot(dx, dy) or 1.0
    ux, uy = dx / L, dy / L
    nx, ny = -uy, ux
    start = (p1[0] + ux * node_radius + nx * offset, p1[1] + uy * node_radius + ny * offset)
    end = (p2[0] - ux * node_radius + nx * offset, p2[1] - uy * node_radius + ny * offset)
    return start, end


def arrow_strokes(tip: Point, heading: float, length: float, spread: float) -> List[Tuple[Point, Point]]:
    """Two strokes of a V opening from ``tip`` around ``heading``."""
    return [
        (tip, (tip[0] + length * math.cos(heading + spread), tip[1] + length * math.sin(heading + spread))),
        (tip, (tip[0] + length * math.cos(heading - spread), tip[1] + length * math.sin(heading - spread))),
    ]


# ---------------------- Renderer ----------------------

class GraphRenderer:
    def __init__(self, positions: Sequence[Point], config: GraphConfig):
        self.positions = list(positions)
        self.config = config

    def render(self, surface: Surface, model: GraphModel, directed: bool) -> None:
        self.draw_edges(surface, model, directed)
        self.draw_nodes(surface, model, directed)

    def draw_edges(self, surface: Surface, model: GraphModel, directed: bool) -> None:
        cfg = self.config
        m = model.active_matrix(directed)
        for i, p1 in enumerate(self.positions):
            for j, p2 in enumerate(self.positions):
                if i == j or not m[i][j]:
                    continue
                # one line stands for a mutual relation
                if not directed and j < i:
                    continue
                offset = cfg.reciprocal_offset if directed and m[j][i] else 0.0
                start, end = edge_segment(p1, p2, cfg.node_radius, offset)
                surface.draw_line(start, end, cfg.stroke, cfg.stroke_weight)
                if directed:
                    heading = math.atan2(end[1] - start[1], end[0] - start[0]) + math.pi
                    self._draw_arrow(surface, end, heading)

    def draw_nodes(self, surface: Surface, model: GraphModel, directed: bool) -> None:
        cfg = self.config
        for i, (x, y) in enumerate(self.positions):
            # self-loops always come from the directed matrix
            if model.matrix[i][i]:
                lx, ly = cfg.loop_center
                surface.draw_circle((x + lx, y + ly), cfg.loop_radius, cfg.stroke, None, cfg.stroke_weight)
                if directed:
                    tx, ty = cfg.loop_arrow_tip
                    self._draw_arrow(surface, (x + tx, y + ty), cfg.loop_arrow_heading)

            surface.draw_circle((x, y), cfg.node_radius, cfg.stroke, cfg.node_fill, cfg.stroke_weight)
            surface.draw_text((x, y), str(i + 1), cfg.text_size, cfg.label_color)

    def _draw_arrow(self, surface: Surface, tip: Point, heading: float) -> None:
        cfg = self.config
        for a, b in arrow_strokes(tip, heading, cfg.arrow_length, cfg.arrow_spread):
            surface.draw_line(a, b, cfg.stroke, cfg.stroke_weight)
