from dataclasses import dataclass
from typing import Tuple

# ---------------------- Settings ----------------------

Color = Tuple[int, int, int, int]


@dataclass(frozen=True)
class GraphConfig:
    variant: int = 3106
    digits: Tuple[int, ...] = (0, 3, 1, 0, 6)

    # layout / geometry, in canvas pixels
    canvas_size: Tuple[int, int] = (700, 700)
    layout_radius: float = 280.0
    node_radius: float = 30.0
    reciprocal_offset: float = 3.0   # orthogonal shift of a reverse edge pair
    arrow_length: float = 15.0
    arrow_spread: float = 0.3        # radians either side of the reverse heading
    loop_center: Tuple[float, float] = (0.0, -40.83)
    loop_radius: float = 20.0
    loop_arrow_tip: Tuple[float, float] = (14.0, -26.5)
    loop_arrow_heading: float = -1.0

    # look
    window_title: str = "Circle Graph"
    background: Color = (10, 10, 10, 255)
    stroke: Color = (255, 255, 255, 255)
    node_fill: Color = (100, 100, 100, 255)
    label_color: Color = (255, 255, 255, 255)
    stroke_weight: float = 2.0
    text_size: int = 40

    @property
    def seed(self) -> int:
        return self.variant

    @property
    def node_count(self) -> int:
        return self.digits[3] + 10

    @property
    def initial_density(self) -> float:
        return 1.0 - self.digits[3] * 0.01 - self.digits[4] * 0.01 - 0.3

    @property
    def updated_density(self) -> float:
        return 1.0 - self.digits[3] * 0.005 - self.digits[4] * 0.005 - 0.27


DEFAULT_CONFIG = GraphConfig()
