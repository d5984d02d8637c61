import logging
import os
from typing import Optional

import dearpygui.dearpygui as dpg

from graph_config import DEFAULT_CONFIG, Color, GraphConfig
from graph_model import GraphModel, Point, ToggleController, compute_positions
from graph_render import GraphRenderer
from graph_report import run_startup_report

logger = logging.getLogger(__name__)

# ---------------------- UI Helpers ----------------------

class DrawlistSurface:
    """Forwards renderer draw calls to a drawlist whose origin is its centre."""

    def __init__(self, tag: str, size):
        self.tag = tag
        self.cx = size[0] * 0.5
        self.cy = size[1] * 0.5

    def _at(self, p: Point) -> Point:
        return (p[0] + self.cx, p[1] + self.cy)

    def draw_line(self, p1: Point, p2: Point, color: Color, thickness: float) -> None:
        dpg.draw_line(self._at(p1), self._at(p2), color=color, thickness=thickness, parent=self.tag)

    def draw_circle(self, center: Point, radius: float, color: Color,
                    fill: Optional[Color], thickness: float) -> None:
        if fill is None:
            dpg.draw_circle(self._at(center), radius, color=color, thickness=thickness, parent=self.tag)
        else:
            dpg.draw_circle(self._at(center), radius, color=color, fill=fill, thickness=thickness, parent=self.tag)

    def draw_text(self, center: Point, text: str, size: int, color: Color) -> None:
        x, y = self._at(center)
        tw = len(text) * size * 0.5
        dpg.draw_text((x - tw * 0.5, y - size * 0.5), text, color=color, size=size, parent=self.tag)


class AppState:
    def __init__(self, config: GraphConfig = DEFAULT_CONFIG):
        self.config = config
        self.canvas_tag = "canvas_drawlist"
        self.model = GraphModel.from_config(config)
        self.positions = compute_positions(config.node_count, config.layout_radius)
        self.renderer = GraphRenderer(self.positions, config)
        self.toggle = ToggleController(toggle_key=dpg.mvKey_Spacebar)
        self.surface = DrawlistSurface(self.canvas_tag, config.canvas_size)

state: Optional[AppState] = None

def redraw_canvas():
    dpg.delete_item(state.canvas_tag, children_only=True)
    w, h = state.config.canvas_size
    dpg.draw_rectangle((0, 0), (w, h), color=state.config.background,
                       fill=state.config.background, parent=state.canvas_tag)
    state.renderer.render(state.surface, state.model, state.toggle.directed)

# ---------------------- Callbacks ----------------------

def on_key_press(sender, app_data):
    if state.toggle.handle_key(app_data):
        mode = "Directed" if state.toggle.directed else "Undirected"
        dpg.set_value("mode_text", f"Mode: {mode} (space to toggle)")

# ---------------------- UI Build ----------------------

def build_ui():
    cfg = state.config
    w, h = cfg.canvas_size
    dpg.create_context()
    dpg.create_viewport(title=cfg.window_title, width=w + 20, height=h + 60)

    with dpg.window(
        tag="canvas_window",
        label=cfg.window_title,
        no_title_bar=True,
        no_move=True,
        no_resize=True,
        no_collapse=True,
        no_close=True
    ):
        dpg.add_text("Mode: Directed (space to toggle)", tag="mode_text")
        dpg.add_drawlist(width=w, height=h, tag=state.canvas_tag)
        with dpg.handler_registry():
            dpg.add_key_press_handler(callback=on_key_press)
    dpg.set_primary_window("canvas_window", True)

    dpg.setup_dearpygui()
    dpg.show_viewport()
    logger.info("Viewport %dx%d shown", w, h)

    while dpg.is_dearpygui_running():
        redraw_canvas()
        dpg.render_dearpygui_frame()
    dpg.destroy_context()


def main():
    global state
    logging.basicConfig(
        level=os.environ.get("CIRCLE_GRAPH_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    state = AppState()
    run_startup_report(state.model, state.config)
    build_ui()


if __name__ == "__main__":
    main()
