"""Canvas falso que registra as chamadas de desenho, para testes sem janela."""

from typing import Any, List, Tuple


class RecordingCanvas:
    def __init__(self, width: float = 800.0, height: float = 800.0, device_pixel_ratio: float = 2.0):
        self.width = float(width)
        self.height = float(height)
        self.device_pixel_ratio = device_pixel_ratio
        self.calls: List[Tuple[str, tuple, dict]] = []

    def _record(self, name: str, *args: Any, **kwargs: Any):
        self.calls.append((name, args, kwargs))

    def get_size(self, size: float) -> float:
        return size * self.device_pixel_ratio / 2.0

    def clear_screen(self, color):
        self._record("clear_screen", color)

    def draw_point(self, pos, color="black", size=8):
        self._record("draw_point", pos, color, size)

    def draw_circle(self, pos, radius, color="black", size=8):
        self._record("draw_circle", pos, radius, color, size)

    def draw_line(self, a, b, color="black", line_width=2):
        self._record("draw_line", a, b, color, line_width)

    def draw_arrow(self, a, b, color="black", line_width=2):
        self._record("draw_arrow", a, b, color, line_width)

    def draw_grid_plane(self, center, basis_x, basis_y, grid_size, cell_count, color="black", line_width=4):
        self._record("draw_grid_plane", center, basis_x, basis_y, grid_size, cell_count, color, line_width)

    def fill_polygon(self, points, color):
        self._record("fill_polygon", list(points), color)

    def fill_rect(self, x, y, width, height, color):
        self._record("fill_rect", x, y, width, height, color)

    def stroke_rect(self, x, y, width, height, color, line_width):
        self._record("stroke_rect", x, y, width, height, color, line_width)

    def draw_text(self, pos, text, color, point_size, align="center", baseline="alphabetic"):
        self._record("draw_text", pos, text, color, point_size, align=align, baseline=baseline)

    # --- Consultas ---
    def names(self) -> List[str]:
        return [name for name, _, _ in self.calls]

    def calls_to(self, name: str) -> List[tuple]:
        return [args for call_name, args, _ in self.calls if call_name == name]

    def texts(self) -> List[str]:
        return [args[1] for args in self.calls_to("draw_text")]
