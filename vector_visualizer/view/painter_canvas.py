# vector_visualizer/view/painter_canvas.py
import math
from typing import Sequence, Union

import numpy as np
from PyQt5.QtCore import Qt, QPointF, QRectF
from PyQt5.QtGui import QBrush, QColor, QFont, QFontMetricsF, QPainter, QPen, QPolygonF

ColorLike = Union[str, QColor]


def to_qcolor(color: ColorLike) -> QColor:
    """Converte nomes ("black") e hexadecimais ("#666", "#ffa500") em QColor."""
    if isinstance(color, QColor):
        return color
    qcolor = QColor(color)
    if not qcolor.isValid():
        print(f"Aviso: Cor inválida '{color}'. Usando preto.")
        return QColor(Qt.black)
    return qcolor


class PainterCanvas:
    """
    Primitivas de desenho em pixels do canvas sobre um QPainter.

    Os tamanhos (espessuras, raios, fontes) foram definidos para uma razão de
    pixels do dispositivo igual a 2; get_size ajusta-os para a tela atual.
    """

    FONT_FAMILY = "Sans Serif"
    ARROW_TIP_LENGTH = 20.0  # pixels

    def __init__(
        self,
        painter: QPainter,
        width: float,
        height: float,
        device_pixel_ratio: float = 2.0,
    ):
        self._painter = painter
        self._width = float(width)
        self._height = float(height)
        self._device_pixel_ratio = float(device_pixel_ratio)
        self._painter.setRenderHints(QPainter.Antialiasing | QPainter.TextAntialiasing)

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    def get_size(self, size: float) -> float:
        return size * self._device_pixel_ratio / 2.0

    def _pen(self, color: ColorLike, line_width: float) -> QPen:
        pen = QPen(to_qcolor(color), max(self.get_size(line_width), 0.0))
        pen.setCapStyle(Qt.FlatCap)
        return pen

    # --- Primitivas ---
    def clear_screen(self, color: ColorLike):
        self._painter.fillRect(
            QRectF(0.0, 0.0, self._width, self._height), to_qcolor(color)
        )

    def draw_point(self, canvas_position, color: ColorLike = "black", size: float = 8):
        """Disco preenchido centrado na posição, com raio size / 2."""
        radius = self.get_size(size / 2.0)
        self._painter.setPen(Qt.NoPen)
        self._painter.setBrush(QBrush(to_qcolor(color)))
        self._painter.drawEllipse(
            QPointF(canvas_position[0], canvas_position[1]), radius, radius
        )

    def draw_circle(
        self, canvas_position, radius: float, color: ColorLike = "black", size: float = 8
    ):
        """Circunferência de raio `radius` (pixels) com espessura `size`."""
        self._painter.setPen(self._pen(color, size))
        self._painter.setBrush(Qt.NoBrush)
        self._painter.drawEllipse(
            QPointF(canvas_position[0], canvas_position[1]), radius, radius
        )

    def draw_line(
        self, canvas_a, canvas_b, color: ColorLike = "black", line_width: float = 2
    ):
        self._painter.setPen(self._pen(color, line_width))
        self._painter.drawLine(
            QPointF(canvas_a[0], canvas_a[1]), QPointF(canvas_b[0], canvas_b[1])
        )

    def draw_arrow(
        self, canvas_a, canvas_b, color: ColorLike = "black", line_width: float = 2
    ):
        """Linha de A até B com uma ponta triangular em B."""
        self.draw_line(canvas_a, canvas_b, color, line_width)

        dx = canvas_b[0] - canvas_a[0]
        dy = canvas_b[1] - canvas_a[1]
        length = math.hypot(dx, dy)
        if length < 1e-9:
            return
        dx, dy = dx / length, dy / length

        arrow_size = self.get_size(line_width) * 2.0
        bx, by = canvas_b[0], canvas_b[1]
        head = QPolygonF(
            [
                QPointF(bx - dy * arrow_size, by + dx * arrow_size),
                QPointF(bx + dx * self.ARROW_TIP_LENGTH, by + dy * self.ARROW_TIP_LENGTH),
                QPointF(bx + dy * arrow_size, by - dx * arrow_size),
                QPointF(bx, by),
            ]
        )
        self.fill_polygon(head, color)

    def draw_grid_plane(
        self,
        canvas_center,
        basis_x,
        basis_y,
        grid_size: float,
        cell_count: int,
        color: ColorLike = "black",
        line_width: float = 4,
    ):
        """Grade quadrada de `cell_count` células sobre as bases dadas (em pixels)."""
        center = np.asarray(canvas_center, dtype=float)
        basis_x = np.asarray(basis_x, dtype=float)
        basis_y = np.asarray(basis_y, dtype=float)
        half_grid_size = grid_size * 0.5

        for i in range(cell_count + 1):
            t = (i / cell_count) * 2.0 - 1.0

            # Linhas ao longo da base X ("horizontais")
            a = center - basis_x * half_grid_size + basis_y * (t * half_grid_size)
            b = center + basis_x * half_grid_size + basis_y * (t * half_grid_size)
            self.draw_line(a, b, color, line_width)

            # Linhas ao longo da base Y ("verticais")
            a = center - basis_y * half_grid_size + basis_x * (t * half_grid_size)
            b = center + basis_y * half_grid_size + basis_x * (t * half_grid_size)
            self.draw_line(a, b, color, line_width)

    def fill_polygon(self, canvas_points: Union[QPolygonF, Sequence], color: ColorLike):
        if isinstance(canvas_points, QPolygonF):
            polygon = canvas_points
        else:
            polygon = QPolygonF([QPointF(p[0], p[1]) for p in canvas_points])
        self._painter.setPen(Qt.NoPen)
        self._painter.setBrush(QBrush(to_qcolor(color)))
        self._painter.drawPolygon(polygon)

    def fill_rect(self, x: float, y: float, width: float, height: float, color: ColorLike):
        self._painter.fillRect(QRectF(x, y, width, height), to_qcolor(color))

    def stroke_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        color: ColorLike,
        line_width: float,
    ):
        pen = QPen(to_qcolor(color), line_width)
        pen.setJoinStyle(Qt.MiterJoin)
        self._painter.setPen(pen)
        self._painter.setBrush(Qt.NoBrush)
        self._painter.drawRect(QRectF(x, y, width, height))

    def draw_text(
        self,
        canvas_position,
        text: str,
        color: ColorLike,
        point_size: float,
        align: str = "center",
        baseline: str = "alphabetic",
    ):
        """
        Desenha texto ancorado em `canvas_position`.

        Args:
            align: "left", "center" ou "right" (posição horizontal da âncora).
            baseline: "alphabetic", "middle" ou "bottom" (posição vertical da âncora).
        """
        font = QFont(self.FONT_FAMILY)
        font.setPointSizeF(max(point_size, 1.0))
        metrics = QFontMetricsF(font)

        x, y = float(canvas_position[0]), float(canvas_position[1])
        text_width = metrics.horizontalAdvance(text)
        if align == "center":
            x -= text_width / 2.0
        elif align == "right":
            x -= text_width

        if baseline == "middle":
            y += (metrics.ascent() - metrics.descent()) / 2.0
        elif baseline == "bottom":
            y -= metrics.descent()

        self._painter.setFont(font)
        self._painter.setPen(QPen(to_qcolor(color)))
        self._painter.drawText(QPointF(x, y), text)
