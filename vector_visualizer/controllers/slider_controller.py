# vector_visualizer/controllers/slider_controller.py
from typing import Optional

import numpy as np
from PyQt5.QtGui import QColor

from ..utils.scalar_math import inverse_lerp, lerp, saturate, vec2


class SliderController:
    """
    Controles deslizantes imediatos desenhados sobre o canvas.

    Apenas um controle pode ser arrastado por vez (identificado pelo rótulo);
    o arrasto termina quando todos os botões do mouse são soltos.
    """

    TRACK_LENGTH = 200.0  # pixels
    TRACK_WIDTH = 8
    HANDLE_SIZE = 20
    HANDLE_SIZE_ACTIVE = 24
    HOVER_RADIUS = 24.0  # pixels
    LABEL_MARGIN = 24.0
    FONT_SIZE = 24

    TRACK_COLOR = "#ccc"
    HANDLE_COLOR = "#888"
    HANDLE_COLOR_ACTIVE = "#555"
    LABEL_COLOR = "#999"
    LABEL_COLOR_ACTIVE = "#333"
    VALUE_BACKGROUND = QColor(255, 255, 255, 178)

    def __init__(self):
        self._drag_label: Optional[str] = None

    def drag_label(self) -> Optional[str]:
        return self._drag_label

    def is_dragging(self) -> bool:
        return self._drag_label is not None

    def slider(
        self,
        canvas,
        anchor: np.ndarray,
        mouse: np.ndarray,
        mouse_buttons: int,
        min_value: float,
        max_value: float,
        value: float,
        label: str,
    ) -> float:
        """
        Desenha um controle e processa a interação do mouse neste quadro.

        Args:
            canvas: Canvas de desenho (coordenadas em pixels).
            anchor: Início da trilha no canvas.
            mouse: Posição do ponteiro no canvas.
            mouse_buttons: Máscara de botões pressionados.
            min_value, max_value: Intervalo do valor.
            value: Valor atual.
            label: Rótulo exibido (e identificador do arrasto).

        Returns:
            float: O valor, possivelmente alterado pelo arrasto.
        """
        track_min_x = float(anchor[0])
        track_max_x = track_min_x + self.TRACK_LENGTH
        track_y = float(anchor[1])

        t = inverse_lerp(min_value, max_value, value)
        handle_pos = vec2(lerp(track_min_x, track_max_x, t), track_y)
        handle_color = self.HANDLE_COLOR
        handle_size = self.HANDLE_SIZE
        draw_value = False

        canvas.draw_line(
            vec2(track_min_x, track_y),
            vec2(track_max_x, track_y),
            self.TRACK_COLOR,
            self.TRACK_WIDTH,
        )

        if self._drag_label == label:
            handle_size = self.HANDLE_SIZE_ACTIVE
            handle_color = self.HANDLE_COLOR_ACTIVE
            draw_value = True

            t = saturate(inverse_lerp(track_min_x, track_max_x, mouse[0]))
            value = lerp(min_value, max_value, t)
            handle_pos[0] = lerp(track_min_x, track_max_x, t)

            if not mouse_buttons:
                self._drag_label = None
        elif self._drag_label is None:
            if np.linalg.norm(np.asarray(mouse) - handle_pos) <= self.HOVER_RADIUS:
                handle_size = self.HANDLE_SIZE_ACTIVE
                draw_value = True

                if mouse_buttons:
                    self._drag_label = label

        canvas.draw_point(handle_pos, handle_color, handle_size)

        font_size = canvas.get_size(self.FONT_SIZE)
        if draw_value:
            canvas.fill_rect(
                handle_pos[0] - 40, handle_pos[1] - 60, 80, 40, self.VALUE_BACKGROUND
            )
            canvas.draw_text(
                vec2(handle_pos[0], handle_pos[1] - 28),
                f"{value:.2f}",
                self.LABEL_COLOR_ACTIVE,
                font_size,
            )

        label_color = (
            self.LABEL_COLOR_ACTIVE if self._drag_label == label else self.LABEL_COLOR
        )
        canvas.draw_text(
            vec2(track_min_x - self.LABEL_MARGIN, track_y),
            label,
            label_color,
            font_size,
            align="right",
            baseline="middle",
        )

        return value
