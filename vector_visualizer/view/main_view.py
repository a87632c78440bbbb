# vector_visualizer/view/main_view.py
from typing import Optional

from PyQt5.QtWidgets import QWidget
from PyQt5.QtCore import Qt, QTimer, QSize
from PyQt5.QtGui import (
    QMouseEvent,
    QWheelEvent,
    QPainter,
    QKeyEvent,
    QCloseEvent,
    QFocusEvent,
    QPaintEvent,
    QContextMenuEvent,
)

from ..input_state import InputState
from ..state_manager import Demo, StateManager
from ..visualizer import Visualizer
from .painter_canvas import PainterCanvas


class VisualizerView(QWidget):
    """
    Janela do visualizador.

    Converte eventos Qt em InputState, agenda um quadro a cada FRAME_INTERVAL_MS
    e, em paintEvent, entrega o instantâneo da entrada e um PainterCanvas ao
    Visualizer.
    """

    FRAME_INTERVAL_MS = 16
    WHEEL_STEP = 120.0  # angleDelta de um "clique" da roda
    WINDOW_TITLE = "Visualizador de Vetores"
    DEFAULT_SIZE = QSize(1280, 800)

    DEMO_TITLES = {
        Demo.DOT_PRODUCT: "Produto Escalar",
        Demo.DOT_PRODUCT_NORMAL: "Produto Escalar com Normal",
        Demo.SURFACE_NORMAL: "Normal da Superfície",
        Demo.CAMERA_FRUSTUM: "Tronco de Visão da Câmera",
        Demo.CAMERA_FRUSTUM_PROJECTION_MATRIX: "Matriz de Projeção",
        Demo.POINT_LIGHT: "Luz Pontual",
        Demo.POINT_LIGHT_PIXEL: "Luz Pontual por Pixel",
    }

    # Máscara de botões no formato de FrameInput.mouse_buttons
    _BUTTON_BITS = (
        (Qt.LeftButton, 1),
        (Qt.RightButton, 2),
        (Qt.MiddleButton, 4),
    )

    def __init__(self, state_manager: StateManager, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._state_manager = state_manager
        self._visualizer = Visualizer(state_manager)
        self._input_state = InputState()

        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.StrongFocus)
        self.setAttribute(Qt.WA_OpaquePaintEvent, True)
        self.resize(self.DEFAULT_SIZE)

        self._state_manager.demo_changed.connect(self._update_window_title)
        self._update_window_title(self._state_manager.demo())

        self._frame_timer = QTimer(self)
        self._frame_timer.setInterval(self.FRAME_INTERVAL_MS)
        self._frame_timer.timeout.connect(self.update)
        self._frame_timer.start()

    # --- Getters ---
    def visualizer(self) -> Visualizer:
        return self._visualizer

    def input_state(self) -> InputState:
        return self._input_state

    @classmethod
    def buttons_to_mask(cls, buttons: Qt.MouseButtons) -> int:
        mask = 0
        for button, bit in cls._BUTTON_BITS:
            if buttons & button:
                mask |= bit
        return mask

    def _update_window_title(self, demo: Demo):
        title = self.DEMO_TITLES.get(demo, "")
        self.setWindowTitle(f"{self.WINDOW_TITLE} - {title}" if title else self.WINDOW_TITLE)

    # --- Quadro ---
    def paintEvent(self, event: QPaintEvent) -> None:
        """Executa um quadro: instantâneo da entrada, cena e desenho."""
        painter = QPainter(self)
        try:
            canvas = PainterCanvas(
                painter, self.width(), self.height(), self.devicePixelRatioF()
            )
            frame_input = self._input_state.snapshot(canvas.width, canvas.height)
            self._visualizer.run_frame(frame_input, canvas)
        finally:
            painter.end()
            self._input_state.end_frame()

    # --- Eventos de entrada ---
    def _record_mouse(self, event: QMouseEvent) -> None:
        pos = event.localPos()
        self._input_state.update_mouse(
            pos.x(), pos.y(), self.buttons_to_mask(event.buttons())
        )

    def mousePressEvent(self, event: QMouseEvent) -> None:
        self._record_mouse(event)
        event.accept()

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        self._record_mouse(event)
        event.accept()

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        self._record_mouse(event)
        event.accept()

    def wheelEvent(self, event: QWheelEvent) -> None:
        """Acumula passos da roda; positivo = em direção ao usuário."""
        self._input_state.add_wheel(-event.angleDelta().y() / self.WHEEL_STEP)
        event.accept()

    def keyPressEvent(self, event: QKeyEvent) -> None:
        self._input_state.key_pressed(event.key(), event.isAutoRepeat())
        event.accept()

    def keyReleaseEvent(self, event: QKeyEvent) -> None:
        if event.isAutoRepeat():
            event.accept()
            return
        self._input_state.key_released(event.key())
        event.accept()

    def contextMenuEvent(self, event: QContextMenuEvent) -> None:
        # Botão direito é usado para orbitar a câmera
        event.ignore()

    def focusOutEvent(self, event: QFocusEvent) -> None:
        self._input_state.release_all()
        super().focusOutEvent(event)

    def closeEvent(self, event: QCloseEvent) -> None:
        self._frame_timer.stop()
        self._state_manager.save_state()
        super().closeEvent(event)
