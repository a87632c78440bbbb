# vector_visualizer/view/__init__.py
"""
Pacote que contém a camada de exibição Qt.

- PainterCanvas: Primitivas de desenho sobre QPainter.
- VisualizerView: Janela que recebe a entrada e executa os quadros.
"""

from .painter_canvas import PainterCanvas
from .main_view import VisualizerView

__all__ = [
    "PainterCanvas",
    "VisualizerView",
]
