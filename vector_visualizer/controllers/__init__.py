# vector_visualizer/controllers/__init__.py
"""
Pacote que contém os controladores do visualizador.

Controladores são responsáveis por:
- Converter coordenadas entre os espaços de mundo, recorte e canvas.
- Gerenciar a lógica de interação do usuário (arrastos, controles deslizantes).

Controladores disponíveis:
- TransformPipeline: Conversões 2D (mundo <-> canvas) e 3D (mundo -> recorte -> canvas).
- DragController: Mantém a sessão de arrasto ativa (no máximo uma).
- SliderController: Controles deslizantes imediatos da cena 3D.
"""

from .transform_pipeline import TransformPipeline, Viewport2D
from .drag_controller import DragController
from .slider_controller import SliderController

__all__ = [
    "TransformPipeline",
    "Viewport2D",
    "DragController",
    "SliderController",
]
