# vector_visualizer/models/__init__.py
"""
Pacote que contém os modelos de interação do visualizador.

Este pacote fornece os seguintes modelos:
- PositionDrag: Arrasto que translada um ponto 2D.
- NormalDrag: Arrasto que rotaciona uma direção 2D em torno de um pivô.
- DragSession: União dos dois tipos de sessão.
"""

from .drag import PositionDrag, NormalDrag, DragSession

__all__ = [
    "PositionDrag",
    "NormalDrag",
    "DragSession",
]
