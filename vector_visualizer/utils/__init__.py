# vector_visualizer/utils/__init__.py
"""
Pacote de utilitários do visualizador.

Contém módulos para:
- clipping: Recorte de segmentos contra um plano em coordenadas homogêneas.
- scalar_math: Funções escalares e vetoriais 2D (lerp, clamp, distâncias, interseções).
- transformations_3d: Matrizes de visão e projeção 3D.
"""

from . import clipping
from . import scalar_math
from . import transformations_3d

__all__ = [
    "clipping",
    "scalar_math",
    "transformations_3d",
]
