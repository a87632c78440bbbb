# vector_visualizer/scenes/__init__.py
"""
Pacote que contém as cenas de demonstração.

Cenas decidem o que desenhar a cada quadro, fazem o teste de acerto do
ponteiro, iniciam arrastos e usam o TransformPipeline para posicionar as
primitivas no canvas.

Cenas disponíveis:
- LightingScene: Demonstrações 2D (produto escalar, normal, luz pontual).
- FrustumScene: Demonstrações 3D (tronco de visão, matriz de projeção).
"""

from .lighting_scene import LightingScene, LightingFrameResult
from .frustum_scene import FrustumScene

__all__ = [
    "LightingScene",
    "LightingFrameResult",
    "FrustumScene",
]
