"""
Módulo que implementa o recorte (clipping) de segmentos em coordenadas homogêneas.

Os segmentos são recortados no espaço de recorte (após projeção x visão e
antes da divisão perspectiva) contra um único plano expresso como um vetor
de 4 componentes, de modo que dot(p, plano) é a distância com sinal do ponto
homogêneo p ao plano. Pontos com distância negativa estão "atrás" do plano.
"""

# vector_visualizer/utils/clipping.py
import numpy as np

# Plano próximo: z + w >= 0 (z_ndc >= -1)
NEAR_CLIP_PLANE = np.array([0.0, 0.0, 1.0, 1.0], dtype=float)


def clip_to_plane(
    clip_position_a: np.ndarray, clip_position_b: np.ndarray, plane: np.ndarray
) -> bool:
    """
    Recorta o segmento A-B contra o plano, modificando A e B IN PLACE.

    Args:
        clip_position_a: Extremidade A (x, y, z, w) no espaço de recorte.
        clip_position_b: Extremidade B (x, y, z, w) no espaço de recorte.
        plane: Normal do plano em 4 componentes, ex. NEAR_CLIP_PLANE.

    Returns:
        bool: False se o segmento estiver inteiramente atrás do plano (não
              deve ser desenhado), True caso contrário.
    """
    dot_a = float(np.dot(clip_position_a, plane))
    dot_b = float(np.dot(clip_position_b, plane))

    if dot_a < 0.0 and dot_b < 0.0:
        # Ambos atrás do plano.
        return False

    if dot_a == dot_b:
        # Paralelo ao plano e do lado visível: nada a recortar.
        return True

    t = dot_a / (dot_a - dot_b)
    if dot_a < 0.0:
        clip_position_a[:] = clip_position_a + (clip_position_b - clip_position_a) * t
    elif dot_b < 0.0:
        clip_position_b[:] = clip_position_a + (clip_position_b - clip_position_a) * t

    return True
