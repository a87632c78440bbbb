# vector_visualizer/utils/scalar_math.py
import math
from typing import Sequence, Union

import numpy as np
from PyQt5.QtGui import QColor

# Alias para clareza
Vector2 = np.ndarray
VectorLike = Union[np.ndarray, Sequence[float]]

TAU = math.pi * 2.0

# Constante pequena para comparações de ponto flutuante
EPSILON = 1e-9

# Tolerâncias do teste raio x segmento (quase paralelo e limites do segmento)
PARALLEL_TOLERANCE = 0.01
SEGMENT_TOLERANCE = 0.01

# Valor retornado quando não há interseção
NO_INTERSECTION = -1.0


# --- Funções escalares ---


def lerp(a: float, b: float, t: float) -> float:
    """Interpolação linear entre a e b (t=0 -> a, t=1 -> b)."""
    return (b - a) * t + a


def inverse_lerp(a: float, b: float, v: float) -> float:
    """
    Inverso de lerp: retorna t tal que lerp(a, b, t) == v.

    Returns:
        float: Parâmetro t. Retorna 0.0 se a e b forem (quase) iguais.
    """
    if abs(b - a) < EPSILON:
        return 0.0
    return (v - a) / (b - a)


def clamp(x: float, min_value: float, max_value: float) -> float:
    return min(max_value, max(min_value, x))


def saturate(x: float) -> float:
    """Limita x ao intervalo [0, 1]."""
    return clamp(x, 0.0, 1.0)


# --- Funções vetoriais 2D ---


def vec2(x: float, y: float) -> Vector2:
    return np.array([x, y], dtype=float)


def as_vector(v: VectorLike, size: int) -> np.ndarray:
    """
    Converte v para um array NumPy float de tamanho `size`.

    Raises:
        ValueError: Se v não tiver exatamente `size` componentes.
    """
    arr = np.asarray(v, dtype=float)
    if arr.shape != (size,):
        raise ValueError(f"Esperado vetor de tamanho {size}, recebido {arr.shape}")
    return arr


def normalize(v: VectorLike) -> np.ndarray:
    """Retorna uma cópia normalizada de v. Vetores nulos permanecem nulos."""
    arr = np.array(v, dtype=float)
    length = np.linalg.norm(arr)
    if length < EPSILON:
        return np.zeros_like(arr)
    return arr / length


def cross_2d(a: VectorLike, b: VectorLike) -> float:
    """Produto vetorial 2D (componente z de a x b)."""
    return a[0] * b[1] - b[0] * a[1]


def perpendicular(v: VectorLike) -> Vector2:
    """Rotaciona v em 90 graus no sentido anti-horário: (-y, x)."""
    return vec2(-v[1], v[0])


def point_to_segment_distance(a0: VectorLike, a1: VectorLike, p: VectorLike) -> float:
    """
    Distância euclidiana do ponto p ao segmento [a0, a1].

    A projeção de p sobre a reta é limitada às extremidades do segmento.
    Um segmento de comprimento zero mede a distância até a0.
    """
    a0 = as_vector(a0, 2)
    a = as_vector(a1, 2) - a0
    p0 = as_vector(p, 2) - a0
    length_sq = float(np.dot(a, a))
    if length_sq < EPSILON:
        return float(np.linalg.norm(p0))
    t = saturate(float(np.dot(a, p0)) / length_sq)
    return float(np.linalg.norm(p0 - a * t))


def ray_vs_segment_parameter(
    a0: VectorLike, a1: VectorLike, b0: VectorLike, b1: VectorLike
) -> float:
    """
    Interseção do raio b0->b1 com o segmento [a0, a1].

    Args:
        a0, a1: Extremidades do segmento (superfície).
        b0, b1: Origem do raio e um segundo ponto que define seu comprimento.

    Returns:
        float: Parâmetro ao longo do raio (0 em b0, 1 em b1), ou NO_INTERSECTION
        se as retas forem (quase) paralelas, se a interseção estiver atrás do
        raio ou fora do segmento (com tolerância SEGMENT_TOLERANCE).
    """
    a0 = as_vector(a0, 2)
    b0 = as_vector(b0, 2)
    a = as_vector(a1, 2) - a0
    b = as_vector(b1, 2) - b0
    c = b0 - a0

    denom = cross_2d(a, b)
    if abs(denom) < PARALLEL_TOLERANCE:
        return NO_INTERSECTION  # colineares / paralelas

    ray_t = cross_2d(c, a) / denom
    segment_t = cross_2d(c, b) / denom
    if (
        ray_t < 0
        or segment_t < -SEGMENT_TOLERANCE
        or segment_t > 1.0 + SEGMENT_TOLERANCE
    ):
        return NO_INTERSECTION

    return float(ray_t)


# --- Cores ---


def color_lerp(color_a: str, color_b: str, t: float) -> QColor:
    """
    Interpola duas cores "#rrggbb" componente a componente.

    Returns:
        QColor: Cor interpolada (alfa opaco).
    """
    ca = QColor(color_a)
    cb = QColor(color_b)
    if not ca.isValid() or not cb.isValid():
        raise ValueError(f"Cores inválidas para interpolação: {color_a}, {color_b}")
    r = lerp(ca.red(), cb.red(), t)
    g = lerp(ca.green(), cb.green(), t)
    b = lerp(ca.blue(), cb.blue(), t)
    return QColor(int(round(r)), int(round(g)), int(round(b)))
