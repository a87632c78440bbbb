# vector_visualizer/utils/transformations_3d.py
import numpy as np
import math
from typing import List, Tuple
from PyQt5.QtGui import QVector3D

EPSILON = 1e-9

# Plano de recorte próximo padrão da câmera 3D
DEFAULT_NEAR_PLANE = 0.1


def create_identity_matrix_3d() -> np.ndarray:
    return np.identity(4, dtype=float)


def compute_unit_sphere_coords(azimuthal: float, polar: float) -> np.ndarray:
    """
    Converte coordenadas esféricas (ângulos em radianos) em um ponto da esfera unitária.

    O eixo polar é +Y, de modo que polar=0 aponta para cima.
    """
    sin_p = math.sin(polar)
    return np.array(
        [sin_p * math.cos(azimuthal), math.cos(polar), sin_p * math.sin(azimuthal)],
        dtype=float,
    )


def apply_transformation_3d(
    vertices: List[Tuple[float, float, float]], matrix: np.ndarray
) -> List[Tuple[float, float, float]]:
    if not vertices:
        return []
    vertex_array = np.array(vertices, dtype=float)
    homogeneous_coords = np.hstack(
        [vertex_array, np.ones((len(vertices), 1), dtype=float)]
    )
    transformed_h = matrix @ homogeneous_coords.T
    transformed_h = transformed_h.T
    w_coords = transformed_h[:, 3]
    w_divisor = np.where(np.abs(w_coords) < EPSILON, 1.0, w_coords)
    transformed_cartesian = transformed_h[:, :3] / w_divisor[:, np.newaxis]
    return [tuple(coord) for coord in transformed_cartesian]


def create_view_matrix(eye: QVector3D, target: QVector3D, vup: QVector3D) -> np.ndarray:
    """
    Cria a matriz de visão (look-at) da câmera em `eye` olhando para `target`.

    Retorna a identidade se o olho coincidir com o alvo.
    """
    if (eye - target).lengthSquared() < EPSILON:
        return np.identity(4, dtype=float)
    z_axis_cam = (eye - target).normalized()
    # Se vup for paralelo à direção de visão, x fica nulo (mesmo comportamento do gl-matrix)
    x_axis_cam = QVector3D.crossProduct(vup, z_axis_cam).normalized()
    y_axis_cam = QVector3D.crossProduct(z_axis_cam, x_axis_cam)
    R_view = np.array(
        [
            [x_axis_cam.x(), x_axis_cam.y(), x_axis_cam.z(), 0.0],
            [y_axis_cam.x(), y_axis_cam.y(), y_axis_cam.z(), 0.0],
            [z_axis_cam.x(), z_axis_cam.y(), z_axis_cam.z(), 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=float,
    )
    T_view = np.array(
        [
            [1.0, 0.0, 0.0, -eye.x()],
            [0.0, 1.0, 0.0, -eye.y()],
            [0.0, 0.0, 1.0, -eye.z()],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=float,
    )
    view_matrix = R_view @ T_view
    return view_matrix


def create_perspective_projection_matrix(
    fov_y_degrees: float, aspect_ratio: float, near: float, far: float
) -> np.ndarray:
    """
    Cria a matriz de projeção perspectiva (convenção OpenGL, NDC em [-1, 1]³).

    Args:
        fov_y_degrees: Campo de visão vertical em graus.
        aspect_ratio: Largura / altura.
        near: Distância do plano próximo.
        far: Distância do plano distante. `math.inf` gera a matriz de plano
             distante infinito.

    Returns:
        np.ndarray: Matriz 4x4. Identidade se os parâmetros forem degenerados.
        Em 180 graus tan(fov/2) é finito em ponto flutuante, então x e y
        ficam com escala próxima de zero.
    """
    if (
        aspect_ratio <= EPSILON
        or abs(near - far) < EPSILON
        or not (EPSILON < fov_y_degrees <= 180.0)
    ):
        return np.identity(4, dtype=float)
    tan_half_fov_y = math.tan(math.radians(fov_y_degrees) / 2.0)
    m = np.zeros((4, 4), dtype=float)
    m[0, 0] = 1.0 / (aspect_ratio * tan_half_fov_y)
    m[1, 1] = 1.0 / tan_half_fov_y
    m[3, 2] = -1.0
    if math.isinf(far):
        # Limite de far -> infinito
        m[2, 2] = -1.0
        m[2, 3] = -2.0 * near
    else:
        m[2, 2] = (far + near) / (near - far)
        m[2, 3] = (2.0 * far * near) / (near - far)
    return m


def invert_matrix(matrix: np.ndarray) -> np.ndarray:
    """Inverte uma matriz 4x4. Matrizes singulares retornam a identidade."""
    try:
        return np.linalg.inv(matrix)
    except np.linalg.LinAlgError:
        print("Aviso: Matriz singular não pode ser invertida. Usando identidade.")
        return np.identity(4, dtype=float)


def compute_frustum_corners(
    fov_y_degrees: float,
    aspect_ratio: float,
    far: float,
    cube_lerp: float,
    cube_scale: float = 5.0,
) -> Tuple[np.ndarray, List[Tuple[float, float, float]]]:
    """
    Calcula os oito cantos do tronco de visão de uma câmera de demonstração.

    A projeção é construída com planos negativos (near=-2, far=-far) e invertida;
    os termos de escala x/y da inversa são negados para que o tronco se abra
    ao longo de +Z. Cada canto é interpolado por `cube_lerp` em direção ao
    canto correspondente de uma caixa (cube_scale*aspect, cube_scale, cube_scale),
    ilustrando a divisão perspectiva.

    Returns:
        Tuple: (matriz de projeção, cantos na ordem
                n00, n10, n01, n11, f00, f10, f01, f11).
    """
    projection = create_perspective_projection_matrix(
        fov_y_degrees, aspect_ratio, -2.0, -far
    )
    inverse = invert_matrix(projection)
    inverse[0, 0] *= -1.0
    inverse[1, 1] *= -1.0

    ndc_corners = [
        (x, y, z) for z in (-1.0, 1.0) for y in (-1.0, 1.0) for x in (-1.0, 1.0)
    ]
    frustum_corners = apply_transformation_3d(ndc_corners, inverse)

    corners = []
    for (x, y, z), corner in zip(ndc_corners, frustum_corners):
        cube_corner = np.array(
            [x * cube_scale * aspect_ratio, y * cube_scale, z * cube_scale],
            dtype=float,
        )
        lerped = np.array(corner, dtype=float) + (cube_corner - corner) * cube_lerp
        corners.append(tuple(lerped))
    return projection, corners
