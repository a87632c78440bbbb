# vector_visualizer/controllers/transform_pipeline.py
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
from PyQt5.QtGui import QVector3D

from ..state_manager import CameraState3D
from ..utils import clipping as clp
from ..utils import transformations_3d as tf3d
from ..utils.scalar_math import VectorLike, as_vector


@dataclass(frozen=True)
class Viewport2D:
    """Quadrado centralizado no canvas onde o mundo 2D [-1, 1]² é desenhado."""

    width: float = 0.0
    height: float = 0.0
    offset_x: float = 0.0
    offset_y: float = 0.0

    @classmethod
    def centered_square(cls, canvas_width: float, canvas_height: float) -> "Viewport2D":
        side = min(canvas_width, canvas_height)
        return cls(
            width=side,
            height=side,
            offset_x=max((canvas_width - side) / 2.0, 0.0),
            offset_y=max((canvas_height - side) / 2.0, 0.0),
        )


class TransformPipeline:
    """
    Converte coordenadas entre os espaços de mundo, recorte e canvas.

    Modo 2D: o mundo é o quadrado [-1, 1]², mapeado no Viewport2D com +Y para cima.
    Modo 3D: câmera perspectiva orbitando a origem; o espaço de recorte é
    mapeado no canvas inteiro.

    begin_frame_2d/begin_frame_3d devem ser chamados a cada quadro antes das
    conversões do respectivo modo.
    """

    WORLD_UP = QVector3D(0.0, 1.0, 0.0)
    WORLD_ORIGIN = QVector3D(0.0, 0.0, 0.0)

    def __init__(self):
        self._canvas_width: float = 0.0
        self._canvas_height: float = 0.0
        self._viewport_2d: Viewport2D = Viewport2D()

        self._view_from_world: np.ndarray = tf3d.create_identity_matrix_3d()
        self._clip_from_view: np.ndarray = tf3d.create_identity_matrix_3d()
        self._clip_from_world: np.ndarray = tf3d.create_identity_matrix_3d()

    # --- Getters ---
    def viewport_2d(self) -> Viewport2D:
        return self._viewport_2d

    def canvas_size(self) -> Tuple[float, float]:
        return (self._canvas_width, self._canvas_height)

    def view_from_world(self) -> np.ndarray:
        return self._view_from_world.copy()

    def clip_from_view(self) -> np.ndarray:
        return self._clip_from_view.copy()

    def clip_from_world(self) -> np.ndarray:
        return self._clip_from_world.copy()

    # --- Modo 2D ---
    def begin_frame_2d(self, canvas_width: float, canvas_height: float):
        """Recalcula o viewport quadrado centralizado a partir do tamanho do canvas."""
        self._canvas_width = float(canvas_width)
        self._canvas_height = float(canvas_height)
        self._viewport_2d = Viewport2D.centered_square(
            self._canvas_width, self._canvas_height
        )

    def world_to_canvas(self, v: VectorLike) -> np.ndarray:
        vp = self._viewport_2d
        x = (v[0] * 0.5 + 0.5) * vp.width + vp.offset_x
        y = (-v[1] * 0.5 + 0.5) * vp.height + vp.offset_y
        return np.array([x, y], dtype=float)

    def canvas_to_world(self, v: VectorLike) -> np.ndarray:
        """Inverso exato de world_to_canvas. Viewport vazio mapeia para a origem."""
        vp = self._viewport_2d
        if vp.width <= 0.0 or vp.height <= 0.0:
            return np.zeros(2, dtype=float)
        x = ((v[0] - vp.offset_x) / vp.width) * 2.0 - 1.0
        y = -(((v[1] - vp.offset_y) / vp.height) * 2.0 - 1.0)
        return np.array([x, y], dtype=float)

    # --- Modo 3D ---
    def begin_frame_3d(
        self, camera: CameraState3D, canvas_width: float, canvas_height: float
    ):
        """
        Constrói as matrizes de projeção e visão para a câmera.

        O olho fica em unit_sphere(latitude, longitude) * distance, olhando para a
        origem com +Y para cima.
        """
        self._canvas_width = float(canvas_width)
        self._canvas_height = float(canvas_height)

        aspect = camera.aspect
        if aspect is None:
            aspect = (
                self._canvas_width / self._canvas_height
                if self._canvas_height > 0.0
                else 1.0
            )
        self._clip_from_view = tf3d.create_perspective_projection_matrix(
            camera.fov_y_degrees, aspect, tf3d.DEFAULT_NEAR_PLANE, camera.far_plane
        )

        eye = (
            tf3d.compute_unit_sphere_coords(camera.latitude, camera.longitude)
            * camera.distance
        )
        self._view_from_world = tf3d.create_view_matrix(
            QVector3D(*eye), self.WORLD_ORIGIN, self.WORLD_UP
        )
        self._clip_from_world = self._clip_from_view @ self._view_from_world

    def world_to_clip(self, v: VectorLike) -> np.ndarray:
        """Retorna a posição homogênea (x, y, z, w) no espaço de recorte."""
        world_h = np.append(as_vector(v, 3), 1.0)
        return self._clip_from_world @ world_h

    def clip_to_canvas(self, clip_position: VectorLike) -> np.ndarray:
        """
        Divisão perspectiva e mapeamento de NDC para pixels do canvas.

        Returns:
            np.ndarray: (x, y, z_ndc). z_ndc é usado para o teste de profundidade.
        """
        clip_w = clip_position[3]
        if abs(clip_w) < tf3d.EPSILON:
            clip_w = 1.0
        clip_x = clip_position[0] / clip_w
        clip_y = clip_position[1] / clip_w
        clip_z = clip_position[2] / clip_w

        # De -1...1 para 0...tamanho
        canvas_x = (clip_x + 1.0) * self._canvas_width / 2.0
        canvas_y = (clip_y + 1.0) * self._canvas_height / 2.0

        # No espaço de recorte +Y aponta para cima; no canvas, para baixo.
        canvas_y_flipped = self._canvas_height - canvas_y

        return np.array([canvas_x, canvas_y_flipped, clip_z], dtype=float)

    @staticmethod
    def is_in_depth_range(canvas_position: np.ndarray) -> bool:
        """Falso para pontos atrás da câmera ou além do plano distante."""
        return -1.0 <= canvas_position[2] <= 1.0

    def project_point_3d(self, world_position: VectorLike) -> Optional[np.ndarray]:
        """
        Projeta um ponto 3D no canvas.

        Returns:
            Optional[np.ndarray]: (x, y) no canvas, ou None se não for visível.
        """
        canvas_position = self.clip_to_canvas(self.world_to_clip(world_position))
        if not self.is_in_depth_range(canvas_position):
            return None
        return canvas_position[:2]

    def project_segment_3d(
        self, world_a: VectorLike, world_b: VectorLike
    ) -> Optional[Tuple[np.ndarray, np.ndarray]]:
        """
        Projeta um segmento 3D no canvas, recortando-o no plano próximo.

        Returns:
            Optional[Tuple]: ((xa, ya), (xb, yb)) no canvas, ou None se o
            segmento estiver inteiramente atrás do plano próximo.
        """
        clip_a = self.world_to_clip(world_a)
        clip_b = self.world_to_clip(world_b)

        if not clp.clip_to_plane(clip_a, clip_b, clp.NEAR_CLIP_PLANE):
            return None

        canvas_a = self.clip_to_canvas(clip_a)
        canvas_b = self.clip_to_canvas(clip_b)
        return canvas_a[:2], canvas_b[:2]
