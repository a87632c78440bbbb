# vector_visualizer/scenes/frustum_scene.py
from typing import Sequence

import numpy as np
from PyQt5.QtGui import QColor

from ..controllers.slider_controller import SliderController
from ..controllers.transform_pipeline import TransformPipeline
from ..input_state import FrameInput
from ..state_manager import Demo, StateManager
from ..utils import transformations_3d as tf3d
from ..utils.scalar_math import vec2


class FrustumScene:
    """
    Demonstrações 3D: tronco de visão de uma câmera e sua matriz de projeção.

    A câmera do visualizador orbita a origem (arrastar com qualquer botão,
    roda para aproximar). Controles deslizantes ajustam o campo de visão, a
    proporção, o plano distante e a interpolação para o cubo da divisão
    perspectiva.
    """

    GRID_COLOR = "#ccc"
    GRID_SIZE = 100.0
    GRID_CELLS = 10
    GRID_LINE_WIDTH = 3
    FRUSTUM_COLOR = "black"
    FRUSTUM_LINE_WIDTH = 4
    PANEL_COLOR = QColor(255, 255, 255, 178)
    MATRIX_BORDER_COLOR = QColor(0x33, 0x33, 0x33, 0xCC)
    TEXT_COLOR = "#333"
    ZERO_TEXT_COLOR = "#aaa"
    FONT_SIZE = 24

    # (rótulo, atributo do estado, mínimo, máximo, y do mundo 2D)
    SLIDERS = (
        ("Field of View", "frustum_fovy", 15.0, 180.0, -0.70),
        ("Aspect Ratio", "frustum_aspect", 0.1, 3.0, -0.78),
        ("Far Plane", "frustum_far", 0.1, 100.0, -0.86),
        ("Perspective Divide", "frustum_cube_lerp", 0.0, 1.0, -0.94),
    )

    def __init__(
        self,
        state_manager: StateManager,
        pipeline: TransformPipeline,
        slider_controller: SliderController,
    ):
        self._state_manager = state_manager
        self._pipeline = pipeline
        self._sliders = slider_controller

    def update(self, frame_input: FrameInput, canvas) -> np.ndarray:
        """
        Executa um quadro da cena 3D.

        Returns:
            np.ndarray: A matriz de projeção do tronco exibido.
        """
        state = self._state_manager.state()

        camera = state.camera
        if frame_input.mouse_buttons and not self._sliders.is_dragging():
            camera = camera.orbited(frame_input.mouse_delta[0], frame_input.mouse_delta[1])
        camera = camera.zoomed(frame_input.mouse_wheel)
        self._state_manager.set_camera(camera)

        self._pipeline.begin_frame_3d(
            camera, frame_input.canvas_width, frame_input.canvas_height
        )

        self.draw_grid_plane_3d(
            canvas,
            np.zeros(3),
            np.array([1.0, 0.0, 0.0]),
            np.array([0.0, 0.0, 1.0]),
            self.GRID_SIZE,
            self.GRID_CELLS,
            self.GRID_COLOR,
            self.GRID_LINE_WIDTH,
        )

        projection, corners = tf3d.compute_frustum_corners(
            state.frustum_fovy,
            state.frustum_aspect,
            state.frustum_far,
            state.frustum_cube_lerp,
        )
        n00, n10, n01, n11, f00, f10, f01, f11 = corners

        quad_color = QColor(128, 200, 240, int(round(state.frustum_cube_lerp * 255)))
        self.draw_quad_fill_3d(canvas, (n00, n10, n11, n01), quad_color)

        edges = (
            (n00, n10), (n10, n11), (n11, n01), (n01, n00),
            (f00, f10), (f10, f11), (f11, f01), (f01, f00),
            (n00, f00), (n10, f10), (n11, f11), (n01, f01),
        )
        for a, b in edges:
            self.draw_line_3d(canvas, a, b, self.FRUSTUM_COLOR, self.FRUSTUM_LINE_WIDTH)

        self._draw_ui(frame_input, canvas, projection)
        return projection

    # --- Primitivas 3D ---
    def draw_line_3d(self, canvas, world_a, world_b, color, line_width: float = 2):
        projected = self._pipeline.project_segment_3d(world_a, world_b)
        if projected is None:
            return
        canvas.draw_line(projected[0], projected[1], color, line_width)

    def draw_quad_fill_3d(self, canvas, world_positions: Sequence, color: QColor):
        """Preenche um quadrilátero; omitido se algum vértice estiver atrás da câmera."""
        points = []
        for world_position in world_positions:
            clip_position = self._pipeline.world_to_clip(world_position)
            if clip_position[3] <= tf3d.EPSILON:
                return
            points.append(self._pipeline.clip_to_canvas(clip_position)[:2])
        canvas.fill_polygon(points, color)

    def draw_grid_plane_3d(
        self,
        canvas,
        center: np.ndarray,
        basis_x: np.ndarray,
        basis_y: np.ndarray,
        grid_size: float,
        cell_count: int,
        color,
        line_width: float = 4,
    ):
        half_grid_size = grid_size * 0.5

        for i in range(cell_count + 1):
            t = (i / cell_count) * 2.0 - 1.0

            # Linhas ao longo da base X ("horizontais")
            a = center - basis_x * half_grid_size + basis_y * (t * half_grid_size)
            b = center + basis_x * half_grid_size + basis_y * (t * half_grid_size)
            self.draw_line_3d(canvas, a, b, color, line_width)

            # Linhas ao longo da base Y ("verticais")
            a = center - basis_y * half_grid_size + basis_x * (t * half_grid_size)
            b = center + basis_y * half_grid_size + basis_x * (t * half_grid_size)
            self.draw_line_3d(canvas, a, b, color, line_width)

    # --- Interface ---
    def _draw_ui(self, frame_input: FrameInput, canvas, projection: np.ndarray):
        state = self._state_manager.state()
        pipeline = self._pipeline
        pipeline.begin_frame_2d(frame_input.canvas_width, frame_input.canvas_height)

        panel_position = pipeline.world_to_canvas(vec2(0.0, -0.75))
        canvas.fill_rect(
            0,
            panel_position[1] - 50,
            frame_input.canvas_width,
            frame_input.canvas_height,
            self.PANEL_COLOR,
        )

        for label, attribute, min_value, max_value, world_y in self.SLIDERS:
            value = self._sliders.slider(
                canvas,
                pipeline.world_to_canvas(vec2(0.0, world_y)),
                frame_input.mouse,
                frame_input.mouse_buttons,
                min_value,
                max_value,
                getattr(state, attribute),
                label,
            )
            setattr(state, attribute, value)

        if state.demo == Demo.CAMERA_FRUSTUM_PROJECTION_MATRIX:
            self._draw_projection_matrix(frame_input, canvas, projection)

    def _draw_projection_matrix(self, frame_input: FrameInput, canvas, matrix: np.ndarray):
        size = canvas.get_size
        mx = frame_input.canvas_width - size(500)
        my = size(100)
        canvas.fill_rect(mx, my, size(450), size(240), self.PANEL_COLOR)
        canvas.stroke_rect(
            mx, my, size(450), size(240), self.MATRIX_BORDER_COLOR, size(4)
        )

        font_size = size(self.FONT_SIZE)
        canvas.draw_text(
            vec2(mx, my - size(20)),
            "Projection Matrix",
            self.TEXT_COLOR,
            font_size,
            align="left",
        )

        # Leitura em ordem de colunas: cada linha da tela é uma coluna da matriz
        for row in range(4):
            for col in range(4):
                n = matrix[col, row]
                color = self.TEXT_COLOR if n != 0 else self.ZERO_TEXT_COLOR
                tx = mx + col * size(100) + size(110)
                ty = my + row * size(50) + size(65)
                canvas.draw_text(
                    vec2(tx, ty),
                    f"{n:.2f}",
                    color,
                    font_size,
                    align="right",
                    baseline="bottom",
                )
