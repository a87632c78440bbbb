# vector_visualizer/scenes/lighting_scene.py
import math
from dataclasses import dataclass

import numpy as np
from PyQt5.QtGui import QColor

from ..controllers.drag_controller import DragController
from ..controllers.transform_pipeline import TransformPipeline
from ..input_state import FrameInput
from ..state_manager import Demo, StateManager, VisualizerState
from ..utils.scalar_math import (
    TAU,
    clamp,
    color_lerp,
    inverse_lerp,
    lerp,
    normalize,
    perpendicular,
    point_to_segment_distance,
    ray_vs_segment_parameter,
    saturate,
    vec2,
)


@dataclass(frozen=True)
class LightingFrameResult:
    """Contagens e medidas calculadas em um quadro das demonstrações 2D."""

    light_ray_num: int = 0
    light_ray_hit_num: int = 0
    cos: float = 0.0


class LightingScene:
    """
    Demonstrações 2D: produto escalar, normal de superfície e luz pontual.

    Uma superfície (segmento) centrada na origem é atingida por raios de luz
    direcionais ou radiais. A normal da superfície, a direção da luz e a
    posição da luz podem ser arrastadas com o mouse.
    """

    SURFACE_SIZE = 0.4
    LIGHT_DIR_SIZE = 0.4
    HIT_DISTANCE = 0.02  # distância de "acerto" do ponteiro em coordenadas de mundo
    LIGHT_DIR_GRAB_RADIUS = 0.4
    RAY_MAGNITUDE = 4.0
    RAY_HIT_BACKOFF = 0.02
    POINT_LIGHT_RAY_START = 0.025
    ARROW_HEAD_PIXELS = 40.0
    FONT_SIZE = 24
    LINE_SPACING = 40

    SURFACE_COLOR = "#666"
    SURFACE_HOVER_COLOR = "#999"
    LIGHT_DIR_COLOR = "#cccccc"
    LIGHT_DIR_HOVER_COLOR = "#999"
    LIGHT_HIT_COLOR = "#ffa500"
    LIGHT_HIT_DRAG_COLOR = "#ff8800"
    LIGHT_HIT_BACKFACE_COLOR = "#aaaaaa"
    LIGHT_MISS_COLOR = "#eeeeee"
    PIXEL_DARK_COLOR = "#333333"
    TEXT_COLOR = "#333"
    PANEL_COLOR = QColor(255, 255, 255, 178)

    def __init__(
        self,
        state_manager: StateManager,
        pipeline: TransformPipeline,
        drag_controller: DragController,
    ):
        self._state_manager = state_manager
        self._pipeline = pipeline
        self._drag = drag_controller
        self.surface_origin = vec2(0.0, 0.0)

    def _arrow_length(self) -> float:
        # Encurta a seta para que a ponta termine sobre a borda da superfície
        viewport_width = max(self._pipeline.viewport_2d().width, 1.0)
        return self.SURFACE_SIZE - (self.ARROW_HEAD_PIXELS / viewport_width)

    def surface_endpoints(self, state: VisualizerState):
        surface_perp = perpendicular(state.surface_normal)
        surface_a = self.surface_origin + surface_perp * self.SURFACE_SIZE
        surface_b = self.surface_origin - surface_perp * self.SURFACE_SIZE
        return surface_a, surface_b

    def update(self, frame_input: FrameInput, canvas) -> LightingFrameResult:
        state = self._state_manager.state()
        demo = state.demo
        pipeline = self._pipeline
        to_canvas = pipeline.world_to_canvas

        pipeline.begin_frame_2d(frame_input.canvas_width, frame_input.canvas_height)
        mouse_world = pipeline.canvas_to_world(frame_input.mouse)
        mouse_buttons = frame_input.mouse_buttons

        self._drag.update(mouse_world, mouse_buttons)

        if frame_input.mouse_wheel:
            state.light_ray_num -= int(math.copysign(1, frame_input.mouse_wheel))
        state.light_ray_num = max(state.light_ray_num, VisualizerState.MIN_LIGHT_RAY_NUM)

        surface_origin = self.surface_origin
        surface_a, surface_b = self.surface_endpoints(state)

        light_dir_perp = perpendicular(state.light_dir)
        light_dir_origin = vec2(0.0, 0.0)
        light_dir_line_width = lerp(
            6, 2, saturate(inverse_lerp(10, 40, state.light_ray_num))
        )

        surface_color = self.SURFACE_COLOR
        light_dir_color = self.LIGHT_DIR_COLOR
        light_dir_hit_color = self.LIGHT_HIT_COLOR

        show_surface_normal = demo in (
            Demo.DOT_PRODUCT_NORMAL,
            Demo.SURFACE_NORMAL,
            Demo.POINT_LIGHT_PIXEL,
        )
        show_light_ray_dir = demo in (Demo.DOT_PRODUCT, Demo.DOT_PRODUCT_NORMAL)
        show_light_ray_pos = demo in (Demo.POINT_LIGHT, Demo.POINT_LIGHT_PIXEL)

        if self._drag.is_dragging_value(state.light_dir) or self._drag.is_dragging_value(
            state.light_pos
        ):
            light_dir_hit_color = self.LIGHT_HIT_DRAG_COLOR

        # --- Teste de acerto: apenas quando nenhum arrasto está ativo ---
        if not self._drag.is_dragging():
            over_surface = (
                point_to_segment_distance(surface_a, surface_b, mouse_world)
                < self.HIT_DISTANCE
            )
            if show_surface_normal:
                surface_arrow_b = (
                    surface_origin + state.surface_normal * self._arrow_length()
                )
                if (
                    point_to_segment_distance(
                        surface_origin, surface_arrow_b, mouse_world
                    )
                    < self.HIT_DISTANCE
                ):
                    over_surface = True

            if over_surface:
                surface_color = self.SURFACE_HOVER_COLOR
                self._drag.begin_normal_drag(
                    state.surface_normal, surface_origin, mouse_world, mouse_buttons
                )

        if (
            not self._drag.is_dragging()
            and show_light_ray_dir
            and np.linalg.norm(mouse_world - light_dir_origin)
            >= self.LIGHT_DIR_GRAB_RADIUS
        ):
            light_dir_color = self.LIGHT_DIR_HOVER_COLOR
            self._drag.begin_normal_drag(
                state.light_dir, light_dir_origin, mouse_world, mouse_buttons
            )

        if (
            not self._drag.is_dragging()
            and show_light_ray_pos
            and np.linalg.norm(mouse_world - state.light_pos) < self.HIT_DISTANCE
        ):
            light_dir_color = self.LIGHT_DIR_HOVER_COLOR
            self._drag.begin_position_drag(state.light_pos, mouse_world, mouse_buttons)

        light_ray_num = 0
        light_ray_hit_num = 0
        light_dir = state.light_dir

        if show_light_ray_dir:
            light_ray_num = state.light_ray_num + 1
            for i in range(state.light_ray_num + 1):
                ray_t = (i / state.light_ray_num) * 2.0 - 1.0
                ray_origin = light_dir_origin + light_dir_perp * (
                    ray_t * self.LIGHT_DIR_SIZE
                )
                ray_a = ray_origin - state.light_dir * 2.0
                ray_b = ray_a + state.light_dir * self.RAY_MAGNITUDE

                t = ray_vs_segment_parameter(surface_a, surface_b, ray_a, ray_b)
                color = light_dir_color
                if t >= 0:
                    backface = (
                        demo == Demo.DOT_PRODUCT_NORMAL
                        and float(np.dot(state.surface_normal, state.light_dir)) > 0
                    )
                    color = (
                        self.LIGHT_HIT_BACKFACE_COLOR if backface else light_dir_hit_color
                    )
                    ray_b = lerp(ray_a, ray_b, t - self.RAY_HIT_BACKOFF)
                    light_ray_hit_num += 1

                canvas.draw_arrow(
                    to_canvas(ray_a), to_canvas(ray_b), color, light_dir_line_width
                )
        elif demo == Demo.POINT_LIGHT:
            light_pos = state.light_pos
            canvas.draw_point(to_canvas(light_pos), light_dir_hit_color, 16)

            light_dir = normalize(surface_origin - light_pos)

            # Superfície virtual voltada para a luz: conta apenas os raios que
            # poderiam atingir uma superfície deste tamanho.
            facing_perp = perpendicular(light_dir)
            facing_a = surface_origin + facing_perp * self.SURFACE_SIZE
            facing_b = surface_origin - facing_perp * self.SURFACE_SIZE

            for i in range(state.light_ray_num):
                ray_theta = (i / state.light_ray_num) * TAU
                ray_dir = vec2(math.cos(ray_theta), math.sin(ray_theta))

                ray_a = light_pos + ray_dir * self.POINT_LIGHT_RAY_START
                ray_b = light_pos + ray_dir * self.RAY_MAGNITUDE

                color = self.LIGHT_DIR_COLOR
                if ray_vs_segment_parameter(facing_a, facing_b, ray_a, ray_b) < 0:
                    color = self.LIGHT_MISS_COLOR
                else:
                    light_ray_num += 1

                t = ray_vs_segment_parameter(surface_a, surface_b, ray_a, ray_b)
                if t >= 0:
                    color = light_dir_hit_color
                    ray_b = lerp(ray_a, ray_b, t - self.RAY_HIT_BACKOFF)
                    light_ray_hit_num += 1

                canvas.draw_arrow(
                    to_canvas(ray_a), to_canvas(ray_b), color, light_dir_line_width
                )
        elif demo == Demo.POINT_LIGHT_PIXEL:
            light_pos = state.light_pos
            canvas.draw_point(to_canvas(light_pos), light_dir_hit_color, 16)

            light_dir = normalize(surface_origin - light_pos)

            dot = saturate(-float(np.dot(light_dir, state.surface_normal)))
            color = color_lerp(self.PIXEL_DARK_COLOR, light_dir_hit_color, dot)

            ray_a = light_pos + light_dir * self.POINT_LIGHT_RAY_START
            ray_b = surface_origin - light_dir * 0.1

            canvas.draw_arrow(
                to_canvas(ray_a), to_canvas(ray_b), color, light_dir_line_width
            )

        if demo in (Demo.DOT_PRODUCT_NORMAL, Demo.POINT_LIGHT_PIXEL):
            surface_arrow_b = surface_origin + state.surface_normal * self._arrow_length()
            canvas.draw_arrow(
                to_canvas(surface_origin), to_canvas(surface_arrow_b), surface_color, 4
            )
        elif demo == Demo.SURFACE_NORMAL:
            self._draw_surface_normal_overlay(state, canvas, surface_color)

        canvas.draw_line(to_canvas(surface_a), to_canvas(surface_b), surface_color, 4)

        cos = 0.0
        if demo in (Demo.DOT_PRODUCT, Demo.DOT_PRODUCT_NORMAL, Demo.POINT_LIGHT):
            cos = abs(float(np.dot(state.surface_normal, light_dir)))
            self._draw_ray_statistics(
                canvas, frame_input, light_ray_num, light_ray_hit_num, cos
            )
        elif demo == Demo.POINT_LIGHT_PIXEL:
            cos = -float(np.dot(light_dir, state.surface_normal))
            self._draw_angle_panel(canvas, frame_input, cos)

        return LightingFrameResult(light_ray_num, light_ray_hit_num, cos)

    def _draw_surface_normal_overlay(
        self, state: VisualizerState, canvas, surface_color: str
    ):
        to_canvas = self._pipeline.world_to_canvas
        viewport_width = self._pipeline.viewport_2d().width
        origin = self.surface_origin
        size = self.SURFACE_SIZE

        canvas.draw_grid_plane(
            to_canvas(vec2(0.0, 0.0)),
            vec2(1.0, 0.0),
            vec2(0.0, 1.0),
            size * viewport_width * 4,
            40,
            "#eee",
            1,
        )

        canvas.draw_line(to_canvas(origin), to_canvas(vec2(size, 0.0)), "#a66", 2)
        canvas.draw_line(to_canvas(origin), to_canvas(vec2(0.0, size)), "#6a6", 2)

        surface_arrow_b = origin + state.surface_normal * self._arrow_length()
        canvas.draw_circle(to_canvas(origin), size * viewport_width / 2.0, "#ccc", 2)
        canvas.draw_arrow(to_canvas(origin), to_canvas(surface_arrow_b), surface_color, 4)

        text_width, text_height = 250, 75
        text_pos = to_canvas(origin + state.surface_normal * size)
        text_pos[0] += state.surface_normal[0] * text_width * 0.5
        text_pos[1] += state.surface_normal[1] * -text_height * 0.5

        normal_x, normal_y = state.surface_normal
        canvas.draw_text(
            text_pos,
            f"{normal_x:.3f}, {normal_y:.3f}",
            self.TEXT_COLOR,
            canvas.get_size(self.FONT_SIZE),
            baseline="middle",
        )

    def _draw_panel(self, canvas, frame_input: FrameInput, anchor_y: float) -> np.ndarray:
        canvas_position = self._pipeline.world_to_canvas(vec2(0.0, anchor_y))
        canvas.fill_rect(
            0,
            canvas_position[1] - canvas.get_size(50),
            frame_input.canvas_width,
            frame_input.canvas_height,
            self.PANEL_COLOR,
        )
        return canvas_position

    def _draw_ray_statistics(
        self,
        canvas,
        frame_input: FrameInput,
        light_ray_num: int,
        light_ray_hit_num: int,
        cos: float,
    ):
        canvas_position = self._draw_panel(canvas, frame_input, -0.65)
        font_size = canvas.get_size(self.FONT_SIZE)
        line_spacing = canvas.get_size(self.LINE_SPACING)

        ratio = light_ray_hit_num / light_ray_num if light_ray_num else 0.0
        lines = [
            f"Total number of possible light rays: {light_ray_num}",
            f"Number of light rays hitting the surface: {light_ray_hit_num}",
            f"Ratio: {light_ray_hit_num} / {light_ray_num} = {ratio:.4f}",
            self._angle_text(cos),
        ]
        for line in lines:
            canvas.draw_text(canvas_position, line, self.TEXT_COLOR, font_size)
            canvas_position[1] += line_spacing

    def _draw_angle_panel(self, canvas, frame_input: FrameInput, cos: float):
        canvas_position = self._draw_panel(canvas, frame_input, -0.75)
        canvas_position[1] += canvas.get_size(self.LINE_SPACING) * 2
        canvas.draw_text(
            canvas_position,
            self._angle_text(cos),
            self.TEXT_COLOR,
            canvas.get_size(self.FONT_SIZE),
        )

    @staticmethod
    def _angle_text(cos: float) -> str:
        angle = math.degrees(math.acos(clamp(cos, -1.0, 1.0)))
        return f"Angle: {angle:.0f}°  Cos: {cos:.4f}"
