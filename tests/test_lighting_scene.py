import math
import unittest

import numpy as np

from recording_canvas import RecordingCanvas
from vector_visualizer.controllers.drag_controller import DragController
from vector_visualizer.controllers.transform_pipeline import TransformPipeline
from vector_visualizer.input_state import FrameInput
from vector_visualizer.models.drag import NormalDrag, PositionDrag
from vector_visualizer.scenes.lighting_scene import LightingScene
from vector_visualizer.state_manager import Demo, StateManager

CANVAS_SIZE = 800.0
HALF = math.sqrt(0.5)


def world_to_canvas(x, y):
    return np.array([(x * 0.5 + 0.5) * CANVAS_SIZE, (-y * 0.5 + 0.5) * CANVAS_SIZE])


def make_frame(mouse=(0.0, 0.0), buttons=0, wheel=0.0):
    return FrameInput(
        canvas_width=CANVAS_SIZE,
        canvas_height=CANVAS_SIZE,
        mouse=np.array(mouse, dtype=float),
        mouse_buttons=buttons,
        mouse_wheel=wheel,
    )


def assert_vec2_approx(actual, expected, places=9):
    assert abs(actual[0] - expected[0]) < 10**(-places), f"x: {actual[0]} != {expected[0]}"
    assert abs(actual[1] - expected[1]) < 10**(-places), f"y: {actual[1]} != {expected[1]}"


class TestLightingScene(unittest.TestCase):
    def setUp(self):
        self.state_manager = StateManager()
        self.drag = DragController()
        self.scene = LightingScene(self.state_manager, TransformPipeline(), self.drag)
        self.canvas = RecordingCanvas(CANVAS_SIZE, CANVAS_SIZE)

    def run_frame(self, demo=None, **kwargs):
        if demo is not None:
            self.state_manager.set_demo(demo)
        return self.scene.update(make_frame(**kwargs), self.canvas)

    def test_directional_ray_statistics(self):
        result = self.run_frame(Demo.DOT_PRODUCT)
        self.assertEqual(result.light_ray_num, 11)
        self.assertEqual(result.light_ray_hit_num, 7)
        self.assertAlmostEqual(result.cos, HALF)
        self.assertEqual(len(self.canvas.calls_to("draw_arrow")), 11)
        self.assertIn(
            "Ratio: 7 / 11 = 0.6364", self.canvas.texts()
        )
        self.assertIn("Angle: 45°  Cos: 0.7071", self.canvas.texts())

    def test_surface_hit_starts_normal_drag(self):
        state = self.state_manager.state()
        self.run_frame(Demo.DOT_PRODUCT, mouse=world_to_canvas(0.1, -0.1), buttons=1)
        session = self.drag.session()
        self.assertIsInstance(session, NormalDrag)
        self.assertIs(session.out, state.surface_normal)

        # O ponteiro varre +90 graus em torno da origem
        self.run_frame(mouse=world_to_canvas(0.1, 0.1), buttons=1)
        assert_vec2_approx(state.surface_normal, (-HALF, HALF))

        self.run_frame(mouse=world_to_canvas(0.1, 0.1), buttons=0)
        self.assertFalse(self.drag.is_dragging())

    def test_light_direction_drag(self):
        state = self.state_manager.state()
        self.run_frame(Demo.DOT_PRODUCT_NORMAL, mouse=world_to_canvas(-0.8, 0.0), buttons=1)
        self.assertTrue(self.drag.is_dragging_value(state.light_dir))

        self.run_frame(mouse=world_to_canvas(0.0, 0.8), buttons=1)
        assert_vec2_approx(state.light_dir, (0.0, 1.0))

    def test_light_direction_not_grabbed_near_origin(self):
        self.run_frame(Demo.DOT_PRODUCT, mouse=world_to_canvas(0.2, 0.2), buttons=1)
        self.assertFalse(self.drag.is_dragging())

    def test_light_position_drag(self):
        state = self.state_manager.state()
        self.run_frame(Demo.POINT_LIGHT, mouse=world_to_canvas(0.75, 0.75), buttons=1)
        session = self.drag.session()
        self.assertIsInstance(session, PositionDrag)
        self.assertIs(session.out, state.light_pos)

        self.run_frame(mouse=world_to_canvas(0.5, -0.25), buttons=1)
        assert_vec2_approx(state.light_pos, (0.5, -0.25))

    def test_surface_normal_demo_has_no_light_drag(self):
        self.run_frame(Demo.SURFACE_NORMAL, mouse=world_to_canvas(-0.8, 0.0), buttons=1)
        self.assertFalse(self.drag.is_dragging())
        self.assertIn("0.707, 0.707", self.canvas.texts())
        self.assertEqual(len(self.canvas.calls_to("draw_grid_plane")), 1)
        self.assertEqual(len(self.canvas.calls_to("draw_circle")), 1)

    def test_point_light_counts(self):
        result = self.run_frame(Demo.POINT_LIGHT)
        self.assertEqual(len(self.canvas.calls_to("draw_arrow")), 10)
        self.assertGreater(result.light_ray_num, 0)
        self.assertLessEqual(result.light_ray_hit_num, result.light_ray_num)

    def test_point_light_pixel_cosine(self):
        result = self.run_frame(Demo.POINT_LIGHT_PIXEL)
        self.assertAlmostEqual(result.cos, 1.0)
        self.assertIn("Angle: 0°  Cos: 1.0000", self.canvas.texts())

    def test_wheel_changes_ray_count(self):
        state = self.state_manager.state()
        self.run_frame(Demo.DOT_PRODUCT, wheel=1.0)
        self.assertEqual(state.light_ray_num, 9)
        self.run_frame(wheel=-2.0)
        self.assertEqual(state.light_ray_num, 10)

        state.light_ray_num = 2
        self.run_frame(wheel=1.0)
        self.assertEqual(state.light_ray_num, 2)
