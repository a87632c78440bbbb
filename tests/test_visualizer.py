import unittest

import numpy as np
from PyQt5.QtCore import Qt

from recording_canvas import RecordingCanvas
from vector_visualizer.input_state import FrameInput
from vector_visualizer.state_manager import CameraState3D, Demo, StateManager
from vector_visualizer.utils import transformations_3d as tf3d
from vector_visualizer.visualizer import Visualizer


def make_frame(keys=(), mouse=(0.0, 0.0), delta=(0.0, 0.0), buttons=0, wheel=0.0):
    return FrameInput(
        canvas_width=1000.0,
        canvas_height=800.0,
        mouse=np.array(mouse, dtype=float),
        mouse_delta=np.array(delta, dtype=float),
        mouse_buttons=buttons,
        mouse_wheel=wheel,
        keys_down=frozenset(keys),
        keys_triggered=frozenset(keys),
    )


class TestVisualizer(unittest.TestCase):
    def setUp(self):
        self.state_manager = StateManager()
        self.visualizer = Visualizer(self.state_manager)

    def run_frame(self, **kwargs):
        canvas = RecordingCanvas(1000.0, 800.0)
        state = self.visualizer.run_frame(make_frame(**kwargs), canvas)
        return state, canvas

    def test_frame_starts_by_clearing(self):
        _, canvas = self.run_frame()
        self.assertEqual(canvas.names()[0], "clear_screen")

    def test_number_keys_select_demo(self):
        for offset, demo in enumerate(Demo):
            state, _ = self.run_frame(keys=[Qt.Key_1 + offset])
            self.assertEqual(state.demo, demo)

    def test_reset_key(self):
        self.state_manager.set_demo(Demo.POINT_LIGHT)
        self.state_manager.state().light_ray_num = 30
        state, _ = self.run_frame(keys=[Qt.Key_P])
        self.assertEqual(state.demo, Demo.DOT_PRODUCT)
        self.assertEqual(state.light_ray_num, 10)

    def test_3d_demo_draws_frustum(self):
        state, canvas = self.run_frame(keys=[Qt.Key_4])
        self.assertEqual(state.demo, Demo.CAMERA_FRUSTUM)
        # 22 linhas da grade + 12 arestas do tronco + trilhas dos controles
        self.assertGreaterEqual(len(canvas.calls_to("draw_line")), 22 + 12 + 4)
        self.assertIn("Field of View", canvas.texts())
        # Somente as alças dos quatro controles deslizantes são pontos
        self.assertEqual(len(canvas.calls_to("draw_point")), 4)
        self.assertNotIn("Projection Matrix", canvas.texts())

    def test_projection_matrix_demo(self):
        state, canvas = self.run_frame(keys=[Qt.Key_5])
        self.assertEqual(state.demo, Demo.CAMERA_FRUSTUM_PROJECTION_MATRIX)
        texts = canvas.texts()
        self.assertIn("Projection Matrix", texts)
        expected = tf3d.create_perspective_projection_matrix(80.0, 16.0 / 9.0, -2.0, -15.0)
        self.assertIn(f"{expected[0, 0]:.2f}", texts)
        self.assertIn("-1.00", texts)
        self.assertEqual(len(canvas.calls_to("stroke_rect")), 1)

    def test_projection_matrix_is_shown_column_by_column(self):
        _, canvas = self.run_frame(keys=[Qt.Key_5])
        placed = {
            (round(float(pos[0])), round(float(pos[1]))): text
            for pos, text, _, _ in canvas.calls_to("draw_text")
        }
        # Painel em x=500, y=100; colunas a cada 100 px, linhas a cada 50 px
        self.assertEqual(placed[(910, 265)], "-1.00")
        self.assertEqual(placed[(810, 315)], f"{60.0 / 13.0:.2f}")
        self.assertEqual(placed[(910, 315)], "0.00")

    def test_camera_orbits_and_zooms(self):
        self.state_manager.set_demo(Demo.CAMERA_FRUSTUM)
        default = CameraState3D()

        state, _ = self.run_frame(delta=(10.0, 0.0), buttons=1)
        self.assertAlmostEqual(state.camera.latitude, default.latitude + 0.05)

        state, _ = self.run_frame(wheel=1.0)
        self.assertEqual(state.camera.distance, default.distance - CameraState3D.ZOOM_STEP)

    def test_camera_ignores_mouse_without_buttons(self):
        self.state_manager.set_demo(Demo.CAMERA_FRUSTUM)
        state, _ = self.run_frame(delta=(10.0, 10.0), buttons=0)
        self.assertEqual(state.camera, CameraState3D())

    def test_2d_demo_uses_lighting_scene(self):
        _, canvas = self.run_frame()
        self.assertTrue(any("light rays" in text for text in canvas.texts()))
        self.assertEqual(len(canvas.calls_to("stroke_rect")), 0)
