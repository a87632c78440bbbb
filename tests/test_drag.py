import math
import unittest

import numpy as np

from vector_visualizer.controllers.drag_controller import DragController
from vector_visualizer.models.drag import NormalDrag, PositionDrag


def assert_vec2_approx(actual, expected, places=9):
    assert abs(actual[0] - expected[0]) < 10**(-places), f"x: {actual[0]} != {expected[0]}"
    assert abs(actual[1] - expected[1]) < 10**(-places), f"y: {actual[1]} != {expected[1]}"


class TestPositionDrag(unittest.TestCase):
    def test_offset_is_preserved(self):
        value = np.array([5.0, 5.0])
        drag = PositionDrag(value, [2.0, 2.0], 1)
        assert_vec2_approx(drag.offset, (3.0, 3.0))

        released = drag.update([0.0, 0.0], 1)
        self.assertFalse(released)
        assert_vec2_approx(value, (3.0, 3.0))

    def test_writes_in_place(self):
        value = np.array([0.0, 0.0])
        drag = PositionDrag(value, [0.0, 0.0], 1)
        drag.update([0.25, -0.5], 1)
        self.assertIs(drag.out, value)
        assert_vec2_approx(value, (0.25, -0.5))

    def test_release_when_buttons_change(self):
        value = np.array([0.0, 0.0])
        drag = PositionDrag(value, [0.0, 0.0], 1)
        self.assertTrue(drag.update([1.0, 1.0], 0))
        self.assertTrue(drag.update([1.0, 1.0], 3))


class TestNormalDrag(unittest.TestCase):
    def test_quarter_turn(self):
        value = np.array([1.0, 0.0])
        drag = NormalDrag(value, [0.0, 0.0], [1.0, 0.0], 1)
        self.assertFalse(drag.update([0.0, 1.0], 1))
        assert_vec2_approx(value, (0.0, 1.0))

    def test_length_is_preserved(self):
        value = np.array([2.0, 0.0])
        drag = NormalDrag(value, [0.0, 0.0], [0.0, 3.0], 1)
        drag.update([-5.0, 5.0], 1)
        self.assertAlmostEqual(float(np.linalg.norm(value)), 2.0)
        # 45 graus no sentido anti-horário
        assert_vec2_approx(value, (math.sqrt(2.0), math.sqrt(2.0)))

    def test_rotation_is_relative_to_drag_start(self):
        value = np.array([0.0, 1.0])
        drag = NormalDrag(value, [1.0, 1.0], [2.0, 1.0], 1)
        drag.update([0.0, 1.0], 1)
        assert_vec2_approx(value, (0.0, -1.0))
        drag.update([2.0, 1.0], 1)
        assert_vec2_approx(value, (0.0, 1.0))

    def test_pointer_on_pivot_keeps_value(self):
        value = np.array([0.6, 0.8])
        drag = NormalDrag(value, [0.0, 0.0], [1.0, 0.0], 1)
        drag.update([0.0, 0.0], 1)
        assert_vec2_approx(value, (0.6, 0.8))


class TestDragController(unittest.TestCase):
    def test_requires_pressed_button(self):
        controller = DragController()
        self.assertFalse(controller.begin_position_drag(np.zeros(2), [0.0, 0.0], 0))
        self.assertFalse(controller.is_dragging())

    def test_single_active_session(self):
        controller = DragController()
        normal = np.array([0.0, 1.0])
        position = np.array([0.5, 0.5])

        self.assertTrue(controller.begin_normal_drag(normal, [0.0, 0.0], [0.0, 1.0], 1))
        self.assertFalse(controller.begin_position_drag(position, [0.5, 0.5], 1))
        self.assertIsInstance(controller.session(), NormalDrag)
        self.assertTrue(controller.is_dragging_value(normal))
        self.assertFalse(controller.is_dragging_value(position))
        # Identidade, não igualdade
        self.assertFalse(controller.is_dragging_value(normal.copy()))

    def test_update_releases_session(self):
        controller = DragController()
        position = np.array([0.0, 0.0])
        controller.begin_position_drag(position, [0.0, 0.0], 1)

        self.assertFalse(controller.update([0.1, 0.2], 1))
        assert_vec2_approx(position, (0.1, 0.2))

        self.assertTrue(controller.update([0.3, 0.3], 0))
        self.assertFalse(controller.is_dragging())
        self.assertIsNone(controller.session())
        # A última posição é aplicada antes de encerrar
        assert_vec2_approx(position, (0.3, 0.3))

        # Sem sessão, update não faz nada
        self.assertFalse(controller.update([0.9, 0.9], 1))
        assert_vec2_approx(position, (0.3, 0.3))
