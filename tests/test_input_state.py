import unittest

import pytest
from PyQt5.QtCore import Qt

from vector_visualizer.input_state import FrameInput, InputState


class TestInputState(unittest.TestCase):
    def test_key_triggered_only_on_first_frame(self):
        state = InputState()
        state.key_pressed(Qt.Key_1)

        frame = state.snapshot(800, 600)
        self.assertTrue(frame.is_key_triggered(Qt.Key_1))
        self.assertTrue(frame.is_key_down(Qt.Key_1))
        state.end_frame()

        # Auto-repetição não dispara novamente
        state.key_pressed(Qt.Key_1, is_auto_repeat=True)
        frame = state.snapshot(800, 600)
        self.assertFalse(frame.is_key_triggered(Qt.Key_1))
        self.assertTrue(frame.is_key_down(Qt.Key_1))
        state.end_frame()

        state.key_released(Qt.Key_1)
        frame = state.snapshot(800, 600)
        self.assertFalse(frame.is_key_down(Qt.Key_1))

    def test_wheel_accumulates_until_end_of_frame(self):
        state = InputState()
        state.add_wheel(1.0)
        state.add_wheel(0.5)
        self.assertEqual(state.snapshot(1, 1).mouse_wheel, 1.5)
        state.end_frame()
        self.assertEqual(state.snapshot(1, 1).mouse_wheel, 0.0)

    def test_mouse_delta_is_relative_to_previous_frame(self):
        state = InputState()
        state.update_mouse(10.0, 20.0, 1)
        frame = state.snapshot(800, 600)
        self.assertEqual(tuple(frame.mouse), (10.0, 20.0))
        self.assertEqual(tuple(frame.mouse_delta), (10.0, 20.0))
        self.assertEqual(frame.mouse_buttons, 1)
        state.end_frame()

        self.assertEqual(tuple(state.snapshot(800, 600).mouse_delta), (0.0, 0.0))

        state.update_mouse(12.0, 15.0, 1)
        state.update_mouse(15.0, 25.0, 3)
        frame = state.snapshot(800, 600)
        self.assertEqual(tuple(frame.mouse_delta), (5.0, 5.0))
        self.assertEqual(frame.mouse_buttons, 3)

    def test_release_all(self):
        state = InputState()
        state.update_mouse(1.0, 1.0, 2)
        state.key_pressed(Qt.Key_P)
        state.release_all()
        frame = state.snapshot(10, 10)
        self.assertEqual(frame.mouse_buttons, 0)
        self.assertEqual(frame.keys_down, frozenset())

    def test_snapshot_is_read_only(self):
        state = InputState()
        frame = state.snapshot(800, 600)
        self.assertEqual((frame.canvas_width, frame.canvas_height), (800.0, 600.0))
        with pytest.raises(ValueError):
            frame.mouse[0] = 3.0
        state.update_mouse(4.0, 4.0, 0)
        # O instantâneo anterior não muda
        self.assertEqual(tuple(frame.mouse), (0.0, 0.0))


def test_frame_input_defaults():
    frame = FrameInput(canvas_width=100.0, canvas_height=50.0)
    assert frame.mouse_buttons == 0
    assert frame.mouse_wheel == 0.0
    assert not frame.is_key_triggered(Qt.Key_P)
