import unittest

import numpy as np

from vector_visualizer.utils.clipping import NEAR_CLIP_PLANE, clip_to_plane


def assert_vec4_approx(actual, expected, places=9):
    for i, axis in enumerate("xyzw"):
        assert abs(actual[i] - expected[i]) < 10**(-places), f"{axis}: {actual[i]} != {expected[i]}"


class TestClipToPlane(unittest.TestCase):
    def test_clips_b_to_near_plane(self):
        a = np.array([0.0, 0.0, 1.0, 1.0])
        b = np.array([0.0, 0.0, -2.0, 1.0])
        self.assertTrue(clip_to_plane(a, b, NEAR_CLIP_PLANE))
        assert_vec4_approx(a, (0.0, 0.0, 1.0, 1.0))
        assert_vec4_approx(b, (0.0, 0.0, -1.0, 1.0))

    def test_clips_a_to_near_plane(self):
        a = np.array([0.0, 0.0, -2.0, 1.0])
        b = np.array([0.0, 0.0, 1.0, 1.0])
        self.assertTrue(clip_to_plane(a, b, NEAR_CLIP_PLANE))
        assert_vec4_approx(a, (0.0, 0.0, -1.0, 1.0))
        assert_vec4_approx(b, (0.0, 0.0, 1.0, 1.0))
        self.assertAlmostEqual(float(np.dot(a, NEAR_CLIP_PLANE)), 0.0)

    def test_fully_occluded_segment_is_rejected(self):
        a = np.array([0.0, 0.0, -3.0, 1.0])
        b = np.array([0.0, 0.0, -2.0, 1.0])
        self.assertFalse(clip_to_plane(a, b, NEAR_CLIP_PLANE))
        assert_vec4_approx(a, (0.0, 0.0, -3.0, 1.0))
        assert_vec4_approx(b, (0.0, 0.0, -2.0, 1.0))

    def test_visible_segment_is_unchanged(self):
        a = np.array([1.0, 2.0, 0.0, 1.0])
        b = np.array([-1.0, 0.5, 3.0, 4.0])
        self.assertTrue(clip_to_plane(a, b, NEAR_CLIP_PLANE))
        assert_vec4_approx(a, (1.0, 2.0, 0.0, 1.0))
        assert_vec4_approx(b, (-1.0, 0.5, 3.0, 4.0))

    def test_parallel_to_plane(self):
        a = np.array([0.0, 0.0, 0.0, 1.0])
        b = np.array([1.0, 0.0, 0.0, 1.0])
        self.assertTrue(clip_to_plane(a, b, NEAR_CLIP_PLANE))
        assert_vec4_approx(b, (1.0, 0.0, 0.0, 1.0))

    def test_other_planes(self):
        left_plane = np.array([1.0, 0.0, 0.0, 1.0])
        a = np.array([1.0, 0.0, 0.0, 1.0])
        b = np.array([-3.0, 0.0, 0.0, 1.0])
        self.assertTrue(clip_to_plane(a, b, left_plane))
        assert_vec4_approx(b, (-1.0, 0.0, 0.0, 1.0))
