"""Tests for the equation assembly."""

import unittest

import numpy as np

from gradellipse import (
    EquationBuffer,
    InvalidInputError,
    get_equations,
    make_points,
    normalize_points,
)
from gradellipse.tests.ellipse_test_data import params_to_conic, true_params


class TestGetEquations(unittest.TestCase):

    def setUp(self):
        t = np.linspace(0, 2*np.pi, 9, endpoint=False)
        self.pts, self.grad = make_points(true_params, t)
        self.T = normalize_points(self.pts)

    def test_true_conic_solves_system(self):
        eq = get_equations(self.pts, self.grad, self.T)
        self.assertEqual(eq.shape, (36, 6))

        # conic in normalized coordinates: s = inv(T).T @ C @ inv(T)
        Tinv = np.linalg.inv(self.T)
        s = Tinv.T @ params_to_conic(true_params) @ Tinv
        x = s[np.triu_indices(3)]
        x /= np.linalg.norm(x)
        self.assertTrue(np.allclose(eq @ x, 0, atol=1e-10))

    def test_positional_rows(self):
        eq = get_equations(self.pts, self.grad, self.T)
        hpts = np.concatenate((self.pts, np.ones((9, 1))), axis=1)
        px, py, _ = (hpts @ self.T.T).T
        expected = np.stack((
            px*px, 2*px*py, 2*px, py*py, 2*py, np.ones(9)), axis=-1)
        self.assertTrue(np.allclose(eq[3::4], expected))

    def test_tangential_rows(self):
        """Rows 0-2 of each block are antisym(l) @ s @ p."""
        eq = get_equations(self.pts, self.grad, self.T)
        rng = np.random.default_rng(4)
        x = rng.standard_normal(6)
        s = np.zeros((3, 3))
        s[np.triu_indices(3)] = x
        s = s + np.triu(s, 1).T

        hpts = np.concatenate((self.pts, np.ones((9, 1))), axis=1)
        p = hpts @ self.T.T
        # gradients turned by 90 degrees: (-gy, gx)
        d = self.grad[:, ::-1]*[-1, 1] @ self.T[:2, :2].T
        d = np.concatenate((d, np.zeros((9, 1))), axis=1)
        lines = np.cross(p, d)
        expected = np.cross(lines, p @ s)
        self.assertTrue(np.allclose(
            (eq @ x).reshape((9, 4))[:, :3], expected))

    def test_writes_into_buffer(self):
        buff = EquationBuffer()
        buff.reserve(9)
        buff.data[:] = np.nan
        out = buff.rows(9)
        eq = get_equations(self.pts, self.grad, self.T, out=out)
        self.assertIs(eq, out)
        self.assertTrue(np.shares_memory(eq, buff.data))
        self.assertTrue(np.all(np.isfinite(eq)))

    def test_invalid(self):
        with self.assertRaises(InvalidInputError):
            get_equations(None, self.grad, self.T)
        with self.assertRaises(InvalidInputError):
            get_equations(self.pts, self.grad[:4], self.T)
        with self.assertRaises(InvalidInputError):
            get_equations(self.pts, self.grad, self.T[:2])
        with self.assertRaises(InvalidInputError):
            get_equations(self.pts, self.grad, self.T, out=np.empty((4, 6)))


if __name__ == '__main__':
    unittest.main()
