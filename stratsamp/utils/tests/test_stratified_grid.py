""" """

import numpy as np
from jax import random as jran

from .. import stratified_grid as sg


def test_stratified_xy_grid():
    ran_key = jran.key(0)
    n_tests = 100
    for n_per_dim in (5, 50, 500):
        for __ in range(n_tests):
            ran_key, test_key = jran.split(ran_key, 2)
            xy_grid = sg.stratified_xy_grid(n_per_dim, test_key)
            assert xy_grid.shape == (n_per_dim**2, 2)
            assert np.all(xy_grid >= 0)
            assert np.all(xy_grid <= 1)

    xy_grid = sg.stratified_xy_grid(1_000, ran_key)
    assert np.allclose(xy_grid.mean(), 0.5, atol=0.1)


def test_stratified_xy_grid_is_row_major():
    n_per_dim = 7
    xy_grid = np.asarray(sg.stratified_xy_grid(n_per_dim, jran.key(1)))
    sy, sx = np.divmod(np.arange(n_per_dim**2), n_per_dim)
    for coord, indx in ((xy_grid[:, 0], sx), (xy_grid[:, 1], sy)):
        assert np.all(coord >= indx / n_per_dim - 1e-6)
        assert np.all(coord <= (indx + 1) / n_per_dim + 1e-6)


def test_stratified_xy_grid_centering():
    n_per_dim = 10
    ran_key = jran.key(2)

    xy_grid = np.asarray(sg.stratified_xy_grid(n_per_dim, ran_key, centering=1.0))
    grid_1d = (np.arange(n_per_dim) + 0.5) / n_per_dim
    assert np.allclose(xy_grid[:, 0], np.tile(grid_1d, n_per_dim))
    assert np.allclose(xy_grid[:, 1], np.repeat(grid_1d, n_per_dim))

    centering = 0.6
    xy_grid = np.asarray(sg.stratified_xy_grid(n_per_dim, ran_key, centering=centering))
    local = xy_grid * n_per_dim - np.floor(xy_grid * n_per_dim)
    assert np.all(local >= centering / 2 - 1e-5)
    assert np.all(local <= 1 - centering / 2 + 1e-5)


def test_stratified_xy_grid_empty():
    xy_grid = sg.stratified_xy_grid(0, jran.key(0))
    assert xy_grid.shape == (0, 2)


def test_stratified_grid_scaled():
    ran_key = jran.key(3)
    xmin, xmax, ymin, ymax = 10.0, 12.0, -3.0, 5.0
    xy_grid = sg.stratified_grid_scaled(20, ran_key, xmin, xmax, ymin, ymax)
    assert xy_grid.shape == (400, 2)
    assert np.all(xy_grid[:, 0] >= xmin)
    assert np.all(xy_grid[:, 0] <= xmax)
    assert np.all(xy_grid[:, 1] >= ymin)
    assert np.all(xy_grid[:, 1] <= ymax)

    xy_unit = sg.stratified_xy_grid(20, ran_key)
    assert np.allclose(xy_grid[:, 0], xmin + (xmax - xmin) * xy_unit[:, 0])
    assert np.allclose(xy_grid[:, 1], ymin + (ymax - ymin) * xy_unit[:, 1])


def test_stratified_biunit_grid():
    ran_key = jran.key(4)
    xy_grid = sg.stratified_biunit_grid(16, ran_key, centering=0.2)
    assert np.all(xy_grid >= -1)
    assert np.all(xy_grid <= 1)

    xy_unit = sg.stratified_xy_grid(16, ran_key, centering=0.2)
    assert np.allclose(xy_grid, 2 * xy_unit - 1)


def test_stratified_grid_kern_matches_formula():
    n_per_dim = 3
    centering = 0.5
    uran = np.random.RandomState(0).uniform(size=(n_per_dim**2, 2))
    xy_grid = np.asarray(sg._stratified_grid_kern(uran, n_per_dim, centering))

    start, span = centering * 0.5, 1 - centering
    for i, (ux, uy) in enumerate(uran):
        sy, sx = divmod(i, n_per_dim)
        x = (start + ux * span) / n_per_dim + sx / n_per_dim
        y = (start + uy * span) / n_per_dim + sy / n_per_dim
        assert np.allclose(xy_grid[i], (x, y), atol=1e-6)
