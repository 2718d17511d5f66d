"""Stratified grids of jittered points as arrays"""

from functools import partial

from jax import jit as jjit
from jax import numpy as jnp
from jax import random as jran

from ..defaults import BIUNIT_MAX, BIUNIT_MIN, DEFAULT_CENTERING

__all__ = (
    "stratified_xy_grid",
    "stratified_grid_scaled",
    "stratified_biunit_grid",
)


def _jitter_window(centering):
    """Offset and width of the jitter within a unit stratum"""
    start = centering * 0.5
    span = 1.0 - centering
    return start, span


def _stratum_coord(uran, indx, n_per_dim, start, span):
    """
    Position in [0, 1) of a jittered point in stratum indx

    Works on python scalars, numpy and jax arrays alike
    """
    return (start + uran * span) / n_per_dim + indx / n_per_dim


@partial(jjit, static_argnames=["n_per_dim"])
def _stratified_grid_kern(uran, n_per_dim, centering):
    """
    Map uniform randoms onto a stratified grid in the unit square

    Parameters
    ----------
    uran: array, shape (n_per_dim^2, 2)
        uniform randoms in [0, 1); uran[i] holds the (x, y) draws
        of the i-th stratum in row-major order

    n_per_dim: int
        Number of strata per dimension

    centering: float
        fraction of each stratum excluded from the jitter

    Returns
    -------
    xy_grid : array, shape (n_per_dim^2, 2)
    """
    start, span = _jitter_window(centering)
    indx_1d = jnp.arange(n_per_dim)

    sx = jnp.tile(indx_1d, n_per_dim)
    sy = jnp.repeat(indx_1d, n_per_dim)

    x = _stratum_coord(uran[:, 0], sx, n_per_dim, start, span)
    y = _stratum_coord(uran[:, 1], sy, n_per_dim, start, span)
    return jnp.column_stack([x, y])


@partial(jjit, static_argnames=["n_per_dim"])
def stratified_xy_grid(n_per_dim, ran_key, centering=DEFAULT_CENTERING):
    """
    Stratified grid with noise

    Parameters
    ----------
    n_per_dim: int
        Number of points per dimension (total = n_per_dim^2)

    ran_key: jax.random.key(seed)

    centering: float, optional
        0 jitters each point over its whole stratum,
        1 puts each point at the center of its stratum

    Returns
    -------
    xy_grid : array, shape (n_per_dim^2, 2)
        0 <= x,y < 1 for every grid element;
        y varies slowest, x fastest

    """
    uran = jran.uniform(ran_key, shape=(n_per_dim**2, 2))
    return _stratified_grid_kern(uran, n_per_dim, centering)


@partial(jjit, static_argnames=["n_per_dim"])
def stratified_grid_scaled(
    n_per_dim,
    ran_key,
    xmin,
    xmax,
    ymin,
    ymax,
    centering=DEFAULT_CENTERING,
):
    """
    Stratified grid with noise spanning the rectangle
    [xmin, xmax) x [ymin, ymax)

    Parameters
    ----------
    n_per_dim: int
        Number of points per dimension (total = n_per_dim^2)

    ran_key: jax.random.key(seed)

    xmin, xmax: float
        range of the first coordinate

    ymin, ymax: float
        range of the second coordinate

    centering: float, optional
        see stratified_xy_grid

    Returns
    -------
    xy_grid : array, shape (n_per_dim^2, 2)
    """
    xy_grid = stratified_xy_grid(n_per_dim, ran_key, centering=centering)
    x = xmin + (xmax - xmin) * xy_grid[:, 0]
    y = ymin + (ymax - ymin) * xy_grid[:, 1]
    return jnp.column_stack([x, y])


@partial(jjit, static_argnames=["n_per_dim"])
def stratified_biunit_grid(n_per_dim, ran_key, centering=DEFAULT_CENTERING):
    """
    Stratified grid with noise in the bi-unit square [-1, 1)^2

    Same layout as stratified_xy_grid, with the unit square
    mapped by u -> 2u - 1, as done by StratifiedSampler
    """
    xy_grid = stratified_xy_grid(n_per_dim, ran_key, centering=centering)
    return _to_biunit(xy_grid)


def _to_biunit(u):
    return u * (BIUNIT_MAX - BIUNIT_MIN) + BIUNIT_MIN
