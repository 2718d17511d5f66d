"""
The StratifiedSampler class generates one jittered sample position
per cell of an n x n grid covering the bi-unit square [-1, 1)^2.
Samples are pushed to a caller-supplied sink one at a time, or pulled
lazily from a generator, so that no collection of samples is built.

Cells are visited in row-major order (y outer, x inner). For each cell
two floats are drawn from the random source, x first and then y.
"""

import logging
import operator

import numpy as np

from .defaults import DEFAULT_BLOCK_SIZE, DEFAULT_SEED
from .random_source import JaxRandomSource, RandomSource
from .sink import Sample, as_sink
from .utils.stratified_grid import _jitter_window, _stratum_coord, _to_biunit

logger = logging.getLogger(__name__)

__all__ = ("StratifiedSampler",)


class StratifiedSampler:
    """
    Seeded generator of stratified sample positions

    Parameters
    ----------
    seed: int
        seed of the owned random source

    random_source: RandomSource, optional
        source of uniform floats to use instead of a JaxRandomSource
        built from seed; the sampler takes ownership of it, and seed
        is ignored so that the seed property returns None

    block_size: int, optional
        block size of the default JaxRandomSource

    Notes
    -----
    Each generation call continues from the current state of the
    random source; the seed is never replayed. Draws are taken one
    stratum at a time, just before that stratum is delivered.
    Instances are not safe to share between threads without
    external locking.
    """

    def __init__(
        self, seed=DEFAULT_SEED, random_source=None, block_size=DEFAULT_BLOCK_SIZE
    ):
        if random_source is None:
            random_source = JaxRandomSource(seed, block_size=block_size)
        elif isinstance(random_source, RandomSource):
            seed = None
        else:
            msg = "random_source must be a RandomSource, got {0}"
            raise TypeError(msg.format(type(random_source).__name__))
        self._seed = seed
        self._random_source = random_source

    @property
    def seed(self):
        return self._seed

    @property
    def random_source(self):
        return self._random_source

    def generate_uniform(self, n, sink):
        """
        Generate n*n sample positions, each distributed uniformly
        over its own stratum

        Parameters
        ----------
        n: int
            number of strata per dimension, n >= 0

        sink: SampleSink or callable
            receives each sample as sink.on_new_sample(x, y) or sink(x, y)
        """
        n = _check_n_strata(n)
        emit = as_sink(sink)
        logger.debug("generating %d uniform stratified samples", n * n)
        for x, y in self._iter_strata(n, 0.0):
            emit(x, y)

    def generate_centered(self, n, centering, sink):
        """
        Generate n*n sample positions, each confined to the central
        part of its stratum

        Within a stratum the jitter covers [centering/2, 1 - centering/2)
        in stratum-local coordinates. centering=0 is equivalent to
        generate_uniform and centering=1 puts every sample at the exact
        stratum center; values outside [0, 1] are used as given.

        Parameters
        ----------
        n: int
            number of strata per dimension, n >= 0

        centering: float
            nominally in [0, 1]

        sink: SampleSink or callable
            receives each sample as sink.on_new_sample(x, y) or sink(x, y)
        """
        n = _check_n_strata(n)
        centering = float(centering)
        emit = as_sink(sink)
        logger.debug(
            "generating %d stratified samples with centering=%g", n * n, centering
        )
        for x, y in self._iter_strata(n, centering):
            emit(x, y)

    def iter_uniform(self, n):
        """
        Lazily generate the samples of generate_uniform

        Returns
        -------
        samples: generator of Sample
            a new generator drawing from the shared random source
        """
        n = _check_n_strata(n)
        return self._iter_strata(n, 0.0)

    def iter_centered(self, n, centering):
        """
        Lazily generate the samples of generate_centered

        Returns
        -------
        samples: generator of Sample
            a new generator drawing from the shared random source
        """
        n = _check_n_strata(n)
        return self._iter_strata(n, float(centering))

    def _iter_strata(self, n, centering):
        start, span = _jitter_window(centering)
        for sy in range(n):
            for sx in range(n):
                ux, uy = self._random_source.next_floats(2).astype(np.float64)
                x = _to_biunit(_stratum_coord(ux, sx, n, start, span))
                y = _to_biunit(_stratum_coord(uy, sy, n, start, span))
                yield Sample(float(x), float(y))


def _check_n_strata(n):
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"number of strata must be non-negative, got {n}")
    return n
