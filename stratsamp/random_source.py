"""
Seeded sources of uniform floats in [0, 1)

The sampler consumes its randomness through the small RandomSource
interface so that the order of draws is explicit and so that tests
can substitute a scripted sequence for the jax-backed generator.
"""

import operator

import numpy as np
from jax import numpy as jnp
from jax import random as jran

from .defaults import DEFAULT_BLOCK_SIZE

_UINT32_MASK = 0xFFFFFFFF
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF

__all__ = (
    "RandomSource",
    "JaxRandomSource",
    "ScriptedRandomSource",
    "RandomSourceExhaustedError",
    "seed_to_key",
)


class RandomSourceExhaustedError(RuntimeError):
    """Raised when a finite scripted source runs out of values"""


class RandomSource:
    """
    Abstract stream of uniform random floats

    Subclasses implement next_floats; next_float is a single draw
    from the same stream. Every draw advances the stream by exactly
    one value, so next_floats(k) returns the same values as k
    consecutive calls to next_float.

    Consumers that need an (x, y) pair per grid cell read the values
    in x-then-y order: a request for 2*n floats on one grid row is
    interpreted as (x_0, y_0, x_1, y_1, ..., x_{n-1}, y_{n-1}).
    """

    def __init__(self):
        self._draws = 0

    @property
    def draws(self):
        """Number of floats consumed so far"""
        return self._draws

    def next_float(self):
        """Draw the next float uniformly in [0, 1)"""
        return float(self.next_floats(1)[0])

    def next_floats(self, count):
        """
        Draw the next ``count`` floats of the stream

        Parameters
        ----------
        count: int
            number of values to draw, count >= 0

        Returns
        -------
        uran: ndarray of shape (count, )
            values uniformly distributed in [0, 1)
        """
        count = _check_count(count)
        uran = self._draw(count)
        self._draws += count
        return uran

    def _draw(self, count):
        raise NotImplementedError


class JaxRandomSource(RandomSource):
    """
    RandomSource backed by jax.random

    Parameters
    ----------
    seed: int
        any Python integer; it is reduced modulo 2**64

    block_size: int
        number of float32 uniforms generated per call to jax.random.uniform;
        the stream produced by a seed is only reproducible for a fixed block_size
    """

    def __init__(self, seed, block_size=DEFAULT_BLOCK_SIZE):
        super().__init__()
        block_size = operator.index(block_size)
        if block_size < 1:
            raise ValueError(f"block_size must be positive, got {block_size}")
        self._seed = operator.index(seed)
        self._block_size = block_size
        self._key = seed_to_key(self._seed)
        self._buffer = np.zeros(0, dtype=np.float32)
        self._cursor = 0

    @property
    def seed(self):
        return self._seed

    @property
    def block_size(self):
        return self._block_size

    def _refill(self):
        self._key, block_key = jran.split(self._key, 2)
        block = jran.uniform(block_key, shape=(self._block_size,), dtype=jnp.float32)
        self._buffer = np.asarray(block)
        self._cursor = 0

    def _draw(self, count):
        chunks = []
        n_left = count
        while n_left > 0:
            if self._cursor == self._buffer.size:
                self._refill()
            n_take = min(n_left, self._buffer.size - self._cursor)
            chunks.append(self._buffer[self._cursor : self._cursor + n_take])
            self._cursor += n_take
            n_left -= n_take

        if not chunks:
            return np.zeros(0, dtype=np.float32)
        return np.concatenate(chunks)


class ScriptedRandomSource(RandomSource):
    """
    RandomSource replaying a fixed sequence of values

    Parameters
    ----------
    values: sequence of floats
        values to return, each in [0, 1)

    cycle: bool
        when True, restart from the first value once the sequence
        is used up; otherwise RandomSourceExhaustedError is raised
    """

    def __init__(self, values, cycle=False):
        super().__init__()
        values = np.asarray(values, dtype=np.float32).ravel()
        if np.any(values < 0) or np.any(values >= 1):
            raise ValueError("scripted values must lie in [0, 1)")
        if cycle and values.size == 0:
            raise ValueError("cannot cycle over an empty sequence")
        self._values = values
        self._cycle = cycle
        self._cursor = 0

    def _draw(self, count):
        n_values = self._values.size
        if self._cycle:
            indx = (self._cursor + np.arange(count)) % n_values
            self._cursor = int((self._cursor + count) % n_values)
            return self._values[indx]

        if self._cursor + count > n_values:
            msg = "scripted source exhausted after {0} of {1} requested values"
            raise RandomSourceExhaustedError(
                msg.format(n_values - self._cursor, count)
            )
        uran = self._values[self._cursor : self._cursor + count]
        self._cursor += count
        return uran


def seed_to_key(seed):
    """
    Build a jax.random key from an arbitrary integer seed

    Both 32-bit halves of the seed (modulo 2**64) are folded into
    a fixed root key, so that negative and 64-bit seeds are valid
    without enabling jax_enable_x64.

    Parameters
    ----------
    seed: int

    Returns
    -------
    ran_key: jax.random.key
    """
    seed = operator.index(seed) & _UINT64_MASK
    lo, hi = seed & _UINT32_MASK, seed >> 32
    ran_key = jran.fold_in(jran.key(0), lo)
    ran_key = jran.fold_in(ran_key, hi)
    return ran_key


def _check_count(count):
    count = operator.index(count)
    if count < 0:
        raise ValueError(f"cannot draw a negative number of values, got {count}")
    return count
