"""Callback contract used to deliver samples"""

import typing

import numpy as np

__all__ = (
    "Sample",
    "SampleSink",
    "SampleCollector",
    "as_sink",
)


class Sample(typing.NamedTuple):
    """
    A single sample position

    Parameters
    ----------
    x: float
        x coordinate in the bi-unit square

    y: float
        y coordinate in the bi-unit square
    """

    x: float
    y: float


@typing.runtime_checkable
class SampleSink(typing.Protocol):
    """
    Receiver of generated samples

    on_new_sample is called synchronously once per stratum. Its return
    value is ignored and any exception it raises propagates to the
    caller of the generation method.
    """

    def on_new_sample(self, x: float, y: float) -> None: ...


def as_sink(sink):
    """
    Normalize a sink into a callable taking (x, y)

    Parameters
    ----------
    sink: SampleSink or callable
        either an object with an on_new_sample(x, y) method
        or a plain function of (x, y)

    Returns
    -------
    emit: callable
    """
    if isinstance(sink, SampleSink):
        return sink.on_new_sample
    if callable(sink):
        return sink
    msg = "sink must be callable or define on_new_sample(x, y), got {0}"
    raise TypeError(msg.format(type(sink).__name__))


class SampleCollector:
    """Sink that keeps every sample it receives"""

    def __init__(self):
        self.samples = []

    def on_new_sample(self, x, y):
        self.samples.append(Sample(x, y))

    def __len__(self):
        return len(self.samples)

    def __iter__(self):
        return iter(self.samples)

    def clear(self):
        self.samples = []

    def as_array(self):
        """
        Returns
        -------
        xy: ndarray of shape (n_samples, 2)
        """
        if not self.samples:
            return np.zeros((0, 2))
        return np.array(self.samples, dtype=float)
