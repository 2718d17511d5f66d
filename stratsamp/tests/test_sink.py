""" """

import numpy as np
import pytest

from ..sink import Sample, SampleCollector, SampleSink, as_sink


class _RecordingSink:
    def __init__(self):
        self.calls = []

    def on_new_sample(self, x, y):
        self.calls.append((x, y))


def test_as_sink_accepts_objects_and_callables():
    recorder = _RecordingSink()
    assert isinstance(recorder, SampleSink)
    as_sink(recorder)(0.5, -0.5)
    assert recorder.calls == [(0.5, -0.5)]

    calls = []
    as_sink(lambda x, y: calls.append((x, y)))(0.1, 0.2)
    assert calls == [(0.1, 0.2)]


def test_as_sink_rejects_other_objects():
    with pytest.raises(TypeError):
        as_sink(42)


def test_sample_collector():
    collector = SampleCollector()
    assert len(collector) == 0
    assert collector.as_array().shape == (0, 2)

    collector.on_new_sample(0.25, -0.75)
    collector.on_new_sample(-1.0, 0.5)
    assert len(collector) == 2
    assert list(collector) == [Sample(0.25, -0.75), Sample(-1.0, 0.5)]
    assert collector.samples[0].x == 0.25
    assert collector.samples[1].y == 0.5

    xy = collector.as_array()
    assert xy.shape == (2, 2)
    assert np.allclose(xy, [[0.25, -0.75], [-1.0, 0.5]])

    collector.clear()
    assert len(collector) == 0
