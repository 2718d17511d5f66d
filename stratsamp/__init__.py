""""""

# flake8: noqa

from .defaults import DEFAULT_SEED, DEFAULT_CENTERING, DEFAULT_BLOCK_SIZE
from .random_source import (
    RandomSource,
    JaxRandomSource,
    ScriptedRandomSource,
    RandomSourceExhaustedError,
)
from .sink import Sample, SampleSink, SampleCollector, as_sink
from .stratified_sampling import StratifiedSampler
from .utils.stratified_grid import (
    stratified_xy_grid,
    stratified_grid_scaled,
    stratified_biunit_grid,
)

__version__ = "0.1.0"
