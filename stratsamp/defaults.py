"""
Useful default values
"""

DEFAULT_SEED = 0

# fraction of each stratum excluded from the jitter, split evenly on both sides
DEFAULT_CENTERING = 0.0

# number of uniforms drawn per jax.random.uniform call
DEFAULT_BLOCK_SIZE = 4_096

# output domain of StratifiedSampler
BIUNIT_MIN = -1.0
BIUNIT_MAX = 1.0
