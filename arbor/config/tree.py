"""Genome sampling and branch walk constants."""

# Number of generation levels (trunk is the oldest, leaves are generation 1)
GENERATION_COUNT = 8

# Distance covered by one step of a branch walk
STEP_LENGTH = 5.0

# Trunk dimensions; younger generations shrink by LENGTH_FALLOFF ** (8 / generation)
MAX_LENGTH = 120.0
MAX_SIZE = 6.0
LENGTH_FALLOFF = 0.9

# Per-regeneration multiplicative jitter (+/- 5%)
MAX_DEVIATION_PERCENT = 0.05

# Per-step drift of size and color step scales (1%)
STEP_SCALE_PERCENT = 0.01

# Turn step magnitude range (degrees), interpolated by generation age
MIN_TURN_DEGREES = 1.0
MAX_TURN_DEGREES = 3.0

# Upper bound for the downward pull on a branch heading
MAX_GRAVITY = 0.02

# Branch fan-out, inclusive on both ends
MIN_BRANCHES = 2
MAX_BRANCHES = 3

# Spread between sibling branches is 80-100% of this angle
BRANCH_SPREAD_DEGREES = 45.0
BRANCH_SPREAD_MIN_RATIO = 0.8

# Inherit-from-ancestor blend weight ranges [low, low + span)
SIZE_FROM_ANCESTOR_MIN = 0.6
SIZE_FROM_ANCESTOR_SPAN = 0.4
COLOR_FROM_ANCESTOR_MIN = 0.8
COLOR_FROM_ANCESTOR_SPAN = 0.2

# Base color channels are drawn from [COLOR_CHANNEL_MIN, 1.0)
COLOR_CHANNEL_MIN = 0.5
