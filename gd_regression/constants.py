"""
Numeric defaults shared by the trainers, the CLI and the plotting script.
"""

DEFAULT_LEARNING_RATE = 0.1
DEFAULT_ITERATIONS = 1000
DEFAULT_BATCH_SIZE = 10
DEFAULT_DECISION_BOUNDARY = 0.5

# Added inside every log() of the cross-entropy so saturated predictions stay finite.
LOG_EPSILON = 1e-7

# Bold-driver factors.
RATE_DECAY = 0.5
RATE_GROWTH = 1.05

SIGMOID_CLIP = 500.0
