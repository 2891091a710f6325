import os
from typing import List

# Steps after which the driver reports energy instead of looking further
DEFAULT_MAX_ITERATIONS = 1000

# Puzzle input
REFERENCE_POSITIONS = [
    (-19, -4, 2),
    (-9, 8, -16),
    (-4, 5, -11),
    (1, 9, -13),
]

# Worked examples with their known energy after a fixed number of steps
EXAMPLE_POSITIONS = {
    "example1": [(-1, 0, 2), (2, -10, -7), (4, -8, 8), (3, 5, -1)],
    "example2": [(-8, -10, 0), (5, 5, 10), (2, -7, 3), (9, -8, -3)],
}


def max_iterations_from_env() -> int:
    return int(os.getenv("MOONSIM_MAX_ITERATIONS", DEFAULT_MAX_ITERATIONS))


def debug_enabled() -> bool:
    return os.getenv("MOONSIM_DEBUG", "false").lower() == "true"


# Upper bounds for a single API request
API_MAX_ITERATIONS = 100_000
API_MAX_STEPS = 100_000
API_MAX_TRAJECTORY_STEPS = 10_000


def cors_origins_from_env() -> List[str]:
    """Comma-separated MOONSIM_CORS_ORIGINS; empty means no CORS middleware."""
    raw = os.getenv("MOONSIM_CORS_ORIGINS", "")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
