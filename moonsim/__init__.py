from .body import Body, apply_gravity_pair
from .physics import CycleReport, detect_cycle, energy_after, run_positions, trajectory
from .system import System

__all__ = [
    "Body",
    "apply_gravity_pair",
    "System",
    "CycleReport",
    "detect_cycle",
    "energy_after",
    "run_positions",
    "trajectory",
]
