"""
Drives a System forward and reports either its energy at a fixed checkpoint or
the first step at which an exact earlier state comes back.
"""

from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass
from typing import Dict, Iterable, List, Literal, Optional

from .constants import DEFAULT_MAX_ITERATIONS
from .system import State, System

logger = logging.getLogger(__name__)

ENERGY_AT_CAP = "total_energy_at_cap"
CYCLE_FOUND = "cycle_found"


@dataclass
class CycleReport:
    outcome: Literal["total_energy_at_cap", "cycle_found"]
    value: int
    iterations: int
    first_seen: Optional[int] = None
    period: Optional[int] = None

    @property
    def cycle_found(self) -> bool:
        return self.outcome == CYCLE_FOUND

    def describe(self) -> str:
        if self.cycle_found:
            return f"Found a duplicate state after {self.value} iterations"
        return f"Total energy: {self.value}"


def detect_cycle(
    system: System,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    seen: Optional[Dict[State, int]] = None,
) -> CycleReport:
    """
    Step ``system`` until the iteration cap is hit or a state repeats.

    The cap is checked before the state is recorded, so reaching it always
    yields the energy outcome even if that step would also have repeated.
    ``seen`` maps every recorded state to the iteration that produced it; the
    pre-step state of ``system`` is not recorded.
    """
    if not isinstance(max_iterations, numbers.Integral) or max_iterations <= 0:
        raise ValueError(f"max_iterations must be a positive integer, got {max_iterations!r}")
    if seen is None:
        seen = {}

    logger.debug(
        "Searching for a repeated state among %d bodies (cap %d)",
        len(system),
        max_iterations,
    )
    count = 0
    while True:
        system.step()
        count += 1
        if count == max_iterations:
            energy = system.total_energy()
            logger.info("Reached %d iterations, total energy %d", count, energy)
            return CycleReport(outcome=ENERGY_AT_CAP, value=energy, iterations=count)

        state = system.state()
        first_seen = seen.get(state)
        if first_seen is not None:
            logger.info(
                "State after iteration %d repeats iteration %d", count, first_seen
            )
            return CycleReport(
                outcome=CYCLE_FOUND,
                value=count,
                iterations=count,
                first_seen=first_seen,
                period=count - first_seen,
            )
        seen[state] = count


def energy_after(system: System, steps: int) -> int:
    """Advance ``system`` by ``steps`` steps and return its total energy."""
    if not isinstance(steps, numbers.Integral) or steps < 0:
        raise ValueError(f"steps must be a non-negative integer, got {steps!r}")
    for _ in range(steps):
        system.step()
    return system.total_energy()


def run_positions(
    positions: Iterable[Iterable[int]],
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> CycleReport:
    return detect_cycle(System(positions), max_iterations=max_iterations)


def trajectory(system: System, steps: int) -> List[State]:
    """
    Preview the states ``system`` passes through over the next ``steps``
    steps. The system itself is left where it was.
    """
    if not isinstance(steps, numbers.Integral) or steps < 0:
        raise ValueError(f"steps must be a non-negative integer, got {steps!r}")
    return system.sample_states(steps)
