"""
Main class for handling a system of moons.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple

from .body import Body, apply_gravity_pair

State = Tuple[int, ...]


class System:
    """
    Container that owns Body instances, applies the pairwise gravity rule and
    advances every body one discrete step at a time.
    """

    def __init__(self, positions: Iterable[Iterable[int]]) -> None:
        self.bodies: List[Body] = [Body(position) for position in positions]
        if not self.bodies:
            raise ValueError("A system needs at least one body")

    def __len__(self) -> int:
        return len(self.bodies)

    def pairs(self) -> Iterator[Tuple[int, int]]:
        """Yield every unordered pair of body indices exactly once."""
        count = len(self.bodies)
        for i in range(count):
            for j in range(i + 1, count):
                yield i, j

    def step(self) -> None:
        """
        Apply gravity for all pairs, then move every body. The two phases are
        never interleaved.
        """
        for i, j in self.pairs():
            apply_gravity_pair(self.bodies[i], self.bodies[j])
        for body in self.bodies:
            body.update_position()

    def total_energy(self) -> int:
        return sum(body.total_energy() for body in self.bodies)

    def state(self) -> State:
        """Flatten (px, py, pz, vx, vy, vz) for each body in system order."""
        snapshot: List[int] = []
        for body in self.bodies:
            snapshot.extend(body.state())
        return tuple(snapshot)

    def sample_states(self, steps: int) -> List[State]:
        """
        Return the state after each of the next ``steps`` steps without
        changing the live system.
        """
        if steps < 0:
            raise ValueError("steps must be non-negative")

        # Restored in the finally block below.
        preserved_state = [
            (body, body.position.copy(), body.velocity.copy()) for body in self.bodies
        ]

        samples: List[State] = []
        try:
            for _ in range(steps):
                self.step()
                samples.append(self.state())
        finally:
            for body, position, velocity in preserved_state:
                body.position = position
                body.velocity = velocity
        return samples
