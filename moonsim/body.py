"""
Mutable representation of a moon that belongs to a System.
"""

from __future__ import annotations

from typing import Iterable, Tuple

from .vector import Vector3, add_assign, signum, vector3, zero


class Body:
    """
    A point mass with an integer position and velocity. Bodies start at rest
    and are mutated in place by the owning System on every step.
    """

    def __init__(self, position: Iterable[int]) -> None:
        self.position: Vector3 = vector3(position)
        self.velocity: Vector3 = zero()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(position={self.position.tolist()}, "
            f"velocity={self.velocity.tolist()})"
        )

    def update_position(self) -> None:
        """Move by the current velocity. Only valid once gravity is applied."""
        add_assign(self.position, self.velocity)

    def potential_energy(self) -> int:
        return int(abs(self.position).sum())

    def kinetic_energy(self) -> int:
        return int(abs(self.velocity).sum())

    def total_energy(self) -> int:
        return self.potential_energy() * self.kinetic_energy()

    def state(self) -> Tuple[int, ...]:
        return tuple(int(v) for v in self.position) + tuple(
            int(v) for v in self.velocity
        )


def apply_gravity_pair(a: Body, b: Body) -> None:
    """
    Pull two bodies one unit of velocity toward each other on every axis.

    The sign is taken once from the positions before either velocity changes,
    so the result does not depend on which body is passed first.
    """
    pull = signum(a.position - b.position)
    a.velocity -= pull
    b.velocity += pull
