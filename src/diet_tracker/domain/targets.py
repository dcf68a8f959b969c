"""Daily target settings."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Targets:
    """Daily nutrition and activity targets for a user."""

    calories_target: float = 2000
    protein_target: float = 120
    steps_target: float = 10000
