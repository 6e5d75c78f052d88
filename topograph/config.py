"""Configuration classes for TopoGraph components."""

import random
from dataclasses import dataclass


@dataclass
class GeneratorConfig:
    """Defaults for synthetic dataset generation."""

    # Seed used when the caller does not pass one
    seed: int = 42

    # Inclusive edge weight range
    min_weight: int = 1
    max_weight: int = 10

    # Density label thresholds (exclusive upper bounds)
    sparse_below: float = 0.2
    medium_below: float = 0.4

    def density_label(self, density: float) -> str:
        """Classify an edge density as Sparse, Medium or Dense."""
        if density < self.sparse_below:
            return "Sparse"
        if density < self.medium_below:
            return "Medium"
        return "Dense"

    def random_weight(self, rng: random.Random) -> int:
        return rng.randint(self.min_weight, self.max_weight)


# Global configuration instance
GENERATOR_CONFIG = GeneratorConfig()
