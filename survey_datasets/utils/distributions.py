"""Distribution sampling utilities for survey dataset generation."""

import numpy as np
from typing import Union, Tuple, Optional, Sequence
import logging

logger = logging.getLogger(__name__)


class DistributionSampler:
    """Seeded handle for every random draw made while building the datasets.

    One sampler is created per run and passed explicitly to each
    generation function, so draws are consumed in a fixed order and a
    given seed always reproduces the same tables.
    """

    def __init__(self, seed: Optional[int] = None):
        """Initialize the sampler.

        Args:
            seed: Random seed for reproducibility
        """
        self.seed = seed
        self.rng = np.random.RandomState(seed)
        logger.debug(f"Initialized DistributionSampler with seed={seed}")

    def sample_integers(self, low: int, high: int,
                        size: Union[int, Tuple] = 1) -> np.ndarray:
        """Sample integers uniformly from the closed range [low, high].

        Args:
            low: Smallest value
            high: Largest value (inclusive)
            size: Output shape

        Returns:
            Integer samples
        """
        if low > high:
            raise ValueError(f"Lower bound {low} is greater than upper bound {high}")

        return self.rng.randint(low, high + 1, size)

    def sample_uniform(self, low: float, high: float,
                       size: Union[int, Tuple] = 1,
                       decimals: Optional[int] = None) -> np.ndarray:
        """Sample from a continuous uniform distribution.

        Args:
            low: Lower bound
            high: Upper bound
            size: Output shape
            decimals: Round samples to this many decimals if given

        Returns:
            Uniform samples
        """
        if low > high:
            raise ValueError(f"Lower bound {low} is greater than upper bound {high}")

        samples = self.rng.uniform(low, high, size)
        if decimals is not None:
            samples = np.round(samples, decimals)
        return samples

    def sample_normal(self, mean: float, std: float,
                      size: Union[int, Tuple] = 1) -> np.ndarray:
        if std < 0:
            raise ValueError("Standard deviation must be non-negative")

        return self.rng.normal(mean, std, size)

    def sample_poisson(self, lam: float, size: Union[int, Tuple] = 1) -> np.ndarray:
        """Sample event counts from a Poisson distribution.

        Args:
            lam: Expected number of events
            size: Output shape

        Returns:
            Non-negative integer samples
        """
        if lam < 0:
            raise ValueError("Poisson rate must be non-negative")

        return self.rng.poisson(lam, size)

    def sample_log_uniform(self, low_exponent: float, high_exponent: float,
                           size: Union[int, Tuple] = 1,
                           base: float = 10.0) -> np.ndarray:
        """Sample from a log-uniform distribution.

        The exponent is drawn uniformly from [low_exponent, high_exponent]
        and then raised to ``base``, giving a right-skewed sample.

        Args:
            low_exponent: Lower bound of the exponent
            high_exponent: Upper bound of the exponent
            size: Output shape
            base: Base of the exponentiation (must be positive)

        Returns:
            Samples in [base**low_exponent, base**high_exponent]
        """
        if base <= 0:
            raise ValueError("Base must be positive for log-uniform distribution")

        exponents = self.sample_uniform(low_exponent, high_exponent, size)
        return np.power(base, exponents)

    def sample_categorical(self, values: Sequence,
                           probabilities: Optional[Sequence[float]] = None,
                           size: Union[int, Tuple] = 1) -> np.ndarray:
        """Sample values from a finite set.

        Args:
            values: Candidate values
            probabilities: Value probabilities (uniform if None, normalized otherwise)
            size: Output shape

        Returns:
            Array of sampled values
        """
        values = list(values)
        if not values:
            raise ValueError("Cannot sample from an empty set of values")

        if probabilities is not None:
            probabilities = np.asarray(probabilities, dtype=float)
            if probabilities.shape != (len(values),):
                raise ValueError(
                    f"Expected {len(values)} probabilities, got {probabilities.size}"
                )
            probabilities = probabilities / probabilities.sum()

        # Sample indices so the result keeps the original value types
        indices = self.rng.choice(len(values), size=size, p=probabilities)
        return np.array(values, dtype=object)[indices]

    @staticmethod
    def clamp(values: np.ndarray, low: float, high: float) -> np.ndarray:
        """Constrain values to the closed interval [low, high]."""
        return np.clip(values, low, high)

    def set_seed(self, seed: int):
        """Set random seed for reproducibility.

        Args:
            seed: Random seed
        """
        self.seed = seed
        self.rng = np.random.RandomState(seed)
        logger.debug(f"Reset seed to {seed}")
