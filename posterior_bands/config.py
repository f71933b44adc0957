"""Interval configuration shared by the summarizer and the runner script."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .errors import InvalidProbabilityError

DEFAULT_LOWER_PROB = 0.025
DEFAULT_UPPER_PROB = 0.975


@dataclass(frozen=True)
class SummaryConfig:
    """Probabilities bounding the two-sided credible interval.

    Attributes:
        lower_prob: Quantile probability of the lower bound.
        upper_prob: Quantile probability of the upper bound.
    """

    lower_prob: float = DEFAULT_LOWER_PROB
    upper_prob: float = DEFAULT_UPPER_PROB

    @classmethod
    def from_mass(cls, mass: float) -> "SummaryConfig":
        """Build a central interval holding ``mass`` of the posterior.

        Args:
            mass (float): Credible mass in [0, 1], e.g. ``0.9`` for a 90%
                interval.

        Returns:
            SummaryConfig: Config with ``lower_prob = (1 - mass) / 2`` and
            ``upper_prob = 1 - lower_prob``.

        Raises:
            InvalidProbabilityError: If ``mass`` is non-finite or outside [0, 1].
        """
        m = float(mass)
        if not math.isfinite(m) or m < 0.0 or m > 1.0:
            raise InvalidProbabilityError([mass], "credible mass must lie in [0, 1]")
        tail = (1.0 - m) / 2.0
        return cls(lower_prob=tail, upper_prob=1.0 - tail)

    @property
    def mass(self) -> float:
        return self.upper_prob - self.lower_prob


DEFAULT_CONFIG = SummaryConfig()
