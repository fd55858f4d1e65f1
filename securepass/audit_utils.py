# securepass/audit_utils.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional

from securepass.entropy_utils import EntropySource
from securepass.sampling_utils import UnbiasedSampler


@dataclass(frozen=True)
class UniformityReport:
    counts: List[int]
    samples: int
    chi2: float
    df: int
    p_value: float

    @property
    def expected(self) -> float:
        return self.samples / len(self.counts)

    def passes(self, alpha: float = 0.001) -> bool:
        return self.p_value >= alpha


def chi_squared(counts: List[int]) -> tuple[float, int, float]:
    """
    Pearson's chi-squared statistic for uniformity over len(counts) buckets.
    Returns (chi2, degrees of freedom, approximate upper-tail p-value).
    """
    k = len(counts)
    if k < 2:
        raise ValueError("need at least two buckets")
    total = sum(counts)
    if total == 0:
        raise ValueError("no samples")
    expected = total / k
    chi2 = sum((c - expected) ** 2 / expected for c in counts)
    df = k - 1
    # Wilson–Hilferty: (chi2/df)^(1/3) is roughly normal
    z = (chi2 / df) ** (1 / 3) - (1 - 2 / (9 * df))
    z /= math.sqrt(2 / (9 * df))
    p_value = 0.5 * math.erfc(z / math.sqrt(2))
    return chi2, df, p_value


def audit_sampler(
    n: int,
    samples: int,
    source: Optional[EntropySource] = None,
) -> UniformityReport:
    """Draw `samples` indices in [0, n) and test the counts against uniform."""
    if n < 2:
        raise ValueError("n must be >= 2")
    if samples < 1:
        raise ValueError("samples must be >= 1")
    counts = [0] * n
    with UnbiasedSampler(source) as sampler:
        for _ in range(samples):
            counts[sampler.index(n)] += 1
    chi2, df, p = chi_squared(counts)
    return UniformityReport(counts=counts, samples=samples, chi2=chi2, df=df, p_value=p)
