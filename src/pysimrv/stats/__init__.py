"""Summary statistics for sampled sequences."""

from pysimrv.stats.mean import Mean
from pysimrv.stats.variance import Variance

__all__ = [
    "Mean",
    "Variance",
]
