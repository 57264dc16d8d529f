"""Assignment strategies for the convergence loop."""

from .hard import NearestCentroidAssignment, partition

__all__ = [
    'NearestCentroidAssignment',
    'partition'
]
