"""
Error types raised by the clustering engine.

Every error aborts the run; no partial result is returned. The argument and
empty-cluster errors subclass ValueError, the resource and convergence errors
subclass RuntimeError, so callers catching the builtin types keep working.
"""

from typing import Any, List, Optional


class KMeansError(Exception):
    """Base class for all clustering errors."""


class InvalidArgumentError(KMeansError, ValueError):
    """Raised for bad inputs: k <= 0, k > n, empty dataset, empty centroid set."""


class ResourceExhaustedError(KMeansError, RuntimeError):
    """Raised when an initializer runs out of attempts to find distinct centroids."""

    def __init__(self, message: str, attempts: int, found: int):
        super().__init__(message)
        self.attempts = attempts
        self.found = found


class DidNotConvergeError(KMeansError, RuntimeError):
    """Raised when the iteration cap is reached without a fixed point."""

    def __init__(self, message: str, n_iter: int,
                 centroids: Optional[List[Any]] = None):
        super().__init__(message)
        self.n_iter = n_iter
        self.centroids = centroids


class EmptyClusterError(KMeansError, ValueError):
    """Raised when a centroid receives no points and the policy forbids keeping it."""

    def __init__(self, message: str, cluster_idx: int):
        super().__init__(message)
        self.cluster_idx = cluster_idx
