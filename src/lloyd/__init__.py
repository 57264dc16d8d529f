"""
Lloyd: k-means clustering over generic metric spaces.

This package implements Lloyd's algorithm for any item type that provides a
distance and a mean:
- Scalars (absolute difference)
- 2-D points (Euclidean distance)

Example usage:
    >>> from lloyd import KMeans, run_kmeans
    >>>
    >>> data = [(11, 52), (43, 24), (5, 57), (52, 4), (94, 22), (15, 56)]
    >>>
    >>> # Function interface
    >>> centroids, clusters = run_kmeans(data, k=2, metric='euclidean', random_state=0)
    >>>
    >>> # Estimator interface
    >>> kmeans = KMeans(n_clusters=2, metric='euclidean', random_state=0, verbose=1)
    >>> kmeans.fit(data)
    >>> labels = kmeans.predict(data)
"""

__version__ = '0.1.0'

# Core data structures and errors
from .base import (
    Metric,
    Point,
    AlgorithmState,
    KMeansError,
    InvalidArgumentError,
    ResourceExhaustedError,
    DidNotConvergeError,
    EmptyClusterError
)

# Import main algorithm
from .algorithms.kmeans import KMeans, run_kmeans

# Metrics
from .distances import ScalarMetric, EuclideanMetric, get_metric

__all__ = [
    # Algorithm
    'KMeans',
    'run_kmeans',

    # Metrics
    'Metric',
    'ScalarMetric',
    'EuclideanMetric',
    'get_metric',

    # Core data structures
    'Point',
    'AlgorithmState',

    # Errors
    'KMeansError',
    'InvalidArgumentError',
    'ResourceExhaustedError',
    'DidNotConvergeError',
    'EmptyClusterError',

    # Version
    '__version__'
]
