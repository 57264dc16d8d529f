"""Clustering algorithm implementations."""

from .kmeans import KMeans, run_kmeans

__all__ = [
    'KMeans',
    'run_kmeans'
]
