"""
Mean update strategy for centroid-based clustering.
"""

from typing import Any, List
import warnings

from ..base.interfaces import ParameterUpdater, Metric
from ..base.exceptions import EmptyClusterError, InvalidArgumentError

EMPTY_CLUSTER_POLICIES = ('keep', 'error')


class MeanUpdater(ParameterUpdater):
    """Recomputes each centroid as the mean of its assigned items.

    A centroid that received no items cannot be averaged. With
    ``empty_cluster='keep'`` it is carried over unchanged and a warning is
    issued; with ``'error'`` the run fails with EmptyClusterError.
    """

    def __init__(self, empty_cluster: str = 'keep'):
        """
        Args:
            empty_cluster: Policy for empty clusters, 'keep' or 'error'
        """
        if empty_cluster not in EMPTY_CLUSTER_POLICIES:
            raise InvalidArgumentError(f"empty_cluster must be one of {EMPTY_CLUSTER_POLICIES}, "
                                       f"got {empty_cluster!r}")
        self.empty_cluster = empty_cluster

    def update(self, clusters: List[List[Any]], centroids: List[Any],
               metric: Metric, **kwargs) -> List[Any]:
        """Compute the next centroid set.

        Args:
            clusters: k groups of items
            centroids: Current k centroids, index-aligned with clusters
            metric: Metric providing the mean
            **kwargs: Ignored

        Returns:
            New list of k centroids
        """
        if len(clusters) != len(centroids):
            raise InvalidArgumentError(f"Got {len(clusters)} clusters for {len(centroids)} centroids")

        new_centroids = []
        for k, members in enumerate(clusters):
            if members:
                new_centroids.append(metric.mean(members))
                continue

            if self.empty_cluster == 'error':
                raise EmptyClusterError(f"Cluster {k} has no members; its mean is undefined",
                                        cluster_idx=k)

            # No points assigned - keep current centroid
            warnings.warn(f"Cluster {k} is empty; keeping centroid {centroids[k]!r}")
            new_centroids.append(centroids[k])

        return new_centroids
