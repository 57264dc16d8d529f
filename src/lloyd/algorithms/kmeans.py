"""
K-means clustering algorithm.

Lloyd's k-means over any item type with a Metric, implemented using the
modular framework.
"""

from typing import Any, List, Optional, Sequence, Tuple, Union
import torch

from ..base.clustering_base import BaseClusteringAlgorithm
from ..base.interfaces import Metric, InitializationStrategy
from ..base.exceptions import InvalidArgumentError
from ..assignments.hard import NearestCentroidAssignment
from ..distances import get_metric
from ..initialization.random import SamplingInit, RangeInit
from ..initialization.from_previous import FromPreviousInit
from ..updates.mean import MeanUpdater, EMPTY_CLUSTER_POLICIES
from ..utils.convergence import CentroidsUnchanged, UnchangedAssignments
from ..utils.validation import check_option

CONVERGENCE_MODES = ('centroids', 'assignments')


class KMeans(BaseClusteringAlgorithm):
    """K-means clustering algorithm.

    Classic Lloyd iteration: assign every item to its nearest centroid,
    move each centroid to the mean of its items, repeat until the centroid
    set stops changing.

    Parameters
    ----------
    n_clusters : int
        Number of clusters
    metric : str or Metric, default='euclidean'
        Item type and distance: 'scalar', 'euclidean' (2-D points) or a
        Metric instance
    init : str, InitializationStrategy or sequence, default='sample'
        Initialization method:
        - 'sample' : k distinct dataset items chosen at random
        - 'range' : k distinct random values inside the dataset bounds
        - InitializationStrategy instance
        - sequence of n_clusters items : use as initial centroids
    max_iter : int or None, default=300
        Maximum number of iterations; None iterates until convergence
    tol : float, default=0.0
        Largest centroid movement still counted as converged. 0 requires
        the recomputed centroids to equal the current ones exactly
    convergence : str, default='centroids'
        'centroids' stops when the centroid set is unchanged, 'assignments'
        when every item keeps its cluster
    empty_cluster : str, default='keep'
        What to do when a centroid receives no items: 'keep' it unchanged
        or raise ('error')
    verbose : int, default=0
        Verbosity level
    random_state : int or torch.Generator, optional
        Random seed or generator for reproducibility

    Attributes
    ----------
    cluster_centers_ : list of length n_clusters
        Final centroids
    clusters_ : list of n_clusters lists
        Items of each cluster, index-aligned with cluster_centers_
    labels_ : Tensor of shape (n_samples,)
        Cluster assignments for training data
    inertia_ : float
        Sum of squared distances to the assigned centroid
    n_iter_ : int
        Number of iterations run
    history_ : list of AlgorithmState
        Per-iteration diagnostics
    """

    def __init__(self,
                 n_clusters: int,
                 metric: Union[str, Metric] = 'euclidean',
                 init: Union[str, InitializationStrategy, Sequence[Any]] = 'sample',
                 max_iter: Optional[int] = 300,
                 tol: float = 0.0,
                 convergence: str = 'centroids',
                 empty_cluster: str = 'keep',
                 verbose: int = 0,
                 random_state: Optional[Union[int, torch.Generator]] = None):
        """Initialize K-means algorithm."""
        super().__init__(
            n_clusters=n_clusters,
            max_iter=max_iter,
            verbose=verbose,
            random_state=random_state
        )
        self.metric = metric
        self.init = init
        self.tol = tol
        self.convergence = convergence
        self.empty_cluster = empty_cluster

    def _create_components(self) -> None:
        """Create K-means specific components."""
        check_option('convergence', self.convergence, CONVERGENCE_MODES)
        check_option('empty_cluster', self.empty_cluster, EMPTY_CLUSTER_POLICIES)

        self.metric_ = get_metric(self.metric)

        # Assignment strategy
        self.assignment_strategy = NearestCentroidAssignment()

        # Update strategy
        self.update_strategy = MeanUpdater(empty_cluster=self.empty_cluster)

        # Initialization
        if isinstance(self.init, str):
            if self.init == 'sample':
                self.initialization_strategy = SamplingInit()
            elif self.init == 'range':
                self.initialization_strategy = RangeInit()
            else:
                raise InvalidArgumentError(f"Unknown init method: {self.init}")
        elif isinstance(self.init, InitializationStrategy):
            self.initialization_strategy = self.init
        else:
            # Custom initial centroids provided
            self.initialization_strategy = FromPreviousInit(self.init)

        # Convergence criterion
        if self.convergence == 'centroids':
            self.convergence_criterion = CentroidsUnchanged(tol=self.tol)
        else:
            self.convergence_criterion = UnchangedAssignments()

    def fit(self, X: Any, y: Optional[Any] = None) -> 'KMeans':
        """Fit K-means clustering.

        Parameters
        ----------
        X : sequence of items, or array/tensor of shape (n_samples, n_features)
            Training data
        y : Ignored
            Not used, present for API consistency

        Returns
        -------
        self : KMeans
            Fitted estimator
        """
        super().fit(X, y)
        return self

    def get_params(self, deep: bool = True) -> dict:
        """Get parameters (sklearn compatibility)."""
        params = super().get_params(deep)
        params.update({
            'metric': self.metric,
            'init': self.init,
            'tol': self.tol,
            'convergence': self.convergence,
            'empty_cluster': self.empty_cluster
        })
        return params


def run_kmeans(dataset: Any, k: int,
               metric: Union[str, Metric] = 'euclidean',
               **kwargs) -> Tuple[List[Any], List[List[Any]]]:
    """Cluster a dataset and return the converged centroids and clusters.

    Args:
        dataset: Non-empty sequence of items
        k: Number of clusters, 1 <= k <= len(dataset)
        metric: Metric instance or registry name
        **kwargs: Further KMeans options (init, max_iter, tol, random_state, ...)

    Returns:
        centroids: List of k centroids
        clusters: k lists of items; clusters[i] belongs to centroids[i]

    Raises:
        InvalidArgumentError: k <= 0, k > len(dataset) or empty dataset
        DidNotConvergeError: max_iter reached without a fixed point
    """
    model = KMeans(n_clusters=k, metric=metric, **kwargs).fit(dataset)
    return model.cluster_centers_, model.clusters_
