"""
Base class for clustering algorithms built on the Lloyd iteration.

Provides the common algorithmic skeleton alternating between the assignment
and update steps until the convergence criterion reports a fixed point.
"""

from abc import abstractmethod
from typing import Any, Dict, List, Optional, Union
import time
import torch
from torch import Tensor

from .interfaces import (
    Metric, AssignmentStrategy, ParameterUpdater,
    InitializationStrategy, ConvergenceCriterion
)
from .data_structures import AlgorithmState
from .exceptions import DidNotConvergeError, InvalidArgumentError
from ..assignments.hard import partition
from ..utils.metrics import inertia, cluster_sizes
from ..utils.validation import validate_dataset, check_n_clusters, check_random_state


class BaseClusteringAlgorithm:
    """Base class implementing the assign/update loop.

    Subclasses need to specify:
    - Metric
    - Assignment strategy
    - Parameter update strategy
    - Initialization strategy
    - Convergence criterion

    The loop runs Initializing -> Iterating -> Converged. Each iteration
    assigns every item to the current centroids, recomputes the centroids
    from that partition and hands both sets to the convergence criterion.
    On convergence the current centroids and the partition they produced are
    kept, so assigning the data to ``cluster_centers_`` reproduces
    ``clusters_``.
    """

    def __init__(self,
                 n_clusters: int,
                 max_iter: Optional[int] = 300,
                 verbose: int = 0,
                 random_state: Optional[Union[int, torch.Generator]] = None):
        """
        Args:
            n_clusters: Number of clusters K
            max_iter: Maximum iterations (None for no limit)
            verbose: Verbosity level (0=silent, 1=progress, 2=detailed)
            random_state: Random seed or generator for reproducibility
        """
        self.n_clusters = n_clusters
        self.max_iter = max_iter
        self.verbose = verbose
        self.random_state = random_state

        # These will be set by subclasses
        self.metric_: Optional[Metric] = None
        self.assignment_strategy: Optional[AssignmentStrategy] = None
        self.update_strategy: Optional[ParameterUpdater] = None
        self.initialization_strategy: Optional[InitializationStrategy] = None
        self.convergence_criterion: Optional[ConvergenceCriterion] = None

        # Algorithm state
        self._reset_fitted()

    @abstractmethod
    def _create_components(self) -> None:
        """Create algorithm-specific components.

        Subclasses must implement this to instantiate:
        - self.metric_
        - self.assignment_strategy
        - self.update_strategy
        - self.initialization_strategy
        - self.convergence_criterion
        """
        pass

    def _reset_fitted(self) -> None:
        """Forget the results of any previous fit."""
        self.fitted_ = False
        self.n_iter_ = 0
        self.history_: List[AlgorithmState] = []
        self.cluster_centers_: Optional[List[Any]] = None
        self.clusters_: Optional[List[List[Any]]] = None
        self.labels_: Optional[Tensor] = None
        self.inertia_: Optional[float] = None

    def fit(self, X: Any, y: Optional[Any] = None) -> 'BaseClusteringAlgorithm':
        """Fit the clustering model.

        Args:
            X: Sequence of items, or (n, d) array/tensor
            y: Ignored (for sklearn compatibility)

        Returns:
            Self
        """
        return self._fit(X)

    def fit_predict(self, X: Any, y: Optional[Any] = None) -> Tensor:
        """Fit and return cluster assignments.

        Args:
            X: Sequence of items, or (n, d) array/tensor
            y: Ignored

        Returns:
            (n,) tensor of cluster assignments
        """
        self._fit(X)
        return self.labels_

    def predict(self, X: Any) -> Tensor:
        """Assign new data to the fitted centroids.

        Args:
            X: Sequence of items, or (n, d) array/tensor

        Returns:
            (n,) tensor of cluster assignments
        """
        if not self.fitted_:
            raise RuntimeError("Model must be fitted before calling predict")

        _, points = validate_dataset(X, self.metric_)
        centers = self.metric_.encode(self.cluster_centers_)
        return self.assignment_strategy.compute_assignments(points, centers, self.metric_)

    def score(self, X: Any, y: Optional[Any] = None) -> float:
        """Opposite of the inertia of X under the fitted centroids."""
        labels = self.predict(X)
        _, points = validate_dataset(X, self.metric_)
        centers = self.metric_.encode(self.cluster_centers_)
        return -inertia(points, labels, centers, self.metric_)

    def _fit(self, X: Any) -> 'BaseClusteringAlgorithm':
        """Internal fit method implementing the convergence loop."""
        self._create_components()

        # Validate everything before any sampling happens
        items, points = validate_dataset(X, self.metric_)
        check_n_clusters(self.n_clusters, len(items))
        if self.max_iter is not None and self.max_iter < 1:
            raise InvalidArgumentError(f"max_iter must be positive or None, got {self.max_iter}")
        generator = check_random_state(self.random_state)

        self._reset_fitted()

        if self.verbose:
            print(f"Initializing {self.n_clusters} clusters...")

        start_time = time.time()
        centroids = self.initialization_strategy.initialize(
            points, self.n_clusters, self.metric_, generator=generator
        )

        self.convergence_criterion.reset()

        converged = False
        iteration = 0
        while self.max_iter is None or iteration < self.max_iter:
            iteration += 1
            iter_start_time = time.time()

            # Assignment step
            centers = self.metric_.encode(centroids)
            assignments = self.assignment_strategy.compute_assignments(
                points, centers, self.metric_
            )
            clusters = partition(items, assignments, self.n_clusters)

            # Update step
            candidate = self.update_strategy.update(clusters, centroids, self.metric_)

            objective_value = inertia(points, assignments, centers, self.metric_)
            shift = max(self.metric_.distance(old, new) for old, new in zip(centroids, candidate))

            # Check convergence
            converged = self.convergence_criterion.check({
                'iteration': iteration,
                'centroids': centroids,
                'candidate': candidate,
                'assignments': assignments,
                'shift': shift,
                'metric': self.metric_
            })

            self.history_.append(AlgorithmState(
                iteration=iteration,
                centroids=list(centroids),
                candidate=list(candidate),
                cluster_sizes=cluster_sizes(clusters),
                inertia=objective_value,
                shift=shift,
                converged=converged,
                metadata={'empty_clusters': [k for k, members in enumerate(clusters) if not members]}
            ))
            self.n_iter_ = iteration

            # Logging
            iter_time = time.time() - iter_start_time
            if self.verbose >= 2 or (self.verbose >= 1 and iteration % 10 == 0):
                print(f"Iteration {iteration:3d}: inertia = {objective_value:.6f}, "
                      f"shift = {shift:.6g} ({iter_time:.3f}s)")

            if converged:
                if self.verbose:
                    print(f"Converged at iteration {iteration}")
                break

            centroids = candidate

        if not converged:
            raise DidNotConvergeError(
                f"Failed to converge after {self.max_iter} iterations",
                n_iter=self.n_iter_,
                centroids=list(centroids)
            )

        if self.verbose:
            print(f"Total fitting time: {time.time() - start_time:.3f}s")

        self.cluster_centers_ = list(centroids)
        self.clusters_ = clusters
        self.labels_ = assignments
        self.inertia_ = objective_value
        self.fitted_ = True
        return self

    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        """Get parameters (sklearn compatibility)."""
        return {
            'n_clusters': self.n_clusters,
            'max_iter': self.max_iter,
            'verbose': self.verbose,
            'random_state': self.random_state
        }

    def set_params(self, **params) -> 'BaseClusteringAlgorithm':
        """Set parameters (sklearn compatibility)."""
        valid = self.get_params()
        for key, value in params.items():
            if key not in valid:
                raise InvalidArgumentError(f"Invalid parameter {key!r} for {self.__class__.__name__}")
            setattr(self, key, value)
        return self
