"""Utility functions for the Lloyd clustering engine."""

from .convergence import (
    CentroidsUnchanged,
    UnchangedAssignments
)

from .metrics import (
    inertia,
    cluster_sizes,
    is_partition
)

from .validation import (
    validate_dataset,
    check_n_clusters,
    check_random_state,
    check_option,
    check_distinct
)

__all__ = [
    # Convergence criteria
    'CentroidsUnchanged',
    'UnchangedAssignments',

    # Metrics
    'inertia',
    'cluster_sizes',
    'is_partition',

    # Validation
    'validate_dataset',
    'check_n_clusters',
    'check_random_state',
    'check_option',
    'check_distinct'
]
