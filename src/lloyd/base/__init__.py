"""Base classes, interfaces and error types for the Lloyd clustering engine."""

from .interfaces import (
    Metric,
    InitializationStrategy,
    AssignmentStrategy,
    ParameterUpdater,
    ConvergenceCriterion
)

from .data_structures import (
    Point,
    AlgorithmState
)

from .exceptions import (
    KMeansError,
    InvalidArgumentError,
    ResourceExhaustedError,
    DidNotConvergeError,
    EmptyClusterError
)

from .clustering_base import BaseClusteringAlgorithm

__all__ = [
    # Interfaces
    'Metric',
    'InitializationStrategy',
    'AssignmentStrategy',
    'ParameterUpdater',
    'ConvergenceCriterion',

    # Data structures
    'Point',
    'AlgorithmState',

    # Errors
    'KMeansError',
    'InvalidArgumentError',
    'ResourceExhaustedError',
    'DidNotConvergeError',
    'EmptyClusterError',

    # Base algorithm
    'BaseClusteringAlgorithm'
]
