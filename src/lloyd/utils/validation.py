"""
Input validation utilities.

Provides functions for validating the dataset, the number of clusters, the
random source and string options before any clustering work starts.
"""

from typing import Any, Iterable, List, Optional, Tuple, Union
import torch
from torch import Tensor
import numpy as np

from ..base.interfaces import Metric
from ..base.exceptions import InvalidArgumentError


def validate_dataset(dataset: Union[Tensor, np.ndarray, list, tuple],
                     metric: Metric,
                     ensure_finite: bool = True) -> Tuple[List[Any], Tensor]:
    """Validate a dataset and encode it for the metric.

    Args:
        dataset: Sequence of items, or an array/tensor of encoded items
        metric: Metric used to encode the items
        ensure_finite: Whether to reject inf/nan coordinates

    Returns:
        items: List of dataset items (original objects for sequences,
               decoded items for arrays/tensors)
        points: (n, d) float64 tensor

    Raises:
        InvalidArgumentError: If the dataset is empty or malformed
    """
    if dataset is None:
        raise InvalidArgumentError("Dataset must not be None")

    points = metric.encode(dataset)

    if points.shape[0] == 0:
        raise InvalidArgumentError("Dataset must contain at least one item")

    if ensure_finite and not torch.isfinite(points).all():
        raise InvalidArgumentError("Dataset contains NaN or infinite values")

    if isinstance(dataset, (Tensor, np.ndarray)):
        items = [metric.decode(row) for row in points]
    else:
        items = list(dataset)

    return items, points


def check_n_clusters(n_clusters: int, n_samples: int) -> None:
    """Validate number of clusters.

    Args:
        n_clusters: Number of clusters
        n_samples: Number of samples

    Raises:
        InvalidArgumentError: If invalid
    """
    if isinstance(n_clusters, bool) or not isinstance(n_clusters, (int, np.integer)):
        raise InvalidArgumentError(f"n_clusters must be int, got {type(n_clusters).__name__}")

    if n_clusters <= 0:
        raise InvalidArgumentError(f"n_clusters must be positive, got {n_clusters}")

    if n_clusters > n_samples:
        raise InvalidArgumentError(f"n_clusters ({n_clusters}) cannot be larger than "
                                   f"n_samples ({n_samples})")


def check_random_state(random_state: Optional[Union[int, torch.Generator]]) -> torch.Generator:
    """Create generator from random state.

    Args:
        random_state: Seed, generator, or None for a fresh non-deterministic generator

    Returns:
        Generator
    """
    if random_state is None:
        generator = torch.Generator()
        generator.seed()
        return generator
    elif isinstance(random_state, torch.Generator):
        return random_state
    elif isinstance(random_state, (int, np.integer)) and not isinstance(random_state, bool):
        generator = torch.Generator()
        generator.manual_seed(int(random_state))
        return generator
    else:
        raise InvalidArgumentError(
            f"random_state must be int or Generator, got {type(random_state).__name__}"
        )


def check_option(name: str, value: Any, allowed: Iterable[Any]) -> None:
    """Validate that a string option is one of the allowed values."""
    allowed = tuple(allowed)
    if value not in allowed:
        raise InvalidArgumentError(f"{name} must be one of {allowed}, got {value!r}")


def check_distinct(items: List[Any], what: str = "centroids") -> None:
    """Raise if a list of (hashable) items contains duplicate values."""
    seen = set()
    for item in items:
        if item in seen:
            raise InvalidArgumentError(f"Duplicate value in {what}: {item!r}")
        seen.add(item)
