"""
Euclidean metric for 2-D coordinates.

The usual straight-line distance in the plane. Means are taken per axis.
"""

from typing import Sequence, Tuple, Union
import torch
from torch import Tensor

from ..base.interfaces import Metric
from ..base.data_structures import Point
from ..base.exceptions import InvalidArgumentError


class EuclideanMetric(Metric[Point]):
    """Euclidean distance between (x, y) coordinates.

    Computes sqrt((a.x - b.x)² + (a.y - b.y)²). Items may be ``Point``
    instances or any length-2 sequence of reals; decoded items are ``Point``.
    """

    @property
    def dimension(self) -> int:
        return 2

    def encode(self, items: Union[Sequence[Tuple[float, float]], Tensor]) -> Tensor:
        """Convert coordinates to an (n, 2) tensor."""
        try:
            coords = torch.as_tensor(items, dtype=self.dtype)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(f"Coordinate items must be (x, y) pairs: {exc}") from exc

        if coords.numel() == 0:
            return coords.reshape(0, 2)
        if coords.dim() != 2 or coords.shape[1] != 2:
            raise InvalidArgumentError(f"Expected (n, 2) coordinates, got shape {tuple(coords.shape)}")
        return coords

    def decode(self, row: Tensor) -> Point:
        return Point(float(row[0]), float(row[1]))

    def distance_to_point(self, points: Tensor, center: Tensor) -> Tensor:
        """Compute Euclidean distances from points to a center.

        Args:
            points: (n, 2) tensor of coordinates
            center: (2,) tensor

        Returns:
            (n,) tensor of distances
        """
        diff = points - center.unsqueeze(0)
        return torch.sqrt(torch.sum(diff * diff, dim=1))
