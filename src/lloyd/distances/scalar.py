"""
Scalar (1-D) metric.

Items are plain real numbers; distance is the absolute difference.
"""

from typing import Sequence, Union
import torch
from torch import Tensor

from ..base.interfaces import Metric
from ..base.exceptions import InvalidArgumentError


class ScalarMetric(Metric[float]):
    """Absolute-difference metric over real numbers.

    ``distance(a, b) = |a - b|`` and ``mean(xs) = sum(xs) / len(xs)``.
    """

    @property
    def dimension(self) -> int:
        return 1

    def encode(self, items: Union[Sequence[float], Tensor]) -> Tensor:
        """Convert numbers to an (n, 1) tensor.

        Accepts a flat sequence, a 1-D array/tensor, or an (n, 1) array/tensor.
        """
        try:
            values = torch.as_tensor(items, dtype=self.dtype)
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(f"Scalar items must be real numbers: {exc}") from exc

        if values.dim() == 0:
            raise InvalidArgumentError("Expected a sequence of numbers, got a single value")
        if values.dim() == 1:
            return values.unsqueeze(1)
        if values.dim() == 2 and values.shape[1] == 1:
            return values
        raise InvalidArgumentError(f"Expected scalar items, got shape {tuple(values.shape)}")

    def decode(self, row: Tensor) -> float:
        return float(row[0])

    def distance_to_point(self, points: Tensor, center: Tensor) -> Tensor:
        """Absolute difference from each point to the center.

        Args:
            points: (n, 1) tensor
            center: (1,) tensor

        Returns:
            (n,) tensor of distances
        """
        return (points[:, 0] - center[0]).abs()
