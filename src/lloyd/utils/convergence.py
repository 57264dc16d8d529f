"""
Convergence criteria for the Lloyd loop.

- Centroids unchanged between iterations (exact, or within a tolerance)
- Assignments unchanged between iterations
"""

from typing import Any, Dict, Optional
from torch import Tensor

from ..base.interfaces import ConvergenceCriterion
from ..base.exceptions import InvalidArgumentError


class CentroidsUnchanged(ConvergenceCriterion):
    """Convergence when recomputed centroids equal the current ones.

    With ``tol == 0`` the comparison is exact, element by element and in
    index order. Floating-point oscillation can then keep the loop from
    terminating, which is what ``max_iter`` guards against. With ``tol > 0``
    the loop stops once no centroid moved more than ``tol`` under the metric.
    """

    def __init__(self, tol: float = 0.0):
        """
        Args:
            tol: Largest centroid movement still counted as unchanged
        """
        super().__init__()
        if tol < 0:
            raise InvalidArgumentError(f"tol must be non-negative, got {tol}")
        self.tol = tol

    def check(self, current_state: Dict[str, Any]) -> bool:
        """Compare ``centroids`` with ``candidate`` in the state."""
        centroids = current_state['centroids']
        candidate = current_state['candidate']
        shift = current_state.get('shift')

        if shift is None:
            metric = current_state['metric']
            shift = max(metric.distance(a, b) for a, b in zip(centroids, candidate))

        if self.tol == 0:
            converged = list(centroids) == list(candidate)
        else:
            converged = shift <= self.tol

        self.history.append({
            'iteration': current_state.get('iteration', len(self.history)),
            'shift': shift,
            'converged': converged
        })

        return converged


class UnchangedAssignments(ConvergenceCriterion):
    """Convergence when every point keeps its cluster between iterations."""

    def __init__(self):
        super().__init__()
        self._prev_assignments: Optional[Tensor] = None

    def check(self, current_state: Dict[str, Any]) -> bool:
        """Compare ``assignments`` with the previous call's assignments."""
        current_assignments = current_state['assignments']

        if self._prev_assignments is None:
            self._prev_assignments = current_assignments.clone()
            return False

        n_changed = (current_assignments != self._prev_assignments).sum().item()

        self.history.append({
            'iteration': current_state.get('iteration', len(self.history)),
            'n_changed': n_changed
        })

        self._prev_assignments = current_assignments.clone()

        return n_changed == 0

    def reset(self):
        """Reset history and forget the previous assignments."""
        super().reset()
        self._prev_assignments = None
