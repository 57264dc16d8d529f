"""Initialization strategies for the convergence loop."""

from .random import SamplingInit, RangeInit
from .from_previous import FromPreviousInit

__all__ = [
    'SamplingInit',
    'RangeInit',
    'FromPreviousInit'
]
