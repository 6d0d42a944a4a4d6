"""Domain services for pipe cutting."""

from .cutting_optimizer import optimize_cutting

__all__ = ["optimize_cutting"]
