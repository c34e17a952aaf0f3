"""Constraint sets, a soft-constraint cost and robot parameters for legged-robot trajectory optimization."""

__version__ = "0.1.0"