"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and its
adapters, so that dataset readers and solvers can be swapped in tests.
"""

from .graph import DatasetRepositoryPort, Graph, RouteSolverPort

__all__ = [
    "Graph",
    "DatasetRepositoryPort",
    "RouteSolverPort",
]
