"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to:
- Dataset storage (plain text, CSV and TSV files)
- Route solvers (Dijkstra)
"""
