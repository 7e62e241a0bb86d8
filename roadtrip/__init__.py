"""Top-level package for the IRoadTrip project.

This package resolves the inconsistent country names of three
reference datasets (borders, capital distances, country identities)
onto canonical ids, builds the border graph, and computes the cheapest
land route between two countries.
"""
