"""State/store layer.

This package is the single source of truth for the reconciled spot
collection and the aggregates derived from it.
"""
