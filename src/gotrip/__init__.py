"""Fare estimation and trip lifecycle tracking for the GO ride-hailing app."""

__version__ = "0.1.0"
