"""Functional helpers, zero-value utilities and small extensions."""

__version__ = "0.1.0"