"""Intelligent movie search and AI-powered recommendations."""

__version__ = "0.1.0"

__all__ = ["__version__"]
