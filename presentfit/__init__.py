"""Fit 3x3 present shapes into rectangular regions under a tree."""

__version__ = "0.1.0"
__all__ = ["__version__"]