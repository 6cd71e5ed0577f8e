"""Animated de Casteljau construction over regular polygons."""

__version__ = "1.0.0"
