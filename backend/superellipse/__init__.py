"""Superellipse geometry engine: Lamé curve sampling, bounds, area and SVG output."""

__version__ = "0.1.0"
