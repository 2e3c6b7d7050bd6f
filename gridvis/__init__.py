"""Animated colour grids filled by user code, with a pygame viewer and helpers."""

__version__ = "0.1.0"