"""Nerves, nerve lists and shared constants for layered neural networks."""

__version__ = "0.1.0"
__all__ = ["consts", "nerve", "nerve_list"]