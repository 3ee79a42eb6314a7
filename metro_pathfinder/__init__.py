"""Shortest travel times on a metro network"""

__version__ = "1.0.0"
