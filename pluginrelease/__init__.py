"""Batch building and packaging of Unreal Engine plugins across engine versions."""

__version__ = "0.1.0"