"""Core-roughing toolpath geometry, linking moves, replay, preview and post-processing."""

__version__ = "0.1.0"