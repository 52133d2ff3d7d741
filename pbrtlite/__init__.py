"""A small ray tracing toolkit: geometry, transforms, shapes, samplers, cameras and a demo renderer."""

__version__ = "0.1.0"