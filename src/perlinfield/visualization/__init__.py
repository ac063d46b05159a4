"""Visualization of generated rasters."""

from .preview import RasterPreviewPlotter

__all__ = ["RasterPreviewPlotter"]
