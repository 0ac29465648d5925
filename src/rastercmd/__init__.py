"""rastercmd - convert raster images into printer control language commands."""

__version__ = "0.1.0"
