"""Grid-based raycasting engine: map loading, ray casting, movement, input state and software rendering."""

__version__ = "0.1.0"
__all__ = ["__version__"]