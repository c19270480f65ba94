"""Triangle meshes: primitives, editing, OBJ loading, draw batching and grouped release."""

__version__ = "0.1.0"
__all__ = ["mesh", "primitives", "objloader", "batch", "trash"]