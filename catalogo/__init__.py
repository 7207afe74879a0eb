"""Console catalogue for registering and listing products by category."""

__version__ = "0.1.0"
__all__ = ["categoria", "producto", "sistema", "controlador", "menu"]