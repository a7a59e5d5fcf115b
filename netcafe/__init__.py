"""Computer club day replay: input parsing, event handling and per-table revenue."""

__version__ = "0.1.0"
__all__ = ["__version__"]