"""Dense matrices, activations, a dense layer and a four-layer digit classifier."""

__version__ = "0.1.0"
__all__ = ["activation", "dense", "matrix", "network"]