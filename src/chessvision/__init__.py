"""chessvision - chess board state and rules for board-vision training."""

__version__ = "0.1.0"
