from tilesolver.models.grid import Grid, InvalidGridError

__all__ = ["Grid", "InvalidGridError"]
