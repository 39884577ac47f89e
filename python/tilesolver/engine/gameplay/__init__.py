from tilesolver.engine.gameplay.game import GamePlay, ReplayReport

__all__ = ["GamePlay", "ReplayReport"]
