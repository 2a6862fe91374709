from backend.engine.gameplay.game import GamePlay
from backend.engine.gameplay.timed import TimedRun

__all__ = ["GamePlay", "TimedRun"]
